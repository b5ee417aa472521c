import pytest

from ssenum.core.bond import Bond
from ssenum.core.position import Position
from ssenum.core.symbol import Symbol, coerce_symbols, compatible, parse_symbols, symbols_to_string
from ssenum.utils.validation import ValidationError


def test_compatibility_holds_only_for_complementary_pairs():
    ordered_pairs = [(a, b) for a in Symbol for b in Symbol if compatible(a, b)]
    assert set(ordered_pairs) == {
        (Symbol.A, Symbol.U),
        (Symbol.U, Symbol.A),
        (Symbol.C, Symbol.G),
        (Symbol.G, Symbol.C),
    }
    # Never reflexive
    for s in Symbol:
        assert not compatible(s, s)


def test_parse_symbols_is_case_insensitive_and_renders_back():
    seq = parse_symbols("auGc")
    assert seq == (Symbol.A, Symbol.U, Symbol.G, Symbol.C)
    assert symbols_to_string(seq) == "AUGC"
    assert Symbol.from_char("x") is None
    assert Symbol.from_char("AU") is None


def test_parse_symbols_rejects_unknown_characters():
    with pytest.raises(ValidationError) as excinfo:
        parse_symbols("AUTG")
    err = excinfo.value
    assert err.error_type == "unrecognized_symbol"
    assert err.details["index"] == 2
    assert err.details["char"] == "T"
    assert "unrecognized_symbol" in str(err)


def test_coerce_symbols_rejects_none_markers():
    with pytest.raises(ValidationError):
        coerce_symbols([Symbol.A, None, Symbol.U])
    assert coerce_symbols([Symbol.G]) == (Symbol.G,)


def test_bond_shift_equality_and_ordering():
    b = Bond(0, 3)
    assert b.shift(2) == Bond(2, 5)
    assert b.shift(2) is not b
    assert b == Bond(0, 3)
    assert hash(b) == hash(Bond(0, 3))
    assert Bond(3, 0) != b
    assert sorted([Bond(2, 3), Bond(0, 1), Bond(1, 0)]) == [Bond(0, 1), Bond(1, 0), Bond(2, 3)]
    assert str(b) == "(0,3)"


def test_bond_rejects_self_pairing_and_negative_indices():
    with pytest.raises(ValidationError):
        Bond(2, 2)
    with pytest.raises(ValidationError):
        Bond(-1, 2)


def test_position_equality_is_safe_without_bond():
    plain = Position(0, Symbol.A)
    bonded = Position(0, Symbol.A, False, Bond(0, 1))
    assert plain == Position(0, Symbol.A, False, None)
    assert plain != bonded
    assert bonded != plain
    assert hash(plain) == hash(Position(0, Symbol.A))
    # Hashing both states must not fail
    assert len({plain, bonded}) == 2


def test_position_bond_roles_and_rendering():
    bond = Bond(4, 1)
    start = Position(4, Symbol.G, False, bond)
    end = Position(1, Symbol.C, True, bond)
    assert start.is_start and not start.is_end
    assert end.is_end and not end.is_start
    assert start.partner == 1 and end.partner == 4
    assert Position(2, Symbol.U).partner is None
    assert str(start) == "G"
    assert str(end) == "c"
