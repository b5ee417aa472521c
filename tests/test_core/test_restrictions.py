import pytest

from ssenum.config import RESTRICTIONS_SINGLE_MUTATION
from ssenum.core.restrictions import Restrictions, intset
from ssenum.utils.validation import ValidationError


def test_defaults_resolve_to_everything_eligible():
    r = Restrictions().resolve(5)
    assert (r.min_mutations, r.max_mutations) == (0, 5)
    assert (r.min_bonds, r.max_bonds) == (0, 2)
    assert r.mutation_positions == (0, 1, 2, 3, 4)
    assert r.bond_positions == frozenset(range(5))
    assert r.ordered_bonds is False
    assert r.is_satisfiable


def test_bounds_are_clamped():
    r = Restrictions(min_mutations=-3, max_mutations=99, min_bonds=-1, max_bonds=10).resolve(7)
    assert (r.min_mutations, r.max_mutations) == (0, 7)
    assert (r.min_bonds, r.max_bonds) == (0, 3)


def test_inverted_bounds_are_unsatisfiable_not_an_error():
    r = Restrictions(min_bonds=3).resolve(4)
    assert (r.min_bonds, r.max_bonds) == (3, 2)
    assert not r.is_satisfiable
    assert not Restrictions(min_mutations=2, max_mutations=1).resolve(4).is_satisfiable


def test_position_sets_accept_any_iterable_and_sort():
    r = Restrictions(mutation_positions=[3, 1, 1])
    assert r.mutation_positions == frozenset({1, 3})
    assert r.resolve(4).mutation_positions == (1, 3)
    assert intset(1, 2, 2) == frozenset({1, 2})


def test_validate_for_rejects_out_of_range_positions():
    Restrictions(bond_positions=intset(0, 3)).validate_for(4)
    with pytest.raises(ValidationError) as excinfo:
        Restrictions(bond_positions=intset(0, 4)).validate_for(4)
    assert excinfo.value.error_type == "position_out_of_range"
    assert excinfo.value.details["field"] == "bond_positions"
    assert excinfo.value.details["indices"] == (4,)
    with pytest.raises(ValidationError):
        Restrictions(mutation_positions=intset(-1)).validate_for(4)


def test_for_segment_reindexes_bond_positions():
    base = Restrictions(min_mutations=1, max_mutations=3, min_bonds=2,
                        bond_positions=intset(0, 1, 4, 5, 7), ordered_bonds=True)
    seg = base.for_segment(4, 7, max_bonds=2)
    assert (seg.min_mutations, seg.max_mutations) == (0, 0)
    assert (seg.min_bonds, seg.max_bonds) == (0, 2)
    assert seg.mutation_positions == frozenset()
    assert seg.bond_positions == frozenset({0, 1})
    assert seg.ordered_bonds is True
    # The original is untouched
    assert base.min_bonds == 2 and 7 in base.bond_positions


def test_for_segment_without_bond_positions_allows_whole_segment():
    seg = Restrictions().for_segment(3, 6, max_bonds=1)
    assert seg.bond_positions == frozenset({0, 1, 2})


def test_config_round_trip_and_unknown_keys():
    r = Restrictions.from_config(RESTRICTIONS_SINGLE_MUTATION)
    assert (r.min_mutations, r.max_mutations) == (1, 1)
    cfg = Restrictions(mutation_positions=intset(2, 0)).to_config()
    assert cfg["mutation_positions"] == [0, 2]
    assert Restrictions.from_config(cfg) == Restrictions(mutation_positions=intset(0, 2))
    with pytest.raises(ValidationError) as excinfo:
        Restrictions.from_config({"max_pairs": 2})
    assert excinfo.value.error_type == "unknown_restriction"
