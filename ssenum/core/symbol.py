"""Nucleotide alphabet and its pairing rule."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from ssenum.utils.validation import ValidationError


class Symbol(Enum):
    """The four nucleotide letters.

    Values are chosen so that complementary letters sum to 3
    (A=0 with U=3, C=1 with G=2).
    """

    A = 0
    C = 1
    G = 2
    U = 3

    @classmethod
    def from_char(cls, char: str) -> Optional["Symbol"]:
        """Map one character to a Symbol, case-insensitively; None if unknown."""
        return _CHAR_TO_SYMBOL.get(char.upper()) if len(char) == 1 else None

    def pairs_with(self, other: "Symbol") -> bool:
        return self.value + other.value == 3

    def to_char(self, mutated: bool = False) -> str:
        return self.name.lower() if mutated else self.name

    def __str__(self) -> str:
        return self.name


_CHAR_TO_SYMBOL = {s.name: s for s in Symbol}


def compatible(a: Symbol, b: Symbol) -> bool:
    """Return True if `a` and `b` may form a bond (A-U or C-G, either order)."""
    return a.pairs_with(b)


def parse_symbols(text: str) -> tuple[Symbol, ...]:
    """Parse a textual sequence such as 'AUGC' (case-insensitive).

    Raises:
        ValidationError: 'unrecognized_symbol' for any character outside the
            alphabet, with the offending index and character.
    """
    symbols: list[Symbol] = []
    for idx, ch in enumerate(text):
        sym = Symbol.from_char(ch)
        if sym is None:
            raise ValidationError(
                "unrecognized_symbol",
                f"Unrecognized nucleotide {ch!r} at index {idx}",
                index=idx,
                char=ch,
            )
        symbols.append(sym)
    return tuple(symbols)


def coerce_symbols(symbols: str | Iterable[Symbol]) -> tuple[Symbol, ...]:
    """Accept either a string or an iterable of Symbol and return a tuple."""
    if isinstance(symbols, str):
        return parse_symbols(symbols)
    out = tuple(symbols)
    for idx, sym in enumerate(out):
        if not isinstance(sym, Symbol):
            raise ValidationError(
                "unrecognized_symbol",
                f"Expected Symbol at index {idx}, got {sym!r}",
                index=idx,
                char=sym,
            )
    return out


def symbols_to_string(symbols: Iterable[Symbol]) -> str:
    return "".join(s.name for s in symbols)


__all__ = [
    "Symbol",
    "compatible",
    "parse_symbols",
    "coerce_symbols",
    "symbols_to_string",
]
