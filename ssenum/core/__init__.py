"""Core value types: symbols, bonds, positions, candidates, restrictions."""

from .bond import Bond
from .position import Position
from .restrictions import ResolvedRestrictions, Restrictions, intset
from .sequence import CandidateSequence
from .symbol import Symbol, coerce_symbols, compatible, parse_symbols, symbols_to_string

__all__ = [
    'Symbol',
    'compatible',
    'parse_symbols',
    'coerce_symbols',
    'symbols_to_string',
    'Bond',
    'Position',
    'CandidateSequence',
    'Restrictions',
    'ResolvedRestrictions',
    'intset',
]
