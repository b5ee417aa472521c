"""Single slot of a candidate sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ssenum.core.bond import Bond
from ssenum.core.symbol import Symbol


@dataclass(frozen=True)
class Position:
    """One position: index, symbol, mutation flag and the bond it belongs to.

    Positions are created by `CandidateSequence` and never modified. A
    position outside any bond has `bond=None`.
    """

    index: int
    symbol: Symbol
    mutated: bool = False
    bond: Optional[Bond] = None

    @property
    def is_bonded(self) -> bool:
        return self.bond is not None

    @property
    def is_start(self) -> bool:
        return self.bond is not None and self.bond.start == self.index

    @property
    def is_end(self) -> bool:
        return self.bond is not None and self.bond.end == self.index

    @property
    def partner(self) -> Optional[int]:
        """Index of the other endpoint of this position's bond, if any."""
        if self.bond is None:
            return None
        return self.bond.end if self.bond.start == self.index else self.bond.start

    def __str__(self) -> str:
        return self.symbol.to_char(self.mutated)


__all__ = ["Position"]
