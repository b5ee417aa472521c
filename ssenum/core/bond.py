"""Bond between two positions of the same sequence."""

from __future__ import annotations

from dataclasses import dataclass

from ssenum.utils.validation import ValidationError


@dataclass(frozen=True, order=True)
class Bond:
    """Immutable ordered pair of position indices.

    `(a, b)` and `(b, a)` are distinct bonds; whether both are enumerated is
    decided by `Restrictions.ordered_bonds`.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start == self.end:
            raise ValidationError(
                "invalid_bond",
                f"Bond endpoints must differ, got ({self.start},{self.end})",
                start=self.start,
                end=self.end,
            )
        if self.start < 0 or self.end < 0:
            raise ValidationError(
                "invalid_bond",
                f"Bond endpoints must be non-negative, got ({self.start},{self.end})",
                start=self.start,
                end=self.end,
            )

    @property
    def endpoints(self) -> tuple[int, int]:
        return (self.start, self.end)

    def shift(self, d: int) -> Bond:
        """Return a copy with both endpoints offset by `d`."""
        return Bond(self.start + d, self.end + d)

    def __str__(self) -> str:
        return f"({self.start},{self.end})"


__all__ = ["Bond"]
