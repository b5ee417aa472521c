"""Search restrictions and their per-length resolution."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping, Optional

from ssenum.utils.validation import ValidationError


def intset(*ns: int) -> frozenset[int]:
    """Shorthand for building an eligible-position set."""
    return frozenset(ns)


@dataclass(frozen=True)
class ResolvedRestrictions:
    """Restrictions clamped and materialised for one sequence length.

    Attributes:
        length: Sequence length the bounds were resolved against
        min_mutations/max_mutations: Clamped to [0, length]
        min_bonds/max_bonds: Clamped to [0, length // 2]
        mutation_positions: Eligible mutation indices, ascending
        bond_positions: Eligible bond endpoint indices
        ordered_bonds: Enumerate (b, a) in addition to (a, b)
    """

    length: int
    min_mutations: int
    max_mutations: int
    min_bonds: int
    max_bonds: int
    mutation_positions: tuple[int, ...]
    bond_positions: frozenset[int]
    ordered_bonds: bool

    @property
    def is_satisfiable(self) -> bool:
        return self.min_mutations <= self.max_mutations and self.min_bonds <= self.max_bonds


@dataclass(frozen=True)
class Restrictions:
    """Bounds and eligibility constraining the enumeration.

    `None` for a maximum means unbounded; `None` for a position set means
    every position is eligible. Bounds are clamped when resolved against a
    sequence length, and inverted bounds simply produce no candidates.
    """

    min_mutations: int = 0
    max_mutations: Optional[int] = None
    min_bonds: int = 0
    max_bonds: Optional[int] = None
    mutation_positions: Optional[frozenset[int]] = None
    bond_positions: Optional[frozenset[int]] = None
    ordered_bonds: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable for the position sets
        for name in ("mutation_positions", "bond_positions"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, frozenset):
                object.__setattr__(self, name, frozenset(int(v) for v in value))

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Restrictions:
        known = {f.name for f in fields(cls)}
        extras = sorted(k for k in config if k not in known)
        if extras:
            raise ValidationError(
                "unknown_restriction",
                f"Unknown restriction keys: {extras}",
                extras=tuple(extras),
            )
        return cls(**dict(config))

    def to_config(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, frozenset):
                value = sorted(value)
            out[f.name] = value
        return out

    def validate_for(self, length: int) -> None:
        """Reject eligible positions that do not exist in a sequence of `length`."""
        for name in ("mutation_positions", "bond_positions"):
            positions = getattr(self, name)
            if positions is None:
                continue
            bad = sorted(p for p in positions if not 0 <= p < length)
            if bad:
                raise ValidationError(
                    "position_out_of_range",
                    f"{name} contains indices outside [0, {length}): {bad}",
                    field=name,
                    indices=tuple(bad),
                    length=length,
                )

    def resolve(self, length: int) -> ResolvedRestrictions:
        max_mutations = length if self.max_mutations is None else min(length, self.max_mutations)
        max_bonds = length // 2 if self.max_bonds is None else min(length // 2, self.max_bonds)
        return ResolvedRestrictions(
            length=length,
            min_mutations=max(0, self.min_mutations),
            max_mutations=max_mutations,
            min_bonds=max(0, self.min_bonds),
            max_bonds=max_bonds,
            mutation_positions=_eligible(self.mutation_positions, length),
            bond_positions=frozenset(_eligible(self.bond_positions, length)),
            ordered_bonds=self.ordered_bonds,
        )

    def for_segment(self, start: int, end: int, max_bonds: int) -> Restrictions:
        """Derived restrictions for the unmutated segment [start, end).

        The segment may not mutate, may hold up to `max_bonds` bonds, and
        keeps only the eligible bond positions inside the segment, re-indexed
        relative to `start`.
        """
        if self.bond_positions is None:
            bond_positions = frozenset(range(end - start))
        else:
            bond_positions = frozenset(p - start for p in self.bond_positions if start <= p < end)
        return Restrictions(
            min_mutations=0,
            max_mutations=0,
            min_bonds=0,
            max_bonds=max_bonds,
            mutation_positions=frozenset(),
            bond_positions=bond_positions,
            ordered_bonds=self.ordered_bonds,
        )


def _eligible(positions: Optional[Iterable[int]], length: int) -> tuple[int, ...]:
    if positions is None:
        return tuple(range(length))
    return tuple(sorted(p for p in set(positions) if 0 <= p < length))


__all__ = ["Restrictions", "ResolvedRestrictions", "intset"]
