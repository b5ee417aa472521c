"""CandidateSequence: one fully realised sequence with mutations and bonds."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ssenum.core.bond import Bond
from ssenum.core.position import Position
from ssenum.core.symbol import Symbol
from ssenum.utils.validation import ValidationError


class CandidateSequence:
    """Immutable aggregate of Positions plus the set of Bonds.

    Built atomically from a symbol sequence, the mutated indices and a set of
    bonds. Equality and hashing are structural: two candidates are equal when
    every Position (symbol, mutation flag, bond membership) and the bond sets
    match.
    """

    __slots__ = ("_positions", "_bonds", "_mutations", "_hash")

    def __init__(
        self,
        symbols: Iterable[Symbol],
        mutations: Iterable[int] = (),
        bonds: Iterable[Bond] = (),
    ) -> None:
        symbols = tuple(symbols)
        length = len(symbols)
        mutated = frozenset(mutations)
        bond_set = frozenset(bonds)

        for idx, sym in enumerate(symbols):
            if not isinstance(sym, Symbol):
                raise ValidationError(
                    "unrecognized_symbol",
                    f"Position {idx} has no valid symbol: {sym!r}",
                    index=idx,
                    char=sym,
                )
        for idx in mutated:
            if not 0 <= idx < length:
                raise ValidationError(
                    "position_out_of_range",
                    f"Mutated index {idx} outside sequence of length {length}",
                    index=idx,
                    length=length,
                )

        owner: dict[int, Bond] = {}
        for bond in sorted(bond_set):
            for idx in bond.endpoints:
                if not 0 <= idx < length:
                    raise ValidationError(
                        "position_out_of_range",
                        f"Bond {bond} references index {idx} outside length {length}",
                        index=idx,
                        length=length,
                    )
                if idx in owner:
                    raise ValidationError(
                        "double_bonded_position",
                        f"Index {idx} is an endpoint of both {owner[idx]} and {bond}",
                        index=idx,
                    )
                owner[idx] = bond

        self._positions: tuple[Position, ...] = tuple(
            Position(i, sym, i in mutated, owner.get(i)) for i, sym in enumerate(symbols)
        )
        self._bonds = bond_set
        self._mutations = mutated
        self._hash: Optional[int] = None

    # Accessors

    @property
    def length(self) -> int:
        return len(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def position(self, index: int) -> Position:
        return self._positions[index]

    def __getitem__(self, index: int) -> Position:
        return self._positions[index]

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    @property
    def positions(self) -> tuple[Position, ...]:
        return self._positions

    @property
    def bonds(self) -> frozenset[Bond]:
        return self._bonds

    @property
    def mutations(self) -> frozenset[int]:
        return self._mutations

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        return tuple(p.symbol for p in self._positions)

    @property
    def mutation_count(self) -> int:
        return len(self._mutations)

    @property
    def bond_count(self) -> int:
        return len(self._bonds)

    def sorted_bonds(self) -> list[Bond]:
        return sorted(self._bonds)

    # Validation

    def validate(self, collect_errors: Optional[list] = None) -> bool:
        """Re-check structural invariants.

        Args:
            collect_errors: If a list is given, every violation is appended to
                it as a ValidationError.

        Returns:
            True when no violation was found.
        """
        errors: list[ValidationError] = []
        seen: dict[int, Bond] = {}

        for slot, pos in enumerate(self._positions):
            if pos.index != slot:
                errors.append(ValidationError(
                    "index_mismatch", f"Position at slot {slot} reports index {pos.index}", index=slot))
            if pos.bond is not None and pos.bond not in self._bonds:
                errors.append(ValidationError(
                    "bond_reference_mismatch", f"Position {slot} references unknown bond {pos.bond}", index=slot))

        for bond in sorted(self._bonds):
            for idx in bond.endpoints:
                if not 0 <= idx < self.length:
                    errors.append(ValidationError(
                        "position_out_of_range", f"Bond {bond} out of range", index=idx))
                    continue
                if idx in seen:
                    errors.append(ValidationError(
                        "double_bonded_position", f"Index {idx} bonded twice", index=idx))
                seen[idx] = bond
                if self._positions[idx].bond != bond:
                    errors.append(ValidationError(
                        "bond_reference_mismatch", f"Position {idx} does not reference {bond}", index=idx))

        if collect_errors is not None:
            collect_errors.extend(errors)
        return not errors

    # Structural equality

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CandidateSequence):
            return NotImplemented
        return self._positions == other._positions and self._bonds == other._bonds

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self._positions, self._bonds))
        return self._hash

    # Display

    def to_dot_bracket(self) -> str:
        """Render bonds as '(' at the lower index, ')' at the higher, '.' elsewhere.

        Crossing bonds are rendered with the same brackets and cannot be told
        apart from nested ones in this notation.
        """
        chars = ['.'] * self.length
        for bond in self._bonds:
            lo, hi = sorted(bond.endpoints)
            chars[lo] = '('
            chars[hi] = ')'
        return "".join(chars)

    def __str__(self) -> str:
        letters = "".join(str(p) for p in self._positions)
        bonds = ", ".join(str(b) for b in self.sorted_bonds())
        return f"{letters} {{{bonds}}}"

    def __repr__(self) -> str:
        return f"CandidateSequence({str(self)!r})"


__all__ = ["CandidateSequence"]
