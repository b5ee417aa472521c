"""Sequential enumeration engine.

Implements:
- mutation_sets: eligible mutation subsets within the mutation bounds
- candidate_bonds / has_shared_endpoint: the compatibility-aware bond search
- split_segments: maximal unmutated segments between mutated indices
- expand_mutation_set: all candidates for one mutation set, either by direct
  bond search (no mutations) or by recursing into each segment and
  recombining the segment results with a cartesian product
- enumerate_candidates / iter_candidates: the public search
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Iterable, Iterator, Optional, Sequence

from ssenum.config import resolve_config
from ssenum.core.bond import Bond
from ssenum.core.restrictions import ResolvedRestrictions, Restrictions
from ssenum.core.sequence import CandidateSequence
from ssenum.core.symbol import Symbol, coerce_symbols, compatible
from ssenum.generation.subsets import count_subsets, subsets


def mutation_sets(resolved: ResolvedRestrictions) -> Iterator[tuple[int, ...]]:
    """Yield every eligible mutation set, each as an ascending tuple."""
    return subsets(resolved.mutation_positions, resolved.min_mutations, resolved.max_mutations)


def candidate_bonds(symbols: Sequence[Symbol], bond_positions: Iterable[int], ordered: bool = False) -> list[Bond]:
    """All bonds (i, j), i < j, between eligible positions with compatible symbols.

    With `ordered`, (j, i) directly follows each (i, j).
    """
    eligible = frozenset(bond_positions)
    length = len(symbols)
    bonds: list[Bond] = []
    for i in range(length):
        if i not in eligible:
            continue
        for j in range(i + 1, length):
            if j in eligible and compatible(symbols[i], symbols[j]):
                bonds.append(Bond(i, j))
                if ordered:
                    bonds.append(Bond(j, i))
    return bonds


def has_shared_endpoint(bonds: Iterable[Bond]) -> bool:
    """True if some index is the endpoint of more than one bond."""
    used: set[int] = set()
    for bond in bonds:
        if bond.start in used or bond.end in used:
            return True
        used.add(bond.start)
        used.add(bond.end)
    return False


def split_segments(length: int, mutation_set: Iterable[int]) -> list[tuple[int, int]]:
    """Maximal half-open ranges [start, end) of [0, length) free of mutated indices.

    Mutated indices are visited in ascending order; empty gaps are dropped.
    """
    segments: list[tuple[int, int]] = []
    start = 0
    for stop in [*sorted(mutation_set), length]:
        if stop > start:
            segments.append((start, stop))
        start = stop + 1
    return segments


def _iter_bond_arrangements(symbols: tuple[Symbol, ...], resolved: ResolvedRestrictions) -> Iterator[CandidateSequence]:
    bonds = candidate_bonds(symbols, resolved.bond_positions, resolved.ordered_bonds)
    for bond_set in subsets(bonds, resolved.min_bonds, resolved.max_bonds,
                            lambda s: not has_shared_endpoint(s)):
        yield CandidateSequence(symbols, (), bond_set)


def _iter_recombined(
    symbols: tuple[Symbol, ...],
    mutation_set: tuple[int, ...],
    restrictions: Restrictions,
    resolved: ResolvedRestrictions,
) -> Iterator[CandidateSequence]:
    # One axis per segment; each choice is a sub-candidate's bonds already
    # shifted into full-sequence coordinates.
    axes: list[list[tuple[Bond, ...]]] = []
    for start, end in split_segments(len(symbols), mutation_set):
        sub_restrictions = restrictions.for_segment(start, end, resolved.max_bonds)
        sub_candidates = _iter_resolved(symbols[start:end], sub_restrictions, sub_restrictions.resolve(end - start))
        axes.append([tuple(b.shift(start) for b in c.sorted_bonds()) for c in sub_candidates])

    for combination in itertools.product(*axes):
        bonds = [b for part in combination for b in part]
        if resolved.min_bonds <= len(bonds) <= resolved.max_bonds:
            yield CandidateSequence(symbols, mutation_set, bonds)


def _iter_mutation_set(
    symbols: tuple[Symbol, ...],
    mutation_set: tuple[int, ...],
    restrictions: Restrictions,
    resolved: ResolvedRestrictions,
) -> Iterator[CandidateSequence]:
    if not mutation_set:
        return _iter_bond_arrangements(symbols, resolved)
    return _iter_recombined(symbols, tuple(sorted(mutation_set)), restrictions, resolved)


def expand_mutation_set(
    symbols: tuple[Symbol, ...],
    mutation_set: tuple[int, ...],
    restrictions: Restrictions,
    resolved: ResolvedRestrictions,
) -> list[CandidateSequence]:
    """Every candidate whose mutated indices are exactly `mutation_set`.

    This is one independent branch of the outer search; the parallel variant
    dispatches one call per mutation set.
    """
    return list(_iter_mutation_set(symbols, mutation_set, restrictions, resolved))


def _iter_resolved(
    symbols: tuple[Symbol, ...],
    restrictions: Restrictions,
    resolved: ResolvedRestrictions,
) -> Iterator[CandidateSequence]:
    if not resolved.is_satisfiable:
        logging.debug(
            f"No candidates: mutations [{resolved.min_mutations}, {resolved.max_mutations}], "
            f"bonds [{resolved.min_bonds}, {resolved.max_bonds}] for length {resolved.length}"
        )
        return
    for mutation_set in mutation_sets(resolved):
        yield from _iter_mutation_set(symbols, mutation_set, restrictions, resolved)


def prepare(
    symbols: str | Iterable[Symbol],
    restrictions: Optional[Restrictions],
    config: dict[str, Any],
) -> tuple[tuple[Symbol, ...], Restrictions, ResolvedRestrictions]:
    """Normalise public inputs: parse symbols, default and resolve restrictions."""
    seq = coerce_symbols(symbols)
    if restrictions is None:
        restrictions = Restrictions()
    if config.get('validate_inputs', True):
        restrictions.validate_for(len(seq))
    return seq, restrictions, restrictions.resolve(len(seq))


def iter_candidates(
    symbols: str | Iterable[Symbol],
    restrictions: Optional[Restrictions] = None,
    config: Optional[dict] = None,
) -> Iterator[CandidateSequence]:
    """Lazily yield candidates in the same order as `enumerate_candidates`."""
    seq, restrictions, resolved = prepare(symbols, restrictions, resolve_config(config))
    return _iter_resolved(seq, restrictions, resolved)


def enumerate_candidates(
    symbols: str | Iterable[Symbol],
    restrictions: Optional[Restrictions] = None,
    config: Optional[dict] = None,
) -> list[CandidateSequence]:
    """Enumerate every candidate sequence allowed by `restrictions`.

    Args:
        symbols: Nucleotide string (case-insensitive) or sequence of Symbol.
        restrictions: Search bounds; None means unrestricted.
        config: Engine configuration (see ssenum.config.DEFAULT_CONFIG). With
            'parallel_execution' the call is delegated to enumerate_parallel.

    Returns:
        Candidates in a deterministic order: by mutation set, then bond set.

    Raises:
        ValidationError: unrecognized symbols or out-of-range eligible positions.
    """
    cfg = resolve_config(config)
    if cfg.get('parallel_execution', False):
        from ssenum.generation.parallel import enumerate_parallel

        return enumerate_parallel(symbols, restrictions, cfg)

    seq, restrictions, resolved = prepare(symbols, restrictions, cfg)
    logging.info(
        f"Enumerating length {len(seq)}: "
        f"{count_subsets(len(resolved.mutation_positions), resolved.min_mutations, resolved.max_mutations)} "
        f"mutation sets, bonds [{resolved.min_bonds}, {resolved.max_bonds}]"
    )
    results = list(_iter_resolved(seq, restrictions, resolved))
    logging.info(f"Enumeration complete: {len(results)} candidates")
    return results


def count_candidates(
    symbols: str | Iterable[Symbol],
    restrictions: Optional[Restrictions] = None,
    config: Optional[dict] = None,
) -> int:
    """Number of candidates, without keeping them in memory."""
    return sum(1 for _ in iter_candidates(symbols, restrictions, config))


__all__ = [
    'mutation_sets',
    'candidate_bonds',
    'has_shared_endpoint',
    'split_segments',
    'expand_mutation_set',
    'prepare',
    'iter_candidates',
    'enumerate_candidates',
    'count_candidates',
]
