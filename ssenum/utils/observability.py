"""Ensemble reports, determinism signatures and frequency matrices.

A consolidated report summarises one enumeration result; its determinism
signature is independent of candidate order, so sequential and parallel runs
over the same inputs produce the same signature.
"""

from __future__ import annotations

import hashlib
import json
from collections import Counter
from typing import Any, Iterable, Mapping, Optional, Sequence

import numpy as np

from ssenum.core.restrictions import Restrictions
from ssenum.core.sequence import CandidateSequence
from ssenum.core.symbol import Symbol, coerce_symbols, symbols_to_string
from ssenum.utils.validation import ValidationError

SCHEMA_VERSION = 1


def _infer_length(candidates: Sequence[CandidateSequence], length: Optional[int]) -> int:
    if length is not None:
        return int(length)
    return max((len(c) for c in candidates), default=0)


def bond_frequency_matrix(
    candidates: Iterable[CandidateSequence],
    length: Optional[int] = None,
    normalize: bool = False,
) -> np.ndarray:
    """Count how often each ordered bond (start, end) appears in the ensemble.

    Entry [i, j] is the number of candidates holding Bond(i, j); with
    `normalize` the counts are divided by the number of candidates.
    """
    candidates = list(candidates)
    n = _infer_length(candidates, length)
    counts = np.zeros((n, n), dtype=np.int64)
    for cand in candidates:
        for bond in cand.bonds:
            counts[bond.start, bond.end] += 1
    if normalize:
        return counts / max(1, len(candidates))
    return counts


def mutation_frequency(
    candidates: Iterable[CandidateSequence],
    length: Optional[int] = None,
    normalize: bool = False,
) -> np.ndarray:
    """Per-position count of candidates in which that position is mutated."""
    candidates = list(candidates)
    n = _infer_length(candidates, length)
    counts = np.zeros(n, dtype=np.int64)
    for cand in candidates:
        for idx in cand.mutations:
            counts[idx] += 1
    if normalize:
        return counts / max(1, len(candidates))
    return counts


def consolidated_report(
    candidates: Iterable[CandidateSequence],
    symbols: str | Iterable[Symbol],
    restrictions: Optional[Restrictions] = None,
) -> dict[str, Any]:
    """Summarise an enumeration result as a JSON-serialisable dict."""
    candidates = list(candidates)
    seq = coerce_symbols(symbols)
    restrictions = restrictions or Restrictions()
    resolved = restrictions.resolve(len(seq))
    by_mutations = Counter(c.mutation_count for c in candidates)
    by_bonds = Counter(c.bond_count for c in candidates)
    return {
        'schema_version': SCHEMA_VERSION,
        'sequence': symbols_to_string(seq),
        'restrictions': restrictions.to_config(),
        'resolved_bounds': {
            'mutations': [resolved.min_mutations, resolved.max_mutations],
            'bonds': [resolved.min_bonds, resolved.max_bonds],
        },
        'total': len(candidates),
        'by_mutation_count': {str(k): by_mutations[k] for k in sorted(by_mutations)},
        'by_bond_count': {str(k): by_bonds[k] for k in sorted(by_bonds)},
        'candidates': sorted(str(c) for c in candidates),
    }


def determinism_signature(report_or_candidates: Mapping[str, Any] | Iterable[CandidateSequence]) -> str:
    """SHA-256 over a canonical JSON rendering, independent of candidate order."""
    if isinstance(report_or_candidates, Mapping):
        payload: Any = dict(report_or_candidates)
    else:
        payload = sorted(str(c) for c in report_or_candidates)
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


def assert_determinism_equivalence(reports: Sequence[Mapping[str, Any]]) -> None:
    """Raise ValidationError if the reports do not share one signature."""
    signatures = [determinism_signature(r) for r in reports]
    if len(set(signatures)) > 1:
        raise ValidationError(
            "determinism_drift",
            "Reports differ across runs",
            signatures=tuple(signatures),
        )


__all__ = [
    'SCHEMA_VERSION',
    'bond_frequency_matrix',
    'mutation_frequency',
    'consolidated_report',
    'determinism_signature',
    'assert_determinism_equivalence',
]
