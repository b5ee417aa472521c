"""Thread-pool variant of the enumeration engine.

Only the outer mutation-set loop is parallel: each mutation set is one unit
of work running the sequential `expand_mutation_set`, including its recursive
per-segment searches. A single pool is created per call; recursive sub-calls
never start pools of their own.
"""

from __future__ import annotations

import concurrent.futures
import logging
import threading
from typing import Any, Iterable, Optional

from ssenum.config import resolve_config
from ssenum.core.restrictions import Restrictions
from ssenum.core.sequence import CandidateSequence
from ssenum.core.symbol import Symbol
from ssenum.generation.enumeration import expand_mutation_set, mutation_sets, prepare


class ParallelEnumerationError(RuntimeError):
    """One or more branches of a parallel enumeration failed.

    Attributes:
        error_type: 'worker_failure' or 'timeout'
        failures: (mutation_set, exception) for every failed branch
        pending: Mutation sets that did not finish before the deadline
    """

    def __init__(self, error_type: str, message: str,
                 failures: Optional[list[tuple[tuple[int, ...], BaseException]]] = None,
                 pending: Optional[list[tuple[int, ...]]] = None) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.failures = list(failures or [])
        self.pending = list(pending or [])


def _pool_size(branch_count: int, config: dict[str, Any]) -> int:
    cap = config.get('max_parallel_workers')
    if cap is None:
        return branch_count
    return max(1, min(branch_count, int(cap)))


def enumerate_parallel(
    symbols: str | Iterable[Symbol],
    restrictions: Optional[Restrictions] = None,
    config: Optional[dict] = None,
) -> list[CandidateSequence]:
    """Enumerate candidates with one worker per mutation set (bounded pool).

    Produces the same candidates as `enumerate_candidates`; only the order in
    which branches contribute may differ between runs.

    Raises:
        ValidationError: invalid symbols or restrictions (before any dispatch).
        ParallelEnumerationError: a branch raised, or the optional
            'parallel_timeout_s' deadline expired. Raised only after every
            branch has finished or been cancelled.
    """
    cfg = resolve_config(config)
    seq, restrictions, resolved = prepare(symbols, restrictions, cfg)

    if not resolved.is_satisfiable:
        logging.debug("No candidates: inverted bounds after clamping")
        return []

    branches = list(mutation_sets(resolved))
    if not branches:
        logging.debug("No eligible mutation sets")
        return []

    results: list[CandidateSequence] = []
    lock = threading.Lock()

    def run_branch(mutation_set: tuple[int, ...]) -> int:
        batch = expand_mutation_set(seq, mutation_set, restrictions, resolved)
        with lock:
            results.extend(batch)
        return len(batch)

    workers = _pool_size(len(branches), cfg)
    timeout = cfg.get('parallel_timeout_s')
    logging.info(f"Parallel enumeration of length {len(seq)}: {len(branches)} mutation sets on {workers} workers")

    executor = concurrent.futures.ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ssenum")
    try:
        futures = {executor.submit(run_branch, m): m for m in branches}
        done, not_done = concurrent.futures.wait(futures, timeout=timeout)
        for fut in not_done:
            fut.cancel()
    finally:
        # Running branches cannot be interrupted; wait for them so no worker
        # outlives the call.
        executor.shutdown(wait=True)

    if not_done:
        pending = [futures[f] for f in futures if f in not_done]
        logging.warning(f"Parallel enumeration timed out after {timeout}s with {len(pending)} unfinished mutation sets")
        raise ParallelEnumerationError(
            "timeout",
            f"{len(pending)} of {len(branches)} mutation sets unfinished after {timeout}s",
            pending=pending,
        )

    failures: list[tuple[tuple[int, ...], BaseException]] = []
    for fut, mutation_set in futures.items():
        exc = fut.exception()
        if exc is not None:
            logging.error(f"Branch for mutation set {mutation_set} failed: {exc!r}")
            failures.append((mutation_set, exc))
    if failures:
        raise ParallelEnumerationError(
            "worker_failure",
            f"{len(failures)} of {len(branches)} mutation sets failed",
            failures=failures,
        ) from failures[0][1]

    logging.info(f"Parallel enumeration complete: {len(results)} candidates")
    return results


__all__ = ['enumerate_parallel', 'ParallelEnumerationError']
