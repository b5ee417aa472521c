"""Enumeration engine for ssenum."""

from .enumeration import (  # noqa: F401
    candidate_bonds,
    count_candidates,
    enumerate_candidates,
    expand_mutation_set,
    has_shared_endpoint,
    iter_candidates,
    mutation_sets,
    split_segments,
)
from .parallel import ParallelEnumerationError, enumerate_parallel  # noqa: F401
from .subsets import combination_indices, count_subsets, subsets  # noqa: F401

__all__ = [
    'enumerate_candidates',
    'enumerate_parallel',
    'iter_candidates',
    'count_candidates',
    'expand_mutation_set',
    'mutation_sets',
    'candidate_bonds',
    'has_shared_endpoint',
    'split_segments',
    'subsets',
    'combination_indices',
    'count_subsets',
    'ParallelEnumerationError',
]
