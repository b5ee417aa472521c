"""Configuration defaults and presets for ssenum.

Engine configuration is a plain dict read with `config.get(key, default)`.
Restriction presets are dicts accepted by `Restrictions.from_config`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

DEFAULT_CONFIG: dict[str, Any] = {
    # Delegate enumerate_candidates() to the thread-pool variant
    'parallel_execution': False,
    # Upper bound on pool size; the pool never exceeds the number of mutation sets
    'max_parallel_workers': 32,
    # Optional deadline for the parallel variant, in seconds
    'parallel_timeout_s': None,
    # Check eligible positions against the sequence length at the entry point
    'validate_inputs': True,
}

PRESET_SEQUENTIAL: dict[str, Any] = {
    'parallel_execution': False,
}

PRESET_PARALLEL: dict[str, Any] = {
    'parallel_execution': True,
    'max_parallel_workers': 8,
}

RESTRICTIONS_UNRESTRICTED: dict[str, Any] = {}

RESTRICTIONS_SINGLE_MUTATION: dict[str, Any] = {
    'min_mutations': 1,
    'max_mutations': 1,
}

RESTRICTIONS_ORDERED_BONDS: dict[str, Any] = {
    'ordered_bonds': True,
}


def resolve_config(overrides: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Return DEFAULT_CONFIG with `overrides` applied on top."""
    config = dict(DEFAULT_CONFIG)
    if overrides:
        config.update(overrides)
    return config


__all__ = [
    'DEFAULT_CONFIG',
    'PRESET_SEQUENTIAL',
    'PRESET_PARALLEL',
    'RESTRICTIONS_UNRESTRICTED',
    'RESTRICTIONS_SINGLE_MUTATION',
    'RESTRICTIONS_ORDERED_BONDS',
    'resolve_config',
]
