"""Utility helpers for ssenum.

Observability helpers live in `ssenum.utils.observability` and are imported
from there (they depend on the core types, which depend on this package).
"""

from .validation import ValidationError  # noqa: F401

__all__ = [
    'ValidationError',
]
