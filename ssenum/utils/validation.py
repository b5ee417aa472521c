"""Structured validation errors shared across ssenum."""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Validation failure with a machine-readable type and context.

    Attributes:
        error_type: Short code such as 'unrecognized_symbol' or
            'position_out_of_range'
        message: Human-readable description
        details: Extra context (offending index, character, bounds, ...)
    """

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details: dict[str, Any] = dict(details)

    def __str__(self) -> str:
        if not self.details:
            return f"[{self.error_type}] {self.message}"
        ctx = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"[{self.error_type}] {self.message} ({ctx})"


__all__ = ["ValidationError"]
