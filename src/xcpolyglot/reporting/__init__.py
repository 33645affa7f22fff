"""Output formatting for audit results."""

from .formatter import (
    ALL_PRESENT_MESSAGE,
    COMPLETED_WITH_MISSING_MESSAGE,
    format_missing,
    format_error,
)

__all__ = [
    "ALL_PRESENT_MESSAGE",
    "COMPLETED_WITH_MISSING_MESSAGE",
    "format_missing",
    "format_error",
]
