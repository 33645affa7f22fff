"""Data models for the catalog audit."""

from .string_entry import (
    TRANSLATED_STATE,
    StringUnit,
    Localization,
    StringEntry,
    XCStringsFile,
)
from .missing_translation import MissingTranslation

__all__ = [
    "TRANSLATED_STATE",
    "StringUnit",
    "Localization",
    "StringEntry",
    "XCStringsFile",
    "MissingTranslation",
]
