"""Data models for XCStrings file structure."""

from dataclasses import dataclass
from typing import Dict, Optional

TRANSLATED_STATE = "translated"


@dataclass(frozen=True)
class StringUnit:
    """Represents a single string translation unit."""

    state: Optional[str] = None  # new, translated, needs_review, stale, ...

    @property
    def is_translated(self) -> bool:
        return self.state == TRANSLATED_STATE


@dataclass(frozen=True)
class Localization:
    """Represents a localization entry for a specific language."""

    string_unit: Optional[StringUnit] = None

    @property
    def is_translated(self) -> bool:
        return self.string_unit is not None and self.string_unit.is_translated


@dataclass(frozen=True)
class StringEntry:
    """
    Represents a single localizable string entry.

    ``localizations`` is None when the catalog holds no localization block
    for this string at all, which counts as missing in every language.
    """

    key: str
    localizations: Optional[Dict[str, Localization]] = None

    def is_translated(self, language: str) -> bool:
        """Check if this string has an approved translation for the given language."""
        if self.localizations is None:
            return False
        loc = self.localizations.get(language)
        return loc is not None and loc.is_translated


@dataclass(frozen=True)
class XCStringsFile:
    """Represents a complete .xcstrings file."""

    path: str
    strings: Dict[str, StringEntry]
