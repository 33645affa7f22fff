"""Data model for missing translation findings."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class MissingTranslation:
    """A string in a catalog file lacking approved translations."""

    file_path: str
    original_string: str
    missing_languages: Tuple[str, ...]

    @property
    def description(self) -> List[str]:
        """One human-readable line per missing language."""
        return [
            f'"{self.original_string}" is missing or not translated in {language} '
            f'in file "{self.file_path}"'
            for language in self.missing_languages
        ]
