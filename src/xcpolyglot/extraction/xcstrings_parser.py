"""Parser for Apple's .xcstrings JSON format (Xcode 15+)."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from ..errors import FileUnprocessableError
from ..models.string_entry import StringUnit, Localization, StringEntry, XCStringsFile

logger = logging.getLogger(__name__)


class XCStringsParser:
    """Parser for .xcstrings files."""

    def parse(self, file_path: str) -> XCStringsFile:
        """
        Parse an .xcstrings file and return a structured representation.

        Args:
            file_path: Path to the .xcstrings file

        Returns:
            XCStringsFile object containing all parsed data

        Raises:
            FileUnprocessableError: if the file cannot be read, is not valid
                JSON or has no "strings" object
        """
        logger.debug("Parsing %s", file_path)
        try:
            content = Path(file_path).read_bytes()
        except OSError as e:
            logger.debug("Could not read %s: %s", file_path, e)
            raise FileUnprocessableError(file_path) from e

        return self.parse_string(content, file_path)

    def parse_string(
        self, content: Union[str, bytes], file_path: str = "<string>"
    ) -> XCStringsFile:
        """
        Parse .xcstrings content from a string.

        Args:
            content: JSON content, as str or bytes
            file_path: Path recorded on the result and on errors

        Returns:
            XCStringsFile object
        """
        try:
            data = json.loads(content, object_pairs_hook=_checked_object)
        except (ValueError, RecursionError) as e:
            logger.debug("Invalid JSON in %s: %s", file_path, e)
            raise FileUnprocessableError(file_path) from e

        return self._parse_data(data, file_path)

    def _parse_data(self, data: Any, file_path: str) -> XCStringsFile:
        """Parse the JSON data structure into our model."""
        if not isinstance(data, dict):
            raise FileUnprocessableError(file_path)

        raw_strings = data.get("strings")
        if not isinstance(raw_strings, dict):
            logger.debug("%s has no \"strings\" object", file_path)
            raise FileUnprocessableError(file_path)

        strings = {}
        for key, entry_data in raw_strings.items():
            if not isinstance(entry_data, dict):
                logger.debug("Entry %r in %s is not an object", key, file_path)
                raise FileUnprocessableError(file_path)
            strings[key] = self._parse_string_entry(key, entry_data)

        return XCStringsFile(path=file_path, strings=strings)

    def _parse_string_entry(self, key: str, entry_data: Dict[str, Any]) -> StringEntry:
        """Parse a single string entry."""
        raw_localizations = entry_data.get("localizations")

        # A block that is not a mapping of objects counts as no block at all
        if not isinstance(raw_localizations, dict) or not all(
            isinstance(loc_data, dict) for loc_data in raw_localizations.values()
        ):
            return StringEntry(key=key, localizations=None)

        localizations = {
            lang: self._parse_localization(loc_data)
            for lang, loc_data in raw_localizations.items()
        }
        return StringEntry(key=key, localizations=localizations)

    def _parse_localization(self, loc_data: Dict[str, Any]) -> Localization:
        """Parse a localization entry."""
        su = loc_data.get("stringUnit")
        if not isinstance(su, dict):
            return Localization(string_unit=None)

        state = su.get("state")
        return Localization(
            string_unit=StringUnit(state=state if isinstance(state, str) else None)
        )


def _checked_object(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    # Lone surrogates from \u escapes are not text; encode() raises
    # UnicodeEncodeError, a ValueError, which fails the parse.
    for key, value in pairs:
        key.encode("utf-8")
        if isinstance(value, str):
            value.encode("utf-8")
    return dict(pairs)
