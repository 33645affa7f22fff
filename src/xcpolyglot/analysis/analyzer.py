"""Detection of missing translations in .xcstrings catalogs."""

import logging
from typing import List, Sequence

from ..extraction.directory_scanner import scan
from ..extraction.xcstrings_parser import XCStringsParser
from ..models.missing_translation import MissingTranslation
from ..models.string_entry import XCStringsFile

logger = logging.getLogger(__name__)


def analyze_catalog(
    catalog: XCStringsFile, target_languages: Sequence[str]
) -> List[MissingTranslation]:
    """
    Find the strings of a parsed catalog lacking approved translations.

    A string without any localizations produces a single finding listing
    every target language. Otherwise each unapproved language produces its
    own single-language finding.

    Args:
        catalog: Parsed catalog
        target_languages: Language codes to check, in report order

    Returns:
        Findings in document order, then language order
    """
    languages = tuple(target_languages)
    missing: List[MissingTranslation] = []

    for original_string, entry in catalog.strings.items():
        if entry.localizations is None:
            missing.append(
                MissingTranslation(
                    file_path=catalog.path,
                    original_string=original_string,
                    missing_languages=languages,
                )
            )
            continue

        for language in languages:
            if entry.is_translated(language):
                continue
            missing.append(
                MissingTranslation(
                    file_path=catalog.path,
                    original_string=original_string,
                    missing_languages=(language,),
                )
            )

    return missing


def analyze_file(
    file_path: str, target_languages: Sequence[str]
) -> List[MissingTranslation]:
    """
    Parse one catalog file and return its missing translations.

    Raises:
        FileUnprocessableError: if the file cannot be read or parsed
    """
    catalog = XCStringsParser().parse(file_path)
    missing = analyze_catalog(catalog, target_languages)
    logger.debug(
        "%s: %d string(s), %d finding(s)", file_path, len(catalog.strings), len(missing)
    )
    return missing


def analyze_directory(
    directory_path: str, target_languages: Sequence[str]
) -> List[MissingTranslation]:
    """
    Audit every catalog directly inside a directory.

    Files are processed one at a time in scan order and their findings
    concatenated. The first unprocessable file aborts the whole audit.

    Raises:
        DirectoryUnreadableError: if the directory cannot be listed
        FileUnprocessableError: if any catalog cannot be read or parsed
    """
    missing: List[MissingTranslation] = []
    for file_path in scan(directory_path):
        missing.extend(analyze_file(file_path, target_languages))
    return missing
