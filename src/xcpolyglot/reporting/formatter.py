"""Formatting of audit results for terminals and GitHub Actions."""

from typing import List, Sequence

from ..errors import DirectoryUnreadableError, FileUnprocessableError, PolyglotError
from ..models.missing_translation import MissingTranslation

ALL_PRESENT_MESSAGE = "All translations are present"
COMPLETED_WITH_MISSING_MESSAGE = "Completed with missing translations"


def format_missing(
    missing: Sequence[MissingTranslation], github_actions: bool, error_on_missing: bool
) -> List[str]:
    """
    Render one line per missing (string, language) pair.

    In GitHub Actions each line becomes a workflow annotation, an error when
    missing translations fail the run and a warning otherwise.
    """
    lines = []
    annotation = "error" if error_on_missing else "warning"
    for item in missing:
        for line in item.description:
            if github_actions:
                line = f"::{annotation} file={item.file_path}::{line}"
            lines.append(line)
    return lines


def format_error(error: PolyglotError, github_actions: bool) -> str:
    """Render a fatal audit error."""
    if isinstance(error, FileUnprocessableError):
        if github_actions:
            return f"::error file={error.path}::Could not process file at path: {error.path}"
        return f'Error: file "{error.path}" could not be processed'

    if isinstance(error, DirectoryUnreadableError):
        if github_actions:
            return f"::error::Could not read directory at path: {error.path}"
        return f'Error: directory "{error.path}" could not be read'

    return f"Error: {error}"
