"""Command-line interface for the catalog audit."""

import logging
import os
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .analysis.analyzer import analyze_directory
from .errors import PolyglotError
from .reporting.formatter import (
    ALL_PRESENT_MESSAGE,
    COMPLETED_WITH_MISSING_MESSAGE,
    format_error,
    format_missing,
)
from .config import config

console = Console()
err_console = Console(stderr=True)

USAGE = "Usage: xcpolyglot <language codes> [--errorOnMissing]"


@click.command()
@click.argument("languages", required=False)
@click.option(
    "--errorOnMissing",
    "error_on_missing",
    is_flag=True,
    help="Exit with a failure status when translations are missing"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Log each scanned catalog"
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, languages: Optional[str], error_on_missing: bool, verbose: bool):
    """Check the .xcstrings catalogs in the current directory for missing translations.

    LANGUAGES is a comma-separated list of language codes, e.g. "de,fr,it".
    """
    _setup_logging(verbose)

    target_langs = _parse_languages(languages)
    if not target_langs:
        console.print(USAGE, markup=False, highlight=False)
        ctx.exit(1)

    try:
        missing = analyze_directory(os.getcwd(), target_langs)
    except PolyglotError as e:
        _print_line(format_error(e, config.github_actions))
        ctx.exit(1)

    if not missing:
        console.print(f"[green]{ALL_PRESENT_MESSAGE}[/green]")
        return

    for line in format_missing(missing, config.github_actions, error_on_missing):
        _print_line(line)

    console.print(f"[yellow]{COMPLETED_WITH_MISSING_MESSAGE}[/yellow]")

    if error_on_missing:
        ctx.exit(1)


def _parse_languages(languages: Optional[str]) -> List[str]:
    """Split a comma-separated language list, dropping blank items."""
    if not languages:
        return []
    return [lang.strip() for lang in languages.split(",") if lang.strip()]


def _print_line(line: str):
    """Print text verbatim so workflow annotations are not restyled or wrapped."""
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _setup_logging(verbose: bool):
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        err_console.print(
            f"Unknown log level {config.log_level!r}, using WARNING",
            markup=False,
            highlight=False,
        )
        level = logging.WARNING

    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


if __name__ == "__main__":
    cli()
