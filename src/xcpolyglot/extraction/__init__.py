"""Catalog discovery and parsing modules."""

from .directory_scanner import CATALOG_SUFFIX, scan
from .xcstrings_parser import XCStringsParser

__all__ = ["CATALOG_SUFFIX", "scan", "XCStringsParser"]
