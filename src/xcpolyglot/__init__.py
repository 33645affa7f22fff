"""Audit Xcode string catalogs for missing translations."""

__version__ = "0.1.0"
