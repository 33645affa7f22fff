"""Missing translation analysis."""

from .analyzer import analyze_catalog, analyze_file, analyze_directory

__all__ = ["analyze_catalog", "analyze_file", "analyze_directory"]
