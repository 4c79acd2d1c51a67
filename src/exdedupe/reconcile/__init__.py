"""Comparison of name sets held by two record sources."""

from exdedupe.reconcile.compare import SourceComparison, compare_sources

__all__ = [
    "SourceComparison",
    "compare_sources",
]
