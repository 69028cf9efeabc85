"""Diff Workbench - line-level diff engine and its HTTP backend"""

from .models.diff import DiffReport, DiffReview, DiffStats, LineKind, LineRecord
from .services.aligner import AlignmentTooLargeError
from .services.diff_engine import DiffEngine, are_identical, compare, stats

__version__ = "1.0.0"

__all__ = [
    "DiffEngine",
    "compare",
    "stats",
    "are_identical",
    "AlignmentTooLargeError",
    "DiffReport",
    "DiffReview",
    "DiffStats",
    "LineKind",
    "LineRecord",
]
