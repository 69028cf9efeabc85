"""Services module - Business logic layer"""

from .aligner import AlignmentTooLargeError, align
from .annotator import annotate, are_identical, compute_stats
from .config_manager import ConfigManager
from .diff_engine import DiffEngine
from .tokenizer import split_lines

__all__ = [
    "split_lines",
    "align",
    "AlignmentTooLargeError",
    "annotate",
    "compute_stats",
    "are_identical",
    "DiffEngine",
    "ConfigManager",
]
