"""Models module - Pydantic data models"""

from .api import (
    CompareRequest,
    IdenticalResponse,
    RenderFormat,
    RenderRequest,
    RenderResponse,
    ReviewRequest,
)
from .diff import DiffReport, DiffReview, DiffStats, Hunk, HunkTag, LineKind, LineRecord

__all__ = [
    # Diff models
    "LineKind",
    "LineRecord",
    "DiffReport",
    "DiffStats",
    "DiffReview",
    "Hunk",
    "HunkTag",
    # API models
    "CompareRequest",
    "ReviewRequest",
    "RenderRequest",
    "RenderFormat",
    "RenderResponse",
    "IdenticalResponse",
]
