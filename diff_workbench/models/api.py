"""Request/response models for the diff API"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RenderFormat(str, Enum):
    """Available plain-text renderings"""

    TABLE = "table"
    INLINE = "inline"


class CompareRequest(BaseModel):
    """Request to compare two texts"""

    old_text: str
    new_text: str


class ReviewRequest(CompareRequest):
    """Request for a review comparison with optional column labels"""

    old_label: str | None = None
    new_label: str | None = None


class RenderRequest(CompareRequest):
    """Request to render a comparison as text"""

    format: RenderFormat = RenderFormat.TABLE
    context_lines: int | None = Field(default=None, ge=0)


class IdenticalResponse(BaseModel):
    """Identity verdict response"""

    identical: bool


class RenderResponse(BaseModel):
    """Rendered comparison"""

    format: RenderFormat
    identical: bool
    content: str
    summary: str = ""
