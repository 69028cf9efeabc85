"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from diff_workbench.models.api import (
    CompareRequest,
    IdenticalResponse,
    RenderFormat,
    RenderRequest,
    RenderResponse,
    ReviewRequest,
)
from diff_workbench.models.diff import DiffReport, DiffReview, DiffStats
from diff_workbench.services.aligner import AlignmentTooLargeError
from diff_workbench.services.config_manager import ConfigManager
from diff_workbench.services.diff_engine import DiffEngine
from diff_workbench.services.diff_renderer import render_inline, render_summary, render_table

router = APIRouter()


def get_engine() -> DiffEngine:
    """Build an engine from the current configuration"""
    config = ConfigManager.get_instance().get_config()
    return DiffEngine.from_config(config)


def too_large(error: AlignmentTooLargeError) -> HTTPException:
    """Map the alignment size guard to 413"""
    print(f"[DiffRouter] Rejected comparison: {error}")
    return HTTPException(status_code=413, detail=str(error))


@router.post("/compare", response_model=DiffReport)
async def compare(request: CompareRequest) -> DiffReport:
    """Compute the full line-by-line diff"""
    try:
        return get_engine().compare(request.old_text, request.new_text)
    except AlignmentTooLargeError as e:
        raise too_large(e)


@router.post("/stats", response_model=DiffStats)
async def stats(report: DiffReport) -> DiffStats:
    """Summarize a previously computed report"""
    return get_engine().stats(report)


@router.post("/identical", response_model=IdenticalResponse)
async def identical(request: CompareRequest) -> IdenticalResponse:
    """Trim-insensitive identity check"""
    return IdenticalResponse(identical=get_engine().are_identical(request.old_text, request.new_text))


@router.post("/review", response_model=DiffReview)
async def review(request: ReviewRequest) -> DiffReview:
    """Identity check followed by a diff only when the texts differ"""
    cfg = ConfigManager.get_instance().get("diff", {})
    old_label = cfg.get("oldLabel", "Previous") if request.old_label is None else request.old_label
    new_label = cfg.get("newLabel", "Current") if request.new_label is None else request.new_label

    try:
        return get_engine().review(request.old_text, request.new_text, old_label, new_label)
    except AlignmentTooLargeError as e:
        raise too_large(e)


@router.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest) -> RenderResponse:
    """Render a comparison as plain text"""
    engine = get_engine()

    if engine.are_identical(request.old_text, request.new_text):
        return RenderResponse(format=request.format, identical=True, content="")

    try:
        report = engine.compare(request.old_text, request.new_text)
    except AlignmentTooLargeError as e:
        raise too_large(e)

    if request.format == RenderFormat.INLINE:
        context_lines = request.context_lines
        if context_lines is None:
            context_lines = ConfigManager.get_instance().get("diff", {}).get("contextLines", 3)
        content = render_inline(report, context_lines=context_lines)
    else:
        content = render_table(report)

    return RenderResponse(
        format=request.format,
        identical=False,
        content=content,
        summary=render_summary(engine.stats(report)),
    )
