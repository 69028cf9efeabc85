"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from diff_workbench.services.config_manager import ConfigManager

router = APIRouter()


class DiffSettings(BaseModel):
    """Partial diff settings update"""

    maxAlignmentCells: int | None = Field(default=None, ge=1)
    contextLines: int | None = Field(default=None, ge=0)
    oldLabel: str | None = None
    newLabel: str | None = None


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: DiffSettings | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: dict
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=config.get("diff", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.diff:
        updates = request.diff.model_dump(exclude_none=True)
        current_config["diff"] = {**current_config.get("diff", {}), **updates}
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
