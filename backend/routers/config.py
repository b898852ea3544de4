"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    history: dict | None = None
    diff: dict | None = None
    server: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    history: dict
    diff: dict
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return ConfigResponse(
        history=config.get("history", {}),
        diff=config.get("diff", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest, http_request: Request) -> dict[str, Any]:
    """Update configuration; new sessions pick up history and diff settings"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.history:
        depth = request.history.get("maxDepth")
        if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int) or depth < 0):
            raise HTTPException(status_code=400, detail="history.maxDepth must be a non-negative integer")
        current_config["history"] = {**current_config.get("history", {}), **request.history}
    if request.diff:
        size = request.diff.get("contextSize")
        if size is not None and (isinstance(size, bool) or not isinstance(size, int) or size < 0):
            raise HTTPException(status_code=400, detail="diff.contextSize must be a non-negative integer")
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff}
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}

    config_manager.save_config(current_config)

    registry = http_request.app.state.registry
    registry.max_depth = config_manager.history_max_depth()
    registry.context_size = config_manager.diff_context_size()

    return {"status": "success", "message": "Configuration updated"}
