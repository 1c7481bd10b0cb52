"""Configuration API endpoints"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    server: dict | None = None
    preview: dict | None = None
    logging: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    preview: dict
    logging: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return ConfigResponse(
        server=config.get("server", {}),
        preview=config.get("preview", {}),
        logging=config.get("logging", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.preview and "contextLines" in request.preview:
        context_lines = request.preview["contextLines"]
        if isinstance(context_lines, bool) or not isinstance(context_lines, int) or context_lines < 0:
            raise HTTPException(
                status_code=400, detail=f"contextLines must be a non-negative integer: {context_lines!r}"
            )

    if request.logging and "level" in request.logging:
        level = str(request.logging["level"]).upper()
        if level not in _LOG_LEVELS:
            raise HTTPException(status_code=400, detail=f"Unknown log level: {level}")
        request.logging["level"] = level
        logging.getLogger().setLevel(level)

    # Update only provided sections
    for section in ("server", "preview", "logging"):
        values = getattr(request, section)
        if values:
            current_config[section] = {**current_config.get(section, {}), **values}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}
