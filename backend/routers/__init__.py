"""Routers module - FastAPI route handlers"""

from . import config, patch

__all__ = ["config", "patch"]
