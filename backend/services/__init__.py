"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .diff_parser import DiffParser, parse_diff
from .patch_applier import PatchApplier, PatchState, apply_patch
from .preview_store import PreviewStore

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "DiffParser",
    "parse_diff",
    "PatchApplier",
    "PatchState",
    "apply_patch",
    "PreviewStore",
]
