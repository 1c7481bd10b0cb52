"""Diff display models for patch previews"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class DiffHunk(BaseModel):
    """A single changed region between the preview's left and right sides"""

    start_line: int  # 1-indexed, in the original
    end_line: int
    original_content: str
    new_content: str
    change_type: Literal["add", "modify", "delete"]


class DiffResult(BaseModel):
    """Rendered comparison of an original document and its patched version"""

    file_path: str
    hunks: list[DiffHunk]
    unified_diff: str  # Standard unified diff format, display only
    preview_content: str  # Full patched document
