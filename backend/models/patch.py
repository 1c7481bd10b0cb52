"""Patch-related data models"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .diff import DiffResult


class OperationType(str, Enum):
    """Edit operation kinds recognized in a pasted diff"""

    REPLACE = "replace"
    DELETE = "delete"
    INSERT = "insert"


class ReplaceOperation(BaseModel):
    """`-old` immediately followed by `+new`"""

    type: Literal["replace"] = "replace"
    old: str
    new: str


class DeleteOperation(BaseModel):
    """`-old` with no `+` line after it"""

    type: Literal["delete"] = "delete"
    old: str


class InsertOperation(BaseModel):
    """`+new` not merged into a replace"""

    type: Literal["insert"] = "insert"
    new: str


Operation = Annotated[
    Union[ReplaceOperation, DeleteOperation, InsertOperation],
    Field(discriminator="type"),
]


class OutcomeStatus(str, Enum):
    """What happened to a single operation during apply"""

    REPLACED = "replaced"
    DELETED = "deleted"
    INSERTED = "inserted"
    APPENDED = "appended"  # replace target missing, new line added at the end
    SKIPPED = "skipped"  # delete target missing


class OperationOutcome(BaseModel):
    """Result of applying one operation"""

    index: int
    type: OperationType
    status: OutcomeStatus
    line: int | None = None  # 0-indexed buffer position touched


class PatchResult(BaseModel):
    """Patched text plus a per-operation report"""

    patched: str
    line_ending: str  # "lf" or "crlf"
    operations: list[Operation] = []
    outcomes: list[OperationOutcome] = []


class ParseRequest(BaseModel):
    """Request to parse a pasted diff"""

    diff: str = ""


class ParseResponse(BaseModel):
    """Parsed operations in diff order"""

    operations: list[Operation]
    count: int


class PatchRequest(BaseModel):
    """Request to apply or preview a pasted diff against a document"""

    original: str
    diff: str = ""
    file_path: str | None = None  # Used only to label the preview diff


class PreviewContents(BaseModel):
    """Left/right sides of the reusable preview"""

    left: str = ""
    right: str = ""
    version: int = 0


class PreviewResponse(PreviewContents):
    """Preview contents with a rendered diff for display"""

    title: str
    diff: DiffResult
    inline: str


class PreviewEvent(BaseModel):
    """SSE event fired whenever the preview changes"""

    type: str  # "changed", "reset"
    version: int
