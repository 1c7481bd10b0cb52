"""Models module - Pydantic data models"""

from .diff import DiffHunk, DiffResult
from .patch import (
    DeleteOperation,
    InsertOperation,
    Operation,
    OperationOutcome,
    OperationType,
    OutcomeStatus,
    ParseRequest,
    ParseResponse,
    PatchRequest,
    PatchResult,
    PreviewContents,
    PreviewEvent,
    PreviewResponse,
    ReplaceOperation,
)

__all__ = [
    # Diff display models
    "DiffHunk",
    "DiffResult",
    # Patch models
    "DeleteOperation",
    "InsertOperation",
    "Operation",
    "OperationOutcome",
    "OperationType",
    "OutcomeStatus",
    "ReplaceOperation",
    "PatchResult",
    # Request/response models
    "ParseRequest",
    "ParseResponse",
    "PatchRequest",
    "PreviewContents",
    "PreviewEvent",
    "PreviewResponse",
]
