"""
Patch Applier - Apply pasted diff operations to a text buffer

Operations are applied in order against a moving cursor so that repeated
lines are consumed top to bottom. A target that is not found never fails the
patch: a missing replace target appends the new line, a missing delete target
is skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from models.patch import (
    DeleteOperation,
    InsertOperation,
    Operation,
    OperationOutcome,
    OperationType,
    OutcomeStatus,
    PatchResult,
    ReplaceOperation,
)

from .diff_parser import parse_diff
from .line_endings import detect_line_ending, join_lines, line_ending_name, split_lines

logger = logging.getLogger(__name__)


@dataclass
class PatchState:
    """Line buffer and cursor for a single apply call"""

    lines: list[str]
    cursor: int = 0
    outcomes: list[OperationOutcome] = field(default_factory=list)

    def _clamp(self, index: int) -> int:
        return min(max(index, 0), len(self.lines))

    def index_of(self, value: str, start: int) -> int:
        """Exact whole-line match at or after start, -1 if absent"""
        for i in range(max(0, start), len(self.lines)):
            if self.lines[i] == value:
                return i
        return -1

    def find(self, value: str) -> int:
        """Search from the cursor first, then wrap around to the top"""
        pos = self.index_of(value, self.cursor)
        if pos == -1:
            pos = self.index_of(value, 0)
        return pos

    def replace(self, op: ReplaceOperation) -> tuple[OutcomeStatus, int]:
        pos = self.find(op.old)
        if pos == -1:
            logger.debug("[PatchApplier] Replace target not found, appending: %r", op.old)
            self.lines.append(op.new)
            self.cursor = len(self.lines)
            return OutcomeStatus.APPENDED, len(self.lines) - 1
        self.lines[pos] = op.new
        self.cursor = pos + 1
        return OutcomeStatus.REPLACED, pos

    def delete(self, op: DeleteOperation) -> tuple[OutcomeStatus, int | None]:
        pos = self.find(op.old)
        if pos == -1:
            logger.debug("[PatchApplier] Delete target not found, skipping: %r", op.old)
            return OutcomeStatus.SKIPPED, None
        del self.lines[pos]
        # The next line shifts into pos
        self.cursor = pos
        return OutcomeStatus.DELETED, pos

    def insert(self, op: InsertOperation) -> tuple[OutcomeStatus, int]:
        pos = self._clamp(self.cursor)
        self.lines.insert(pos, op.new)
        self.cursor = pos + 1
        return OutcomeStatus.INSERTED, pos

    def apply(self, index: int, op: Operation) -> "PatchState":
        if isinstance(op, ReplaceOperation):
            status, line = self.replace(op)
        elif isinstance(op, DeleteOperation):
            status, line = self.delete(op)
        else:
            status, line = self.insert(op)

        self.outcomes.append(
            OperationOutcome(index=index, type=OperationType(op.type), status=status, line=line)
        )
        return self


class PatchApplier:
    """Apply pasted diffs to documents"""

    def apply_with_report(self, original_text: str, diff_text: str) -> PatchResult:
        """Apply the diff and report what happened to each operation"""
        original_text = original_text or ""
        eol = detect_line_ending(original_text)
        operations = parse_diff(diff_text)

        state = PatchState(lines=split_lines(original_text))
        original_count = len(state.lines)
        for index, op in enumerate(operations):
            state.apply(index, op)

        logger.debug(
            "[PatchApplier] Applied %d operations (%d lines -> %d lines, %s)",
            len(operations),
            original_count,
            len(state.lines),
            line_ending_name(eol),
        )

        return PatchResult(
            patched=join_lines(state.lines, eol),
            line_ending=line_ending_name(eol),
            operations=operations,
            outcomes=state.outcomes,
        )

    def apply(self, original_text: str, diff_text: str) -> str:
        """Apply the diff and return the patched text"""
        return self.apply_with_report(original_text, diff_text).patched


def apply_patch(original_text: str, diff_text: str) -> str:
    """Apply a pasted diff to original_text, preserving its line ending style"""
    return PatchApplier().apply(original_text, diff_text)
