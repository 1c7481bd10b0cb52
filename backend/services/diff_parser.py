"""
Diff Parser - Turn a pasted pseudo-diff into ordered edit operations

Only lines starting with "+" or "-" carry meaning. Everything else (blank
lines, context lines, hunk headers) is ignored.
"""

from __future__ import annotations

from models.patch import DeleteOperation, InsertOperation, Operation, ReplaceOperation

from .line_endings import split_lines


def parse_diff(diff_text: str | None) -> list[Operation]:
    """Parse diff text into operations, in order of appearance"""
    if not diff_text:
        return []

    raw = split_lines(diff_text)
    operations: list[Operation] = []

    i = 0
    while i < len(raw):
        line = raw[i]
        if line.startswith("-"):
            old = line[1:]
            if i + 1 < len(raw) and raw[i + 1].startswith("+"):
                operations.append(ReplaceOperation(old=old, new=raw[i + 1][1:]))
                i += 2  # the "+" line is consumed by the replace
                continue
            operations.append(DeleteOperation(old=old))
        elif line.startswith("+"):
            operations.append(InsertOperation(new=line[1:]))
        i += 1

    return operations


class DiffParser:
    """Parse pasted diffs for the patch routers"""

    def parse(self, diff_text: str | None) -> list[Operation]:
        return parse_diff(diff_text)
