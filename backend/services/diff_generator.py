"""
Diff Generator Service - Render previews of a patched document

Used for display only. Patching itself never goes through difflib.
"""

from __future__ import annotations

from difflib import SequenceMatcher, unified_diff

from models.diff import DiffHunk, DiffResult

from .line_endings import split_lines

_CHANGE_TYPES = {"insert": "add", "delete": "delete", "replace": "modify"}


class DiffGenerator:
    """Render the difference between a preview's left and right sides"""

    def generate_diff(
        self,
        original_content: str,
        new_content: str,
        file_path: str | None = None,
    ) -> DiffResult:
        """Build a structured diff from original and patched content"""
        file_path = file_path or "untitled"
        original_lines = split_lines(original_content)
        new_lines = split_lines(new_content)

        unified = unified_diff(
            original_lines,
            new_lines,
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
            lineterm="",
        )

        return DiffResult(
            file_path=file_path,
            hunks=self._extract_hunks(original_lines, new_lines),
            unified_diff="\n".join(unified),
            preview_content=new_content,
        )

    def _extract_hunks(self, original: list[str], modified: list[str]) -> list[DiffHunk]:
        """One hunk per non-equal opcode"""
        matcher = SequenceMatcher(None, original, modified, autojunk=False)
        hunks = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                continue

            hunks.append(
                DiffHunk(
                    start_line=i1 + 1,  # 1-indexed for the editor
                    end_line=i2,
                    original_content="\n".join(original[i1:i2]),
                    new_content="\n".join(modified[j1:j2]),
                    change_type=_CHANGE_TYPES[tag],
                )
            )

        return hunks

    def generate_inline_preview(
        self,
        original_content: str,
        new_content: str,
        context_lines: int = 3,
    ) -> str:
        """Compact +/- view with context lines around each change"""
        original_lines = split_lines(original_content)
        new_lines = split_lines(new_content)

        matcher = SequenceMatcher(None, original_lines, new_lines, autojunk=False)
        result_lines: list[str] = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                for i in range(i1, i2):
                    near_previous = i1 > 0 and i < i1 + context_lines
                    near_next = i2 < len(original_lines) and i >= i2 - context_lines
                    if near_previous or near_next:
                        result_lines.append(f"  {original_lines[i]}")
                    elif not result_lines or result_lines[-1] != "...":
                        result_lines.append("...")
                continue

            for line in original_lines[i1:i2]:
                result_lines.append(f"- {line}")
            for line in new_lines[j1:j2]:
                result_lines.append(f"+ {line}")

        return "\n".join(result_lines)
