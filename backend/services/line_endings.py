"""Line ending helpers shared by the diff parser and the patch applier"""

from __future__ import annotations

import re

CRLF = "\r\n"
LF = "\n"

_LINE_BREAK = re.compile(r"\r?\n")


def detect_line_ending(text: str) -> str:
    """Return CRLF if the text contains it anywhere, LF otherwise"""
    return CRLF if CRLF in text else LF


def split_lines(text: str) -> list[str]:
    """Split on CRLF or bare LF. An empty string yields a single empty line."""
    return _LINE_BREAK.split(text)


def join_lines(lines: list[str], eol: str) -> str:
    return eol.join(lines)


def line_ending_name(eol: str) -> str:
    return "crlf" if eol == CRLF else "lf"
