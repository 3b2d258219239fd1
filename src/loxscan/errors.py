"""Lexical error reporting with formatted source context."""

from __future__ import annotations

from loxscan.tokens import LexicalError


def report(error: LexicalError, where: str = "") -> str:
    """Return the one-line driver diagnostic for a lexical error."""
    return f"[line {error.line}] Error {where}: {error.message}"


def locate(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a 0-based offset into source."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def format_context(error: LexicalError, source: str, filename: str = "<script>") -> str:
    """Render the error with the offending source line and a caret under it."""
    line_no, col = locate(source, error.offset)
    lines = source.split("\n")
    line_idx = line_no - 1

    # Build the source line (strip trailing CR for display)
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\r")
    else:
        source_line = ""

    pad = " " * (col - 1)

    line_num = str(line_no)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {error.message}\n"
        f"{' ' * gutter_width}--> {filename}:{line_no}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}^"
    )
