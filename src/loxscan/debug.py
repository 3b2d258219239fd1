"""--debug token table dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from loxscan.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO | None = None) -> None:
    """Print an aligned line/type/lexeme/literal table of tokens to *file* (default stderr)."""
    if file is None:
        file = sys.stderr
    if not tokens:
        return
    line_width = max(len(str(t.line)) for t in tokens)
    type_width = max(len(t.type.name) for t in tokens)
    lexeme_width = max(len(repr(t.lexeme)) for t in tokens)
    for tok in tokens:
        literal = "" if tok.literal is None else repr(tok.literal)
        row = (
            f"{tok.line:>{line_width}} | "
            f"{tok.type.name:<{type_width}} | "
            f"{tok.lexeme!r:<{lexeme_width}} | "
            f"{literal}"
        )
        file.write(row.rstrip() + "\n")
