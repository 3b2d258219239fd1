"""Lexical analysis front end for the Lox language."""

from __future__ import annotations

from loxscan.scanner import ScanResult, Scanner, scan, tokenize
from loxscan.tokens import LexicalError, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "LexicalError",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenType",
    "scan",
    "tokenize",
]
