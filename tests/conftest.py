"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxscan.scanner import ScanResult, Scanner
from loxscan.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        result = Scanner(source).scan_tokens()
        # Strip trailing EOF for convenience
        return [t for t in result.tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def scan_source():
    """Return a helper that scans source and returns the full ScanResult."""

    def _scan(source: str) -> ScanResult:
        return Scanner(source).scan_tokens()

    return _scan


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lines(tokens: list[Token], expected: list[int]) -> None:
    """Assert that the token lines match the expected list."""
    actual = [t.line for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
