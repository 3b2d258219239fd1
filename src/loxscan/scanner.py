"""Lox scanner — converts source text into a flat token stream plus errors."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from loxscan.tokens import (
    EQUAL_OPERATORS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    UNEXPECTED_CHARACTER,
    UNTERMINATED_STRING,
    LexicalError,
    Token,
    TokenType,
    is_digit,
    is_ident_char,
    is_whitespace,
)

# One scan step yields a token, an error, or nothing (whitespace, comments).
Event = Token | LexicalError


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Completed output of a batch scan."""

    tokens: list[Token] = field(default_factory=list)
    errors: list[LexicalError] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return bool(self.errors)


class Scanner:
    """Scan one Lox source string in a single left-to-right pass.

    A Scanner is bound to its source at construction and may be driven
    exactly once, through any one of :meth:`scan_tokens` (batch),
    :meth:`scan` (callbacks) or :meth:`events` (generator).
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._consumed = False

    def scan_tokens(self) -> ScanResult:
        """Run the full pass and return all tokens and errors."""
        result = ScanResult()
        self.scan(result.tokens.append, result.errors.append)
        return result

    def scan(
        self,
        on_token: Callable[[Token], object],
        on_error: Callable[[LexicalError], object],
    ) -> None:
        """Run the full pass, handing each token/error to its sink as produced."""
        for event in self.events():
            if isinstance(event, Token):
                on_token(event)
            else:
                on_error(event)

    def events(self) -> Iterator[Event]:
        """Yield tokens and errors in source order; the EOF token comes last."""
        if self._consumed:
            raise RuntimeError("Scanner has already been run; create a new one per source")
        self._consumed = True
        return self._run()

    def _run(self) -> Iterator[Event]:
        while not self._at_end():
            event = self._scan_token()
            if event is not None:
                yield event
        yield Token(TokenType.EOF, "", None, self._line)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self, offset: int = 0) -> str:
        idx = self._current + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _token(self, tt: TokenType, literal: float | str | None = None) -> Token:
        lexeme = self._source[self._start : self._current]
        return Token(tt, lexeme, literal, self._start_line)

    def _error(self, message: str) -> LexicalError:
        return LexicalError(self._line, message, self._start)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> Event | None:
        self._start = self._current
        self._start_line = self._line
        ch = self._advance()

        tt = SINGLE_CHAR_TOKENS.get(ch)
        if tt is not None:
            return self._token(tt)

        if ch in EQUAL_OPERATORS:
            single, double = EQUAL_OPERATORS[ch]
            return self._token(double if self._match("=") else single)

        if ch == "/":
            if self._match("/"):
                self._skip_comment()
                return None
            return self._token(TokenType.SLASH)

        if is_whitespace(ch):
            return None

        if ch == "\n":
            self._line += 1
            return None

        if ch == '"':
            return self._string()

        if is_digit(ch):
            return self._number()

        if is_ident_char(ch):
            return self._identifier()

        return self._error(UNEXPECTED_CHARACTER)

    def _skip_comment(self) -> None:
        # Stops before the newline so the dispatcher still counts it.
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> Event:
        while not self._at_end() and self._peek() != '"':
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            return self._error(UNTERMINATED_STRING)

        self._advance()  # closing quote
        value = self._source[self._start + 1 : self._current - 1]
        return self._token(TokenType.STRING, value)

    def _number(self) -> Token:
        while is_digit(self._peek()):
            self._advance()

        # A trailing "." is only part of the number when a digit follows it.
        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        return self._token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _identifier(self) -> Token:
        while is_ident_char(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        return self._token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str) -> ScanResult:
    """Convenience function: scan source text in batch mode."""
    return Scanner(source).scan_tokens()


def tokenize(source: str) -> list[Token]:
    """Convenience function: return just the tokens of source, EOF included."""
    return scan(source).tokens
