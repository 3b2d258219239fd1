"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Single-character punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    STAR = auto()  # *
    SLASH = auto()  # /

    # One or two character operators
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=

    # Literal-bearing
    STRING = auto()  # "text" — literal is the unquoted contents
    NUMBER = auto()  # 12 or 12.5 — literal is a float
    IDENTIFIER = auto()  # ident_char+

    # Reserved words
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


_KEYWORD_TYPES = (
    TokenType.AND,
    TokenType.CLASS,
    TokenType.ELSE,
    TokenType.FALSE,
    TokenType.FUN,
    TokenType.FOR,
    TokenType.IF,
    TokenType.NIL,
    TokenType.OR,
    TokenType.PRINT,
    TokenType.RETURN,
    TokenType.SUPER,
    TokenType.THIS,
    TokenType.TRUE,
    TokenType.VAR,
    TokenType.WHILE,
)

# Reserved spelling -> kind, matched exactly after a full identifier is scanned
KEYWORDS: dict[str, TokenType] = {tt.name.lower(): tt for tt in _KEYWORD_TYPES}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that take an optional trailing "=": lead char -> (one-char, two-char)
EQUAL_OPERATORS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified lexeme with its literal value and starting line."""

    type: TokenType
    lexeme: str
    literal: float | str | None
    line: int

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"


@dataclass(frozen=True, slots=True)
class LexicalError:
    """A recoverable scanning error.

    ``line`` is where the problem was detected; ``offset`` is the 0-based
    source offset where the malformed lexeme begins.
    """

    line: int
    message: str
    offset: int = 0


_DIGITS = frozenset("0123456789")
_IDENT_CHARS = _DIGITS | frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)


def is_whitespace(ch: str) -> bool:
    """Return True for insignificant intra-line whitespace (space, CR, tab)."""
    return ch in (" ", "\r", "\t")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _DIGITS


def is_ident_char(ch: str) -> bool:
    """Return True if ch may start or continue an identifier."""
    return ch in _IDENT_CHARS
