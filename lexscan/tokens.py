"""
Token definitions for the lexscan scanner.

This module defines the token kinds produced by the scanner:
- Keywords and symbols (taken from the language configuration)
- Identifiers (ASCII only)
- String and number literals
- Comments (kept, so tooling can highlight them)

plus the internal pseudo-kinds the dispatch loop uses to skip input.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """
    Enumeration of all token kinds.

    Only the first group is ever stored in a ScannerData. UNKNOWN marks the
    single character at an unknown-token failure, the pseudo-kinds never
    leave the scanner.
    """

    # ========================================================================
    # Emitted tokens
    # ========================================================================
    SYMBOL = auto()                 # (, ==, ...
    IDENTIFIER = auto()             # foo, _bar1
    STRING_LITERAL = auto()         # "hello"
    NUMBER_LITERAL = auto()         # 42, 3.14, 0xff, 0b101
    KEYWORD = auto()                # function, end
    COMMENT = auto()                # -- note, --[[ block ]]

    # ========================================================================
    # Diagnostics
    # ========================================================================
    UNKNOWN = auto()                # Unrecognized character

    # ========================================================================
    # Internal pseudo-kinds (never emitted)
    # ========================================================================
    IGNORE = auto()                 # Whitespace run
    NEWLINE = auto()                # '\n'
    EOF = auto()                    # End of input


INTERNAL_TYPES = frozenset({TokenType.IGNORE, TokenType.NEWLINE, TokenType.EOF})


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the decoded source.

    line and column are 1-based, offset is the 0-based character (code
    point) index into the source.
    """
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A classified token with its kind-specific payload.

    text is the matched text for symbols, keywords, identifiers and
    comments, the unescaped content (no quotes) for string literals and the
    literal text for numbers. value is only set for number literals.
    """
    type: TokenType
    text: str = ""
    value: Optional[float] = None

    @classmethod
    def symbol(cls, text: str) -> "Token":
        return cls(TokenType.SYMBOL, text)

    @classmethod
    def identifier(cls, text: str) -> "Token":
        return cls(TokenType.IDENTIFIER, text)

    @classmethod
    def string(cls, content: str) -> "Token":
        return cls(TokenType.STRING_LITERAL, content)

    @classmethod
    def number(cls, text: str, value: float) -> "Token":
        return cls(TokenType.NUMBER_LITERAL, text, float(value))

    @classmethod
    def keyword(cls, text: str) -> "Token":
        return cls(TokenType.KEYWORD, text)

    @classmethod
    def comment(cls, text: str) -> "Token":
        return cls(TokenType.COMMENT, text)

    @classmethod
    def unknown(cls, char: str) -> "Token":
        return cls(TokenType.UNKNOWN, char)

    @property
    def span_length(self) -> int:
        """Length of the source span a complete token of this kind covers."""
        if self.type in INTERNAL_TYPES:
            return 0
        if self.type == TokenType.STRING_LITERAL:
            return len(self.text) + 2
        return len(self.text)

    @property
    def is_internal(self) -> bool:
        return self.type in INTERNAL_TYPES

    def __str__(self) -> str:
        if self.type in INTERNAL_TYPES:
            return self.type.name
        if self.value is not None:
            return f"{self.type.name}({self.text!r} -> {self.value!r})"
        return f"{self.type.name}({self.text!r})"


# Singletons for the pseudo-kinds
IGNORE = Token(TokenType.IGNORE)
NEWLINE = Token(TokenType.NEWLINE)
EOF = Token(TokenType.EOF)


# Character classes. Python's str predicates are Unicode aware, identifiers
# here are ASCII only.
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
BINARY_DIGITS = frozenset("01")
ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
ALPHANUMERIC = DIGITS | ALPHA
WHITESPACE = frozenset(" \t\r")


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_alpha(char: str) -> bool:
    return char in ALPHA


def is_alphanumeric(char: str) -> bool:
    return char in ALPHANUMERIC


def is_space(char: str) -> bool:
    return char in WHITESPACE
