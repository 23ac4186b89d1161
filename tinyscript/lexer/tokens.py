"""
Token definitions for the TinyScript lexer.

This module defines all token types supported by TinyScript, including:
- Single-character punctuation
- One- and two-character comparison operators
- Literals (numbers, strings) and identifiers
- Reserved keywords

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType


class TokenType(Enum):
    """
    Enumeration of all token types in TinyScript.

    Member names are part of the debug/serialization format, so they are
    kept exactly as the downstream parser expects them.
    """

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character operators
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # user_name, x1
    NUMBER = auto()                 # 42, 3.14
    STRING = auto()                 # "hello"

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()                    # and
    ELSE = auto()                   # else
    FALSE = auto()                  # false
    IF = auto()                     # if
    LET = auto()                    # let
    NIL = auto()                    # nil
    OR = auto()                     # or
    TRUE = auto()                   # true
    WHILE = auto()                  # while
    PRINT = auto()                  # print

    END_OF_FILE = auto()


@dataclass(frozen=True)
class SourceLocation:
    """
    A line in a named source, used for diagnostics.

    Diagnostics carry a line number only, never a column.
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the TinyScript language.

    `lexeme` is the raw source text the token came from, except for string
    literals where it is the content between the quotes.  `line` is the
    1-based line the scanner was on when the token was emitted.
    """
    type: TokenType
    lexeme: str
    line: int

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {
            TokenType.NUMBER, TokenType.STRING,
            TokenType.TRUE, TokenType.FALSE, TokenType.NIL,
        }

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer for dispatch and keyword recognition.
# They are built once and never written to, so every Lexer shares them.

KEYWORDS = MappingProxyType({
    "and": TokenType.AND,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "let": TokenType.LET,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "true": TokenType.TRUE,
    "while": TokenType.WHILE,
    "print": TokenType.PRINT,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

SINGLE_CHAR_TOKENS = MappingProxyType({
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
})

# char -> (type without a following '=', type with it)
COMPOUND_TOKENS = MappingProxyType({
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
})

# Whitespace that is skipped without touching the line counter
BLANK_CHARS = frozenset(" \r\t")

DIGITS = frozenset("0123456789")

IDENTIFIER_START_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)

IDENTIFIER_CHARS = IDENTIFIER_START_CHARS | DIGITS
