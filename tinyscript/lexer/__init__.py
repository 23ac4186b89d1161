"""
TinyScript Lexer Package

Implements the lexical analyzer (scanner) for the TinyScript language.
Turns raw source text into a flat list of tokens for the parser.

Key Features:
- Single pass, single cursor scanning
- Longest-match operators (!=, ==, <=, >=)
- Keyword recognition with a shared read-only keyword table
- Line tracking for diagnostics
- Non-fatal error reporting through a pluggable reporter

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .lexer import Lexer, scan, tokenize_string, tokenize_file
from .errors import LexerError, UnexpectedCharacterError, UnterminatedStringError

__all__ = [
    "Lexer",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "LexerError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
]
