"""
TinyScript Lexer - turns source text into a flat list of tokens

Single pass over the source with one cursor. Each iteration of the main
loop starts a new lexeme at `current` and either emits one token or skips
one unit of whitespace/comment. Errors never escape tokenize(); they are
collected in `errors` and reported as one line each through `reporter`.

xwest
"""

import logging
import os
from typing import Callable, List, Optional, Union

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS, COMPOUND_TOKENS,
    BLANK_CHARS, DIGITS, IDENTIFIER_START_CHARS, IDENTIFIER_CHARS
)
from .errors import (
    LexerError, UnterminatedStringError, create_unexpected_character_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


class Lexer:
    """
    TinyScript lexical analyzer.

    Converts source text into a list of tokens terminated by END_OF_FILE.
    Unexpected characters are reported and skipped; an unterminated string
    is reported and ends the scan.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 reporter: Optional[Reporter] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            reporter: Receives one human-readable line per diagnostic.
                Defaults to logging them at ERROR level.
        """
        self.source = source
        self.filename = filename
        self.reporter = reporter if reporter is not None else logger.error
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, always ending with END_OF_FILE
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            try:
                self._scan_token()
            except UnterminatedStringError as e:
                # The string swallowed the rest of the input
                self._report(e)
                break
            except LexerError as e:
                self._report(e)

        self.tokens.append(Token(TokenType.END_OF_FILE, "", self.line))

        logger.debug("%s: %d tokens, %d errors, %d lines",
                     self.filename, len(self.tokens), len(self.errors), self.line)
        return self.tokens

    def _scan_token(self):
        """Scan one token starting at `start`, or skip one blank/comment."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in COMPOUND_TOKENS:
            short_type, long_type = COMPOUND_TOKENS[char]
            self._add_token(long_type if self._match('=') else short_type)
        elif char == '/':
            if self._match('/'):
                # Line comment runs up to, not including, the newline
                while not self._is_at_end() and self._peek() != '\n':
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in BLANK_CHARS or char == '\n':
            pass
        elif char == '"':
            self._scan_string()
        elif char in DIGITS:
            self._scan_number()
        elif char in IDENTIFIER_START_CHARS:
            self._scan_identifier()
        else:
            raise create_unexpected_character_error(char, self._location())

    def _scan_string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while not self._is_at_end() and self._peek() != '"':
            if self._peek() == '\\' and self.current + 1 < len(self.source):
                # Escaped character is kept verbatim but can't close the string
                self._advance()
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self._location())

        self._advance()  # Closing quote

        # Lexeme is the body without its quotes
        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _scan_number(self):
        """Scan digits with an optional fractional part."""
        while self._peek() in DIGITS:
            self._advance()

        # A trailing '.' without a digit after it is left for the next token
        if self._peek() == '.' and self._peek_next() in DIGITS:
            self._advance()
            while self._peek() in DIGITS:
                self._advance()

        self._add_token(TokenType.NUMBER)

    def _scan_identifier(self):
        while self._peek() in IDENTIFIER_CHARS:
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, lexeme: Optional[str] = None):
        if lexeme is None:
            lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, self.line))

    def _report(self, error: LexerError):
        self.errors.append(error)
        self.reporter(error.message)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line)

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume one character, counting newlines."""
        char = self.source[self.current]
        self.current += 1
        if char == '\n':
            self.line += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[LexerError]:
        """Get all errors recorded by the last tokenize() call."""
        return list(self.errors)


def scan(source: str, filename: str = "<string>",
         reporter: Optional[Reporter] = None) -> List[Token]:
    """
    Scan source text into tokens.

    Never raises for malformed input; problems go to `reporter`.
    """
    return Lexer(source, filename, reporter).tokenize()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: Union[str, os.PathLike]) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, str(filepath))
