"""
TinyScript Package

Front end for the TinyScript scripting language. Only the scanning stage
lives here; a parser consumes the token list produced by the lexer.

Architecture:
    tinyscript/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # tinyscan command line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@tinyscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, scan

__all__ = [
    # Core
    "Lexer",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
