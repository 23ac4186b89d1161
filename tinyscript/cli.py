"""
tinyscan - command line driver for the TinyScript lexer.

Reads a source file (or stdin), prints the token stream and sends
diagnostics to stderr through logging.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Lexer, Token

logger = logging.getLogger(__name__)


def format_tokens(tokens: List[Token], output_format: str = "text") -> str:
    """Render tokens as one line each, or as a JSON array."""
    if output_format == "json":
        return json.dumps(
            [{"type": t.type.name, "lexeme": t.lexeme, "line": t.line} for t in tokens],
            indent=2
        )
    return "\n".join(
        f"{t.line:>4} {t.type.name:<14} {t.lexeme!r}" for t in tokens
    )


def _read_source(path: str, stdin: TextIO) -> str:
    if path == "-":
        return stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyscan",
        description="Tokenize TinyScript source and print the token stream",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tinyscan program.ts                 # Print tokens, one per line
    tinyscan program.ts --format json   # Print tokens as a JSON array
    echo 'let x = 1;' | tinyscan        # Read from stdin
        """
    )
    parser.add_argument('path', nargs='?', default='-',
                        help='Source file to scan ("-" or omitted for stdin)')
    parser.add_argument('--format', choices=['text', 'json'], default='text',
                        help='Output format for the token stream')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log scan statistics')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the tinyscan command. Returns the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        source = _read_source(args.path, sys.stdin)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.path, e)
        return 2

    filename = "<stdin>" if args.path == "-" else args.path
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    print(format_tokens(tokens, args.format))

    return 1 if lexer.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())
