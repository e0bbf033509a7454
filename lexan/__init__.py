"""
lexan - Lexical Analyzer Package

Scanner for a small C-like language. Turns source text into tokens and
reports malformed input as diagnostics without aborting the scan.

Architecture:
    lexan/
    ├── lexer/           # Tokenization, diagnostics and error recovery
    └── cli.py           # Command-line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@lexan.dev"
__license__ = "MIT"

from .lexer import (
    Lexer, ScanResult, Token, TokenType, SourceLocation,
    Diagnostic, LexerError, scan, tokenize_file
)

__all__ = [
    # Core classes
    "Lexer",
    "ScanResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",

    # Operations
    "scan",
    "tokenize_file",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
