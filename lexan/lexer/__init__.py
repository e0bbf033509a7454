"""
lexan Lexer Package

Implements a from-scratch lexical analyzer for a small C-like language.

Key Features:
- Single left-to-right pass over the source
- Line (//) and block (/* */) comment skipping
- Single-character symbol tokens and keyword/identifier words
- Panic-mode error recovery with non-fatal diagnostics
- Source location tracking for every token and diagnostic

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, SYMBOLS
from .lexer import Lexer, LexMode, ScanResult, scan, tokenize_string, tokenize_file, read_source, normalize_lines
from .errors import Diagnostic, LexerError, ErrorRecovery

__all__ = [
    "Lexer",
    "LexMode",
    "ScanResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "SYMBOLS",
    "Diagnostic",
    "LexerError",
    "ErrorRecovery",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "read_source",
    "normalize_lines",
]
