"""
lexan Lexer - single pass scanner with panic-mode recovery

Walks the source once, left to right. Comments and whitespace are dropped,
symbols and words become tokens, and anything malformed becomes a
diagnostic instead of stopping the scan.

xwest
"""

import logging
import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .tokens import (
    Token, TokenType, SourceLocation,
    is_whitespace, is_symbol, is_word_start, is_word_char, is_valid_token
)
from .errors import (
    Diagnostic, LexerError, ErrorRecovery, INVALID_TOKEN,
    create_unexpected_character_error, create_invalid_token_error
)

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LexMode(Enum):
    """What the scanner does at the current cursor position."""
    WHITESPACE = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    SYMBOL = auto()
    WORD = auto()
    UNEXPECTED = auto()


@dataclass(frozen=True)
class ScanResult:
    """Tokens and diagnostics from one full pass over a source text."""
    tokens: Tuple[Token, ...]
    diagnostics: Tuple[Diagnostic, ...]
    filename: str = "<string>"

    @property
    def lexemes(self) -> List[str]:
        return [token.lexeme for token in self.tokens]

    @property
    def messages(self) -> List[str]:
        return [str(diagnostic) for diagnostic in self.diagnostics]

    def has_errors(self) -> bool:
        """Check if the scan produced any diagnostics."""
        return len(self.diagnostics) > 0

    def keywords(self) -> List[str]:
        return [token.lexeme for token in self.tokens if token.is_keyword]

    def identifiers(self) -> List[str]:
        return [token.lexeme for token in self.tokens if token.is_identifier]

    def to_dict(self) -> Dict:
        return {
            "filename": self.filename,
            "tokens": self.lexemes,
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
        }


class Lexer:
    """
    Lexical analyzer for the small C-like language.

    Converts source text into tokens and collects a diagnostic for every
    invalid word or unexpected character it meets along the way.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<unknown>",
        validator: Optional[Callable[[str], bool]] = None
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            filename: Name used in source locations
            validator: Predicate deciding whether a finished word run is a
                valid token. Defaults to keywords-or-identifiers.
        """
        self.source = source
        self.filename = filename
        self.validator = validator or is_valid_token
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens in source order. Errors are collected in
            self.errors.
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens.clear()
        self.errors.clear()

        logger.debug("Scanning %s (%d chars)", self.filename, len(self.source))

        while self.pos < len(self.source):
            try:
                token = self._next_token()
                if token:
                    self.tokens.append(token)

            except LexerError as e:
                logger.debug("%s: %s", e.diagnostic.location, e.diagnostic.message)
                self.errors.append(e)
                if e.code == INVALID_TOKEN:
                    self._advance_to(ErrorRecovery.panic_mode(self.source, self.pos))
                else:
                    self._advance_to(ErrorRecovery.skip_character(self.pos))

        logger.debug(
            "Scanned %s: %d tokens, %d diagnostics",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def result(self) -> ScanResult:
        return ScanResult(tuple(self.tokens), tuple(self.diagnostics), self.filename)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [error.diagnostic for error in self.errors]

    def _mode(self) -> LexMode:
        """Pick the scanning mode for the character under the cursor."""
        current_char = self.source[self.pos]

        if is_whitespace(current_char):
            return LexMode.WHITESPACE
        if current_char == '/' and self._peek() == '/':
            return LexMode.LINE_COMMENT
        if current_char == '/' and self._peek() == '*':
            return LexMode.BLOCK_COMMENT
        if is_symbol(current_char):
            return LexMode.SYMBOL
        if is_word_start(current_char):
            return LexMode.WORD
        return LexMode.UNEXPECTED

    def _next_token(self) -> Optional[Token]:
        """Run one step of the scanner, returning a token if one was formed."""
        mode = self._mode()

        if mode == LexMode.WHITESPACE:
            self._advance()
            return None

        if mode == LexMode.LINE_COMMENT:
            self._skip_line_comment()
            return None

        if mode == LexMode.BLOCK_COMMENT:
            self._skip_block_comment()
            return None

        location = self._location()

        if mode == LexMode.SYMBOL:
            lexeme = self.source[self.pos]
            self._advance()
            return Token(TokenType.SYMBOL, lexeme, location)

        if mode == LexMode.WORD:
            return self._tokenize_word(location)

        raise create_unexpected_character_error(self.source[self.pos], location)

    def _tokenize_word(self, location: SourceLocation) -> Token:
        """Accumulate a maximal word run and validate it as a whole."""
        start_pos = self.pos

        # First character is already validated as a word start
        self._advance()

        while self.pos < len(self.source) and is_word_char(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]

        if not self.validator(lexeme):
            # Reported at the index where accumulation stopped
            raise create_invalid_token_error(lexeme, self._location())

        return Token(TokenType.WORD, lexeme, location)

    def _skip_line_comment(self):
        """Skip a // comment including its terminating newline."""
        while self.pos < len(self.source) and self.source[self.pos] != '\n':
            self._advance()
        if self.pos < len(self.source):
            self._advance()

    def _skip_block_comment(self):
        """
        Skip a /* */ comment.

        An unterminated comment consumes the rest of the source without a
        diagnostic; the cursor ends up past the end of the text.
        """
        self._advance(2)
        while (self.pos + 1 < len(self.source) and
               self.source[self.pos:self.pos + 2] != '*/'):
            self._advance()
        self._advance(2)  # Skip closing */

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self, count: int = 1):
        """Advance position, updating line/column for characters inside the text."""
        for _ in range(count):
            if self.pos < len(self.source) and self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_to(self, index: int):
        self._advance(index - self.pos)

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def scan(source: str, filename: str = "<string>") -> ScanResult:
    """
    Scan a complete source text.

    Never raises for malformed input; every problem is reported as a
    diagnostic in the returned result.
    """
    lexer = Lexer(source, filename)
    lexer.tokenize()
    return lexer.result()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing produced any diagnostic
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def normalize_lines(text: str) -> str:
    """
    Rejoin text so that every line, including the last, ends with a newline.

    "\\r\\n" and a lone "\\r" are line breaks too and become "\\n".
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == '':
        lines.pop()
    return ''.join(line + '\n' for line in lines)


def read_source(filepath: str, encoding: str = 'utf-8') -> str:
    """
    Read a source file, normalizing every line to end with a newline.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding=encoding, newline='') as f:
        return normalize_lines(f.read())


def tokenize_file(filepath: str, encoding: str = 'utf-8') -> ScanResult:
    """
    Convenience function to scan a source file.

    Raises:
        OSError: If the file cannot be read
    """
    return scan(read_source(filepath, encoding), filepath)
