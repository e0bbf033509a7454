"""
Error handling for the lexan scanner.

Every lexical error is recoverable: the scanner turns each LexerError
into a Diagnostic, resynchronizes and keeps going.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal message about a malformed region of the source."""
    message: str
    position: int
    location: SourceLocation
    code: str
    severity: str = "error"
    help_text: Optional[str] = None

    def __str__(self) -> str:
        return f"Lexical error: {self.message}"

    def describe(self) -> str:
        """Long multi-line form with location and help text."""
        result = f"{self.severity.upper()}[{self.code}]: {self.message}\n"
        result += f"  --> {self.location}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "title": ERROR_CODES[self.code],
            "severity": self.severity,
            "message": self.message,
            "position": self.position,
            "line": self.location.line,
            "column": self.location.column,
            "text": str(self),
        }


class LexerError(Exception):
    """
    Raised inside the scanner when a token cannot be formed.

    Never escapes Lexer.tokenize(); the scanner catches it and records
    the attached diagnostic.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: str,
        lexeme: str,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.lexeme = lexeme
        self.diagnostic = Diagnostic(
            message=message,
            position=location.offset,
            location=location,
            code=code,
            help_text=help_text
        )

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Characters that end a panic-mode skip
SYNC_CHARS = frozenset({' ', ';', '\n'})


class ErrorRecovery:
    """
    Strategies to continue lexing after an error, so that several errors
    can be collected in a single pass.
    """

    @staticmethod
    def panic_mode(source: str, index: int) -> int:
        """
        Skip forward to the next space, semicolon or newline and return the
        index just past it (or past the end of the source).

        The returned index is always greater than `index`.
        """
        while index < len(source) and source[index] not in SYNC_CHARS:
            index += 1
        return index + 1

    @staticmethod
    def skip_character(index: int) -> int:
        return index + 1


UNEXPECTED_CHARACTER = "L001"
INVALID_TOKEN = "L002"

ERROR_CODES = {
    UNEXPECTED_CHARACTER: "Unexpected character",
    INVALID_TOKEN: "Invalid token",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that cannot start any token."""
    if char.isdecimal():
        help_text = "Identifiers cannot start with a digit; numeric literals are not supported."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unexpected character '{char}' at position {location.offset}",
        location=location,
        code=UNEXPECTED_CHARACTER,
        lexeme=char,
        help_text=help_text
    )


def create_invalid_token_error(word: str, location: SourceLocation) -> LexerError:
    """Create an error for a word run rejected by the validity check."""
    return LexerError(
        message=f"Invalid token '{word}' at position {location.offset}",
        location=location,
        code=INVALID_TOKEN,
        lexeme=word,
        help_text="Input is skipped up to the next space, ';' or newline."
    )
