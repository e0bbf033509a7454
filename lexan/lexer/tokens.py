"""
Token definitions for the lexan scanner.

The scanned language is a small C-like subset. Only two token shapes exist:
- Symbols: single punctuation/operator characters
- Words: keywords and identifiers (letters, digits, underscore)

Also holds the character classification helpers and the word validity
predicates used by the scanner.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """Token categories produced by the scanner."""
    SYMBOL = auto()                 # ; ( ) { } = + ...
    WORD = auto()                   # int, main, count_1, _tmp


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and for callers that want to map tokens
    back onto the text they came from.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character index from start of text

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    The lexeme is what callers consume; the type only separates symbols
    from words. Keyword vs identifier is re-derived from KEYWORDS.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    location: SourceLocation        # Source location

    def __str__(self) -> str:
        return self.lexeme

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.location!r})"

    @property
    def is_symbol(self) -> bool:
        return self.type == TokenType.SYMBOL

    @property
    def is_word(self) -> bool:
        return self.type == TokenType.WORD

    @property
    def is_keyword(self) -> bool:
        """Check if this token is one of the reserved keywords."""
        return self.is_word and self.lexeme in KEYWORDS

    @property
    def is_identifier(self) -> bool:
        """Check if this token is a word that is not a keyword."""
        return self.is_word and self.lexeme not in KEYWORDS


# Lookup tables used by the scanner

# The only words treated as reserved
KEYWORDS = frozenset({"int", "float", "return", "main"})

# Single-character punctuation and operators
SYMBOLS = frozenset("[]{}();,=+-*/<>!&|")

# str.isspace() accepts these, the scanned language does not
NON_BREAKING_SPACES = frozenset({"\u00a0", "\u2007", "\u202f", "\u0085"})


def is_whitespace(char: str) -> bool:
    """Check if character is skippable whitespace."""
    return char.isspace() and char not in NON_BREAKING_SPACES


def is_symbol(char: str) -> bool:
    return char in SYMBOLS


def is_word_start(char: str) -> bool:
    """Check if character can start a word token."""
    return char.isalpha() or char == '_'


def is_word_char(char: str) -> bool:
    """Check if character can continue a word token."""
    # isdecimal, not isdigit: superscripts like '²' are not digits here
    return char.isalpha() or char.isdecimal() or char == '_'


def is_identifier(word: str) -> bool:
    """
    Check if a complete word is a syntactically valid identifier.

    Non-empty, does not start with a digit, and every character is a
    letter, decimal digit or underscore.
    """
    if not word or word[0].isdecimal():
        return False
    return all(is_word_char(char) for char in word)


def is_valid_token(word: str) -> bool:
    """Check if a complete word is a keyword or a valid identifier."""
    if word in KEYWORDS:
        return True
    return is_identifier(word)
