"""
Character classes and source positions for the showexpr scanner.

Everything the grammar needs to know about individual characters lives here:
- Bracket pairs and the characters that stop a sequence or a free-text run
- Digit and hexadecimal digit recognition
- Identifier begin/continue rules used by the free-text scanner

Author: xwest
"""

from dataclasses import dataclass


# ============================================================================
# Delimiters
# ============================================================================

# Opening bracket -> matching closing bracket
BRACKET_PAIRS = {
    '(': ')',
    '[': ']',
    '{': '}',
}

CLOSING_DELIMITERS = frozenset(')]}')

# Characters that end an expression sequence (peeked, never consumed)
SEQUENCE_TERMINATORS = frozenset(')]},')

# Characters that end a free-text run
OTHER_TERMINATORS = frozenset('{[()]}",')

STRING_QUOTE = '"'
CHAR_QUOTE = "'"
ESCAPE = '\\'
COMMA = ','

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


# ============================================================================
# Character predicates
# ============================================================================

def is_digit(char: str) -> bool:
    """ASCII decimal digit. Unicode digits such as '٣' do not start numbers."""
    return '0' <= char <= '9'


def is_hex_digit(char: str) -> bool:
    return char in HEX_DIGITS


def is_identifier_start(char: str) -> bool:
    """Check if a character can begin an identifier (letter or underscore)."""
    return char == '_' or char.isalpha()


def is_identifier_continue(char: str) -> bool:
    """Check if a character can continue an identifier (x1, foo_bar, Leaf')."""
    return char == '_' or char.isalpha() or ends_run_outside_identifier(char)


def ends_run_outside_identifier(char: str) -> bool:
    """
    Digits and single quotes stop a free-text run, except inside an identifier.

    `hello 234` splits before the number, `hello234` does not.
    """
    return is_digit(char) or char == CHAR_QUOTE


# ============================================================================
# Source positions
# ============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the input text.

    Used for warning and error reports only; the expression tree itself
    carries no positions.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


def location_at(source: str, offset: int, filename: str = "<string>") -> SourceLocation:
    """Compute the 1-based line/column of a character offset."""
    offset = max(0, min(offset, len(source)))
    line = source.count('\n', 0, offset) + 1
    line_start = source.rfind('\n', 0, offset) + 1
    return SourceLocation(filename, line, offset - line_start + 1, offset)
