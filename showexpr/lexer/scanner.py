"""
showexpr scanner - the literal and free-text sub-parsers

Every scan starts at the scanner's cursor and stops right before its
terminator (or right after a closing quote), so the caller can always pick up
the unconsumed remainder with `remainder()`. Nothing here raises: running out
of input just ends the literal, and an unclosed quote is recorded as a
warning.

The number scanner accepts hex digits in every continuation run, so a decimal
like `3abc` absorbs the letters. That's how `0x1F` bodies get scanned without
a separate path, and it's kept on purpose.
"""

import logging
from typing import List, Optional, Tuple

from .chars import (
    SourceLocation, location_at, OTHER_TERMINATORS, STRING_QUOTE, CHAR_QUOTE,
    ESCAPE, is_hex_digit, is_identifier_start, is_identifier_continue,
    ends_run_outside_identifier
)
from .errors import ScanWarning, create_unterminated_literal_warning


logger = logging.getLogger(__name__)


class Scanner:
    """
    Cursor over an immutable input string.

    The cursor only moves forward. Scanning methods return the scanned text;
    the position after the scan is `self.pos`.
    """

    def __init__(self, source: str, pos: int = 0, filename: str = "<string>"):
        """
        Initialize the scanner.

        Args:
            source: Full input text
            pos: Starting offset into source
            filename: Name used in warning locations
        """
        self.source = source
        self.pos = pos
        self.filename = filename
        self.warnings: List[ScanWarning] = []

    # Cursor helpers

    def peek(self, offset: int = 0) -> str:
        """Return the character `offset` places ahead, or '' past the end."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ''

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.source))

    def remainder(self) -> str:
        """The unconsumed suffix of the input."""
        return self.source[self.pos:]

    def location(self, offset: Optional[int] = None) -> SourceLocation:
        return location_at(self.source, self.pos if offset is None else offset, self.filename)

    def warn(self, warning: ScanWarning) -> None:
        logger.debug("%s at %s", warning.diagnostic.message, warning.location)
        self.warnings.append(warning)

    # String / character literals

    def scan_string_literal(self) -> str:
        """Scan a string body. The cursor must sit just after the opening quote."""
        return self._scan_quoted(STRING_QUOTE)

    def scan_char_literal(self) -> str:
        """Scan a character literal body. The cursor must sit just after the opening quote."""
        return self._scan_quoted(CHAR_QUOTE)

    def _scan_quoted(self, quote: str) -> str:
        source = self.source
        end = len(source)
        start = pos = self.pos

        while pos < end:
            char = source[pos]
            if char == quote:
                self.pos = pos + 1
                return source[start:pos]
            # A backslash and whatever follows it are kept as-is, so \" never closes
            pos += 2 if char == ESCAPE else 1

        self.pos = end
        self.warn(create_unterminated_literal_warning(quote, self.location(start - 1)))
        return source[start:]

    # Numbers

    def scan_number_literal(self, start: int) -> str:
        """
        Scan the rest of a number whose leading characters are already consumed.

        Accepts, after the leading digit(s):
        - one '.' (only before any exponent)
        - one exponent marker: 'e', 'e+' or 'e-'
        - any number of hex digits

        Args:
            start: Offset of the first character of the literal

        Returns:
            The literal text from `start` to the new cursor position
        """
        source = self.source
        end = len(source)
        pos = self.pos
        has_decimal = False
        has_exponent = False

        while pos < end:
            char = source[pos]
            if char == '.' and not has_decimal:
                has_decimal = True
                pos += 1
            elif char == 'e' and not has_exponent:
                has_decimal = has_exponent = True
                pos += 2 if source[pos + 1:pos + 2] in ('+', '-') else 1
            elif is_hex_digit(char):
                pos += 1
            else:
                break

        self.pos = pos
        return source[start:pos]

    # Free text

    def scan_other(self) -> str:
        """
        Scan free text up to a bracket, a double quote or a comma.

        Digits and single quotes also stop the run unless they continue an
        identifier, which keeps `Leaf'`, `x1` and `I'm` whole but splits
        `hello 234` before the number.
        """
        source = self.source
        end = len(source)
        start = pos = self.pos
        inside_identifier = False

        while pos < end:
            char = source[pos]
            if char in OTHER_TERMINATORS:
                break
            if ends_run_outside_identifier(char) and not inside_identifier:
                break
            if inside_identifier:
                inside_identifier = is_identifier_continue(char)
            else:
                inside_identifier = is_identifier_start(char)
            pos += 1

        self.pos = pos
        return source[start:pos]


# Convenience functions with the (result, remainder) contract

def parse_string_lit(text: str) -> Tuple[str, str]:
    """
    Parse a string literal body up to the closing double quote.

    >>> parse_string_lit('foobar" baz')
    ('foobar', ' baz')
    """
    scanner = Scanner(text)
    return scanner.scan_string_literal(), scanner.remainder()


def parse_char_lit(text: str) -> Tuple[str, str]:
    """
    Parse a character literal body up to the closing single quote.

    >>> parse_char_lit("a' foobar")
    ('a', ' foobar')
    """
    scanner = Scanner(text)
    return scanner.scan_char_literal(), scanner.remainder()


def parse_number_lit(first_digit: str, text: str) -> Tuple[str, str]:
    """
    Parse a number whose first digit the caller has already consumed.

    >>> parse_number_lit('0', '.12399880 foobar')
    ('0.12399880', ' foobar')
    """
    scanner = Scanner(first_digit + text, pos=len(first_digit))
    return scanner.scan_number_literal(0), scanner.remainder()


def parse_other(text: str) -> Tuple[str, str]:
    """
    Parse a run of free text.

    >>> parse_other('hello 234 world')
    ('hello ', '234 world')
    """
    scanner = Scanner(text)
    return scanner.scan_other(), scanner.remainder()
