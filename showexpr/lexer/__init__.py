"""
showexpr Lexer Package

Character-level scanning for the showexpr parser. There is no token stream:
the parser walks the input directly and calls into the scanner for literals
and free text.

Key Features:
- String and character literals with escapes kept verbatim
- Decimal and hexadecimal number literals
- Identifier-aware free-text runs (`Leaf'`, `H3110`)
- Unclosed literals reported as warnings, never as errors

Author: xwest
"""

from .chars import SourceLocation, location_at
from .scanner import (
    Scanner, parse_string_lit, parse_char_lit, parse_number_lit, parse_other
)
from .errors import Diagnostic, ShowExprError, ScanWarning

__all__ = [
    "Scanner",
    "SourceLocation",
    "location_at",
    "parse_string_lit",
    "parse_char_lit",
    "parse_number_lit",
    "parse_other",
    "Diagnostic",
    "ShowExprError",
    "ScanWarning",
]
