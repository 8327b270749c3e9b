"""
Error handling for the showexpr parser.

The grammar itself never fails: unbalanced or mismatched delimiters degrade
to a partial tree and are reported as ParseWarning objects. ParseError is
only raised by the opt-in nesting limit, which sits outside the grammar.

Author: xwest
"""

from typing import Optional, List

from ..lexer.chars import SourceLocation
from ..lexer.errors import Diagnostic, ShowExprError, ScanWarning


class ParseError(ShowExprError):
    """
    Exception raised when parsing is refused.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class NestingTooDeepError(ParseError):
    """
    Raised when brackets nest deeper than ParserConfig.max_depth.

    With no configured limit (max_depth is None) it reports that the
    interpreter stack ran out instead.
    """

    def __init__(self, max_depth: Optional[int], location: SourceLocation):
        if max_depth is None:
            limit = "the interpreter recursion limit"
        else:
            limit = f"the maximum depth of {max_depth}"
        super().__init__(
            message=f"{PARSER_ERROR_CODES['E001']}: nesting exceeds {limit}",
            location=location,
            code="E001",
            help_text=f"Brackets, parentheses and braces nest deeper than {limit}.",
            suggestions=["Raise max_depth", "Check the input for runaway opening delimiters"]
        )
        self.max_depth = max_depth


class ParseWarning(ScanWarning):
    """
    Represents a parser warning that doesn't stop parsing.
    """


# Warning codes produced while parsing (W001/W002 come from the scanner)
PARSER_WARNING_CODES = {
    "W003": "Unterminated group",
    "W004": "Mismatched closing delimiter",
    "W005": "Trailing input discarded",
}

PARSER_ERROR_CODES = {
    "E001": "Nesting too deep",
}


# Helper functions for creating common parser warnings

def create_unterminated_group_warning(opener: str, closer: str,
                                      location: SourceLocation) -> ParseWarning:
    """Create a warning for a group whose opening delimiter is never closed."""
    return ParseWarning(
        message=f"{PARSER_WARNING_CODES['W003']} '{opener}'",
        location=location,
        code="W003",
        help_text=f"The '{opener}' at {location} runs to the end of the input.",
        suggestions=[f"Add a closing '{closer}'"]
    )


def create_mismatched_delimiter_warning(expected: str, found: str,
                                        location: SourceLocation) -> ParseWarning:
    """Create a warning for a closing delimiter that doesn't match the open group."""
    return ParseWarning(
        message=f"{PARSER_WARNING_CODES['W004']}: expected '{expected}', found '{found}'",
        location=location,
        code="W004",
        help_text=f"The group was cut short; '{found}' is left for the enclosing group.",
        suggestions=[f"Replace '{found}' with '{expected}'", "Check for missing delimiters"]
    )


def create_trailing_input_warning(remainder: str, location: SourceLocation) -> ParseWarning:
    """Create a warning for input left over after the top-level sequence."""
    preview = remainder if len(remainder) <= 20 else remainder[:20] + "..."
    return ParseWarning(
        message=f"{PARSER_WARNING_CODES['W005']}: {preview!r}",
        location=location,
        code="W005",
        help_text="Parsing stopped at a closing delimiter or comma outside any group.",
    )
