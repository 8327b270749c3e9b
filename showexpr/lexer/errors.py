"""
Diagnostics for the showexpr scanner.

The scanner never fails. Degraded input (a literal that is never closed) is
reported through ScanWarning objects collected alongside the result, so
callers can surface them without changing what was parsed.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .chars import SourceLocation, STRING_QUOTE


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ShowExprError(Exception):
    """Base class for every exception raised by showexpr."""


class ScanWarning:
    """
    Represents a scanner warning that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.code!r}, {self.diagnostic.message!r})"


# Scanner warning codes
SCANNER_WARNING_CODES = {
    "W001": "Unterminated string literal",
    "W002": "Unterminated character literal",
}


def create_unterminated_literal_warning(quote: str, location: SourceLocation) -> ScanWarning:
    """Create a warning for a string or character literal that is never closed."""
    if quote == STRING_QUOTE:
        code, kind = "W001", "string"
    else:
        code, kind = "W002", "character"

    return ScanWarning(
        message=SCANNER_WARNING_CODES[code],
        location=location,
        code=code,
        help_text=f"The {kind} literal starting at {location} runs to the end of the input.",
        suggestions=[f"Add a closing {quote}"]
    )
