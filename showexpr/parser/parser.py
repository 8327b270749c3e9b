"""
showexpr recursive descent parser

Turns the text rendering of a value (nested constructors, bracketed
collections, quoted literals, numbers, free text) into an expression tree.
Three mutually recursive steps do all the work:

- _parse_expr dispatches on the next one to three characters
- _parse_exprs collects siblings until a closing delimiter or comma
- _parse_csep splits a bracketed group on top-level commas

There are no syntax errors. Missing or mismatched closers cut the current
group short and leave the rest of the input for the caller; the top-level
entry point drops whatever is left.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ..config import ParserConfig, DEFAULT_CONFIG
from ..lexer.chars import (
    BRACKET_PAIRS, CLOSING_DELIMITERS, SEQUENCE_TERMINATORS, STRING_QUOTE,
    CHAR_QUOTE, COMMA, is_digit, is_hex_digit
)
from ..lexer.errors import ScanWarning
from ..lexer.scanner import Scanner
from .expr_nodes import (
    Expr, CommaSeparated, StringLit, CharLit, NumberLit, Other, DELIMITED_BY_OPENER
)
from .errors import (
    ParseWarning, NestingTooDeepError, create_unterminated_group_warning,
    create_mismatched_delimiter_warning, create_trailing_input_warning
)


logger = logging.getLogger(__name__)

# Closing delimiter -> opening delimiter
_OPENER_FOR = {closer: opener for opener, closer in BRACKET_PAIRS.items()}


@dataclass
class ParseResult:
    """
    Outcome of parsing one input.

    Attributes:
        exprs: Top-level expressions in input order
        remainder: Trailing input the top-level sequence stopped at (discarded)
        warnings: Degraded-input reports, in the order they were found
    """
    exprs: List[Expr]
    remainder: str = ""
    warnings: List[Union[ScanWarning, ParseWarning]] = field(default_factory=list)

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


class ExprParser:
    """
    Parser over a single input string.

    One instance parses one input; the cursor lives in the embedded Scanner.
    """

    def __init__(self, source: str, config: Optional[ParserConfig] = None):
        """
        Initialize parser with the input text.

        Args:
            source: Text to parse
            config: Parser options (defaults to no nesting limit)
        """
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.scanner = Scanner(source, filename=self.config.filename)

    @property
    def warnings(self) -> List[ScanWarning]:
        return self.scanner.warnings

    def parse(self) -> ParseResult:
        """
        Parse the whole input into a sequence of top-level expressions.

        Returns:
            ParseResult with the expressions and the discarded remainder

        Raises:
            NestingTooDeepError: If nesting exceeds config.max_depth or the interpreter stack
        """
        exprs = self.guarded(self._parse_exprs, 0)
        remainder = self.scanner.remainder()

        if remainder:
            self.scanner.warn(create_trailing_input_warning(remainder, self.scanner.location()))

        logger.debug("Parsed %d top-level expressions from %s", len(exprs), self.config.filename)

        warnings = list(self.warnings) if self.config.collect_warnings else []
        return ParseResult(exprs, remainder, warnings)

    def guarded(self, step, *args):
        """Run a parse step, reporting interpreter stack exhaustion as NestingTooDeepError."""
        try:
            return step(*args)
        except RecursionError:
            raise NestingTooDeepError(self.config.max_depth, self.scanner.location()) from None

    def _parse_expr(self, depth: int) -> Expr:
        """Parse exactly one expression, chosen by the lookahead characters."""
        scanner = self.scanner
        char = scanner.peek()

        # Nested groups
        node_class = DELIMITED_BY_OPENER.get(char)
        if node_class is not None:
            start = scanner.pos
            if self.config.max_depth is not None and depth >= self.config.max_depth:
                raise NestingTooDeepError(self.config.max_depth, scanner.location(start))
            scanner.advance()
            groups = self._parse_csep(node_class.close, depth + 1, start)
            return node_class(CommaSeparated(groups))

        # Quoted literals
        if char == STRING_QUOTE:
            scanner.advance()
            return StringLit(scanner.scan_string_literal())
        if char == CHAR_QUOTE:
            scanner.advance()
            return CharLit(scanner.scan_char_literal())

        # Numbers: only a lowercase 0x prefix counts as hexadecimal
        if char == '0' and scanner.peek(1) == 'x' and is_hex_digit(scanner.peek(2)):
            start = scanner.pos
            scanner.advance(3)
            return NumberLit(scanner.scan_number_literal(start))
        if is_digit(char):
            start = scanner.pos
            scanner.advance()
            return NumberLit(scanner.scan_number_literal(start))

        return Other(scanner.scan_other())

    def _parse_exprs(self, depth: int) -> List[Expr]:
        """Parse sibling expressions up to (not including) a closing delimiter or comma."""
        scanner = self.scanner
        exprs: List[Expr] = []

        while not scanner.at_end() and scanner.peek() not in SEQUENCE_TERMINATORS:
            exprs.append(self._parse_expr(depth))

        return exprs

    def _parse_csep(self, end: str, depth: int, open_offset: Optional[int] = None) -> List[List[Expr]]:
        """
        Parse the inside of a bracketed group, split on top-level commas.

        The cursor must sit just after the opening delimiter. Consumes the
        matching closer; stops in front of a mismatched one.

        Args:
            end: The matching closing delimiter
            depth: Nesting depth of this group
            open_offset: Offset of the opening delimiter, for warnings
        """
        scanner = self.scanner
        groups: List[List[Expr]] = []

        while True:
            char = scanner.peek()

            if not char:
                location = scanner.location(open_offset)
                scanner.warn(create_unterminated_group_warning(_OPENER_FOR.get(end, end), end, location))
                return groups

            if char == end:
                scanner.advance()
                return groups

            if char in CLOSING_DELIMITERS:
                scanner.warn(create_mismatched_delimiter_warning(end, char, scanner.location()))
                return groups

            # Empty groups are never produced for leading, trailing or doubled commas
            if char == COMMA:
                scanner.advance()
                continue

            groups.append(self._parse_exprs(depth))


# Convenience functions with the (result, remainder) contract

def expression_parse(text: str) -> List[Expr]:
    """
    Parse text into its top-level expressions, dropping any unparsed tail.

    >>> expression_parse("Just 'a'")
    [Other(text='Just '), CharLit(text='a')]
    """
    return ExprParser(text).parse().exprs


def parse_expr(text: str) -> Tuple[Expr, str]:
    """Parse one expression; returns it and the unconsumed remainder."""
    parser = ExprParser(text)
    expr = parser.guarded(parser._parse_expr, 0)
    return expr, parser.scanner.remainder()


def parse_exprs(text: str) -> Tuple[List[Expr], str]:
    """
    Parse sibling expressions up to a closing delimiter or comma.

    >>> parse_exprs('hello 234, x')
    ([Other(text='hello '), NumberLit(text='234')], ', x')
    """
    parser = ExprParser(text)
    exprs = parser.guarded(parser._parse_exprs, 0)
    return exprs, parser.scanner.remainder()


def parse_csep(end: str, text: str) -> Tuple[List[List[Expr]], str]:
    """
    Parse comma-separated groups from just inside an opening delimiter.

    Args:
        end: The closing delimiter that matches the (already consumed) opener
        text: Input starting right after the opener
    """
    parser = ExprParser(text)
    groups = parser.guarded(parser._parse_csep, end, 1)
    return groups, parser.scanner.remainder()


def parse_string(source: str, config: Optional[ParserConfig] = None) -> ParseResult:
    """
    Convenience function to parse a source string.

    Args:
        source: Text to parse
        config: Parser options

    Returns:
        ParseResult

    Raises:
        NestingTooDeepError: If nesting exceeds config.max_depth or the interpreter stack
    """
    parser = ExprParser(source, config)
    return parser.parse()


def parse_file(filepath: str, config: Optional[ParserConfig] = None) -> ParseResult:
    """
    Convenience function to parse a file.

    Args:
        filepath: Path to a UTF-8 text file
        config: Parser options; the filename is replaced by filepath

    Returns:
        ParseResult

    Raises:
        NestingTooDeepError: If nesting exceeds config.max_depth or the interpreter stack
        IOError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    config = (config or DEFAULT_CONFIG).with_filename(str(filepath))
    return parse_string(source, config)
