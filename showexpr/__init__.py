"""
showexpr - expression trees from `show`-style output

Parses the textual rendering of structured data (nested constructors,
bracketed collections, quoted literals, numbers and free text) into a
generic expression tree for a pretty-printer to lay out.

Architecture:
    showexpr/
    ├── lexer/           # Character classes and literal scanners
    ├── parser/          # Recursive descent parser, tree nodes, visitors
    ├── config.py        # ParserConfig
    └── cli.py           # Command-line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .config import ParserConfig, ConfigError
from .lexer import ShowExprError
from .parser import (
    ExprParser, ParseResult, expression_parse, parse_string, parse_file,
    Expr, ExprKind, CommaSeparated, Parens, Brackets, Braces,
    StringLit, CharLit, NumberLit, Other, to_source, dump_json,
    ParseError, NestingTooDeepError, ParseWarning,
)

__all__ = [
    # Entry points
    "expression_parse",
    "parse_string",
    "parse_file",
    "ExprParser",
    "ParseResult",
    "ParserConfig",

    # Tree
    "Expr", "ExprKind", "CommaSeparated",
    "Parens", "Brackets", "Braces",
    "StringLit", "CharLit", "NumberLit", "Other",
    "to_source", "dump_json",

    # Errors
    "ShowExprError", "ConfigError", "ParseError", "NestingTooDeepError", "ParseWarning",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
