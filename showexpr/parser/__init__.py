"""
showexpr Parser Package

Recursive descent parser that recovers an expression tree from the text
rendering of a value, e.g. `Just [Foo {bar = "baz", qux = 0x1F}]`.

Key Features:
- Parentheses, brackets and braces split into comma-separated groups
- String, character and number literals kept as raw text
- Tolerant of unbalanced and mismatched delimiters (warnings, never errors)
- Visitors for reconstructing source and converting to JSON

Author: xwest
"""

from .expr_nodes import *
from .parser import (
    ExprParser, ParseResult, expression_parse, parse_expr, parse_exprs,
    parse_csep, parse_string, parse_file
)
from .visitors import SourceWriter, DictConverter, to_source, to_dict, from_dict, dump_json, load_json
from .errors import ParseError, NestingTooDeepError, ParseWarning

__all__ = [
    # Core parser
    "ExprParser", "ParseResult",
    "expression_parse", "parse_expr", "parse_exprs", "parse_csep",
    "parse_string", "parse_file",

    # Expression nodes
    "Expr", "ExprKind", "CommaSeparated",
    "Parens", "Brackets", "Braces",
    "StringLit", "CharLit", "NumberLit", "Other",
    "ExprVisitor",

    # Visitors
    "SourceWriter", "DictConverter",
    "to_source", "to_dict", "from_dict", "dump_json", "load_json",

    # Error handling
    "ParseError", "NestingTooDeepError", "ParseWarning",
]
