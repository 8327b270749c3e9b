"""
Visitors over expression trees.

SourceWriter puts delimiters, commas and quotes back around the payloads, so
well-formed input survives parse -> to_source unchanged. DictConverter turns
a tree into plain data for JSON output.

Author: xwest
"""

import json
from typing import Any, Dict, Iterable, List

from ..lexer.chars import STRING_QUOTE, CHAR_QUOTE, COMMA
from .expr_nodes import (
    ExprVisitor, Expr, Parens, Brackets, Braces, StringLit, CharLit, NumberLit,
    Other, DELIMITED_KINDS
)


class SourceWriter(ExprVisitor):
    """Rebuild input text from a tree."""

    def visit_delimited(self, expr) -> str:
        groups = ("".join(self.visit_all(group)) for group in expr.groups)
        return expr.open + COMMA.join(groups) + expr.close

    def visit_string_lit(self, expr: StringLit) -> str:
        return STRING_QUOTE + expr.text + STRING_QUOTE

    def visit_char_lit(self, expr: CharLit) -> str:
        return CHAR_QUOTE + expr.text + CHAR_QUOTE

    def visit_text(self, expr) -> str:
        return expr.text


class DictConverter(ExprVisitor):
    """Convert a tree into dicts and lists."""

    def visit_delimited(self, expr) -> Dict[str, Any]:
        return {
            "kind": expr.kind.value,
            "groups": [self.visit_all(group) for group in expr.groups],
        }

    def visit_text(self, expr) -> Dict[str, Any]:
        return {"kind": expr.kind.value, "text": expr.text}


_NODE_CLASSES = {
    cls.kind.value: cls
    for cls in (Parens, Brackets, Braces, StringLit, CharLit, NumberLit, Other)
}


def to_source(exprs: Iterable[Expr]) -> str:
    """
    Reconstruct input text from a sequence of expressions.

    Commas between groups come back as a single ','; whitespace around them
    lives in the neighbouring Other nodes, so it is kept too.
    """
    writer = SourceWriter()
    return "".join(writer.visit_all(exprs))


def to_dict(expr: Expr) -> Dict[str, Any]:
    return DictConverter().visit(expr)


def from_dict(data: Dict[str, Any]) -> Expr:
    """Inverse of to_dict."""
    try:
        cls = _NODE_CLASSES[data["kind"]]
    except KeyError:
        raise ValueError(f"Not an expression node: {data!r}") from None

    if cls.kind in DELIMITED_KINDS:
        return cls.of(*([from_dict(item) for item in group] for group in data["groups"]))
    return cls(data["text"])


def dump_json(exprs: Iterable[Expr], indent: int = 2) -> str:
    """Serialize a sequence of expressions as a JSON array."""
    converter = DictConverter()
    return json.dumps(converter.visit_all(exprs), indent=indent, ensure_ascii=False)


def load_json(text: str) -> List[Expr]:
    return [from_dict(item) for item in json.loads(text)]
