"""
Expression tree node definitions for showexpr.

The tree is a closed set of variants: three bracketed forms holding
comma-separated groups, and four text forms holding a raw slice of the input.
Nodes are frozen dataclasses, so a parsed tree can be shared and compared by
value. Every node carries an ExprKind tag used for dispatch.

Author: xwest
"""

from typing import Any, ClassVar, Iterable, Iterator, List, Tuple, Union
from dataclasses import dataclass, field
from enum import Enum


class ExprKind(Enum):
    """Enumeration of all expression node kinds."""

    # Bracketed groups
    PARENS = "Parens"
    BRACKETS = "Brackets"
    BRACES = "Braces"

    # Literals
    STRING_LIT = "StringLit"
    CHAR_LIT = "CharLit"
    NUMBER_LIT = "NumberLit"

    # Free text
    OTHER = "Other"


@dataclass(frozen=True)
class CommaSeparated:
    """
    The contents of one pair of brackets: groups split on top-level commas.

    Each group is the sequence of sibling expressions found between two commas.
    Lists passed in are stored as tuples.
    """
    groups: Tuple[Tuple['Expr', ...], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "groups", tuple(tuple(group) for group in self.groups))

    @classmethod
    def of(cls, *groups: Iterable['Expr']) -> 'CommaSeparated':
        return cls(tuple(tuple(group) for group in groups))

    def __iter__(self) -> Iterator[Tuple['Expr', ...]]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __getitem__(self, index: int) -> Tuple['Expr', ...]:
        return self.groups[index]


# ============================================================================
# Bracketed groups
# ============================================================================

@dataclass(frozen=True)
class _Delimited:
    """Shared shape of Parens, Brackets and Braces."""
    kind: ClassVar[ExprKind]
    open: ClassVar[str]
    close: ClassVar[str]

    contents: CommaSeparated = field(default_factory=CommaSeparated)

    @classmethod
    def of(cls, *groups: Iterable['Expr']):
        """Build a node from groups, e.g. Parens.of([Other("a")], [Other(" b")])."""
        return cls(CommaSeparated.of(*groups))

    @property
    def groups(self) -> Tuple[Tuple['Expr', ...], ...]:
        return self.contents.groups


@dataclass(frozen=True)
class Parens(_Delimited):
    """`( ... )`"""
    kind: ClassVar[ExprKind] = ExprKind.PARENS
    open: ClassVar[str] = '('
    close: ClassVar[str] = ')'


@dataclass(frozen=True)
class Brackets(_Delimited):
    """`[ ... ]`"""
    kind: ClassVar[ExprKind] = ExprKind.BRACKETS
    open: ClassVar[str] = '['
    close: ClassVar[str] = ']'


@dataclass(frozen=True)
class Braces(_Delimited):
    """`{ ... }`"""
    kind: ClassVar[ExprKind] = ExprKind.BRACES
    open: ClassVar[str] = '{'
    close: ClassVar[str] = '}'


# ============================================================================
# Text payloads
# ============================================================================

@dataclass(frozen=True)
class _Text:
    """Shared shape of the literal and free-text nodes: one raw slice of input."""
    kind: ClassVar[ExprKind]

    text: str = ""


@dataclass(frozen=True)
class StringLit(_Text):
    """Body of a double-quoted literal, escapes kept as written."""
    kind: ClassVar[ExprKind] = ExprKind.STRING_LIT


@dataclass(frozen=True)
class CharLit(_Text):
    """Body of a single-quoted literal, escapes kept as written."""
    kind: ClassVar[ExprKind] = ExprKind.CHAR_LIT


@dataclass(frozen=True)
class NumberLit(_Text):
    """Raw numeric text such as `42`, `1.5e-3` or `0x1F`."""
    kind: ClassVar[ExprKind] = ExprKind.NUMBER_LIT


@dataclass(frozen=True)
class Other(_Text):
    """Free text: constructor names, field names, operators, whitespace."""
    kind: ClassVar[ExprKind] = ExprKind.OTHER


Expr = Union[Parens, Brackets, Braces, StringLit, CharLit, NumberLit, Other]

DELIMITED_KINDS = frozenset({ExprKind.PARENS, ExprKind.BRACKETS, ExprKind.BRACES})

# Opening delimiter -> node class
DELIMITED_BY_OPENER = {
    Parens.open: Parens,
    Brackets.open: Brackets,
    Braces.open: Braces,
}


# ============================================================================
# Visitor
# ============================================================================

class ExprVisitor:
    """
    Base visitor for expression trees.

    `visit` dispatches on the node's kind. Subclasses override the
    `visit_*` methods they care about; the defaults walk into groups and
    return None.
    """

    _METHODS = {
        ExprKind.PARENS: "visit_parens",
        ExprKind.BRACKETS: "visit_brackets",
        ExprKind.BRACES: "visit_braces",
        ExprKind.STRING_LIT: "visit_string_lit",
        ExprKind.CHAR_LIT: "visit_char_lit",
        ExprKind.NUMBER_LIT: "visit_number_lit",
        ExprKind.OTHER: "visit_other",
    }

    def visit(self, expr: Expr) -> Any:
        return getattr(self, self._METHODS[expr.kind])(expr)

    def visit_all(self, exprs: Iterable[Expr]) -> List[Any]:
        return [self.visit(expr) for expr in exprs]

    def visit_delimited(self, expr: _Delimited) -> Any:
        for group in expr.groups:
            self.visit_all(group)
        return None

    def visit_parens(self, expr: Parens) -> Any:
        return self.visit_delimited(expr)

    def visit_brackets(self, expr: Brackets) -> Any:
        return self.visit_delimited(expr)

    def visit_braces(self, expr: Braces) -> Any:
        return self.visit_delimited(expr)

    def visit_text(self, expr: _Text) -> Any:
        return None

    def visit_string_lit(self, expr: StringLit) -> Any:
        return self.visit_text(expr)

    def visit_char_lit(self, expr: CharLit) -> Any:
        return self.visit_text(expr)

    def visit_number_lit(self, expr: NumberLit) -> Any:
        return self.visit_text(expr)

    def visit_other(self, expr: Other) -> Any:
        return self.visit_text(expr)
