"""
Test suite for the showexpr parser.

Tests cover:
- Dispatch on the lookahead characters
- Sequences and comma-separated groups
- Tolerance of unbalanced and mismatched delimiters
- Warnings, the optional nesting limit and parse_file

Author: xwest
"""

import unittest
import tempfile
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from showexpr.config import ParserConfig
from showexpr.parser import (
    expression_parse, parse_expr, parse_exprs, parse_csep, parse_string, parse_file,
    Parens, Brackets, Braces, StringLit, CharLit, NumberLit, Other, CommaSeparated,
    NestingTooDeepError
)


# Handy while poking at the parser; both come from real show output
RECORD_DUMP = (
    'Just [TextInput {textInputClass = Just (Class {unClass = "class"}), '
    'textInputId = Just (Id {unId = "id"}), textInputName = Just (Name {unName = "name"}), '
    'textInputValue = Just (Value {unValue = "value"}), '
    'textInputPlaceholder = Just (Placeholder {unPlaceholder = "placeholder"})}, '
    'TextInput {textInputClass = Just (Class {unClass = "class"}), '
    'textInputId = Just (Id {unId = "id"}), textInputName = Just (Name {unName = "name"}), '
    'textInputValue = Just (Value {unValue = "value"}), '
    'textInputPlaceholder = Just (Placeholder {unPlaceholder = "placeholder"})}]'
)
MIXED_DUMP = 'some stuff (hello ["dia\\x40iahello", why wh, bye] ) (bye)'


class TestSingleExpression(unittest.TestCase):
    """One expression per call, chosen by lookahead."""

    def test_parens(self):
        self.assertEqual(parse_expr("(a) rest"), (Parens.of([Other("a")]), " rest"))

    def test_brackets_and_braces(self):
        self.assertEqual(parse_expr("[1]")[0], Brackets.of([NumberLit("1")]))
        self.assertEqual(parse_expr("{x}")[0], Braces.of([Other("x")]))

    def test_string_and_char(self):
        self.assertEqual(parse_expr('"hi" there'), (StringLit("hi"), " there"))
        self.assertEqual(parse_expr("'c' d"), (CharLit("c"), " d"))

    def test_hex_number(self):
        self.assertEqual(parse_exprs("0x1F foo"), ([NumberLit("0x1F"), Other(" foo")], ""))

    def test_decimal_with_exponent(self):
        self.assertEqual(
            parse_exprs("123.45e-6 x"),
            ([NumberLit("123.45e-6"), Other(" x")], "")
        )

    def test_zero_x_without_hex_digit(self):
        self.assertEqual(parse_exprs("0xg"), ([NumberLit("0"), Other("xg")], ""))

    def test_uppercase_hex_prefix_is_not_hex(self):
        self.assertEqual(parse_exprs("0X1F"), ([NumberLit("0"), Other("X1F")], ""))

    def test_free_text(self):
        self.assertEqual(parse_expr("Just 5"), (Other("Just "), "5"))

    def test_empty_input(self):
        self.assertEqual(parse_expr(""), (Other(""), ""))


class TestSequences(unittest.TestCase):
    """Sibling expressions up to a closer or comma."""

    def test_constructor_with_char(self):
        self.assertEqual(parse_exprs("Just 'a'"), ([Other("Just "), CharLit("a")], ""))

    def test_escaped_quote_in_string(self):
        self.assertEqual(
            parse_exprs('Foo "hello \\"world!"'),
            ([Other("Foo "), StringLit('hello \\"world!')], "")
        )

    def test_escaped_char_literal(self):
        self.assertEqual(parse_exprs("'\\''"), ([CharLit("\\'")], ""))

    def test_stops_before_comma_and_closers(self):
        self.assertEqual(parse_exprs("a b, c"), ([Other("a b")], ", c"))
        self.assertEqual(parse_exprs("x) y"), ([Other("x")], ") y"))
        self.assertEqual(parse_exprs("]"), ([], "]"))

    def test_primed_constructors(self):
        exprs, rest = parse_exprs("Node' (Leaf' 1) (Leaf' 2)")
        self.assertEqual(rest, "")
        self.assertEqual(exprs, [
            Other("Node' "),
            Parens.of([Other("Leaf' "), NumberLit("1")]),
            Other(" "),
            Parens.of([Other("Leaf' "), NumberLit("2")]),
        ])

    def test_empty_input(self):
        self.assertEqual(parse_exprs(""), ([], ""))

    def test_long_flat_input_does_not_recurse(self):
        exprs, rest = parse_exprs("1 " * 5000)
        self.assertEqual(len(exprs), 10000)
        self.assertEqual(rest, "")


class TestCommaSeparatedGroups(unittest.TestCase):
    """Splitting bracket contents on top-level commas."""

    def test_three_groups(self):
        self.assertEqual(
            expression_parse("(a, b, c)"),
            [Parens.of([Other("a")], [Other(" b")], [Other(" c")])]
        )

    def test_juxtaposed_siblings_share_a_group(self):
        [parens] = expression_parse("(a b, c)")
        self.assertEqual(len(parens.groups), 2)
        self.assertEqual(parens.groups[0], (Other("a b"),))

    def test_group_count_is_comma_count_plus_one(self):
        text = "[1, two 3, 'c', \"d\", (e, f)]"
        [brackets] = expression_parse(text)
        top_level_commas = 4
        self.assertEqual(len(brackets.groups), top_level_commas + 1)

    def test_no_group_for_trailing_comma(self):
        self.assertEqual(expression_parse("(a,)"), [Parens.of([Other("a")])])

    def test_no_groups_for_leading_and_doubled_commas(self):
        self.assertEqual(
            expression_parse("(,a,,b,)"),
            [Parens.of([Other("a")], [Other("b")])]
        )

    def test_empty_group(self):
        self.assertEqual(expression_parse("()"), [Parens(CommaSeparated())])
        self.assertEqual(expression_parse("[]")[0].groups, ())

    def test_parse_csep_consumes_closer(self):
        self.assertEqual(
            parse_csep(")", "a, b) after"),
            ([[Other("a")], [Other(" b")]], " after")
        )

    def test_parse_csep_empty_input(self):
        self.assertEqual(parse_csep("]", ""), ([], ""))

    def test_nested_record(self):
        text = 'Just (Foo {bar = [1, 2], baz = "x"})'
        self.assertEqual(expression_parse(text), [
            Other("Just "),
            Parens.of([
                Other("Foo "),
                Braces.of(
                    [Other("bar = "), Brackets.of([NumberLit("1")], [Other(" "), NumberLit("2")])],
                    [Other(" baz = "), StringLit("x")],
                ),
            ]),
        ])

    def test_record_dump(self):
        [just, brackets] = expression_parse(RECORD_DUMP)
        self.assertEqual(just, Other("Just "))
        self.assertEqual(len(brackets.groups), 2)
        first = brackets.groups[0]
        self.assertEqual(first[0], Other("TextInput "))
        self.assertEqual(len(first[1].groups), 5)

    def test_mixed_dump(self):
        exprs = expression_parse(MIXED_DUMP)
        self.assertEqual(exprs[0], Other("some stuff "))
        inner = exprs[1].groups[0][1]
        self.assertEqual(inner, Brackets.of(
            [StringLit("dia\\x40iahello")],
            [Other(" why wh")],
            [Other(" bye")],
        ))
        self.assertEqual(exprs[-1], Parens.of([Other("bye")]))


class TestTolerantDegradation(unittest.TestCase):
    """Malformed input never raises."""

    def test_mismatched_closer(self):
        self.assertEqual(parse_expr("(a]"), (Parens.of([Other("a")]), "]"))
        self.assertEqual(expression_parse("(a]"), [Parens.of([Other("a")])])

    def test_mismatched_closer_handled_by_enclosing_group(self):
        self.assertEqual(
            parse_expr("[(a], b]"),
            (Brackets.of([Parens.of([Other("a")])]), ", b]")
        )

    def test_unterminated_group(self):
        self.assertEqual(
            expression_parse("(a, b"),
            [Parens.of([Other("a")], [Other(" b")])]
        )

    def test_unterminated_string(self):
        self.assertEqual(expression_parse('Foo "bar'), [Other("Foo "), StringLit("bar")])

    def test_stray_closer_at_end_is_dropped(self):
        self.assertEqual(expression_parse("foo)"), [Other("foo")])

    def test_top_level_comma_stops_parsing(self):
        self.assertEqual(expression_parse("a, b"), [Other("a")])

    def test_empty_input(self):
        self.assertEqual(expression_parse(""), [])


class TestParseString(unittest.TestCase):
    """parse_string results, warnings and configuration."""

    def test_well_formed_input_has_no_warnings(self):
        result = parse_string(RECORD_DUMP)
        self.assertFalse(result.has_warnings())
        self.assertEqual(result.remainder, "")

    def test_mismatched_delimiter_warnings(self):
        result = parse_string("(a]")
        self.assertEqual([w.code for w in result.warnings], ["W004", "W005"])
        self.assertEqual(result.remainder, "]")
        self.assertEqual(result.warnings[0].location.offset, 2)

    def test_unterminated_group_warning_points_at_opener(self):
        result = parse_string("x [1, (2")
        self.assertEqual([w.code for w in result.warnings], ["W003", "W003"])
        self.assertEqual([w.location.offset for w in result.warnings], [6, 2])

    def test_unterminated_literal_warnings(self):
        result = parse_string("'a")
        self.assertEqual([w.code for w in result.warnings], ["W002"])

    def test_warnings_can_be_switched_off(self):
        result = parse_string("(a]", ParserConfig(collect_warnings=False))
        self.assertEqual(result.warnings, [])
        self.assertEqual(result.exprs, [Parens.of([Other("a")])])

    def test_filename_in_warning(self):
        result = parse_string("(", ParserConfig(filename="dump.txt"))
        self.assertEqual(result.warnings[0].location.filename, "dump.txt")

    def test_max_depth_exceeded(self):
        with self.assertRaises(NestingTooDeepError) as ctx:
            parse_string("((a))", ParserConfig(max_depth=1))
        self.assertEqual(ctx.exception.diagnostic.code, "E001")
        self.assertEqual(ctx.exception.diagnostic.location.offset, 1)

    def test_max_depth_reached_exactly(self):
        result = parse_string("((a))", ParserConfig(max_depth=2))
        self.assertEqual(result.exprs, [Parens.of([Parens.of([Other("a")])])])

    def test_no_limit_by_default(self):
        depth = 100
        exprs = expression_parse("(" * depth + ")" * depth)
        node = exprs[0]
        for _ in range(depth - 1):
            node = node.groups[0][0]
        self.assertEqual(node, Parens.of())

    def test_stack_exhaustion_reported_as_nesting_error(self):
        depth = sys.getrecursionlimit()
        with self.assertRaises(NestingTooDeepError) as ctx:
            expression_parse("[" * depth + "]" * depth)
        self.assertIsNone(ctx.exception.max_depth)
        self.assertEqual(ctx.exception.diagnostic.code, "E001")
        self.assertIn("recursion limit", str(ctx.exception))

    def test_stack_exhaustion_in_single_expression(self):
        depth = sys.getrecursionlimit()
        with self.assertRaises(NestingTooDeepError):
            parse_expr("(" * depth)

    def test_warning_messages_use_code_titles(self):
        result = parse_string("(a] x")
        self.assertEqual(
            [w.diagnostic.message for w in result.warnings],
            ["Mismatched closing delimiter: expected ')', found ']'",
             "Trailing input discarded: '] x'"]
        )
        unclosed = parse_string("{")
        self.assertEqual(unclosed.warnings[0].diagnostic.message, "Unterminated group '{'")

    def test_parse_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8") as f:
            f.write("Just [1, 2")
            path = f.name
        try:
            result = parse_file(path)
        finally:
            os.remove(path)

        self.assertEqual(result.exprs, [
            Other("Just "),
            Brackets.of([NumberLit("1")], [Other(" "), NumberLit("2")]),
        ])
        self.assertEqual(result.warnings[0].location.filename, path)


if __name__ == "__main__":
    unittest.main()
