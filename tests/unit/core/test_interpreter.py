"""
Test cases for turning parser failures into diagnostics.

Each location strategy is exercised on its own, followed by checks on the
order in which they are tried.
"""

import json
import unittest

from jsonsalve.core.error_handling import LocationSource
from jsonsalve.core.interpreter import ParserFailure, interpret_error, interpret_failure
from jsonsalve.core.structure import count_unclosed, is_balanced, last_unmatched_opener


class TestParserFailure(unittest.TestCase):
    """Test capturing message and offset from raised errors."""

    def test_from_json_decode_error(self):
        with self.assertRaises(json.JSONDecodeError) as cm:
            json.loads('{"a":}')
        failure = ParserFailure.from_exception(cm.exception)
        self.assertEqual(failure.offset, 5)
        self.assertEqual(failure.message, "Expecting value")

    def test_from_plain_exception(self):
        failure = ParserFailure.from_exception(ValueError("bad token at position 2"))
        self.assertIsNone(failure.offset)
        self.assertEqual(failure.message, "bad token at position 2")


class TestLocationStrategies(unittest.TestCase):
    """Test each location strategy."""

    def test_native_offset(self):
        diagnostic = interpret_failure('{"a":}', ParserFailure("Expecting value", 5))
        self.assertEqual(diagnostic.offset, 5)
        self.assertEqual((diagnostic.line, diagnostic.column), (1, 6))
        self.assertEqual(diagnostic.source, LocationSource.EXPLICIT_OFFSET)
        self.assertIsNone(diagnostic.hint)

    def test_position_token(self):
        failure = ParserFailure("Unexpected token } in JSON at Position 5")
        diagnostic = interpret_failure('{"a":}', failure)
        self.assertEqual(diagnostic.offset, 5)
        self.assertEqual(diagnostic.source, LocationSource.EXPLICIT_OFFSET)

    def test_line_and_column(self):
        failure = ParserFailure("Unexpected token at line 2 column 3")
        diagnostic = interpret_failure("ab\ncdef", failure)
        self.assertEqual(diagnostic.offset, 5)
        self.assertEqual((diagnostic.line, diagnostic.column), (2, 3))
        self.assertEqual(diagnostic.source, LocationSource.LINE_COLUMN)

    def test_line_without_column_defaults_to_first_column(self):
        diagnostic = interpret_failure("ab\ncdef", ParserFailure("error on line 2"))
        self.assertEqual(diagnostic.offset, 3)
        self.assertEqual(diagnostic.column, 1)

    def test_line_beyond_text_falls_through(self):
        diagnostic = interpret_failure("ab\ncdef", ParserFailure("error on line 9"))
        self.assertEqual(diagnostic.source, LocationSource.UNKNOWN)
        self.assertEqual((diagnostic.offset, diagnostic.line, diagnostic.column), (0, 1, 1))

    def test_end_of_input(self):
        text = '{"a": 1'
        diagnostic = interpret_failure(text, ParserFailure("Unexpected end of JSON input"))
        self.assertEqual(diagnostic.offset, len(text))
        self.assertEqual(diagnostic.source, LocationSource.END_OF_INPUT)

    def test_unclosed_bracket(self):
        diagnostic = interpret_failure('{"a": [1, 2', ParserFailure("Something odd"))
        self.assertEqual(diagnostic.offset, 6)
        self.assertEqual(diagnostic.hint, "Missing 1 closing bracket(s) ]")
        self.assertEqual(diagnostic.source, LocationSource.STRUCTURAL_IMBALANCE)

    def test_unclosed_brace_points_at_last_unmatched_opener(self):
        diagnostic = interpret_failure('{"a": {"b": 1}', ParserFailure("Something odd"))
        self.assertEqual(diagnostic.offset, 0)
        self.assertEqual(diagnostic.hint, "Missing 1 closing brace(s) }")

    def test_unknown(self):
        diagnostic = interpret_failure('{"a" 1}', ParserFailure("Something odd"))
        self.assertEqual(diagnostic.source, LocationSource.UNKNOWN)
        self.assertEqual((diagnostic.offset, diagnostic.line, diagnostic.column), (0, 1, 1))
        self.assertIsNone(diagnostic.hint)


class TestStrategyOrder(unittest.TestCase):
    """Test that earlier strategies win."""

    def test_native_offset_beats_message(self):
        failure = ParserFailure("Unexpected token at position 1", offset=4)
        self.assertEqual(interpret_failure("abcdef", failure).offset, 4)

    def test_brackets_checked_before_braces(self):
        diagnostic = interpret_failure('{"a": [1', ParserFailure("Something odd"))
        self.assertEqual(diagnostic.hint, "Missing 1 closing bracket(s) ]")

    def test_offsets_are_clamped_to_text(self):
        diagnostic = interpret_failure("abc", ParserFailure("x", offset=100))
        self.assertEqual(diagnostic.offset, 3)
        self.assertEqual(diagnostic.column, 4)

    def test_interpret_error_shortcut(self):
        text = '{\n  "a": 1\n  "b": 2\n}'
        with self.assertRaises(json.JSONDecodeError) as cm:
            json.loads(text)
        diagnostic = interpret_error(text, cm.exception)
        self.assertEqual(diagnostic.offset, 13)
        self.assertEqual((diagnostic.line, diagnostic.column), (3, 3))


class TestStructureHelpers(unittest.TestCase):
    """Test bracket and brace counting."""

    def test_count_unclosed(self):
        self.assertEqual(count_unclosed("[[]", "[", "]"), 1)
        self.assertEqual(count_unclosed("[]]", "[", "]"), -1)

    def test_counting_ignores_strings(self):
        self.assertEqual(count_unclosed('["["]', "[", "]"), 1)

    def test_last_unmatched_opener_skips_stray_closers(self):
        self.assertEqual(last_unmatched_opener("][[", "[", "]"), 2)
        self.assertIsNone(last_unmatched_opener("[]", "[", "]"))

    def test_is_balanced(self):
        self.assertTrue(is_balanced('{"a": [1]}'))
        self.assertFalse(is_balanced('{"a": [1]}}'))


if __name__ == "__main__":
    unittest.main()
