"""
Test cases for the parse orchestrator.

Tests cover each terminal state: empty, success, repaired and failure.
"""

import io
import unittest

import jsonsalve
from jsonsalve.core.engine import ParseOrchestrator, load, loads, process
from jsonsalve.core.exceptions import ErrorKind, JSONSyntaxError, StructuralError
from jsonsalve.core.outcome import (
    EmptyOutcome,
    FailureOutcome,
    OutcomeStatus,
    RepairedOutcome,
    SuccessOutcome,
)
from jsonsalve.utils.config import ParseConfig, RepairSettings


def opaque_loader(text):
    """Loader that always fails without saying where."""
    raise ValueError("Unexpected token")


class TestEmptyInput(unittest.TestCase):
    """Test the empty short circuit."""

    def test_empty_string(self):
        outcome = process("")
        self.assertIsInstance(outcome, EmptyOutcome)
        self.assertEqual(outcome.status, OutcomeStatus.EMPTY)
        self.assertEqual(outcome.stats.character_count, 0)
        self.assertEqual(outcome.stats.line_count, 0)
        self.assertEqual(outcome.stats.human_size, "0 B")

    def test_whitespace_only(self):
        self.assertIsInstance(process("  \n\t "), EmptyOutcome)


class TestStrictSuccess(unittest.TestCase):
    """Test inputs that parse without repair."""

    def test_valid_object(self):
        outcome = process('{"b": [1, 2], "a": null}')
        self.assertIsInstance(outcome, SuccessOutcome)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.value, {"b": [1, 2], "a": None})
        self.assertLess(outcome.formatted_text.index('"b"'), outcome.formatted_text.index('"a"'))

    def test_stats_describe_formatted_text(self):
        outcome = process('{"a":1}')
        self.assertEqual(outcome.formatted_text, '{\n  "a": 1\n}')
        self.assertEqual(outcome.stats.character_count, 12)
        self.assertEqual(outcome.stats.line_count, 3)

    def test_compact_keyword(self):
        outcome = process('{"a": [1, 2]}', compact=True)
        self.assertEqual(outcome.formatted_text, '{"a":[1,2]}')

    def test_indent_keyword(self):
        outcome = process("[1]", indent_size=4)
        self.assertEqual(outcome.formatted_text, "[\n    1\n]")

    def test_bytes_input(self):
        outcome = process('{"a": "é"}'.encode("utf-8"))
        self.assertEqual(outcome.value, {"a": "é"})

    def test_scalar_document(self):
        self.assertEqual(process("42").value, 42)

    def test_lone_surrogate_escape(self):
        outcome = process('["\\ud800"]')
        self.assertIsInstance(outcome, SuccessOutcome)
        self.assertEqual(outcome.value, ["\ud800"])
        self.assertEqual(outcome.stats.size_bytes, outcome.stats.character_count + 2)

    def test_overflowing_numbers_formatted_as_null(self):
        outcome = process("[1e400, -1e400, 1]", compact=True)
        self.assertIsInstance(outcome, SuccessOutcome)
        self.assertEqual(outcome.value, [float("inf"), float("-inf"), 1])
        self.assertEqual(outcome.formatted_text, "[null,null,1]")


class TestRepair(unittest.TestCase):
    """Test inputs that parse after the repair pass."""

    def test_trailing_comma(self):
        outcome = process('{"a":1,}')
        self.assertIsInstance(outcome, RepairedOutcome)
        self.assertIn("Removed trailing commas", outcome.change_log)
        self.assertEqual(outcome.formatted_text, '{\n  "a": 1\n}')
        self.assertEqual(outcome.repaired_text, '{"a":1}')

    def test_original_diagnostic_refers_to_raw_text(self):
        text = '{"a":1,}'
        outcome = process(text)
        self.assertIn(outcome.original_diagnostic.offset, (6, 7))
        self.assertEqual(outcome.original.text, text)

    def test_single_quotes_and_missing_brace(self):
        outcome = process("{'a':1")
        self.assertIsInstance(outcome, RepairedOutcome)
        self.assertIn("Fixed single quotes → double quotes", outcome.change_log)
        self.assertIn("Added 1 closing brace(s) }", outcome.change_log)
        self.assertEqual(outcome.value, {"a": 1})

    def test_unquoted_keys(self):
        outcome = process("{a:1,b:2}")
        self.assertIsInstance(outcome, RepairedOutcome)
        self.assertIn("Added quotes to unquoted keys", outcome.change_log)
        self.assertEqual(outcome.value, {"a": 1, "b": 2})

    def test_custom_repair_settings(self):
        config = ParseConfig(repair=RepairSettings.conservative())
        outcome = process("{'a':1}", config)
        self.assertIsInstance(outcome, FailureOutcome)


class TestFailure(unittest.TestCase):
    """Test inputs that cannot be repaired."""

    def test_missing_value(self):
        outcome = process('{"a":}')
        self.assertIsInstance(outcome, FailureOutcome)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.diagnostic.offset, 5)
        self.assertEqual(outcome.context.offending_char, "}")
        self.assertEqual(outcome.kind, ErrorKind.SYNTAX)
        self.assertEqual(outcome.change_log, ())
        self.assertIsNone(outcome.hint)

    def test_failure_reported_against_repaired_text(self):
        outcome = process("{'a':}")
        self.assertEqual(outcome.original.text, "{'a':}")
        self.assertEqual(outcome.original_diagnostic.offset, 1)
        self.assertEqual(outcome.repaired.text, '{"a":}')
        self.assertEqual(outcome.diagnostic.offset, 5)
        self.assertEqual(outcome.change_log, ("Fixed single quotes → double quotes",))

    def test_context_matches_its_own_text(self):
        for text in ("{'a':}", '{"a": 1}}', '[1, 2,, 3', '{"x": tru}'):
            outcome = process(text)
            self.assertIsInstance(outcome, FailureOutcome)
            for attempt in (outcome.original, outcome.repaired):
                offset = attempt.diagnostic.offset
                if offset < len(attempt.text):
                    self.assertEqual(attempt.context.offending_char, attempt.text[offset])

    def test_extra_closer_is_structural(self):
        outcome = process('{"a": 1}}')
        self.assertEqual(outcome.kind, ErrorKind.STRUCTURAL)
        self.assertEqual(outcome.diagnostic.offset, 8)

    def test_multiline_location(self):
        outcome = process('{\n  "a": 1\n  "b": 2\n}')
        self.assertEqual((outcome.diagnostic.line, outcome.diagnostic.column), (3, 3))

    def test_non_standard_constant_rejected(self):
        outcome = process('{"a": NaN}')
        self.assertIsInstance(outcome, FailureOutcome)
        self.assertEqual(outcome.diagnostic.offset, 6)

    def test_constant_located_outside_strings(self):
        outcome = process('{"NaN": NaN}')
        self.assertIsInstance(outcome, FailureOutcome)
        self.assertEqual(outcome.original_diagnostic.offset, 8)
        self.assertEqual(outcome.diagnostic.offset, 8)

    def test_negative_infinity_after_string_mentioning_nan(self):
        outcome = process('{"note": "NaN here", "x": -Infinity}')
        self.assertEqual(outcome.original_diagnostic.offset, 26)

    def test_original_hint_used_when_repaired_has_none(self):
        config = ParseConfig(loader=opaque_loader)
        outcome = process("[1, 2", config)
        self.assertIsInstance(outcome, FailureOutcome)
        self.assertEqual(outcome.original_diagnostic.hint, "Missing 1 closing bracket(s) ]")
        self.assertIsNone(outcome.diagnostic.hint)
        self.assertEqual(outcome.hint, "Missing 1 closing bracket(s) ]")
        self.assertEqual(outcome.repaired.text, "[1, 2]")

    def test_auto_repair_disabled(self):
        outcome = process('{"a":1,}', auto_repair=False)
        self.assertIsInstance(outcome, FailureOutcome)
        self.assertEqual(outcome.change_log, ())
        self.assertIs(outcome.original, outcome.repaired)


class TestOrchestrator(unittest.TestCase):
    """Test the orchestrator object itself."""

    def test_reusable_across_calls(self):
        orchestrator = ParseOrchestrator(ParseConfig(compact=True))
        self.assertEqual(orchestrator.process("[1, 2]").formatted_text, "[1,2]")
        self.assertEqual(orchestrator.process("[1, 2,]").formatted_text, "[1,2]")
        self.assertEqual(orchestrator.process("[1, 2]").status, OutcomeStatus.SUCCESS)

    def test_package_exports(self):
        self.assertIs(jsonsalve.process, process)
        self.assertIs(jsonsalve.loads, loads)

    def test_config_and_keywords_together_rejected(self):
        with self.assertRaises(TypeError):
            process("[1]", ParseConfig(), compact=True)
        with self.assertRaises(TypeError):
            loads("[1]", ParseConfig(), indent_size=4)


class TestLoads(unittest.TestCase):
    """Test the raising convenience interface."""

    def test_loads_repairs(self):
        self.assertEqual(loads("{a:1}"), {"a": 1})

    def test_loads_empty_returns_none(self):
        self.assertIsNone(loads("   "))

    def test_loads_syntax_error(self):
        with self.assertRaises(JSONSyntaxError) as cm:
            loads('{"a":}')
        error = cm.exception
        self.assertEqual(error.position, 5)
        self.assertEqual((error.line, error.column), (1, 6))
        self.assertIn("line 1, column 6", str(error))
        self.assertIsInstance(error, ValueError)

    def test_loads_structural_error(self):
        with self.assertRaises(StructuralError):
            loads('{"a": 1}}')

    def test_load_file_object(self):
        self.assertEqual(load(io.StringIO("[1, 2,]")), [1, 2])


if __name__ == "__main__":
    unittest.main()
