"""
jsonsalve - Soothing diagnostics and gentle repairs for malformed JSON.

jsonsalve takes text that may or may not be valid JSON and tells you exactly
what happened: it parses valid JSON and formats it, repairs common mistakes
and lists what it changed, or points at the precise line and column where
the text is broken.

Key Features:
- Strict parse first, heuristic repair only when needed
- Repairs unclosed brackets and braces, trailing commas, comments,
  single quotes and unquoted keys
- Error locations with line, column, offset and a snippet of context
- Formatted output with configurable indentation or compact mode
- Size statistics for the formatted result
- Never raises for bad input: every call returns a ParseOutcome

Quick Start:
    import jsonsalve

    outcome = jsonsalve.process("{'name': 'John', age: 30,}")
    print(outcome.formatted_text)
    print(outcome.change_log)

    # Raising interface
    data = jsonsalve.loads('{a: 1}')

    # Path lookup
    outcome, name = jsonsalve.query('{"user": {"name": "Ann"}}', "user.name")
"""

from .core.engine import ParseOrchestrator, load, loads, process
from .core.error_handling import (
    ContextWindow,
    Diagnostic,
    LocationSource,
    ParseAttempt,
    build_context,
)
from .core.exceptions import (
    ErrorKind,
    JSONSyntaxError,
    ParseError,
    PathNotFoundError,
    StructuralError,
)
from .core.formatter import Stats, compute_stats, format_json, human_size
from .core.interpreter import ParserFailure, interpret_error, interpret_failure
from .core.loader import strict_loads
from .core.outcome import (
    EmptyOutcome,
    FailureOutcome,
    OutcomeStatus,
    ParseOutcome,
    RepairedOutcome,
    SuccessOutcome,
)
from .core.position import offset_to_position, position_to_offset
from .core.query import query, resolve_path
from .core.reporting import ErrorReporter
from .preprocessing.pipeline import RepairPipeline, RepairResult, RepairStep, repair
from .utils.config import (
    ErrorReporting,
    FormatSettings,
    ParseConfig,
    ParsingBehavior,
    RepairSettings,
)

__version__ = "0.1.0"
__author__ = "jsonsalve contributors"

__all__ = [
    # Parsing entry points
    "process", "loads", "load", "ParseOrchestrator", "strict_loads",
    # Outcomes
    "ParseOutcome", "EmptyOutcome", "SuccessOutcome", "RepairedOutcome",
    "FailureOutcome", "OutcomeStatus",
    # Error location
    "Diagnostic", "ContextWindow", "ParseAttempt", "LocationSource",
    "ParserFailure", "interpret_error", "interpret_failure", "build_context",
    "offset_to_position", "position_to_offset",
    # Repair
    "repair", "RepairPipeline", "RepairResult", "RepairStep",
    # Formatting
    "format_json", "compute_stats", "human_size", "Stats",
    # Queries and reporting
    "query", "resolve_path", "ErrorReporter",
    # Configuration classes
    "ParseConfig", "FormatSettings", "ParsingBehavior", "ErrorReporting",
    "RepairSettings",
    # Exception classes
    "ParseError", "StructuralError", "JSONSyntaxError", "PathNotFoundError",
    "ErrorKind",
]
