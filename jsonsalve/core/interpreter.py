"""
Error interpretation for failed parses.

Parsers report failures in different shapes: some expose a numeric offset,
some only mention a position, a line and column, or "unexpected end" in the
message text, and some say nothing useful at all. The strategies below are
tried in a fixed order and the first one that produces a location wins.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import regex  # type: ignore[import-untyped]

from .error_handling import Diagnostic, LocationSource
from .position import position_to_offset
from .regex_utils import safe_regex_search
from .structure import count_unclosed, last_unmatched_opener

POSITION_PATTERN = r"\b(?:position|char)\s+(\d+)"
LINE_PATTERN = r"\bline\s+(\d+)"
COLUMN_PATTERN = r"\bcolumn\s+(\d+)"
END_OF_INPUT_PATTERN = r"unexpected\s+end|end\s+of\s+(?:json\s+)?(?:input|data)|unexpected\s+eof"


@dataclass(frozen=True)
class ParserFailure:
    """What the underlying parser told us about a failure."""

    message: str
    offset: Optional[int] = None

    @classmethod
    def from_exception(cls, error: BaseException) -> "ParserFailure":
        """
        Capture message and native offset from a raised parser error.

        ``json.JSONDecodeError`` exposes the offset as ``pos`` and carries the
        bare message in ``msg``; other exceptions fall back to ``str()``.
        """
        offset = getattr(error, "pos", None)
        if not isinstance(offset, int) or isinstance(offset, bool):
            offset = None
        message = getattr(error, "msg", None)
        if not isinstance(message, str):
            message = str(error)
        return cls(message=message, offset=offset)


# A strategy returns (offset, hint) when it can locate the failure
Location = tuple[int, Optional[str]]
LocationStrategy = Callable[[str, ParserFailure], Optional[Location]]


def _from_native_offset(text: str, failure: ParserFailure) -> Optional[Location]:
    if failure.offset is None:
        return None
    return failure.offset, None


def _from_position_token(text: str, failure: ParserFailure) -> Optional[Location]:
    match = safe_regex_search(POSITION_PATTERN, failure.message, flags=regex.IGNORECASE)
    if match is None:
        return None
    return int(match.group(1)), None


def _from_line_column(text: str, failure: ParserFailure) -> Optional[Location]:
    line_match = safe_regex_search(LINE_PATTERN, failure.message, flags=regex.IGNORECASE)
    if line_match is None:
        return None

    column_match = safe_regex_search(
        COLUMN_PATTERN, failure.message, flags=regex.IGNORECASE
    )
    column = int(column_match.group(1)) if column_match else 1
    offset = position_to_offset(text, int(line_match.group(1)), column)
    if offset is None:
        return None
    return offset, None


def _from_end_of_input(text: str, failure: ParserFailure) -> Optional[Location]:
    if safe_regex_search(END_OF_INPUT_PATTERN, failure.message, flags=regex.IGNORECASE):
        return len(text), None
    return None


def _from_structural_imbalance(text: str, failure: ParserFailure) -> Optional[Location]:
    for opener, closer, noun in (("[", "]", "bracket"), ("{", "}", "brace")):
        missing = count_unclosed(text, opener, closer)
        if missing > 0:
            index = last_unmatched_opener(text, opener, closer)
            hint = f"Missing {missing} closing {noun}(s) {closer}"
            return (index if index is not None else text.rfind(opener)), hint
    return None


STRATEGIES: tuple[tuple[LocationSource, LocationStrategy], ...] = (
    (LocationSource.EXPLICIT_OFFSET, _from_native_offset),
    (LocationSource.EXPLICIT_OFFSET, _from_position_token),
    (LocationSource.LINE_COLUMN, _from_line_column),
    (LocationSource.END_OF_INPUT, _from_end_of_input),
    (LocationSource.STRUCTURAL_IMBALANCE, _from_structural_imbalance),
)


def interpret_failure(text: str, failure: ParserFailure) -> Diagnostic:
    """
    Turn a parser failure into a Diagnostic against ``text``.

    Offsets are clamped to the text and line/column are always derived from
    the final offset, so the result is consistent with ``text`` even when the
    parser reported coordinates that run past the end of a line.
    """
    for source, strategy in STRATEGIES:
        location = strategy(text, failure)
        if location is not None:
            offset, hint = location
            return Diagnostic.at_offset(text, offset, hint=hint, source=source)
    return Diagnostic.unknown()


def interpret_error(text: str, error: BaseException) -> Diagnostic:
    """Interpret a raised parser exception against the text it was parsing."""
    return interpret_failure(text, ParserFailure.from_exception(error))
