"""
Parse outcomes.

Every call to the parse orchestrator produces exactly one of the outcome
types below. They are immutable and carry everything a caller needs to
render a result or an error without parsing again.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .error_handling import ContextWindow, Diagnostic, ParseAttempt
from .exceptions import ErrorKind
from .formatter import Stats


class OutcomeStatus(Enum):
    EMPTY = "empty"
    SUCCESS = "success"
    REPAIRED = "repaired"
    FAILURE = "failure"


@dataclass(frozen=True)
class EmptyOutcome:
    """The input was empty or whitespace only."""

    stats: Stats = field(default_factory=Stats.empty)

    status = OutcomeStatus.EMPTY
    ok = True


@dataclass(frozen=True)
class SuccessOutcome:
    """The input parsed as-is."""

    value: Any
    formatted_text: str
    stats: Stats

    status = OutcomeStatus.SUCCESS
    ok = True


@dataclass(frozen=True)
class RepairedOutcome:
    """The input parsed after the repair pass rewrote it."""

    value: Any
    formatted_text: str
    stats: Stats
    change_log: tuple[str, ...]
    repaired_text: str
    original: ParseAttempt

    status = OutcomeStatus.REPAIRED
    ok = True

    @property
    def original_diagnostic(self) -> Diagnostic:
        """Where the untouched input failed, relative to the input text."""
        return self.original.diagnostic


@dataclass(frozen=True)
class FailureOutcome:
    """
    The input could not be parsed, even after repair.

    ``repaired`` describes the failure of the repaired text and is what a
    caller should highlight; ``original`` keeps the first failure against
    the raw input. Each attempt's diagnostic only makes sense against that
    attempt's own text.
    """

    original: ParseAttempt
    repaired: ParseAttempt
    change_log: tuple[str, ...]
    kind: ErrorKind
    hint: Optional[str] = None

    status = OutcomeStatus.FAILURE
    ok = False

    @property
    def diagnostic(self) -> Diagnostic:
        return self.repaired.diagnostic

    @property
    def context(self) -> ContextWindow:
        return self.repaired.context

    @property
    def message(self) -> str:
        return self.repaired.message

    @property
    def original_diagnostic(self) -> Diagnostic:
        return self.original.diagnostic


ParseOutcome = Union[EmptyOutcome, SuccessOutcome, RepairedOutcome, FailureOutcome]
