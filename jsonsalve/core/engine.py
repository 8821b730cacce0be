"""
Parse orchestrator for jsonsalve.

``process`` runs the whole flow: strict parse, diagnosis, one repair pass,
retry, and a final report. It never raises for bad input; every result,
including failure, comes back as a ParseOutcome.
"""

import logging
from typing import IO, Any, Optional, Union

from ..preprocessing.pipeline import RepairPipeline, RepairResult
from ..utils.config import ParseConfig
from .error_handling import ErrorContextBuilder, ParseAttempt
from .exceptions import ErrorKind, error_class_for
from .formatter import compute_stats, format_json
from .interpreter import ParserFailure, interpret_failure
from .outcome import (
    EmptyOutcome,
    FailureOutcome,
    ParseOutcome,
    RepairedOutcome,
    SuccessOutcome,
)
from .structure import is_balanced

logger = logging.getLogger(__name__)

# Errors a loader raises for text it cannot parse. JSONDecodeError is a
# ValueError; deeply nested input exhausts the recursion limit instead.
PARSER_ERRORS = (ValueError, RecursionError)


class ParseOrchestrator:
    """Drives a single text through strict parsing, repair and reporting."""

    def __init__(
        self,
        config: Optional[ParseConfig] = None,
        pipeline: Optional[RepairPipeline] = None,
    ):
        self.config = config or ParseConfig()
        self.pipeline = pipeline or RepairPipeline.create_default_pipeline()

    def process(self, text: Union[str, bytes, bytearray]) -> ParseOutcome:
        """Parse ``text``, repairing it if needed, and describe the result."""
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8", errors="replace")

        if not text.strip():
            logger.debug("Empty input, nothing to parse")
            return EmptyOutcome()

        try:
            value = self.config.loader(text)
        except PARSER_ERRORS as error:
            original = self._diagnose(text, error)
            logger.debug(
                f"Strict parse failed at line {original.diagnostic.line}, "
                f"column {original.diagnostic.column}: {original.message}"
            )
        else:
            return self._success(value)

        if not self.config.auto_repair:
            return self._failure(original, original, RepairResult(text, text, ()))

        repair = self.pipeline.process(text, self.config.repair)
        try:
            value = self.config.loader(repair.text)
        except PARSER_ERRORS as error:
            repaired = self._diagnose(repair.text, error)
            logger.debug(
                f"Parse after repair failed at line {repaired.diagnostic.line}, "
                f"column {repaired.diagnostic.column}: {repaired.message}"
            )
            return self._failure(original, repaired, repair)

        logger.debug(f"Input repaired with {len(repair.change_log)} change(s)")
        formatted = self._format(value)
        return RepairedOutcome(
            value=value,
            formatted_text=formatted,
            stats=compute_stats(formatted),
            change_log=repair.change_log,
            repaired_text=repair.text,
            original=original,
        )

    def _format(self, value: Any) -> str:
        return format_json(value, self.config.indent_size, self.config.compact)

    def _success(self, value: Any) -> SuccessOutcome:
        formatted = self._format(value)
        return SuccessOutcome(
            value=value, formatted_text=formatted, stats=compute_stats(formatted)
        )

    def _diagnose(self, text: str, error: BaseException) -> ParseAttempt:
        failure = ParserFailure.from_exception(error)
        diagnostic = interpret_failure(text, failure)
        return ErrorContextBuilder.build_attempt(
            text, failure.message, diagnostic, self.config.max_error_context
        )

    @staticmethod
    def _failure(
        original: ParseAttempt, repaired: ParseAttempt, repair: RepairResult
    ) -> FailureOutcome:
        kind = ErrorKind.SYNTAX if is_balanced(repaired.text) else ErrorKind.STRUCTURAL
        return FailureOutcome(
            original=original,
            repaired=repaired,
            change_log=repair.change_log,
            kind=kind,
            hint=repaired.diagnostic.hint or original.diagnostic.hint,
        )


def process(
    text: Union[str, bytes, bytearray],
    config: Optional[ParseConfig] = None,
    **kwargs: Any,
) -> ParseOutcome:
    """
    Parse possibly malformed JSON text and report what happened.

    Args:
        text: The JSON text to parse (bytes are decoded as UTF-8)
        config: Optional parse configuration
        **kwargs: Flat configuration shortcuts such as ``indent_size`` or
            ``compact``, used when ``config`` is not given

    Returns:
        EmptyOutcome, SuccessOutcome, RepairedOutcome or FailureOutcome

    Raises:
        TypeError: Both ``config`` and keyword shortcuts were given
    """
    if config is None:
        config = ParseConfig(**kwargs)
    elif kwargs:
        raise TypeError(
            f"Pass either a ParseConfig or keyword options, not both: {sorted(kwargs)}"
        )
    return ParseOrchestrator(config).process(text)


def loads(
    s: Union[str, bytes, bytearray],
    config: Optional[ParseConfig] = None,
    **kwargs: Any,
) -> Any:
    """
    Parse JSON text into a Python value, repairing it if needed.

    Returns None for empty input.

    Raises:
        StructuralError: Brackets or braces are still unbalanced after repair
        JSONSyntaxError: Any other unrecoverable syntax error
    """
    outcome = process(s, config, **kwargs)
    if isinstance(outcome, FailureOutcome):
        raise error_class_for(outcome.kind)(
            outcome.message, outcome.diagnostic, outcome.context
        )
    if isinstance(outcome, EmptyOutcome):
        return None
    return outcome.value


def load(fp: IO[Any], config: Optional[ParseConfig] = None, **kwargs: Any) -> Any:
    """Read a file object and parse its content with ``loads``."""
    return loads(fp.read(), config, **kwargs)
