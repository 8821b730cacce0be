"""
Human-readable rendering of parse outcomes.

The reporter turns outcomes into the messages an editor or command line
shows: an error headline with its location, a snippet with the offending
character marked, an optional hint, or a list of the fixes that were made.
"""

from typing import Iterable, Optional

from ..utils.config import ParseConfig
from .error_handling import ContextWindow
from .outcome import FailureOutcome, ParseOutcome, RepairedOutcome

MARK_OPEN = ">>"
MARK_CLOSE = "<<"


class ErrorReporter:
    """Formats outcomes for display."""

    def __init__(self, config: Optional[ParseConfig] = None):
        self.config = config or ParseConfig()

    @staticmethod
    def format_context(context: ContextWindow) -> str:
        """Render a context window with the offending character marked."""
        # ``after`` starts with the offending character itself
        after = context.after[1:] if context.after else ""
        return (
            f"...{context.before}{MARK_OPEN}{context.offending_char}"
            f"{MARK_CLOSE}{after}..."
        )

    def format_failure(self, outcome: FailureOutcome) -> str:
        diagnostic = outcome.diagnostic
        parts = [
            f"Error at line {diagnostic.line}, column {diagnostic.column}:\n"
            f"{outcome.message}"
        ]
        if self.config.include_context:
            parts.append(self.format_context(outcome.context))
        if outcome.hint:
            parts.append(f"Hint: {outcome.hint}")
        return "\n\n".join(parts)

    @staticmethod
    def format_change_log(change_log: Iterable[str]) -> str:
        lines = ["JSON auto-fixed:"]
        lines.extend(f"• {change}" for change in change_log)
        return "\n".join(lines)

    def format_outcome(self, outcome: ParseOutcome) -> str:
        """Message to show for any outcome; empty when there is nothing to say."""
        if isinstance(outcome, FailureOutcome):
            return self.format_failure(outcome)
        if isinstance(outcome, RepairedOutcome):
            return self.format_change_log(outcome.change_log)
        return ""
