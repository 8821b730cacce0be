"""
Error location records and context building.

This module holds the immutable records that describe where a parse failed
(Diagnostic), what the text around that spot looks like (ContextWindow) and
the pairing of both with the exact text they were computed against
(ParseAttempt).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import DEFAULT_CONTEXT_WIDTH, END_OF_INPUT
from .position import clamp_offset, offset_to_position


class LocationSource(Enum):
    """Which extraction strategy produced a diagnostic's offset."""

    EXPLICIT_OFFSET = "explicit_offset"
    LINE_COLUMN = "line_column"
    END_OF_INPUT = "end_of_input"
    STRUCTURAL_IMBALANCE = "structural_imbalance"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Diagnostic:
    """Resolved error location plus an optional human hint."""

    offset: int
    line: int
    column: int
    hint: Optional[str] = None
    source: LocationSource = LocationSource.UNKNOWN

    @classmethod
    def at_offset(
        cls,
        text: str,
        offset: int,
        hint: Optional[str] = None,
        source: LocationSource = LocationSource.UNKNOWN,
    ) -> "Diagnostic":
        """Build a diagnostic whose line and column agree with ``text``."""
        offset = clamp_offset(text, offset)
        line, column = offset_to_position(text, offset)
        return cls(offset=offset, line=line, column=column, hint=hint, source=source)

    @classmethod
    def unknown(cls) -> "Diagnostic":
        """Diagnostic used when no strategy could locate the error."""
        return cls(offset=0, line=1, column=1)


@dataclass(frozen=True)
class ContextWindow:
    """Bounded snippet of text around an error offset, for display."""

    before: str
    offending_char: str
    after: str
    line: int
    column: int
    offset: int

    @property
    def at_end_of_input(self) -> bool:
        return self.offending_char == END_OF_INPUT


@dataclass(frozen=True)
class ParseAttempt:
    """A failed parse of one specific text, with its location data."""

    text: str
    message: str
    diagnostic: Diagnostic
    context: ContextWindow


class ErrorContextBuilder:
    """Builds context windows from an offset and the text it indexes."""

    @staticmethod
    def build_context(
        text: str, offset: int, width: int = DEFAULT_CONTEXT_WIDTH
    ) -> ContextWindow:
        """
        Extract up to ``width`` characters on each side of ``offset``.

        The ``after`` slice starts at the offending character itself. When
        the offset sits at the end of the text the offending character is the
        end-of-input marker.
        """
        offset = clamp_offset(text, offset)
        start = max(0, offset - width)
        end = min(len(text), offset + width)
        line, column = offset_to_position(text, offset)

        return ContextWindow(
            before=text[start:offset],
            offending_char=text[offset] if offset < len(text) else END_OF_INPUT,
            after=text[offset:end],
            line=line,
            column=column,
            offset=offset,
        )

    @staticmethod
    def build_attempt(
        text: str,
        message: str,
        diagnostic: Diagnostic,
        width: int = DEFAULT_CONTEXT_WIDTH,
    ) -> ParseAttempt:
        """Bind a diagnostic and its context window to the text they describe."""
        context = ErrorContextBuilder.build_context(text, diagnostic.offset, width)
        return ParseAttempt(
            text=text, message=message, diagnostic=diagnostic, context=context
        )


def build_context(
    text: str, offset: int, width: int = DEFAULT_CONTEXT_WIDTH
) -> ContextWindow:
    """Module-level shortcut for ``ErrorContextBuilder.build_context``."""
    return ErrorContextBuilder.build_context(text, offset, width)
