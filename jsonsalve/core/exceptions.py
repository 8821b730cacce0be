"""
Exception hierarchy for jsonsalve.

The parse orchestrator never raises for bad input; these exceptions are used
by the convenience ``loads``/``load`` functions and by path queries, which
sit outside that boundary.
"""

from enum import Enum
from typing import Optional

from .error_handling import ContextWindow, Diagnostic


class ErrorKind(Enum):
    """Broad classification of a parse failure."""

    STRUCTURAL = "structural"  # Unbalanced brackets or braces
    SYNTAX = "syntax"  # Anything else the strict parser rejects


class ParseError(ValueError):
    """Base error for JSON that could not be parsed, even after repair."""

    def __init__(
        self,
        message: str,
        diagnostic: Optional[Diagnostic] = None,
        context: Optional[ContextWindow] = None,
    ):
        self.message = message
        self.diagnostic = diagnostic
        self.context = context

        if diagnostic is not None:
            full_message = (
                f"{message} at line {diagnostic.line}, column {diagnostic.column}"
            )
            if diagnostic.hint:
                full_message += f" ({diagnostic.hint})"
        else:
            full_message = message
        super().__init__(full_message)

    @property
    def position(self) -> Optional[int]:
        return self.diagnostic.offset if self.diagnostic else None

    @property
    def line(self) -> Optional[int]:
        return self.diagnostic.line if self.diagnostic else None

    @property
    def column(self) -> Optional[int]:
        return self.diagnostic.column if self.diagnostic else None


class StructuralError(ParseError):
    """Unbalanced brackets or braces survived the repair pass."""


class JSONSyntaxError(ParseError):
    """The text is not valid JSON and the heuristics could not fix it."""


class PathNotFoundError(ParseError, LookupError):
    """A dot path did not resolve inside a parsed value."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path not found: {path}")


def error_class_for(kind: ErrorKind) -> type[ParseError]:
    """Pick the exception class that represents a failure kind."""
    if kind is ErrorKind.STRUCTURAL:
        return StructuralError
    return JSONSyntaxError
