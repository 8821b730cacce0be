"""
Configuration for jsonsalve parsing.

This module defines formatting, repair and error reporting options. Options
are grouped into small dataclasses; ``ParseConfig`` also accepts the flat
keyword form (``indent_size=4, compact=True``) for convenience.
"""

from dataclasses import dataclass, fields
from typing import Any, Iterable, Optional

from ..core.constants import DEFAULT_CONTEXT_WIDTH, DEFAULT_INDENT_SIZE
from ..core.loader import Loader, strict_loads


@dataclass
class FormatSettings:
    """Output formatting settings."""
    indent_size: int = DEFAULT_INDENT_SIZE
    compact: bool = False


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    auto_repair: bool = True


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = DEFAULT_CONTEXT_WIDTH


@dataclass
class RepairSettings:
    """Which heuristic repair rules are enabled, in pipeline order."""

    trim_whitespace: bool = True
    close_brackets: bool = True
    close_braces: bool = True
    remove_trailing_commas: bool = True
    strip_line_comments: bool = True
    strip_block_comments: bool = True
    normalize_quotes: bool = True
    quote_keys: bool = True
    remove_final_comma: bool = True

    @classmethod
    def conservative(cls) -> "RepairSettings":
        """Structural fixes only; leave comments, quotes and keys alone."""
        return cls(
            strip_line_comments=False,
            strip_block_comments=False,
            normalize_quotes=False,
            quote_keys=False,
        )

    @classmethod
    def aggressive(cls) -> "RepairSettings":
        """Enable every repair rule."""
        return cls()

    @classmethod
    def from_features(cls, enabled_features: Iterable[str]) -> "RepairSettings":
        """Create settings with only the named rules enabled."""
        enabled = set(enabled_features)
        unknown = enabled - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown repair features: {', '.join(sorted(unknown))}")
        return cls(**{f.name: f.name in enabled for f in fields(cls)})


class ParseConfig:
    """Configuration options for jsonsalve parsing."""

    formatting: FormatSettings
    behavior: ParsingBehavior
    error_reporting: ErrorReporting
    repair: RepairSettings
    loader: Loader

    def __init__(
        self,
        *,
        formatting: Optional[FormatSettings] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        repair: Optional[RepairSettings] = None,
        loader: Optional[Loader] = None,
        **config_options: Any,  # Flat shortcuts for the nested settings
    ):
        known_options = {
            "indent_size", "compact", "auto_repair",
            "include_context", "max_error_context",
        }
        unknown = set(config_options) - known_options
        if unknown:
            raise TypeError(f"Unknown config options: {', '.join(sorted(unknown))}")

        if formatting is not None:
            self.formatting = formatting
        else:
            self.formatting = FormatSettings(
                indent_size=config_options.get("indent_size", DEFAULT_INDENT_SIZE),
                compact=config_options.get("compact", False),
            )

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                auto_repair=config_options.get("auto_repair", True),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get("include_context", True),
                max_error_context=config_options.get(
                    "max_error_context", DEFAULT_CONTEXT_WIDTH
                ),
            )

        self.repair = repair or RepairSettings()
        self.loader = loader or strict_loads

        if self.formatting.indent_size < 0:
            raise ValueError("indent_size must not be negative")
        if self.error_reporting.max_error_context <= 0:
            raise ValueError("max_error_context must be positive")

    def __repr__(self) -> str:
        return (
            f"ParseConfig(formatting={self.formatting!r}, behavior={self.behavior!r}, "
            f"error_reporting={self.error_reporting!r}, repair={self.repair!r})"
        )

    # Flat accessors
    @property
    def indent_size(self) -> int:
        """Spaces per nesting level in formatted output."""
        return self.formatting.indent_size

    @property
    def compact(self) -> bool:
        """Whether formatted output omits all whitespace."""
        return self.formatting.compact

    @property
    def auto_repair(self) -> bool:
        """Whether to run the repair pipeline after a strict parse fails."""
        return self.behavior.auto_repair

    @auto_repair.setter
    def auto_repair(self, value: bool) -> None:
        self.behavior.auto_repair = value

    @property
    def include_context(self) -> bool:
        """Whether rendered errors include the surrounding text."""
        return self.error_reporting.include_context

    @property
    def max_error_context(self) -> int:
        """Characters of context kept on each side of an error."""
        return self.error_reporting.max_error_context
