"""
Canonical re-serialisation and size statistics for parsed JSON.
"""

import json
import math
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_INDENT_SIZE, KILOBYTE, MEGABYTE


@dataclass(frozen=True)
class Stats:
    """Size statistics for a piece of text."""

    character_count: int
    line_count: int
    size_bytes: int
    human_size: str

    @classmethod
    def empty(cls) -> "Stats":
        return cls(character_count=0, line_count=0, size_bytes=0, human_size="0 B")


def human_size(size_bytes: int) -> str:
    """Scale a byte count to B, KB or MB using 1024 boundaries."""
    if size_bytes < KILOBYTE:
        return f"{size_bytes} B"
    if size_bytes < MEGABYTE:
        return f"{size_bytes / KILOBYTE:.2f} KB"
    return f"{size_bytes / MEGABYTE:.2f} MB"


def compute_stats(text: str) -> Stats:
    """
    Compute character, line and byte statistics for ``text``.

    Lines are counted as ``\\n``-separated segments, so a trailing newline
    adds one empty line.
    """
    # Lone surrogates survive json.loads and are counted as three bytes
    size_bytes = len(text.encode("utf-8", "surrogatepass"))
    return Stats(
        character_count=len(text),
        line_count=len(text.split("\n")),
        size_bytes=size_bytes,
        human_size=human_size(size_bytes),
    )


def _finite(value: Any) -> Any:
    """Replace non-finite floats with None, recursing into containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite(item) for item in value]
    return value


def format_json(
    value: Any, indent_size: int = DEFAULT_INDENT_SIZE, compact: bool = False
) -> str:
    """
    Serialise a parsed value back to JSON text.

    Compact output, or an indent of zero, carries no whitespace at all.
    Otherwise each nesting level is indented by ``indent_size`` spaces. Keys
    keep the order they were parsed in and non-ASCII text is written as-is.
    Numbers too large for a float (``1e400``) parse to infinity and are
    written as ``null``, since ``Infinity`` is not JSON.
    """
    value = _finite(value)
    if compact or indent_size <= 0:
        return json.dumps(
            value, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        )
    return json.dumps(value, ensure_ascii=False, allow_nan=False, indent=indent_size)
