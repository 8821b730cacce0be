"""
Conversion between flat character offsets and (line, column) positions.

Lines and columns are 1-based; lines are separated by ``\\n`` only.
"""

from typing import Optional


def clamp_offset(text: str, offset: int) -> int:
    """Clamp an offset into the valid range ``[0, len(text)]``."""
    return max(0, min(offset, len(text)))


def offset_to_position(text: str, offset: int) -> tuple[int, int]:
    """
    Resolve a character offset to a (line, column) pair.

    Args:
        text: The text the offset refers to
        offset: Character offset, clamped to the bounds of ``text``

    Returns:
        Tuple of 1-based line and column
    """
    offset = clamp_offset(text, offset)
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def position_to_offset(text: str, line: int, column: int) -> Optional[int]:
    """
    Resolve a 1-based (line, column) pair back to a character offset.

    Returns None when the line does not exist in ``text`` or either
    coordinate is below 1. Columns past the end of the line are not
    rejected; callers clamp the result if they need a valid index.
    """
    if line < 1 or column < 1:
        return None

    lines = text.split("\n")
    if line > len(lines):
        return None

    offset = sum(len(lines[i]) + 1 for i in range(line - 1))
    return offset + column - 1
