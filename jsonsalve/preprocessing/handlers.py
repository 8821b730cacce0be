"""
Comment handling repair rules.

Comments are matched textually, without tracking string literals, so a
``//`` inside a quoted URL also cuts the rest of that line.
"""

from ..core.regex_utils import safe_regex_sub
from .base import RepairRuleBase

LINE_COMMENT_PATTERN = r"//.*"
# Runs of non-star characters, or a star not followed by a slash, so the body
# stops at the first "*/" and spans newlines without DOTALL. Many unclosed
# "/*" still cost a scan each; the regex timeout bounds that case.
BLOCK_COMMENT_PATTERN = r"/\*(?:[^*]|\*(?!/))*\*/"


class LineCommentHandler(RepairRuleBase):
    """Removes ``//`` comments up to the end of their line."""

    name = "strip_line_comments"
    description = "Removed line comments"

    def process(self, text: str) -> str:
        # The newline itself is kept
        return safe_regex_sub(LINE_COMMENT_PATTERN, "", text)


class BlockCommentHandler(RepairRuleBase):
    """Removes ``/* ... */`` comments, which may span several lines."""

    name = "strip_block_comments"
    description = "Removed block comments"

    def process(self, text: str) -> str:
        return safe_regex_sub(BLOCK_COMMENT_PATTERN, "", text)
