"""
Structure repair rules.

This module contains rules that repair malformed JSON structure: unclosed
brackets and braces, and commas left dangling before a closer or at the end
of the text.
"""

from ..core.regex_utils import safe_regex_sub
from ..core.structure import count_unclosed
from .base import RepairRuleBase

TRAILING_COMMA_PATTERN = r",(\s*[}\]])"
FINAL_COMMA_PATTERN = r",\s*\Z"


class ClosingDelimiterAppender(RepairRuleBase):
    """
    Appends one closer for every unmatched opener.

    Counting is global: openers and closers are tallied over the whole text,
    including any that sit inside string literals, and the missing closers
    all go at the very end.
    """

    opener = ""
    closer = ""
    noun = ""

    def process(self, text: str) -> str:
        missing = count_unclosed(text, self.opener, self.closer)
        if missing <= 0:
            return text
        return text + self.closer * missing

    def describe(self, before: str, after: str) -> str:
        added = count_unclosed(before, self.opener, self.closer)
        return f"Added {added} closing {self.noun}(s) {self.closer}"


class BracketCloser(ClosingDelimiterAppender):
    name = "close_brackets"
    description = "Added closing bracket(s) ]"
    opener, closer, noun = "[", "]", "bracket"


class BraceCloser(ClosingDelimiterAppender):
    name = "close_braces"
    description = "Added closing brace(s) }"
    opener, closer, noun = "{", "}", "brace"


class TrailingCommaRemover(RepairRuleBase):
    """Drops commas that directly precede a closing bracket or brace."""

    name = "remove_trailing_commas"
    description = "Removed trailing commas"

    def process(self, text: str) -> str:
        return safe_regex_sub(TRAILING_COMMA_PATTERN, r"\1", text)


class FinalCommaRemover(RepairRuleBase):
    """Drops a single comma left at the very end of the text."""

    name = "remove_final_comma"
    description = "Removed trailing comma at end"

    def process(self, text: str) -> str:
        return safe_regex_sub(FINAL_COMMA_PATTERN, "", text, count=1)
