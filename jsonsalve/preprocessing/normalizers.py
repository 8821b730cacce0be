"""
Content normalization repair rules.

This module contains rules that normalize surrounding whitespace, quote
characters and object keys to the forms standard JSON expects.
"""

from ..core.regex_utils import safe_regex_sub
from .base import RepairRuleBase

# A bare identifier used as an object key, right after "{" or ","
BARE_KEY_PATTERN = r"(\{|,)\s*([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:"


class WhitespaceTrimmer(RepairRuleBase):
    """Trims leading and trailing whitespace."""

    name = "trim_whitespace"
    description = "Trimmed surrounding whitespace"

    def process(self, text: str) -> str:
        return text.strip()


class QuoteNormalizer(RepairRuleBase):
    """
    Replaces every single quote with a double quote.

    The replacement is blind to string context, so an apostrophe inside a
    double-quoted value is turned into a quote as well and usually breaks
    that string.
    """

    name = "normalize_quotes"
    description = "Fixed single quotes → double quotes"

    def process(self, text: str) -> str:
        return text.replace("'", '"')


class KeyQuoter(RepairRuleBase):
    """Wraps bare identifier keys in double quotes."""

    name = "quote_keys"
    description = "Added quotes to unquoted keys"

    def process(self, text: str) -> str:
        # Whitespace between the delimiter, key and colon is dropped
        return safe_regex_sub(BARE_KEY_PATTERN, r'\1"\2":', text)
