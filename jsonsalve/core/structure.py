"""
Bracket and brace balance helpers.

Counting is global and does not skip string literals, so a ``[`` inside a
quoted value counts the same as a structural one.
"""

from typing import Optional

BRACKET_PAIRS = {"[": "]", "{": "}"}


def count_unclosed(text: str, opener: str, closer: str) -> int:
    """Return how many more openers than closers appear in the text."""
    return text.count(opener) - text.count(closer)


def last_unmatched_opener(text: str, opener: str, closer: str) -> Optional[int]:
    """
    Find the index of the last opener that has no matching closer.

    Stray closers with nothing open are ignored.
    """
    stack: list[int] = []
    for index, char in enumerate(text):
        if char == opener:
            stack.append(index)
        elif char == closer and stack:
            stack.pop()
    return stack[-1] if stack else None


def is_balanced(text: str) -> bool:
    """Check whether every bracket and brace count is balanced."""
    return all(
        count_unclosed(text, opener, closer) == 0
        for opener, closer in BRACKET_PAIRS.items()
    )
