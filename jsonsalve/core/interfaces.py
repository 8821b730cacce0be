"""
Core interfaces and protocols.

This module defines the contracts that pluggable components implement.
"""

from typing import Any, Protocol


class RepairRule(Protocol):
    """Protocol for rules in the repair pipeline."""

    name: str
    description: str

    def should_apply(self, settings: Any) -> bool:
        """Determine if this rule is enabled by the given settings."""
        ...

    def process(self, text: str) -> str:
        """Rewrite the text; must return it unchanged when there is nothing to fix."""
        ...

    def describe(self, before: str, after: str) -> str:
        """Describe a change this rule made."""
        ...
