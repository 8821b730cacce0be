"""
Base classes for repair rules.

This module contains the base class used by repair rules so they can be
composed in a pipeline.
"""

from ..utils.config import RepairSettings


class RepairRuleBase:
    """Base class for repair rules with common functionality."""

    # Name of the RepairSettings flag that enables this rule
    name = ""
    description = ""

    def should_apply(self, settings: RepairSettings) -> bool:
        """Apply when the matching settings flag is enabled."""
        return bool(getattr(settings, self.name, True))

    def process(self, text: str) -> str:
        """Rewrite the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")

    def describe(self, before: str, after: str) -> str:
        """Change log entry for a run that turned ``before`` into ``after``."""
        return self.description
