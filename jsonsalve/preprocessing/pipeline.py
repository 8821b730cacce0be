"""
Repair pipeline for composable JSON repair rules.

This module implements the pipeline pattern: rules run once each, in a
fixed order, every rule working on the previous rule's output. The pipeline
records which rules changed the text so callers can show a change log.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.interfaces import RepairRule
from ..utils.config import RepairSettings
from .handlers import BlockCommentHandler, LineCommentHandler
from .normalizers import KeyQuoter, QuoteNormalizer, WhitespaceTrimmer
from .repairers import (
    BraceCloser,
    BracketCloser,
    FinalCommaRemover,
    TrailingCommaRemover,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepairStep:
    """One rule's run within a repair pass."""

    name: str
    description: str
    applied: bool


@dataclass(frozen=True)
class RepairResult:
    """Outcome of a single repair pass."""

    original_text: str
    text: str
    steps: tuple[RepairStep, ...]

    @property
    def changed(self) -> bool:
        return self.text != self.original_text

    @property
    def change_log(self) -> tuple[str, ...]:
        """Descriptions of the steps that changed the text, in order."""
        return tuple(step.description for step in self.steps if step.applied)


class RepairPipeline:
    """Manages an ordered sequence of repair rules applied to JSON text."""

    def __init__(self, rules: Optional[list[RepairRule]] = None):
        self.rules = rules or []

    def add_rule(self, rule: RepairRule) -> None:
        """Add a repair rule to the end of the pipeline."""
        self.rules.append(rule)

    def process(
        self, text: str, settings: Optional[RepairSettings] = None
    ) -> RepairResult:
        """Run every enabled rule once, in order, and record what changed."""
        if settings is None:
            settings = RepairSettings()

        result = text
        steps: list[RepairStep] = []
        for rule in self.rules:
            if not rule.should_apply(settings):
                continue

            before = result
            result = rule.process(before)
            applied = result != before
            description = rule.describe(before, result) if applied else rule.description
            steps.append(RepairStep(rule.name, description, applied))

            if applied:
                logger.debug(f"Repair rule {rule.name} applied: {description}")

        return RepairResult(original_text=text, text=result, steps=tuple(steps))

    @classmethod
    def create_default_pipeline(cls) -> "RepairPipeline":
        """Create the standard repair pipeline."""
        pipeline = cls()

        pipeline.add_rule(WhitespaceTrimmer())

        # Structure: close what is open, then drop commas before closers
        pipeline.add_rule(BracketCloser())
        pipeline.add_rule(BraceCloser())
        pipeline.add_rule(TrailingCommaRemover())

        # Cleanup
        pipeline.add_rule(LineCommentHandler())
        pipeline.add_rule(BlockCommentHandler())

        # Normalization
        pipeline.add_rule(QuoteNormalizer())
        pipeline.add_rule(KeyQuoter())

        # Final cleanup
        pipeline.add_rule(FinalCommaRemover())

        return pipeline


def repair(text: str, settings: Optional[RepairSettings] = None) -> RepairResult:
    """Run one pass of the default repair pipeline over ``text``."""
    return RepairPipeline.create_default_pipeline().process(text, settings)
