"""
JSON repair module.

This module provides a modular repair pipeline for fixing common mistakes in
malformed JSON text before it is parsed again. Each repair is a small,
single-purpose rule; rules are composed into a pipeline.
"""

from .base import RepairRuleBase
from .handlers import BlockCommentHandler, LineCommentHandler
from .normalizers import KeyQuoter, QuoteNormalizer, WhitespaceTrimmer
from .pipeline import RepairPipeline, RepairResult, RepairStep, repair
from .repairers import BraceCloser, BracketCloser, FinalCommaRemover, TrailingCommaRemover

__all__ = [
    "RepairPipeline",
    "RepairResult",
    "RepairStep",
    "RepairRuleBase",
    "repair",
    "WhitespaceTrimmer",
    "BracketCloser",
    "BraceCloser",
    "TrailingCommaRemover",
    "LineCommentHandler",
    "BlockCommentHandler",
    "QuoteNormalizer",
    "KeyQuoter",
    "FinalCommaRemover",
]
