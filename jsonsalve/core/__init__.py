"""
jsonsalve Core Parsing Engine.

This module provides error location, parse orchestration and formatting.
"""

from .engine import ParseOrchestrator, load, loads, process
from .error_handling import ContextWindow, Diagnostic, LocationSource, ParseAttempt
from .interpreter import ParserFailure, interpret_error, interpret_failure
from .position import offset_to_position, position_to_offset

__all__ = [
    'ParseOrchestrator', 'process', 'loads', 'load',
    'ContextWindow', 'Diagnostic', 'LocationSource', 'ParseAttempt',
    'ParserFailure', 'interpret_error', 'interpret_failure',
    'offset_to_position', 'position_to_offset',
]
