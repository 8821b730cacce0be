"""
Safe regex utilities with timeout protection.

All pattern work goes through the ``regex`` module, whose native ``timeout``
argument stops a runaway match instead of letting it hang the caller. On
timeout the helpers log a warning and fall back to a neutral result, so
text rewriting always completes.
"""

import logging
from typing import Callable, Optional, Union

import regex  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0

Replacement = Union[str, Callable[["regex.Match[str]"], str]]


def _describe(pattern: str) -> str:
    return pattern[:50] + "..." if len(pattern) > 50 else pattern


def safe_regex_sub(
    pattern: str,
    repl: Replacement,
    string: str,
    flags: int = 0,
    count: int = 0,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Perform regex substitution with timeout protection.

    Args:
        pattern: Regular expression pattern
        repl: Replacement string or function
        string: Input string to process
        flags: Regex flags
        count: Maximum number of substitutions, 0 for all
        timeout: Timeout in seconds

    Returns:
        String with substitutions applied, or the original string on timeout
    """
    try:
        return regex.sub(pattern, repl, string, count=count, flags=flags, timeout=timeout)
    except TimeoutError:
        logger.warning(
            f"Regex sub timed out after {timeout}s on pattern: {_describe(pattern)}"
        )
        return string


def safe_regex_search(
    pattern: str, string: str, flags: int = 0, timeout: float = DEFAULT_TIMEOUT
) -> Optional["regex.Match[str]"]:
    """
    Perform regex search with timeout protection.

    Returns:
        Match object if found, None if no match or timeout
    """
    try:
        return regex.search(pattern, string, flags=flags, timeout=timeout)
    except TimeoutError:
        logger.warning(
            f"Regex search timed out after {timeout}s on pattern: {_describe(pattern)}"
        )
        return None
