"""
Dot-path lookup inside parsed JSON values.
"""

from typing import Any, Optional

from ..utils.config import ParseConfig
from .engine import process
from .exceptions import PathNotFoundError
from .outcome import ParseOutcome, RepairedOutcome, SuccessOutcome


def resolve_path(value: Any, path: str) -> Any:
    """
    Walk ``value`` along a dot-separated path such as ``users.0.name``.

    Empty segments are skipped, so an empty path returns ``value`` itself.
    List segments must be non-negative integer indices.

    Raises:
        PathNotFoundError: A key or index is missing, or the path descends
            into a scalar
    """
    result = value
    for key in (segment for segment in path.split(".") if segment):
        if isinstance(result, dict):
            if key not in result:
                raise PathNotFoundError(path)
            result = result[key]
        elif isinstance(result, list):
            if not key.isdecimal() or int(key) >= len(result):
                raise PathNotFoundError(path)
            result = result[int(key)]
        else:
            raise PathNotFoundError(path)
    return result


def query(
    text: str, path: str, config: Optional[ParseConfig] = None
) -> tuple[ParseOutcome, Optional[Any]]:
    """
    Parse ``text`` and resolve ``path`` in the parsed value.

    Returns the parse outcome together with the resolved value, which is None
    when the text did not parse.
    """
    outcome = process(text, config)
    if not isinstance(outcome, (SuccessOutcome, RepairedOutcome)):
        return outcome, None
    return outcome, resolve_path(outcome.value, path)
