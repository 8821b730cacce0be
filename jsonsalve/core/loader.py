"""
Strict JSON loading.

Python's json module accepts ``NaN``, ``Infinity`` and ``-Infinity``, which
JSON itself does not. The strict loader rejects them with a regular
``JSONDecodeError`` so they are located and reported like any other error.
"""

import json
from typing import Any, Callable, NoReturn

import regex  # type: ignore[import-untyped]

Loader = Callable[[str], Any]

STRING_LITERAL_PATTERN = r'"(?:[^"\\]|\\.)*"'


def find_bare_token(text: str, token: str) -> int:
    """
    Return the offset of the first ``token`` outside string literals.

    Falls back to 0 when the token only occurs inside strings.
    """
    pattern = f"{STRING_LITERAL_PATTERN}|(?P<token>{regex.escape(token)})"
    for match in regex.finditer(pattern, text):
        if match.group("token") is not None:
            return match.start()
    return 0


def strict_loads(text: str) -> Any:
    """Parse ``text`` as standard JSON, raising ``json.JSONDecodeError`` on failure."""

    def reject_constant(name: str) -> NoReturn:
        raise json.JSONDecodeError(
            f"Invalid constant {name}", text, find_bare_token(text, name)
        )

    return json.loads(text, parse_constant=reject_constant)
