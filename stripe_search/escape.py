"""Value escaping and formatting for the search query grammar."""

from __future__ import annotations

import math

from .types import ClauseValue


def _quote(raw: str) -> str:
    # Backslashes first, otherwise the quote escapes get doubled too.
    escaped = raw.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def escape_string_value(value: str) -> str:
    """Escape a string value and wrap it in double quotes."""
    return _quote(value)


def escape_metadata_key(key: str) -> str:
    """Escape a metadata key for use inside ``metadata[...]``."""
    return _quote(key)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_value(value: ClauseValue) -> str:
    """Render a clause value as it appears on the right of the operator.

    ``None`` becomes the bare word ``null``, numbers are written in base 10
    without quotes and strings are escaped and quoted.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        raise TypeError("boolean values are not supported in search queries")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, str):
        return escape_string_value(value)
    raise TypeError(f"unsupported value type: {type(value)!r}")
