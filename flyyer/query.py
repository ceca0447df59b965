"""Query string serialization with bracket notation for nested variables.

The remote renderer parses queries the way the ``qs`` package does, so the
output reproduces its conventions: ``a[b]=c`` for mappings, ``a[0]=c`` for
sequences, ``key=`` for ``None`` and nothing at all for ``UNDEFINED``.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import quote

from .models import UNDEFINED
from .variables import VariableValue

RFC1738 = "RFC1738"
RFC3986 = "RFC3986"

_SAFE_CHARS = {
    RFC1738: "()",
    RFC3986: "",
}


def to_string(value: Any) -> str:
    """Render a scalar the way a JavaScript ``String(value)`` call would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, datetime):
        return serialize_date(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def serialize_date(value: date) -> str:
    if not isinstance(value, datetime):
        return value.isoformat()
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def _encode(text: str, format: str) -> str:
    encoded = quote(text, safe=_SAFE_CHARS[format])
    if format == RFC1738:
        encoded = encoded.replace("%20", "+")
    return encoded


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _flatten(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is UNDEFINED:
        return
    if value is None:
        yield prefix, ""
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _flatten(f"{prefix}[{to_string(key)}]", item)
        return
    if _is_sequence(value):
        for index, item in enumerate(value):
            yield from _flatten(f"{prefix}[{index}]", item)
        return
    yield prefix, to_string(value)


def to_query(
    variables: Optional[Mapping[str, VariableValue]],
    add_query_prefix: bool = False,
    format: str = RFC1738,
) -> str:
    """Serialize ``variables`` into a query string.

    Keys keep the mapping's iteration order. With ``add_query_prefix`` a leading
    ``?`` is added, but only when the resulting query is not empty.
    """
    if format not in _SAFE_CHARS:
        raise ValueError(f"Unknown query format: {format!r}")

    parts: List[str] = []
    for key, value in (variables or {}).items():
        for name, text in _flatten(to_string(key), value):
            parts.append(f"{_encode(name, format)}={_encode(text, format)}")

    query = "&".join(parts)
    if add_query_prefix and query:
        return f"?{query}"
    return query
