"""Path normalization for routed URLs."""
from __future__ import annotations

import math
from typing import Any, List, Sequence, Union

from .query import to_string

PathPart = Union[str, int, float, None]
FlyyerPath = Union[PathPart, Sequence[PathPart]]


def _keep(part: Any) -> bool:
    # Falsy parts are dropped, except the number zero.
    if part is None or isinstance(part, bool):
        return bool(part)
    if isinstance(part, float) and math.isnan(part):
        return False
    if isinstance(part, (int, float)):
        return True
    return bool(part)


def normalize_path(path: FlyyerPath = None) -> str:
    """Convert a path or a list of path parts to a ``/``-joined relative path.

    >>> normalize_path(["/dashboard/", None, "company"])
    'dashboard/company'
    """
    parts: List[Any] = list(path) if isinstance(path, (list, tuple)) else [path]
    return "/".join(to_string(part).strip("/") for part in parts if _keep(part))
