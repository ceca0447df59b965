"""Rendering meta options and the cache-buster policy."""
from __future__ import annotations

import time
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from .models import UNDEFINED

Scalar = Union[int, float, str]

META_FIELDS = ("width", "height", "agent", "id", "locale", "resolution")


class MetaOptions(BaseModel):
    """Values the renderer normally infers, forced by the caller.

    ``v`` controls cache busting: leave it unassigned for a fresh timestamp on
    every build, set ``None`` to drop it, or any other value to pin it.
    """

    agent: Optional[str] = None
    locale: Optional[str] = None
    width: Optional[Scalar] = None
    height: Optional[Scalar] = None
    resolution: Optional[Scalar] = None
    id: Optional[Scalar] = None
    v: Optional[Union[bool, int, float, str]] = None

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    def get(self, name: str) -> Any:
        """Return the assigned value of ``name`` or ``UNDEFINED`` if never assigned."""
        if name not in self.model_fields_set:
            return UNDEFINED
        return getattr(self, name)


def cache_buster(v: Any = UNDEFINED) -> Any:
    """Resolve the ``__v`` query value.

    * ``UNDEFINED``: current Unix timestamp in seconds, as a string.
    * ``None``: ``UNDEFINED``, so the key is left out of the query.
    * anything else: returned unchanged.
    """
    if v is UNDEFINED:
        return str(round(time.time()))
    if v is None:
        return UNDEFINED
    return v


def is_equal_meta(ameta: MetaOptions, bmeta: MetaOptions) -> bool:
    """Compare two ``MetaOptions``. Ignores ``v``."""
    for name in META_FIELDS:
        if ameta.get(name) != bmeta.get(name):
            return False
    return True


QUERY_KEYS = (
    ("id", "__id"),
    ("width", "_w"),
    ("height", "_h"),
    ("resolution", "_res"),
    ("agent", "_ua"),
    ("locale", "_loc"),
)

# Routed URLs never carry the locale.
PROJECT_QUERY_KEYS = tuple(pair for pair in QUERY_KEYS if pair[0] != "locale")

TOKEN_KEYS = (
    ("id", "i"),
    ("width", "w"),
    ("height", "h"),
    ("resolution", "r"),
    ("agent", "u"),
    ("locale", "l"),
)


def query_defaults(meta: MetaOptions, keys: tuple[tuple[str, str], ...] = QUERY_KEYS) -> dict[str, Any]:
    """Meta values under their query keys, without ``__v``."""
    return {key: meta.get(name) for name, key in keys}


def token_defaults(meta: MetaOptions) -> dict[str, Any]:
    """Meta values under their short token payload keys."""
    return {key: meta.get(name) for name, key in TOKEN_KEYS}
