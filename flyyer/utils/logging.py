"""Logging helpers that emit JSON records for URL builds."""
from __future__ import annotations

import json
import logging
import sys
from typing import Any

from ..paths import normalize_path

CONTEXT_ATTRS = ("flavor", "strategy", "tenant", "deck", "template", "project", "path", "error_code")


class JsonFormatter(logging.Formatter):
    """Formatter that renders structured JSON log records."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        for attr in CONTEXT_ATTRS:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging handler once for the process."""
    if level is None:
        from ..config import get_settings

        level = get_settings().log_level
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(handlers=[handler], level=level, force=True)


def bind_build_context(builder: Any) -> dict[str, Any]:
    """Return context dict used to enrich log records emitted during ``href()``."""
    context: dict[str, Any] = {"flavor": type(builder).__name__}
    strategy = getattr(builder, "strategy", None)
    if strategy:
        context["strategy"] = str(getattr(strategy, "value", strategy)).upper()
    for attr in ("tenant", "deck", "template", "project"):
        value = getattr(builder, attr, None)
        if value is not None:
            context[attr] = value
    path = getattr(builder, "path", None)
    if path is not None:
        context["path"] = normalize_path(path)
    return context
