"""Utility helpers package."""

from .logging import bind_build_context, configure_logging

__all__ = ["bind_build_context", "configure_logging"]
