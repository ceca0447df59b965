"""Equality helpers that ignore the volatile ``__v`` cache-buster."""
from __future__ import annotations

from typing import Any, Callable, Mapping

from .meta import is_equal_meta
from .paths import normalize_path
from .project import Flyyer
from .render import FlyyerRender
from .variables import is_equal_variables

VariablesCompare = Callable[[Mapping[str, Any], Mapping[str, Any]], bool]

RENDER_ATTRS = ("tenant", "deck", "template", "version", "extension", "strategy", "secret")
PROJECT_ATTRS = ("project", "default", "extension", "strategy", "secret")


def is_equal_flyyer_render(
    a: FlyyerRender,
    b: FlyyerRender,
    variables_compare: VariablesCompare = is_equal_variables,
) -> bool:
    """Compare two ``FlyyerRender`` instances. Ignores ``__v``."""
    if a is b:
        return True
    for attr in RENDER_ATTRS:
        if getattr(a, attr) != getattr(b, attr):
            return False
    return is_equal_meta(a.meta, b.meta) and variables_compare(a.variables, b.variables)


def is_equal_flyyer(
    a: Flyyer,
    b: Flyyer,
    variables_compare: VariablesCompare = is_equal_variables,
) -> bool:
    """Compare two ``Flyyer`` instances. Ignores ``__v``; paths are compared normalized."""
    if a is b:
        return True
    for attr in PROJECT_ATTRS:
        if getattr(a, attr) != getattr(b, attr):
            return False
    if normalize_path(a.path) != normalize_path(b.path):
        return False
    return is_equal_meta(a.meta, b.meta) and variables_compare(a.variables, b.variables)
