"""Template variables: any JSON-like values keyed by string."""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Union

from .models import Undefined

VariableValue = Union[str, int, float, bool, None, date, Undefined, Mapping[str, Any], List[Any]]
FlyyerVariables = Dict[str, Any]


def is_equal_variables(a: Mapping[str, Any], b: Mapping[str, Any]) -> bool:
    """Fast compare of the top-level keys and values of two variable bags."""
    if a is b:
        return True
    if len(a) != len(b):
        return False
    for key, value in a.items():
        if key not in b:
            return False
        if b[key] != value:
            return False
    return True
