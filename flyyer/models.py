"""Domain helpers shared across modules."""
from __future__ import annotations


class Undefined:
    """Marker for a value that is absent, as opposed to ``None`` (null).

    Keys holding it are dropped from query strings and signed payloads.
    """

    _instance: "Undefined | None" = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined()


class FlyyerError(Exception):
    """Base exception raised while building an URL."""

    code = "flyyer_error"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class EmptyConfigurationError(FlyyerError, TypeError):
    """A builder was constructed without any argument."""

    code = "empty_configuration"


class MissingFieldError(FlyyerError, ValueError):
    """A required identifier is absent when the URL is built."""

    code = "missing_field"

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing '{field}' property")
        self.field = field


class ConfigurationError(FlyyerError, ValueError):
    """Signing strategy and secret do not make a valid combination."""

    code = "invalid_configuration"
