"""Client-side URL builder for Flyyer rendered images."""

from .compare import is_equal_flyyer, is_equal_flyyer_render
from .config import get_settings  # re-export for convenience
from .meta import MetaOptions, cache_buster, is_equal_meta
from .models import (
    UNDEFINED,
    ConfigurationError,
    EmptyConfigurationError,
    FlyyerError,
    MissingFieldError,
)
from .paths import normalize_path
from .project import Flyyer
from .query import to_query
from .render import FlyyerRender
from .signing import SignatureStrategy, decode_jwt_token, verify_jwt_token
from .variables import is_equal_variables

__all__ = [
    "UNDEFINED",
    "ConfigurationError",
    "EmptyConfigurationError",
    "Flyyer",
    "FlyyerError",
    "FlyyerRender",
    "MetaOptions",
    "MissingFieldError",
    "SignatureStrategy",
    "cache_buster",
    "decode_jwt_token",
    "get_settings",
    "is_equal_flyyer",
    "is_equal_flyyer_render",
    "is_equal_meta",
    "is_equal_variables",
    "normalize_path",
    "to_query",
    "verify_jwt_token",
]
