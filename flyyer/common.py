"""Fields and behaviour shared by both URL builders."""
from __future__ import annotations

import inspect
import logging
from abc import abstractmethod
from typing import Any, ClassVar, Dict, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .meta import MetaOptions, cache_buster
from .models import UNDEFINED, ConfigurationError, EmptyConfigurationError, FlyyerError
from .signing import SignatureStrategy
from .utils.logging import bind_build_context
from .variables import FlyyerVariables

logger = logging.getLogger(__name__)

FlyyerT = TypeVar("FlyyerT", bound="FlyyerCommon")


def optional(value: Any) -> Any:
    """Map ``None`` configuration attributes to ``UNDEFINED``."""
    return UNDEFINED if value is None else value


class FlyyerCommon(BaseModel):
    """Base model for the builders. Construction never validates identifiers or
    the strategy/secret pair; ``href()`` does."""

    empty_message: ClassVar[str] = "constructor must not be empty"

    extension: Optional[str] = None
    variables: FlyyerVariables = Field(default_factory=dict)
    meta: MetaOptions = Field(default_factory=MetaOptions)
    secret: Optional[str] = None
    strategy: Optional[Union[SignatureStrategy, str]] = None

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    def __init__(self, **data: Any) -> None:
        if not data:
            raise EmptyConfigurationError(self.empty_message)
        super().__init__(**data)

    @field_validator("variables", "meta", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def clone(self: FlyyerT, **changes: Any) -> FlyyerT:
        """Return a new instance with ``changes`` applied.

        ``meta`` is copied one level deep. **``variables`` is shared** with the
        original, so mutating nested values affects both instances.
        """
        duplicate = self.model_copy(update={"meta": self.meta.model_copy()})
        for name, value in changes.items():
            setattr(duplicate, name, value)
        return duplicate

    def merge_variables(self, defaults: Mapping[str, Any], extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Overlay caller variables and ``extra`` on top of the reserved defaults."""
        merged = dict(defaults)
        merged.update(self.variables)
        if self.variables.get("__v", None) is UNDEFINED:
            merged["__v"] = cache_buster()
        if extra:
            merged.update(extra)
        return merged

    def ensure_synchronous(self, signature: Any) -> Any:
        if inspect.isawaitable(signature):
            if inspect.iscoroutine(signature):
                signature.close()
            raise ConfigurationError("`sign` must be synchronous (no awaitable allowed)")
        return signature

    @abstractmethod
    def build(self) -> str:
        """Assemble the URL. Subclasses implement the flavor specific layout."""

    def href(self) -> str:
        """Generate the final URL, e.g. for an ``og:image`` meta tag."""
        context = bind_build_context(self)
        try:
            url = self.build()
        except FlyyerError as exc:
            logger.warning("build failed: %s", exc.message, extra={**context, "error_code": exc.code})
            raise
        logger.debug("built url", extra=context)
        return url

    def __str__(self) -> str:
        return self.href()
