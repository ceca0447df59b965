"""URLs rendered directly from a tenant's deck and template."""
from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from .common import FlyyerCommon, optional
from .config import get_settings
from .meta import MetaOptions, cache_buster, query_defaults, token_defaults
from .models import MissingFieldError
from .query import to_query, to_string
from .signing import DECK_SECRET_HELP, SignatureStrategy, resolve_strategy, sign_hmac, sign_jwt

REQUIRED_FIELDS = ("tenant", "deck", "template")


class FlyyerRender(FlyyerCommon):
    """Builds URLs that render a template directly.

    Required are ``tenant``, ``deck`` and ``template``; ``variables`` set or
    override the template variables.

    >>> FlyyerRender(tenant="flyyer", deck="default", template="main", extension="jpeg",
    ...              variables={"title": "Thanks for reading this"}, meta={"v": None}).href()
    'https://cdn.flyyer.io/r/v2/flyyer/default/main.jpeg?title=Thanks+for+reading+this'
    """

    empty_message: ClassVar[str] = "FlyyerRender constructor must not be empty"

    tenant: Optional[str] = None
    deck: Optional[str] = None
    template: Optional[str] = None
    version: Optional[Union[int, float, str]] = None

    def querystring(self, extra: Optional[Mapping[str, Any]] = None, add_query_prefix: bool = False) -> str:
        defaults = {"__v": cache_buster(self.meta.get("v")), **query_defaults(self.meta)}
        return to_query(self.merge_variables(defaults, extra), add_query_prefix=add_query_prefix)

    def sign(
        self,
        deck: str,
        template: str,
        version: Any,
        extension: Optional[str],
        variables: Dict[str, Any],
        meta: MetaOptions,
        strategy: Union[SignatureStrategy, str, None],
        secret: Optional[str],
    ) -> Optional[str]:
        """Return the signature for the configured strategy, ``None`` when unsigned.

        Override to customise signing. Must be synchronous.
        """
        resolved = resolve_strategy(strategy, secret, DECK_SECRET_HELP)
        if resolved is SignatureStrategy.HMAC:
            data = [
                deck,
                template,
                to_string(version) if version else "",
                extension or "",
                to_query({**query_defaults(meta), **variables}),
            ]
            return sign_hmac("#".join(data), secret)
        if resolved is SignatureStrategy.JWT:
            data = {
                "d": deck,
                "t": template,
                "v": optional(version),
                "e": optional(extension),
                **token_defaults(meta),
                "var": variables,
            }
            return sign_jwt(data, secret)
        return None

    def _suffix(self) -> str:
        if self.version and self.extension:
            return f".{to_string(self.version)}.{self.extension}"
        if self.version:
            return f".{to_string(self.version)}"
        if self.extension:
            return f".{self.extension}"
        return ""

    def build(self) -> str:
        for field in REQUIRED_FIELDS:
            if getattr(self, field) is None:
                raise MissingFieldError(field)

        strategy = resolve_strategy(self.strategy, self.secret, DECK_SECRET_HELP)
        signature = self.ensure_synchronous(
            self.sign(
                self.deck,
                self.template,
                self.version,
                self.extension,
                self.variables,
                self.meta,
                self.strategy,
                self.secret,
            )
        )

        base = get_settings().render_base
        if strategy is SignatureStrategy.JWT:
            query = to_query({"__jwt": signature, "__v": cache_buster(self.meta.get("v"))}, add_query_prefix=True)
            return f"{base}/{self.tenant}{query}"

        query = self.querystring({"__hmac": optional(signature)}, add_query_prefix=True)
        return f"{base}/{self.tenant}/{self.deck}/{self.template}{self._suffix()}{query}"
