"""URLs routed through a project and the path of the page being shared."""
from __future__ import annotations

from typing import Any, ClassVar, Mapping, Optional, Union

from .common import FlyyerCommon, optional
from .config import get_settings
from .meta import PROJECT_QUERY_KEYS, cache_buster, query_defaults
from .models import UNDEFINED, MissingFieldError
from .paths import normalize_path
from .query import to_query
from .signing import SignatureStrategy, resolve_strategy, sign_hmac, sign_jwt

NO_SIGNATURE = "_"
EMPTY_PARAMS = "_"


class Flyyer(FlyyerCommon):
    """Builds URLs for a project page.

    Required is ``project``. ``path`` accepts a string, a number or a list of
    parts; ``default`` is the fallback social image (absolute URL preferred).

    >>> Flyyer(project="flyyer-com", path=["products", 1], meta={"v": None}).href()
    'https://cdn.flyyer.io/v2/flyyer-com/_/_/products/1'
    """

    empty_message: ClassVar[str] = "Flyyer constructor must not be empty. Expected object with 'project' property."

    project: Optional[str] = None
    path: Any = None
    default: Optional[str] = None

    def params(self, extra: Optional[Mapping[str, Any]] = None, add_query_prefix: bool = False) -> str:
        defaults = {
            "__v": cache_buster(self.meta.get("v")),
            **query_defaults(self.meta, PROJECT_QUERY_KEYS),
            "_def": optional(self.default),
            "_ext": optional(self.extension),
        }
        return to_query(self.merge_variables(defaults, extra), add_query_prefix=add_query_prefix)

    def sign(
        self,
        project: str,
        path: str,
        params: str,
        strategy: Union[SignatureStrategy, str, None],
        secret: Optional[str],
    ) -> str:
        """Return the signature segment, ``_`` when unsigned.

        ``path`` is already normalized and ``params`` excludes ``__v``. Override
        to customise signing. Must be synchronous.
        """
        resolved = resolve_strategy(strategy, secret)
        if resolved is SignatureStrategy.HMAC:
            return sign_hmac(f"{project}/{path}{params}", secret)
        if resolved is SignatureStrategy.JWT:
            return sign_jwt({"path": path, "params": params}, secret)
        return NO_SIGNATURE

    def build(self) -> str:
        project = self.project
        if project is None:
            raise MissingFieldError("project")

        path = normalize_path(self.path)
        strategy = resolve_strategy(self.strategy, self.secret)
        signature = self.ensure_synchronous(
            self.sign(project, path, self.params({"__v": UNDEFINED}), self.strategy, self.secret)
        )

        base = get_settings().project_base
        if strategy is SignatureStrategy.JWT:
            query = to_query({"__v": cache_buster(self.meta.get("v"))}, add_query_prefix=True)
            return f"{base}/{project}/jwt-{signature}{query}"

        params = self.params() or EMPTY_PARAMS
        return f"{base}/{project}/{signature or NO_SIGNATURE}/{params}/{path}"
