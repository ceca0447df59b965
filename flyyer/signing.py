"""Signature strategies: truncated HMAC digests and compact signed tokens."""
from __future__ import annotations

import hashlib
import hmac
import json
import math
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Union

import jwt

from .models import UNDEFINED, ConfigurationError
from .query import serialize_date

HMAC_LENGTH = 16
JWT_ALGORITHM = "HS256"

STRATEGY_HELP = "Valid options are `HMAC` or `JWT`."
PROJECT_SECRET_HELP = (
    "You can find it in your project in Advanced settings: https://flyyer.io/dashboard/_/projects/_/advanced"
)
DECK_SECRET_HELP = "You can find it in your deck settings: https://flyyer.io/dashboard/_/library/_/latest/manage"


class SignatureStrategy(str, Enum):
    NONE = "NONE"
    HMAC = "HMAC"
    JWT = "JWT"


def _strategy_name(strategy: Union[SignatureStrategy, str, None]) -> str:
    if strategy is None:
        return ""
    if isinstance(strategy, SignatureStrategy):
        return strategy.value
    return str(strategy).strip().upper()


def resolve_strategy(
    strategy: Union[SignatureStrategy, str, None],
    secret: Optional[str],
    secret_help: str = PROJECT_SECRET_HELP,
) -> SignatureStrategy:
    """Validate a strategy/secret pair and return the strategy to sign with."""
    name = _strategy_name(strategy)
    if name == SignatureStrategy.NONE.value:
        name = ""
    if not name and not secret:
        return SignatureStrategy.NONE
    if name and not secret:
        raise ConfigurationError(f"Got `strategy` but missing `secret`. {secret_help}")
    if not name and secret:
        raise ConfigurationError(f"Got `secret` but missing `strategy`. {STRATEGY_HELP}")
    try:
        return SignatureStrategy(name)
    except ValueError:
        raise ConfigurationError(f"Invalid `strategy`. {STRATEGY_HELP}") from None


def _hmac_sha256(data: str, secret: str) -> "hmac.HMAC":
    return hmac.new(secret.encode("utf-8"), data.encode("utf-8"), hashlib.sha256)


def sign_hmac_data(data: str, secret: str) -> str:
    return _hmac_sha256(data, secret).hexdigest()


def sign_hmac(data: str, secret: str) -> str:
    """Only the first 16 hex characters are compared by the renderer."""
    return sign_hmac_data(data, secret)[:HMAC_LENGTH]


def _json_ready(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _json_ready(item) for key, item in value.items() if item is not UNDEFINED}
    if isinstance(value, (list, tuple)):
        return [None if item is UNDEFINED else _json_ready(item) for item in value]
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
        return value
    if isinstance(value, date):
        return serialize_date(value)
    return value


class _PayloadEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        return str(o)


def sign_jwt(data: Dict[str, Any], secret: str) -> str:
    """Encode ``data`` as a compact HS256 token."""
    return jwt.encode(_json_ready(data), secret, algorithm=JWT_ALGORITHM, json_encoder=_PayloadEncoder)


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """Decode the payload of a token without verifying it.

    Raises ``jwt.DecodeError`` for malformed tokens.
    """
    return jwt.decode(token, options={"verify_signature": False})


def verify_jwt_token(token: str, secret: str) -> bool:
    try:
        jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.InvalidTokenError:
        return False
    return True
