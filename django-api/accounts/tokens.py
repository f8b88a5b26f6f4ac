"""Token service: signed identity assertions carrying ``{id, email}``."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings

from accounts.errors import InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Verified caller identity, set as ``request.user`` by the API layer."""

    id: int
    email: str

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_anonymous(self) -> bool:
        return False


def issue_token(claims: dict[str, Any], expires_in: int | None = None) -> str:
    """Sign ``claims`` (at least ``id`` and ``email``) into a JWT.

    Args:
        claims: Payload values to embed.
        expires_in: Lifetime in seconds, defaults to settings.JWT_EXPIRES_IN.
    """
    now = datetime.now(timezone.utc)
    lifetime = settings.JWT_EXPIRES_IN if expires_in is None else expires_in
    payload = {
        "id": claims["id"],
        "email": claims["email"],
        "iat": now,
        "exp": now + timedelta(seconds=lifetime),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> Identity:
    """Validate a JWT and return the identity it asserts.

    Raises:
        InvalidTokenError: If the token is expired, forged, malformed or
            carries no usable identity.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "id"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise InvalidTokenError("expired") from exc
    except jwt.InvalidTokenError as exc:
        logger.debug("rejected token: %s", exc)
        raise InvalidTokenError("invalid") from exc

    user_id = payload.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
        raise InvalidTokenError("missing identity")
    return Identity(id=user_id, email=str(payload.get("email") or ""))
