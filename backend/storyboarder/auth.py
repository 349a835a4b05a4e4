"""Bearer JWT authentication middleware and the authorization gate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import jwt
from jose.exceptions import JWTError
from starlette.middleware.base import BaseHTTPMiddleware

from storyboarder.config import get_settings
from storyboarder.errors import ActionError, ErrorCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserIdentity:
    """The authenticated caller, as asserted by the identity provider."""

    id: str
    email: Optional[str] = None


def create_access_token(
    user_id: str,
    email: Optional[str] = None,
    expires_minutes: Optional[int] = None,
) -> str:
    """Issue a signed token for ``user_id`` with the configured secret."""
    settings = get_settings()
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    now = datetime.now(timezone.utc)
    claims = {"sub": user_id, "iat": now, "exp": now + timedelta(minutes=minutes)}
    if email:
        claims["email"] = email
    if settings.JWT_AUDIENCE:
        claims["aud"] = settings.JWT_AUDIENCE
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> UserIdentity:
    """Verify ``token`` and return its identity.

    Raises:
        JWTError: signature, expiry or audience check failed, or no subject.
    """
    settings = get_settings()
    options = {"verify_aud": settings.JWT_AUDIENCE is not None}
    claims = jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        options=options,
    )
    subject = claims.get("sub")
    if not subject:
        raise JWTError("Token has no subject")
    return UserIdentity(id=str(subject), email=claims.get("email"))


def _get_bearer_token(request: Request) -> Optional[str]:
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer "):
        return None
    return auth.split(" ", 1)[1].strip() or None


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Attach the caller's identity to ``request.state.identity``.

    Never rejects a request itself: a missing or invalid token leaves the
    identity as None and the operation's gate answers UNAUTHORIZED.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.identity = None
        token = _get_bearer_token(request)
        if token:
            try:
                request.state.identity = decode_access_token(token)
            except JWTError as exc:
                logger.warning("auth_invalid_token path=%s error=%s", request.url.path, exc)
        return await call_next(request)


def get_identity(request: Request) -> Optional[UserIdentity]:
    """FastAPI dependency: the identity attached by BearerAuthMiddleware, if any."""
    return getattr(request.state, "identity", None)


def require_user(identity: Optional[UserIdentity]) -> UserIdentity:
    """Authorization gate; must run before any store access."""
    if identity is None:
        raise ActionError(
            ErrorCode.UNAUTHORIZED,
            "You must be signed in to perform this action.",
        )
    return identity
