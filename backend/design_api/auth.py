"""Caller identity — decodes the bearer JWT issued by the auth service."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from design_api.config import get_settings
from design_api.errors import NotAuthenticated

USER_ID_CLAIM = "userId"

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Creates a JWT access token carrying the ``userId`` claim."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.jwt_expiry_minutes)
    )
    to_encode = {USER_ID_CLAIM: user_id, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Dependency returning the authenticated caller's user id."""
    if credentials is None:
        raise NotAuthenticated()

    settings = get_settings()
    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        raise NotAuthenticated()

    user_id = payload.get(USER_ID_CLAIM)
    if user_id is None:
        raise NotAuthenticated()
    return str(user_id)
