"""Password hashing and access token helpers."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from .config import settings
from .exceptions import AuthenticationError


class UserRoles:
    """Role names carried in access tokens."""

    ADMIN = "Admin"
    CLIENT = "Client"


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def create_access_token(*, user_id: int, email: str, roles: list[str], minutes: int | None = None) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: Identifier stored in the ``sub`` claim
        email: User email, informational only
        roles: Role names checked by ``require_roles``
        minutes: Token lifetime; defaults to ``settings.access_token_ttl_minutes``

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    ttl = minutes if minutes is not None else settings.access_token_ttl_minutes
    payload = {
        "sub": str(user_id),
        "email": email,
        "roles": roles,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=ttl)).timestamp()),
    }
    return jwt.encode(payload, settings.bearer_token_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and verify an access token, raising AuthenticationError on failure."""
    try:
        return jwt.decode(
            token,
            settings.bearer_token_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError(detail="Token has expired") from e
    except jwt.PyJWTError as e:
        raise AuthenticationError(detail=f"Token validation failed: {e}") from e
