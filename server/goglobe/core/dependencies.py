"""FastAPI dependencies for database sessions and authentication."""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_async_session
from .exceptions import AuthenticationError, AuthorizationError
from .security import UserRoles, decode_access_token


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Database dependency that provides async database sessions.

    Yields:
        AsyncSession: Database session
    """
    async for session in get_async_session():
        yield session


async def get_current_user(
    authorization: Optional[str] = Header(None, alias="Authorization")
) -> dict:
    """
    Authentication dependency that validates Bearer tokens.

    Args:
        authorization: Authorization header with Bearer token

    Returns:
        dict: User information from validated token

    Raises:
        AuthenticationError: If token is invalid or missing
    """
    if not authorization:
        raise AuthenticationError(detail="Authorization header missing")

    try:
        scheme, token = authorization.split()
    except ValueError:
        raise AuthenticationError(detail="Invalid authorization header format")

    if scheme.lower() != "bearer":
        raise AuthenticationError(detail="Invalid authentication scheme")

    payload = decode_access_token(token)

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise AuthenticationError(detail="Invalid token payload")

    return {
        "user_id": int(subject),
        "email": payload.get("email"),
        "roles": payload.get("roles", []),
    }


def require_roles(*required: str):
    """Build a dependency that admits users holding any of ``required`` roles."""

    async def _dependency(user: dict = Depends(get_current_user)) -> dict:
        if not set(user["roles"]).intersection(required):
            raise AuthorizationError(required_roles=list(required))
        return user

    return _dependency


def is_admin(user: dict) -> bool:
    return UserRoles.ADMIN in user["roles"]


def is_same_user(user: dict, client_id: int) -> bool:
    """Administrators may act on any client's data; clients only on their own."""
    return is_admin(user) or user["user_id"] == client_id


DatabaseSession = Depends(get_db)
AdminOnly = Depends(require_roles(UserRoles.ADMIN))
ClientOrAdmin = Depends(require_roles(UserRoles.CLIENT, UserRoles.ADMIN))
