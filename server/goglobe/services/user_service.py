"""User service: registration, login and account management."""

import logging
from datetime import date
from typing import Sequence

from sqlalchemy.exc import IntegrityError

from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError
from ..core.security import create_access_token, hash_password, verify_password
from ..models.user import User, UserKind
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related operations."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create_user(
        self,
        *,
        email: str,
        password: str,
        name: str,
        surname: str,
        kind: UserKind = UserKind.CLIENT,
        birth_date: date | None = None,
    ) -> User:
        """
        Create a user account.

        Raises:
            ConflictError: If the email is already registered
        """
        # Stored lower-cased; the unique index on users.email is case-sensitive
        email = email.lower()
        existing_user = await self.repository.get_by_email(email)
        if existing_user:
            logger.warning(
                "User creation failed - email already registered",
                extra={"email": email, "existing_user_id": existing_user.id}
            )
            raise ConflictError(
                detail=f"A user with email '{email}' already exists",
                conflicting_resource={"id": existing_user.id, "email": existing_user.email}
            )

        user = User(
            email=email,
            name=name,
            surname=surname,
            password_hash=hash_password(password),
            kind=kind.value,
            birth_date=birth_date if kind is UserKind.CLIENT else None
        )

        try:
            user = await self.repository.create(user)
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email
            raise ConflictError(detail=f"A user with email '{email}' already exists") from e

        logger.info(
            "User created successfully",
            extra={"user_id": user.id, "kind": user.kind}
        )
        return user

    async def authenticate(self, email: str, password: str) -> str:
        """
        Verify credentials and issue an access token.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = await self.repository.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Login failed", extra={"email": email})
            raise AuthenticationError(detail="Invalid email or password")

        logger.info("Login succeeded", extra={"user_id": user.id})
        return create_access_token(user_id=user.id, email=user.email, roles=[user.role])

    async def get_user_or_raise(self, user_id: int) -> User:
        user = await self.repository.get(user_id)
        if not user:
            raise NotFoundError(resource_type="user", resource_id=str(user_id))
        return user

    async def list_users(self) -> Sequence[User]:
        return await self.repository.get_all()
