"""User persistence."""

from sqlalchemy import select

from ..models.user import User
from .base import SqlAlchemyRepository


class UserRepository(SqlAlchemyRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email, ignoring case; emails are stored lower-cased."""
        stmt = select(User).where(User.email == email.lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
