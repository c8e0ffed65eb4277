"""User model definition."""

from datetime import date, datetime
from enum import Enum

from sqlalchemy import CheckConstraint, Date, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base
from ..core.security import UserRoles


class UserKind(str, Enum):
    """Variant tag for users sharing the ``users`` table."""
    CLIENT = "client"
    ADMINISTRATOR = "administrator"

    @property
    def role(self) -> str:
        """Authorization role granted to this kind of user."""
        return UserRoles.ADMIN if self is UserKind.ADMINISTRATOR else UserRoles.CLIENT


class User(Base):
    """Account of a client or an administrator."""

    __tablename__ = "users"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    surname: Mapped[str] = mapped_column(String(128), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    kind: Mapped[str] = mapped_column(String(20), nullable=False, default=UserKind.CLIENT.value, index=True)

    # Client variant only
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("kind IN ('client', 'administrator')", name="ck_user_kind"),
        CheckConstraint(
            "kind = 'client' OR birth_date IS NULL",
            name="ck_user_birth_date_clients_only"
        ),
    )

    @property
    def role(self) -> str:
        return UserKind(self.kind).role

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', kind='{self.kind}')>"
