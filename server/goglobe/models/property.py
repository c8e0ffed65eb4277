"""Travel offer property model definition."""

from enum import Enum

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base


class PropertyKind(str, Enum):
    """Whether a property is part of the offer price or excluded from it."""
    INCLUDED = "included"
    EXCLUDED = "excluded"


class Property(Base):
    """A feature listed on travel offers, e.g. "Airport transfer"."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    kind: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("kind IN ('included', 'excluded')", name="ck_property_kind"),
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, name='{self.name}', kind='{self.kind}')>"
