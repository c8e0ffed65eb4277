"""Country and city model definitions."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base


class Country(Base):
    """Destination country."""

    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Country(id={self.id}, name='{self.name}')>"


class City(Base):
    """Destination city."""

    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<City(id={self.id}, name='{self.name}')>"
