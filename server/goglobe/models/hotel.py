"""Hotel and room model definitions."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base


class Hotel(Base):
    """Hotel used as accommodation by travel offers."""

    __tablename__ = "hotels"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    star_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Constraints
    __table_args__ = (
        CheckConstraint("star_count >= 0 AND star_count <= 5", name="ck_hotel_star_count_range"),
    )

    # Relationships
    rooms: Mapped[list["Room"]] = relationship(
        "Room",
        back_populates="hotel",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Room.id"
    )

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name='{self.name}', star_count={self.star_count})>"


class Room(Base):
    """Room type offered by a hotel."""

    __tablename__ = "rooms"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    hotel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    type: Mapped[str] = mapped_column(String(64), nullable=False)

    # Relationships
    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="rooms")

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, hotel_id={self.hotel_id}, type='{self.type}')>"
