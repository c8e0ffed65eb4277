"""Booking model definition."""

from datetime import datetime
from enum import IntEnum

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base


class BookingStatus(IntEnum):
    """Booking status enumeration; values are persisted as integers."""
    PENDING = 1
    CONFIRMED = 2
    CANCELLED = 3


class Booking(Base):
    """Booking of a travel offer by a client."""

    __tablename__ = "bookings"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Human-facing reference, unique across all bookings
    reference: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)

    client_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    travel_offer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("travel_offers.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    status: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=BookingStatus.CONFIRMED,
        index=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("status BETWEEN 1 AND 3", name="ck_booking_status_range"),
        CheckConstraint("length(reference) > 0", name="ck_booking_reference_not_empty"),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, reference='{self.reference}', client_id={self.client_id}, "
            f"travel_offer_id={self.travel_offer_id}, status={self.status})>"
        )
