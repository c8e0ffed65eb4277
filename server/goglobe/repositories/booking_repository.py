"""Booking persistence."""

from typing import Sequence

from sqlalchemy import select

from ..models.booking import Booking
from .base import SqlAlchemyRepository


class BookingRepository(SqlAlchemyRepository[Booking]):
    """Storage collaborator for the booking workflow."""

    model = Booking

    async def get_by_reference(self, reference: str) -> Booking | None:
        """Get booking by its reference code."""
        stmt = select(Booking).where(Booking.reference == reference)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_travel_offer(self, travel_offer_id: int) -> Sequence[Booking]:
        """Get all bookings made for a travel offer."""
        stmt = (
            select(Booking)
            .where(Booking.travel_offer_id == travel_offer_id)
            .order_by(Booking.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_by_client(self, client_id: int) -> Sequence[Booking]:
        """Get all bookings belonging to a client."""
        stmt = (
            select(Booking)
            .where(Booking.client_id == client_id)
            .order_by(Booking.id)
        )
        result = await self.db.execute(stmt)
        return result.scalars().all()
