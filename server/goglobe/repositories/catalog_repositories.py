"""Persistence for the travel catalogue: agencies, places, hotels and offers."""

from typing import Sequence

from sqlalchemy import select

from ..models.agency import Agency
from ..models.hotel import Hotel, Room
from ..models.location import City, Country
from ..models.property import Property
from ..models.travel_offer import TravelOffer
from .base import SqlAlchemyRepository


class AgencyRepository(SqlAlchemyRepository[Agency]):
    model = Agency


class CountryRepository(SqlAlchemyRepository[Country]):
    model = Country


class CityRepository(SqlAlchemyRepository[City]):
    model = City


class HotelRepository(SqlAlchemyRepository[Hotel]):
    model = Hotel


class RoomRepository(SqlAlchemyRepository[Room]):
    model = Room

    async def get_by_hotel(self, hotel_id: int) -> Sequence[Room]:
        stmt = select(Room).where(Room.hotel_id == hotel_id).order_by(Room.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()


class PropertyRepository(SqlAlchemyRepository[Property]):
    model = Property

    async def get_many(self, property_ids: list[int]) -> Sequence[Property]:
        """Get the properties with the given ids; unknown ids are skipped."""
        if not property_ids:
            return []
        stmt = select(Property).where(Property.id.in_(property_ids)).order_by(Property.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()


class TravelOfferRepository(SqlAlchemyRepository[TravelOffer]):
    model = TravelOffer
