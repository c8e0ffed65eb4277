"""Repository layer: persistence access per aggregate."""

from .base import SqlAlchemyRepository
from .booking_repository import BookingRepository
from .catalog_repositories import (
    AgencyRepository,
    CityRepository,
    CountryRepository,
    HotelRepository,
    PropertyRepository,
    RoomRepository,
    TravelOfferRepository,
)
from .user_repository import UserRepository

__all__ = [
    "SqlAlchemyRepository",
    "AgencyRepository",
    "BookingRepository",
    "CityRepository",
    "CountryRepository",
    "HotelRepository",
    "PropertyRepository",
    "RoomRepository",
    "TravelOfferRepository",
    "UserRepository",
]
