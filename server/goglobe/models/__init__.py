"""Models module exporting all database models."""

from .agency import Agency
from .booking import Booking, BookingStatus
from .hotel import Hotel, Room
from .location import City, Country
from .property import Property, PropertyKind
from .travel_offer import TravelOffer, travel_properties
from .user import User, UserKind

__all__ = [
    # Catalogue entities
    "Agency",
    "Country",
    "City",
    "Hotel",
    "Room",
    "Property",
    "PropertyKind",
    "TravelOffer",
    "travel_properties",

    # Booking entities
    "Booking",
    "BookingStatus",

    # Accounts
    "User",
    "UserKind",
]
