"""Service layer package."""

from .booking_service import BookingService, InvalidStatusError, generate_reference, validate_status
from .travel_offer_service import TravelOfferService
from .user_service import UserService

__all__ = [
    "BookingService",
    "InvalidStatusError",
    "TravelOfferService",
    "UserService",
    "generate_reference",
    "validate_status",
]
