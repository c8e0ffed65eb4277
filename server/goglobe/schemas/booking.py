"""Booking-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..models.booking import BookingStatus


class CreateBookingRequest(BaseModel):
    """Request schema for creating a booking; the status is always Confirmed."""

    client_id: int = Field(..., ge=1, description="Client the booking belongs to")
    travel_offer_id: int = Field(..., ge=1, description="Travel offer to book")


class UpdateBookingRequest(BaseModel):
    """Request schema for updating a booking."""

    client_id: int | None = Field(None, ge=1, description="New client, omitted to keep the current one")
    travel_offer_id: int | None = Field(None, ge=1, description="New travel offer, omitted to keep the current one")
    # Range and type are checked by validate_status
    status: Any = Field(..., description="New status: 1 = Pending, 2 = Confirmed, 3 = Cancelled")


class Booking(BaseModel):
    """Booking response schema."""

    id: int = Field(..., description="Booking ID")
    reference: str = Field(..., description="Booking reference code")
    client_id: int = Field(..., description="Client ID")
    travel_offer_id: int = Field(..., description="Travel offer ID")
    status: BookingStatus = Field(..., description="Booking status")
    created_at: datetime = Field(..., description="Booking creation time (ISO 8601)")

    model_config = ConfigDict(from_attributes=True)
