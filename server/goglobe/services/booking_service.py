"""Booking service: reference assignment, status validation and persistence."""

import logging
import numbers
import secrets
import string
from typing import Any, Sequence

from sqlalchemy.exc import SQLAlchemyError

from ..core.config import settings
from ..core.exceptions import CreateFailedError, NotFoundError, ProblemDetailsException, UpdateFailedError
from ..core.observability import metrics_collector
from ..models.booking import Booking, BookingStatus
from ..repositories.booking_repository import BookingRepository

logger = logging.getLogger(__name__)

REFERENCE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

_system_random = secrets.SystemRandom()


class InvalidStatusError(ProblemDetailsException):
    """Exception when a booking status is outside the known statuses."""

    def __init__(self, status: Any):
        allowed = [member.value for member in BookingStatus]
        super().__init__(
            status_code=400,
            title="Invalid Booking Status",
            detail=f"Booking status {status!r} is not one of {allowed}",
            type_uri="https://goglobe.example.com/problems/invalid-status",
            extensions={
                "code": "INVALID_STATUS",
                "retryable": False,
                "status_value": status if isinstance(status, (int, float, str)) else repr(status),
                "allowed_statuses": allowed,
            },
        )


def generate_reference(length: int | None = None) -> str:
    """
    Generate a candidate booking reference.

    Characters are drawn from A-Z, a-z and 0-9 without repeating a symbol
    within one reference. Uniqueness against stored bookings is not checked.

    Raises:
        ValueError: If ``length`` is outside 1..62
    """
    if length is None:
        length = settings.booking_reference_length
    if not 1 <= length <= len(REFERENCE_ALPHABET):
        raise ValueError(f"Reference length must be between 1 and {len(REFERENCE_ALPHABET)}, got {length}")
    return "".join(_system_random.sample(REFERENCE_ALPHABET, length))


def validate_status(value: Any) -> BookingStatus:
    """
    Return the BookingStatus for ``value`` or raise InvalidStatusError.

    Integers and integer-valued floats in 1..3 are accepted; booleans,
    strings and everything else are rejected.
    """
    if isinstance(value, bool):
        raise InvalidStatusError(value)

    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidStatusError(value)
        value = int(value)

    if not isinstance(value, numbers.Integral):
        raise InvalidStatusError(value)

    try:
        return BookingStatus(int(value))
    except ValueError:
        raise InvalidStatusError(value) from None


class BookingService:
    """Service for booking-related operations."""

    def __init__(self, repository: BookingRepository):
        self.repository = repository

    async def generate_unique_reference(self) -> str:
        """
        Generate references until one is not used by any stored booking.

        Lookup failures propagate to the caller instead of being retried.
        """
        reference = generate_reference()
        while await self.repository.get_by_reference(reference) is not None:
            metrics_collector.record_reference_collision()
            logger.info(
                "Booking reference collision, regenerating",
                extra={"reference": reference}
            )
            reference = generate_reference()
        return reference

    async def create_booking(self, client_id: int, travel_offer_id: int) -> Booking:
        """
        Create a confirmed booking with a fresh reference.

        Args:
            client_id: Booking owner
            travel_offer_id: Booked travel offer

        Returns:
            Created booking entity

        Raises:
            CreateFailedError: If the storage layer rejects the booking
        """
        reference = await self.generate_unique_reference()

        booking = Booking(
            reference=reference,
            client_id=client_id,
            travel_offer_id=travel_offer_id,
            status=BookingStatus.CONFIRMED
        )

        try:
            booking = await self.repository.create(booking)
        except SQLAlchemyError as e:
            logger.error(
                "Booking creation failed",
                extra={
                    "reference": reference,
                    "client_id": client_id,
                    "travel_offer_id": travel_offer_id,
                    "error": str(e)
                }
            )
            raise CreateFailedError("booking") from e

        metrics_collector.record_booking_created()
        logger.info(
            "Booking created successfully",
            extra={
                "booking_id": booking.id,
                "reference": booking.reference,
                "client_id": client_id,
                "travel_offer_id": travel_offer_id
            }
        )

        return booking

    async def update_booking(
        self,
        booking: Booking,
        *,
        status: Any,
        client_id: int | None = None,
        travel_offer_id: int | None = None,
    ) -> Booking:
        """
        Validate the new status and apply the update.

        ``None`` for ``client_id`` or ``travel_offer_id`` keeps the current
        value. Any status may replace any other.

        Raises:
            InvalidStatusError: If ``status`` is not a known status; nothing is changed
            UpdateFailedError: If the storage layer rejects the update
        """
        new_status = validate_status(status)

        changes: dict[str, Any] = {"status": int(new_status)}
        if client_id is not None:
            changes["client_id"] = client_id
        if travel_offer_id is not None:
            changes["travel_offer_id"] = travel_offer_id

        booking_id = booking.id
        previous_status = booking.status

        try:
            booking = await self.repository.update(booking, changes)
        except SQLAlchemyError as e:
            logger.error(
                "Booking update failed",
                extra={"booking_id": booking_id, "error": str(e)}
            )
            raise UpdateFailedError("booking", resource_id=str(booking_id)) from e

        metrics_collector.record_booking_status_update(new_status.name)
        logger.info(
            "Booking updated successfully",
            extra={
                "booking_id": booking_id,
                "previous_status": previous_status,
                "status": int(new_status),
                "changed_fields": sorted(changes)
            }
        )

        return booking

    async def delete_booking(self, booking: Booking) -> None:
        """Delete a booking regardless of its status."""
        booking_id = booking.id
        await self.repository.delete(booking)

        metrics_collector.record_booking_deleted()
        logger.info("Booking deleted", extra={"booking_id": booking_id})

    async def get_booking_or_raise(self, booking_id: int) -> Booking:
        """Get booking by ID or raise NotFoundError."""
        booking = await self.repository.get(booking_id)
        if not booking:
            logger.warning("Booking not found", extra={"booking_id": booking_id})
            raise NotFoundError(resource_type="booking", resource_id=str(booking_id))
        return booking

    async def get_booking_by_reference_or_raise(self, reference: str) -> Booking:
        """Get booking by reference code or raise NotFoundError."""
        booking = await self.repository.get_by_reference(reference)
        if not booking:
            logger.warning("Booking not found", extra={"reference": reference})
            raise NotFoundError(resource_type="booking", resource_id=reference)
        return booking

    async def list_bookings(self) -> Sequence[Booking]:
        return await self.repository.get_all()

    async def list_bookings_for_travel_offer(self, travel_offer_id: int) -> Sequence[Booking]:
        return await self.repository.get_by_travel_offer(travel_offer_id)

    async def list_bookings_for_client(self, client_id: int) -> Sequence[Booking]:
        return await self.repository.get_by_client(client_id)
