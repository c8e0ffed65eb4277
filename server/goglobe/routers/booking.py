"""Booking router for booking operations."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import AdminOnly, ClientOrAdmin, DatabaseSession, is_same_user
from ..core.exceptions import InternalServerError, NotFoundError, ProblemDetailsException
from ..models.booking import Booking as BookingModel
from ..models.user import UserKind
from ..repositories.booking_repository import BookingRepository
from ..repositories.catalog_repositories import TravelOfferRepository
from ..repositories.user_repository import UserRepository
from ..schemas.booking import Booking, CreateBookingRequest, UpdateBookingRequest
from ..services.booking_service import BookingService
from .common import (
    PROBLEM_RESPONSES,
    created_response,
    get_or_404,
    no_content,
    to_list_response,
    to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["bookings"], responses=PROBLEM_RESPONSES)


def _booking_service(db: AsyncSession) -> BookingService:
    return BookingService(BookingRepository(db))


def _ensure_visible(user: dict, booking: BookingModel) -> None:
    """Hide bookings of other clients behind a 404."""
    if not is_same_user(user, booking.client_id):
        logger.warning(
            "Booking access denied for user",
            extra={"booking_id": booking.id, "user_id": user["user_id"]}
        )
        raise NotFoundError(resource_type="booking", resource_id=str(booking.id))


async def _check_client(db: AsyncSession, client_id: int) -> None:
    client = await UserRepository(db).get(client_id)
    if client is None or client.kind != UserKind.CLIENT.value:
        raise NotFoundError(resource_type="client", resource_id=str(client_id))


@router.get("", response_model=list[Booking])
async def list_bookings(
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """List every booking."""
    bookings = await _booking_service(db).list_bookings()
    return to_list_response(Booking, bookings)


@router.get("/{booking_id}", response_model=Booking)
async def get_booking(
    booking_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = ClientOrAdmin
) -> JSONResponse:
    """
    Get booking details.

    Clients only see their own bookings.
    """
    booking = await _booking_service(db).get_booking_or_raise(booking_id)
    _ensure_visible(user, booking)
    return to_response(Booking, booking)


@router.get("/referenceNumber/{reference}", response_model=Booking)
async def get_booking_by_reference(
    reference: str,
    db: AsyncSession = DatabaseSession,
    user: dict = ClientOrAdmin
) -> JSONResponse:
    """Get booking details by reference code."""
    booking = await _booking_service(db).get_booking_by_reference_or_raise(reference)
    _ensure_visible(user, booking)
    return to_response(Booking, booking)


@router.post("", response_model=Booking, status_code=201)
async def create_booking(
    request: CreateBookingRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = ClientOrAdmin
) -> JSONResponse:
    """
    Book a travel offer.

    The booking gets a fresh reference code and is always Confirmed.
    Clients may only book for themselves.
    """
    if not is_same_user(user, request.client_id):
        logger.warning(
            "Client attempted to book for another client",
            extra={"user_id": user["user_id"], "client_id": request.client_id}
        )
        raise NotFoundError(resource_type="client", resource_id=str(request.client_id))

    try:
        await _check_client(db, request.client_id)
        await get_or_404(TravelOfferRepository(db), request.travel_offer_id, "travel offer")

        booking = await _booking_service(db).create_booking(
            client_id=request.client_id,
            travel_offer_id=request.travel_offer_id
        )
        return created_response(Booking, booking, location=f"/api/bookings/{booking.id}")

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in booking creation",
            extra={
                "client_id": request.client_id,
                "travel_offer_id": request.travel_offer_id,
                "error": str(e)
            },
            exc_info=True
        )
        raise InternalServerError() from e


@router.put("/{booking_id}", response_model=Booking)
async def update_booking(
    booking_id: int,
    request: UpdateBookingRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """Change a booking's status and, optionally, its client or travel offer."""
    service = _booking_service(db)

    try:
        booking = await service.get_booking_or_raise(booking_id)

        if request.client_id is not None:
            await _check_client(db, request.client_id)
        if request.travel_offer_id is not None:
            await get_or_404(TravelOfferRepository(db), request.travel_offer_id, "travel offer")

        booking = await service.update_booking(
            booking,
            status=request.status,
            client_id=request.client_id,
            travel_offer_id=request.travel_offer_id
        )
        return to_response(Booking, booking)

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in booking update",
            extra={"booking_id": booking_id, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError() from e


@router.delete("/{booking_id}", status_code=204)
async def delete_booking(
    booking_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    """Delete a booking in any status."""
    service = _booking_service(db)
    booking = await service.get_booking_or_raise(booking_id)
    await service.delete_booking(booking)
    return no_content()
