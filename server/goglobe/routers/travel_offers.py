"""Travel offer router."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import AdminOnly, DatabaseSession
from ..core.exceptions import InternalServerError, ProblemDetailsException
from ..repositories.booking_repository import BookingRepository
from ..schemas.booking import Booking
from ..schemas.travel_offer import CreateTravelOfferRequest, TravelOffer, UpdateTravelOfferRequest
from ..services.booking_service import BookingService
from ..services.travel_offer_service import TravelOfferService
from .common import (
    PROBLEM_RESPONSES,
    created_response,
    get_or_404,
    no_content,
    to_list_response,
    to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/travelOffers", tags=["travel offers"], responses=PROBLEM_RESPONSES)


@router.get("", response_model=list[TravelOffer])
async def list_travel_offers(db: AsyncSession = DatabaseSession) -> JSONResponse:
    """List all travel offers with their properties."""
    offers = await TravelOfferService(db).repository.get_all()
    return to_list_response(TravelOffer, offers)


@router.get("/{travel_offer_id}", response_model=TravelOffer)
async def get_travel_offer(travel_offer_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    offer = await get_or_404(TravelOfferService(db).repository, travel_offer_id, "travel offer")
    return to_response(TravelOffer, offer)


@router.get("/{travel_offer_id}/bookings", response_model=list[Booking])
async def list_travel_offer_bookings(
    travel_offer_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """List the bookings made for one travel offer."""
    await get_or_404(TravelOfferService(db).repository, travel_offer_id, "travel offer")
    bookings = await BookingService(BookingRepository(db)).list_bookings_for_travel_offer(travel_offer_id)
    return to_list_response(Booking, bookings)


@router.post("", response_model=TravelOffer, status_code=201)
async def create_travel_offer(
    request: CreateTravelOfferRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """
    Create a travel offer.

    The referenced agency, country, city, hotel and properties must exist.
    """
    try:
        offer = await TravelOfferService(db).create_travel_offer(request)
        return created_response(TravelOffer, offer, location=f"/api/travelOffers/{offer.id}")

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in travel offer creation",
            extra={"agency_id": request.agency_id, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError() from e


@router.put("/{travel_offer_id}", response_model=TravelOffer)
async def update_travel_offer(
    travel_offer_id: int,
    request: UpdateTravelOfferRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """Update the fields present in the body; omitted fields are kept."""
    service = TravelOfferService(db)

    try:
        offer = await get_or_404(service.repository, travel_offer_id, "travel offer")
        offer = await service.update_travel_offer(offer, request)
        return to_response(TravelOffer, offer)

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in travel offer update",
            extra={"travel_offer_id": travel_offer_id, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError() from e


@router.delete("/{travel_offer_id}", status_code=204)
async def delete_travel_offer(
    travel_offer_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    repository = TravelOfferService(db).repository
    await repository.delete(await get_or_404(repository, travel_offer_id, "travel offer"))
    return no_content()
