"""Travel offer service for catalogue operations."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import CreateFailedError, NotFoundError, UpdateFailedError
from ..models.property import Property
from ..models.travel_offer import TravelOffer
from ..repositories.catalog_repositories import (
    AgencyRepository,
    CityRepository,
    CountryRepository,
    HotelRepository,
    PropertyRepository,
    TravelOfferRepository,
)
from ..schemas.travel_offer import CreateTravelOfferRequest, UpdateTravelOfferRequest

logger = logging.getLogger(__name__)


class TravelOfferService:
    """Service for travel offer operations."""

    def __init__(self, db: AsyncSession):
        self.repository = TravelOfferRepository(db)
        self.properties = PropertyRepository(db)
        self._references = {
            "agency_id": ("agency", AgencyRepository(db)),
            "country_id": ("country", CountryRepository(db)),
            "city_id": ("city", CityRepository(db)),
            "hotel_id": ("hotel", HotelRepository(db)),
        }

    async def _check_references(self, values: dict[str, Any]) -> None:
        """Raise NotFoundError for the first referenced entity that does not exist."""
        for field, (resource_type, repository) in self._references.items():
            if field in values and await repository.get(values[field]) is None:
                raise NotFoundError(resource_type=resource_type, resource_id=str(values[field]))

    async def _resolve_properties(self, property_ids: list[int]) -> list[Property]:
        properties = list(await self.properties.get_many(property_ids))
        missing = sorted(set(property_ids) - {prop.id for prop in properties})
        if missing:
            raise NotFoundError(resource_type="property", resource_id=",".join(map(str, missing)))
        return properties

    async def create_travel_offer(self, request: CreateTravelOfferRequest) -> TravelOffer:
        """
        Create a travel offer.

        Raises:
            NotFoundError: If a referenced agency, place, hotel or property is missing
            CreateFailedError: If the storage layer rejects the offer
        """
        values = request.model_dump(exclude={"property_ids"})
        await self._check_references(values)
        properties = await self._resolve_properties(request.property_ids)

        offer = TravelOffer(**values, properties=properties)
        try:
            offer = await self.repository.create(offer)
        except SQLAlchemyError as e:
            raise CreateFailedError("travel offer") from e

        logger.info(
            "Travel offer created successfully",
            extra={
                "travel_offer_id": offer.id,
                "agency_id": offer.agency_id,
                "property_count": len(properties)
            }
        )
        return offer

    async def update_travel_offer(self, offer: TravelOffer, request: UpdateTravelOfferRequest) -> TravelOffer:
        """
        Apply the fields present in ``request`` to ``offer``.

        Raises:
            NotFoundError: If a newly referenced entity is missing
            UpdateFailedError: If the resulting dates are out of order or storage rejects the update
        """
        changes = request.changes(exclude={"property_ids"})
        await self._check_references(changes)
        if request.property_ids is not None:
            changes["properties"] = await self._resolve_properties(request.property_ids)

        departure = changes.get("departure_date", offer.departure_date)
        return_date = changes.get("return_date", offer.return_date)
        if _as_naive(return_date) < _as_naive(departure):
            raise UpdateFailedError(
                "travel offer",
                resource_id=str(offer.id),
                detail="return_date must not precede departure_date"
            )

        offer_id = offer.id
        try:
            offer = await self.repository.update(offer, changes)
        except SQLAlchemyError as e:
            raise UpdateFailedError("travel offer", resource_id=str(offer_id)) from e

        logger.info(
            "Travel offer updated successfully",
            extra={"travel_offer_id": offer_id, "changed_fields": sorted(changes)}
        )
        return offer


def _as_naive(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; aware values are compared in UTC
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
