"""Travel offer Pydantic schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .common import UpdateRequest
from .property import Property


class CreateTravelOfferRequest(BaseModel):
    """Request schema for creating a travel offer."""

    agency_id: int = Field(..., ge=1)
    country_id: int = Field(..., ge=1)
    city_id: int = Field(..., ge=1)
    hotel_id: int = Field(..., ge=1)
    description: str | None = Field(None, max_length=4000)
    departure_date: datetime = Field(..., description="Departure time (ISO 8601)")
    return_date: datetime = Field(..., description="Return time (ISO 8601)")
    person_count: int = Field(1, ge=1, le=100)
    price: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    is_feeding_included: bool = False
    property_ids: list[int] = Field(default_factory=list, description="Included/excluded properties")

    @model_validator(mode="after")
    def check_dates(self) -> "CreateTravelOfferRequest":
        if self.return_date < self.departure_date:
            raise ValueError("return_date must not precede departure_date")
        return self


class UpdateTravelOfferRequest(UpdateRequest):
    """Request schema for partially updating a travel offer."""

    nullable_fields = frozenset({"description"})

    agency_id: int | None = Field(None, ge=1)
    country_id: int | None = Field(None, ge=1)
    city_id: int | None = Field(None, ge=1)
    hotel_id: int | None = Field(None, ge=1)
    description: str | None = Field(None, max_length=4000)
    departure_date: datetime | None = None
    return_date: datetime | None = None
    person_count: int | None = Field(None, ge=1, le=100)
    price: Decimal | None = Field(None, ge=0, max_digits=18, decimal_places=2)
    is_feeding_included: bool | None = None
    property_ids: list[int] | None = None


class TravelOffer(BaseModel):
    """Travel offer response schema."""

    id: int
    agency_id: int
    country_id: int
    city_id: int
    hotel_id: int
    description: str | None = None
    departure_date: datetime
    return_date: datetime
    person_count: int
    price: Decimal
    is_feeding_included: bool
    properties: list[Property] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
