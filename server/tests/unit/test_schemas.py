"""Unit tests for request schema rules."""

import pytest
from pydantic import ValidationError

from goglobe.schemas.agency import UpdateAgencyRequest
from goglobe.schemas.hotel import UpdateHotelRequest
from goglobe.schemas.travel_offer import CreateTravelOfferRequest, UpdateTravelOfferRequest


def test_changes_only_include_sent_fields():
    request = UpdateHotelRequest.model_validate({"star_count": 5})

    assert request.changes() == {"star_count": 5}


def test_null_is_ignored_for_required_columns():
    request = UpdateHotelRequest.model_validate({"name": None, "star_count": 2})

    assert request.changes() == {"star_count": 2}


def test_null_clears_nullable_columns():
    request = UpdateAgencyRequest.model_validate({"logo": None})

    assert request.changes() == {"logo": None}


def test_changes_exclude():
    request = UpdateTravelOfferRequest.model_validate({"person_count": 3, "property_ids": [1]})

    assert request.changes(exclude={"property_ids"}) == {"person_count": 3}


def test_create_travel_offer_rejects_return_before_departure():
    with pytest.raises(ValidationError):
        CreateTravelOfferRequest.model_validate({
            "agency_id": 1,
            "country_id": 1,
            "city_id": 1,
            "hotel_id": 1,
            "departure_date": "2030-06-08T08:00:00Z",
            "return_date": "2030-06-01T08:00:00Z",
            "price": "100.00",
        })
