"""Integration tests for agencies, places, hotels, properties and travel offers."""

from decimal import Decimal

import pytest


@pytest.mark.asyncio
async def test_catalogue_reads_are_public(test_client, catalogue):
    for path in ("/api/agencies", "/api/countries", "/api/cities", "/api/hotels", "/api/properties", "/api/travelOffers"):
        response = await test_client.get(path)
        assert response.status_code == 200, path
        assert len(response.json()) >= 1, path


@pytest.mark.asyncio
async def test_catalogue_writes_require_admin(test_client, client_headers):
    anonymous = await test_client.post("/api/agencies", json={"name": "Nope"})
    as_client = await test_client.post("/api/agencies", json={"name": "Nope"}, headers=client_headers)

    assert anonymous.status_code == 401
    assert as_client.status_code == 403


@pytest.mark.asyncio
async def test_agency_crud(test_client, admin_headers):
    created = await test_client.post(
        "/api/agencies",
        json={"name": "Blue Lagoon Tours", "address": "1 Main Road", "logo": "https://cdn.test/logo.png"},
        headers=admin_headers
    )
    assert created.status_code == 201
    agency = created.json()
    assert created.headers["Location"] == f"/api/agencies/{agency['id']}"

    renamed = await test_client.put(
        f"/api/agencies/{agency['id']}",
        json={"name": "Blue Lagoon Travel"},
        headers=admin_headers
    )
    assert renamed.status_code == 200
    assert renamed.json() == {**agency, "name": "Blue Lagoon Travel"}

    cleared = await test_client.put(
        f"/api/agencies/{agency['id']}",
        json={"logo": None},
        headers=admin_headers
    )
    assert cleared.json()["logo"] is None
    assert cleared.json()["address"] == "1 Main Road"

    deleted = await test_client.delete(f"/api/agencies/{agency['id']}", headers=admin_headers)
    assert deleted.status_code == 204
    assert (await test_client.get(f"/api/agencies/{agency['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_unknown_agency(test_client, admin_headers):
    response = await test_client.put("/api/agencies/4242", json={"name": "X"}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["resource_id"] == "4242"


@pytest.mark.asyncio
async def test_duplicate_country_is_create_failed(test_client, admin_headers, catalogue):
    response = await test_client.post("/api/countries", json={"name": "Iceland"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["code"] == "CREATE_FAILED"

    countries = await test_client.get("/api/countries")
    assert [c["name"] for c in countries.json()] == ["Iceland"]


@pytest.mark.asyncio
async def test_cities(test_client, admin_headers):
    created = await test_client.post("/api/cities", json={"name": "Akureyri"}, headers=admin_headers)
    assert created.status_code == 201

    city_id = created.json()["id"]
    assert (await test_client.get(f"/api/cities/{city_id}")).json()["name"] == "Akureyri"
    assert (await test_client.delete(f"/api/cities/{city_id}", headers=admin_headers)).status_code == 204
    assert (await test_client.get(f"/api/cities/{city_id}")).status_code == 404


@pytest.mark.asyncio
async def test_hotel_with_rooms(test_client, admin_headers):
    hotel = (await test_client.post(
        "/api/hotels",
        json={"name": "Glacier Inn", "star_count": 3},
        headers=admin_headers
    )).json()
    assert hotel["rooms"] == []

    room = await test_client.post(
        "/api/rooms",
        json={"hotel_id": hotel["id"], "type": "suite"},
        headers=admin_headers
    )
    assert room.status_code == 201

    fetched = (await test_client.get(f"/api/hotels/{hotel['id']}")).json()
    assert [r["type"] for r in fetched["rooms"]] == ["suite"]

    rooms = await test_client.get(f"/api/hotels/{hotel['id']}/rooms")
    assert rooms.json() == fetched["rooms"]


@pytest.mark.asyncio
async def test_room_for_unknown_hotel(test_client, admin_headers):
    response = await test_client.post("/api/rooms", json={"hotel_id": 777, "type": "double"}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["resource_type"] == "hotel"


@pytest.mark.asyncio
async def test_hotel_partial_update_and_validation(test_client, admin_headers, catalogue):
    hotel = catalogue["hotel"]

    updated = await test_client.put(f"/api/hotels/{hotel.id}", json={"star_count": 5}, headers=admin_headers)
    invalid = await test_client.put(f"/api/hotels/{hotel.id}", json={"star_count": 6}, headers=admin_headers)

    assert updated.status_code == 200
    assert updated.json()["name"] == "Aurora Lodge"
    assert updated.json()["star_count"] == 5
    assert len(updated.json()["rooms"]) == 2
    assert invalid.status_code == 422
    assert invalid.json()["violations"][0]["path"] == "body.star_count"


@pytest.mark.asyncio
async def test_delete_hotel_removes_rooms(test_client, admin_headers, catalogue):
    hotel = catalogue["hotel"]
    room_id = hotel.rooms[0].id

    response = await test_client.delete(f"/api/hotels/{hotel.id}", headers=admin_headers)

    assert response.status_code == 204
    assert (await test_client.get(f"/api/rooms/{room_id}")).status_code == 404


@pytest.mark.asyncio
async def test_property_update(test_client, admin_headers, catalogue):
    prop = catalogue["properties"][1]

    response = await test_client.put(
        f"/api/properties/{prop.id}",
        json={"kind": "included"},
        headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json() == {"id": prop.id, "name": "Travel insurance", "kind": "included"}


@pytest.mark.asyncio
async def test_create_travel_offer(test_client, admin_headers, sample_travel_offer_data):
    response = await test_client.post("/api/travelOffers", json=sample_travel_offer_data, headers=admin_headers)

    assert response.status_code == 201
    data = response.json()
    assert Decimal(data["price"]) == Decimal("899.50")
    assert [p["id"] for p in data["properties"]] == sample_travel_offer_data["property_ids"]
    assert response.headers["Location"] == f"/api/travelOffers/{data['id']}"


@pytest.mark.asyncio
async def test_create_travel_offer_with_unknown_references(test_client, admin_headers, sample_travel_offer_data):
    unknown_hotel = await test_client.post(
        "/api/travelOffers",
        json={**sample_travel_offer_data, "hotel_id": 555},
        headers=admin_headers
    )
    unknown_property = await test_client.post(
        "/api/travelOffers",
        json={**sample_travel_offer_data, "property_ids": [555]},
        headers=admin_headers
    )

    assert unknown_hotel.status_code == 404
    assert unknown_hotel.json()["resource_type"] == "hotel"
    assert unknown_property.status_code == 404
    assert unknown_property.json()["resource_type"] == "property"


@pytest.mark.asyncio
async def test_create_travel_offer_with_dates_out_of_order(test_client, admin_headers, sample_travel_offer_data):
    response = await test_client.post(
        "/api/travelOffers",
        json={**sample_travel_offer_data, "return_date": "2030-05-01T08:00:00Z"},
        headers=admin_headers
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_travel_offer_partial_update(test_client, admin_headers, catalogue):
    offer = catalogue["travel_offer"]
    before = (await test_client.get(f"/api/travelOffers/{offer.id}")).json()

    response = await test_client.put(
        f"/api/travelOffers/{offer.id}",
        json={"person_count": 4, "property_ids": []},
        headers=admin_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["person_count"] == 4
    assert data["properties"] == []
    assert data["description"] == before["description"]
    assert data["price"] == before["price"]
    assert data["departure_date"] == before["departure_date"]


@pytest.mark.asyncio
async def test_travel_offer_update_keeps_dates_ordered(test_client, admin_headers, catalogue):
    offer = catalogue["travel_offer"]

    response = await test_client.put(
        f"/api/travelOffers/{offer.id}",
        json={"return_date": "2029-01-01T00:00:00Z"},
        headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["code"] == "UPDATE_FAILED"


@pytest.mark.asyncio
async def test_delete_travel_offer(test_client, admin_headers, catalogue):
    offer = catalogue["travel_offer"]

    response = await test_client.delete(f"/api/travelOffers/{offer.id}", headers=admin_headers)

    assert response.status_code == 204
    assert (await test_client.get(f"/api/travelOffers/{offer.id}")).status_code == 404
    assert (await test_client.get(f"/api/travelOffers/{offer.id}/bookings", headers=admin_headers)).status_code == 404
