"""Unit tests for booking persistence."""

import pytest
from sqlalchemy.exc import IntegrityError

from goglobe.models.booking import Booking, BookingStatus
from goglobe.repositories.booking_repository import BookingRepository
from goglobe.services.booking_service import BookingService


@pytest.mark.asyncio
async def test_create_and_lookup_by_reference(test_session, client_user, catalogue):
    repository = BookingRepository(test_session)
    offer = catalogue["travel_offer"]

    booking = await repository.create(
        Booking(reference="Ref00000001", client_id=client_user.id, travel_offer_id=offer.id)
    )

    assert booking.id is not None
    assert booking.status == BookingStatus.CONFIRMED
    assert booking.created_at is not None
    assert (await repository.get_by_reference("Ref00000001")).id == booking.id
    assert await repository.get_by_reference("ref00000001") is None


@pytest.mark.asyncio
async def test_duplicate_reference_is_rejected_by_database(test_session, client_user, catalogue):
    repository = BookingRepository(test_session)
    offer_id = catalogue["travel_offer"].id
    await repository.create(Booking(reference="SameRef0001", client_id=client_user.id, travel_offer_id=offer_id))

    with pytest.raises(IntegrityError):
        await repository.create(Booking(reference="SameRef0001", client_id=client_user.id, travel_offer_id=offer_id))

    assert len(await repository.get_all()) == 1


@pytest.mark.asyncio
async def test_service_round_trip(test_session, client_user, other_client, catalogue):
    service = BookingService(BookingRepository(test_session))
    offer_id = catalogue["travel_offer"].id

    first = await service.create_booking(client_user.id, offer_id)
    second = await service.create_booking(other_client.id, offer_id)
    await service.update_booking(second, status=BookingStatus.CANCELLED)

    assert first.reference != second.reference
    assert [b.id for b in await service.list_bookings_for_travel_offer(offer_id)] == [first.id, second.id]
    assert [b.id for b in await service.list_bookings_for_client(client_user.id)] == [first.id]

    stored = await service.get_booking_by_reference_or_raise(second.reference)
    assert stored.status == BookingStatus.CANCELLED

    await service.delete_booking(first)
    assert [b.id for b in await service.list_bookings()] == [second.id]
