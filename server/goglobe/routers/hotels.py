"""Hotel and room routers."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import AdminOnly, DatabaseSession
from ..models.hotel import Hotel as HotelModel
from ..models.hotel import Room as RoomModel
from ..repositories.catalog_repositories import HotelRepository, RoomRepository
from ..schemas.hotel import (
    CreateHotelRequest,
    CreateRoomRequest,
    Hotel,
    Room,
    UpdateHotelRequest,
    UpdateRoomRequest,
)
from .common import (
    PROBLEM_RESPONSES,
    create_or_400,
    created_response,
    get_or_404,
    no_content,
    to_list_response,
    to_response,
    update_or_400,
)

hotels_router = APIRouter(prefix="/api/hotels", tags=["hotels"], responses=PROBLEM_RESPONSES)
rooms_router = APIRouter(prefix="/api/rooms", tags=["hotels"], responses=PROBLEM_RESPONSES)


@hotels_router.get("", response_model=list[Hotel])
async def list_hotels(db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_list_response(Hotel, await HotelRepository(db).get_all())


@hotels_router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    """Get a hotel together with its rooms."""
    return to_response(Hotel, await get_or_404(HotelRepository(db), hotel_id, "hotel"))


@hotels_router.get("/{hotel_id}/rooms", response_model=list[Room])
async def list_hotel_rooms(hotel_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    await get_or_404(HotelRepository(db), hotel_id, "hotel")
    return to_list_response(Room, await RoomRepository(db).get_by_hotel(hotel_id))


@hotels_router.post("", response_model=Hotel, status_code=201)
async def create_hotel(
    request: CreateHotelRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    hotel = await create_or_400(HotelRepository(db), HotelModel(**request.model_dump()), "hotel")
    return created_response(Hotel, hotel, location=f"/api/hotels/{hotel.id}")


@hotels_router.put("/{hotel_id}", response_model=Hotel)
async def update_hotel(
    hotel_id: int,
    request: UpdateHotelRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    repository = HotelRepository(db)
    hotel = await get_or_404(repository, hotel_id, "hotel")
    hotel = await update_or_400(repository, hotel, request.changes(), "hotel")
    return to_response(Hotel, hotel)


@hotels_router.delete("/{hotel_id}", status_code=204)
async def delete_hotel(
    hotel_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    """Delete a hotel and its rooms."""
    repository = HotelRepository(db)
    await repository.delete(await get_or_404(repository, hotel_id, "hotel"))
    return no_content()


@rooms_router.get("/{room_id}", response_model=Room)
async def get_room(room_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_response(Room, await get_or_404(RoomRepository(db), room_id, "room"))


@rooms_router.post("", response_model=Room, status_code=201)
async def create_room(
    request: CreateRoomRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    await get_or_404(HotelRepository(db), request.hotel_id, "hotel")
    room = await create_or_400(RoomRepository(db), RoomModel(**request.model_dump()), "room")
    return created_response(Room, room, location=f"/api/rooms/{room.id}")


@rooms_router.put("/{room_id}", response_model=Room)
async def update_room(
    room_id: int,
    request: UpdateRoomRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    repository = RoomRepository(db)
    room = await get_or_404(repository, room_id, "room")
    changes = request.changes()
    if "hotel_id" in changes:
        await get_or_404(HotelRepository(db), changes["hotel_id"], "hotel")
    room = await update_or_400(repository, room, changes, "room")
    return to_response(Room, room)


@rooms_router.delete("/{room_id}", status_code=204)
async def delete_room(
    room_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    repository = RoomRepository(db)
    await repository.delete(await get_or_404(repository, room_id, "room"))
    return no_content()
