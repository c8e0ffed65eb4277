"""Hotel and room Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .common import UpdateRequest


class CreateRoomRequest(BaseModel):
    hotel_id: int = Field(..., ge=1, description="Hotel the room belongs to")
    type: str = Field(..., min_length=1, max_length=64, description="Room type, e.g. 'double'")


class UpdateRoomRequest(UpdateRequest):
    hotel_id: int | None = Field(None, ge=1)
    type: str | None = Field(None, min_length=1, max_length=64)


class Room(BaseModel):
    id: int
    hotel_id: int
    type: str

    model_config = ConfigDict(from_attributes=True)


class CreateHotelRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    star_count: int = Field(0, ge=0, le=5)


class UpdateHotelRequest(UpdateRequest):
    name: str | None = Field(None, min_length=1, max_length=255)
    star_count: int | None = Field(None, ge=0, le=5)


class Hotel(BaseModel):
    id: int
    name: str
    star_count: int
    rooms: list[Room] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
