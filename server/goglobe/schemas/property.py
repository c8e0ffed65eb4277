"""Travel offer property Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from ..models.property import PropertyKind
from .common import UpdateRequest


class CreatePropertyRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    kind: PropertyKind = Field(..., description="Included in or excluded from the offer price")


class UpdatePropertyRequest(UpdateRequest):
    name: str | None = Field(None, min_length=1, max_length=255)
    kind: PropertyKind | None = None


class Property(BaseModel):
    id: int
    name: str
    kind: PropertyKind

    model_config = ConfigDict(from_attributes=True)
