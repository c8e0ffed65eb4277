"""Agency Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from .common import UpdateRequest


class CreateAgencyRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Agency name")
    address: str | None = Field(None, max_length=500)
    logo: str | None = Field(None, max_length=1000, description="Logo URL")


class UpdateAgencyRequest(UpdateRequest):
    nullable_fields = frozenset({"address", "logo"})

    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, max_length=500)
    logo: str | None = Field(None, max_length=1000)


class Agency(BaseModel):
    id: int
    name: str
    address: str | None = None
    logo: str | None = None

    model_config = ConfigDict(from_attributes=True)
