"""Country and city Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CreateCountryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)


class Country(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class CreateCityRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)


class City(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
