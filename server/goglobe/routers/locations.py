"""Country and city routers."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import AdminOnly, DatabaseSession
from ..models.location import City as CityModel
from ..models.location import Country as CountryModel
from ..repositories.catalog_repositories import CityRepository, CountryRepository
from ..schemas.location import City, Country, CreateCityRequest, CreateCountryRequest
from .common import (
    PROBLEM_RESPONSES,
    create_or_400,
    created_response,
    get_or_404,
    no_content,
    to_list_response,
    to_response,
)

countries_router = APIRouter(prefix="/api/countries", tags=["locations"], responses=PROBLEM_RESPONSES)
cities_router = APIRouter(prefix="/api/cities", tags=["locations"], responses=PROBLEM_RESPONSES)


@countries_router.get("", response_model=list[Country])
async def list_countries(db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_list_response(Country, await CountryRepository(db).get_all())


@countries_router.get("/{country_id}", response_model=Country)
async def get_country(country_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_response(Country, await get_or_404(CountryRepository(db), country_id, "country"))


@countries_router.post("", response_model=Country, status_code=201)
async def create_country(
    request: CreateCountryRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """Create a country; names are unique."""
    country = await create_or_400(CountryRepository(db), CountryModel(name=request.name), "country")
    return created_response(Country, country, location=f"/api/countries/{country.id}")


@countries_router.delete("/{country_id}", status_code=204)
async def delete_country(
    country_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    repository = CountryRepository(db)
    await repository.delete(await get_or_404(repository, country_id, "country"))
    return no_content()


@cities_router.get("", response_model=list[City])
async def list_cities(db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_list_response(City, await CityRepository(db).get_all())


@cities_router.get("/{city_id}", response_model=City)
async def get_city(city_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_response(City, await get_or_404(CityRepository(db), city_id, "city"))


@cities_router.post("", response_model=City, status_code=201)
async def create_city(
    request: CreateCityRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    city = await create_or_400(CityRepository(db), CityModel(name=request.name), "city")
    return created_response(City, city, location=f"/api/cities/{city.id}")


@cities_router.delete("/{city_id}", status_code=204)
async def delete_city(
    city_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    repository = CityRepository(db)
    await repository.delete(await get_or_404(repository, city_id, "city"))
    return no_content()
