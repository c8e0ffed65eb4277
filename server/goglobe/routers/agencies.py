"""Agency router."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import AdminOnly, DatabaseSession
from ..models.agency import Agency as AgencyModel
from ..repositories.catalog_repositories import AgencyRepository
from ..schemas.agency import Agency, CreateAgencyRequest, UpdateAgencyRequest
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

router = APIRouter(prefix="/api/agencies", tags=["agencies"], responses=PROBLEM_RESPONSES)


@router.get("", response_model=list[Agency])
async def list_agencies(db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_list_response(Agency, await AgencyRepository(db).get_all())


@router.get("/{agency_id}", response_model=Agency)
async def get_agency(agency_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    agency = await get_or_404(AgencyRepository(db), agency_id, "agency")
    return to_response(Agency, agency)


@router.post("", response_model=Agency, status_code=201)
async def create_agency(
    request: CreateAgencyRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    agency = await create_or_400(AgencyRepository(db), AgencyModel(**request.model_dump()), "agency")
    return created_response(Agency, agency, location=f"/api/agencies/{agency.id}")


@router.put("/{agency_id}", response_model=Agency)
async def update_agency(
    agency_id: int,
    request: UpdateAgencyRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """Update the fields present in the body; omitted fields are kept."""
    repository = AgencyRepository(db)
    agency = await get_or_404(repository, agency_id, "agency")
    agency = await update_or_400(repository, agency, request.changes(), "agency")
    return to_response(Agency, agency)


@router.delete("/{agency_id}", status_code=204)
async def delete_agency(
    agency_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    repository = AgencyRepository(db)
    await repository.delete(await get_or_404(repository, agency_id, "agency"))
    return no_content()
