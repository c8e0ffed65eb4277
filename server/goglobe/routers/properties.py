"""Travel offer property router."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import AdminOnly, DatabaseSession
from ..models.property import Property as PropertyModel
from ..repositories.catalog_repositories import PropertyRepository
from ..schemas.property import CreatePropertyRequest, Property, UpdatePropertyRequest
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

router = APIRouter(prefix="/api/properties", tags=["properties"], responses=PROBLEM_RESPONSES)


@router.get("", response_model=list[Property])
async def list_properties(db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_list_response(Property, await PropertyRepository(db).get_all())


@router.get("/{property_id}", response_model=Property)
async def get_property(property_id: int, db: AsyncSession = DatabaseSession) -> JSONResponse:
    return to_response(Property, await get_or_404(PropertyRepository(db), property_id, "property"))


@router.post("", response_model=Property, status_code=201)
async def create_property(
    request: CreatePropertyRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    prop = PropertyModel(name=request.name, kind=request.kind.value)
    prop = await create_or_400(PropertyRepository(db), prop, "property")
    return created_response(Property, prop, location=f"/api/properties/{prop.id}")


@router.put("/{property_id}", response_model=Property)
async def update_property(
    property_id: int,
    request: UpdatePropertyRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    repository = PropertyRepository(db)
    prop = await get_or_404(repository, property_id, "property")
    changes = request.changes()
    if "kind" in changes:
        changes["kind"] = changes["kind"].value
    prop = await update_or_400(repository, prop, changes, "property")
    return to_response(Property, prop)


@router.delete("/{property_id}", status_code=204)
async def delete_property(
    property_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> Response:
    repository = PropertyRepository(db)
    await repository.delete(await get_or_404(repository, property_id, "property"))
    return no_content()
