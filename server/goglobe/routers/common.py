"""Helpers shared by the resource routers."""

import logging
from typing import Any, Sequence

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from ..core.exceptions import CreateFailedError, NotFoundError, UpdateFailedError
from ..repositories.base import SqlAlchemyRepository
from ..schemas.common import Problem

logger = logging.getLogger(__name__)

PROBLEM_RESPONSES = {
    400: {"model": Problem, "description": "Rejected write"},
    401: {"model": Problem, "description": "Missing or invalid token"},
    403: {"model": Problem, "description": "Role not allowed"},
    404: {"model": Problem, "description": "Resource not found"},
    422: {"model": Problem, "description": "Request validation failed"},
}


def to_response(schema: type[BaseModel], entity: Any, status_code: int = 200, **kwargs) -> JSONResponse:
    """Map an entity to its response schema and wrap it in a JSONResponse."""
    return JSONResponse(
        status_code=status_code,
        content=schema.model_validate(entity).model_dump(mode="json"),
        **kwargs
    )


def to_list_response(schema: type[BaseModel], entities: Sequence[Any]) -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content=[schema.model_validate(entity).model_dump(mode="json") for entity in entities]
    )


def created_response(schema: type[BaseModel], entity: Any, location: str) -> JSONResponse:
    return to_response(
        schema,
        entity,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location}
    )


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def get_or_404(repository: SqlAlchemyRepository, entity_id: int, resource_type: str) -> Any:
    """Fetch an entity by id or raise NotFoundError."""
    entity = await repository.get(entity_id)
    if entity is None:
        logger.warning(
            "Resource not found",
            extra={"resource_type": resource_type, "resource_id": entity_id}
        )
        raise NotFoundError(resource_type=resource_type, resource_id=str(entity_id))
    return entity


async def create_or_400(repository: SqlAlchemyRepository, entity: Any, resource_type: str) -> Any:
    try:
        return await repository.create(entity)
    except SQLAlchemyError as e:
        raise CreateFailedError(resource_type) from e


async def update_or_400(
    repository: SqlAlchemyRepository,
    entity: Any,
    changes: dict[str, Any],
    resource_type: str
) -> Any:
    entity_id = entity.id
    try:
        return await repository.update(entity, changes)
    except SQLAlchemyError as e:
        raise UpdateFailedError(resource_type, resource_id=str(entity_id)) from e
