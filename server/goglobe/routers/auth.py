"""Authentication router: client self-registration and login."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import DatabaseSession
from ..models.user import UserKind
from ..repositories.user_repository import UserRepository
from ..schemas.user import LoginRequest, RegisterRequest, TokenResponse, User
from ..services.user_service import UserService
from .common import PROBLEM_RESPONSES, created_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"], responses=PROBLEM_RESPONSES)


@router.post("/register", response_model=User, status_code=201)
async def register(request: RegisterRequest, db: AsyncSession = DatabaseSession) -> JSONResponse:
    """Register a new client account."""
    user = await UserService(UserRepository(db)).create_user(
        email=request.email,
        password=request.password,
        name=request.name,
        surname=request.surname,
        kind=UserKind.CLIENT,
        birth_date=request.birth_date
    )
    return created_response(User, user, location=f"/api/users/{user.id}")


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, db: AsyncSession = DatabaseSession) -> JSONResponse:
    """Exchange email and password for a bearer token."""
    token = await UserService(UserRepository(db)).authenticate(request.email, request.password)
    return JSONResponse(status_code=200, content=TokenResponse(access_token=token).model_dump())
