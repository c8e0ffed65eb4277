"""User account router."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import AdminOnly, ClientOrAdmin, DatabaseSession
from ..repositories.booking_repository import BookingRepository
from ..repositories.user_repository import UserRepository
from ..schemas.booking import Booking
from ..schemas.user import CreateUserRequest, User
from ..services.booking_service import BookingService
from ..services.user_service import UserService
from .common import PROBLEM_RESPONSES, created_response, to_list_response, to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"], responses=PROBLEM_RESPONSES)


def _user_service(db: AsyncSession) -> UserService:
    return UserService(UserRepository(db))


@router.get("/me", response_model=User)
async def get_current_account(
    db: AsyncSession = DatabaseSession,
    user: dict = ClientOrAdmin
) -> JSONResponse:
    """Get the account of the authenticated user."""
    account = await _user_service(db).get_user_or_raise(user["user_id"])
    return to_response(User, account)


@router.get("/me/bookings", response_model=list[Booking])
async def list_my_bookings(
    db: AsyncSession = DatabaseSession,
    user: dict = ClientOrAdmin
) -> JSONResponse:
    """List the bookings owned by the authenticated user."""
    bookings = await BookingService(BookingRepository(db)).list_bookings_for_client(user["user_id"])
    return to_list_response(Booking, bookings)


@router.get("", response_model=list[User])
async def list_users(
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    users = await _user_service(db).list_users()
    return to_list_response(User, users)


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    account = await _user_service(db).get_user_or_raise(user_id)
    return to_response(User, account)


@router.post("", response_model=User, status_code=201)
async def create_user(
    request: CreateUserRequest,
    db: AsyncSession = DatabaseSession,
    user: dict = AdminOnly
) -> JSONResponse:
    """Create a client or administrator account."""
    account = await _user_service(db).create_user(
        email=request.email,
        password=request.password,
        name=request.name,
        surname=request.surname,
        kind=request.kind,
        birth_date=request.birth_date
    )
    logger.info(
        "Account created by administrator",
        extra={"user_id": account.id, "created_by": user["user_id"]}
    )
    return created_response(User, account, location=f"/api/users/{account.id}")
