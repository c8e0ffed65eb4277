"""User and authentication Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..models.user import UserKind


class RegisterRequest(BaseModel):
    """Request schema for client self-registration."""

    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=8, max_length=128, description="Plain-text password")
    name: str = Field(..., min_length=1, max_length=128)
    surname: str = Field(..., min_length=1, max_length=128)
    birth_date: date | None = Field(None, description="Client birth date")


class CreateUserRequest(RegisterRequest):
    """Request schema for administrators creating accounts of any kind."""

    kind: UserKind = Field(UserKind.CLIENT, description="Account variant")


class LoginRequest(BaseModel):
    """Request schema for logging in."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Issued access token."""

    access_token: str
    token_type: str = "bearer"


class User(BaseModel):
    """User response schema; never carries the password hash."""

    id: int
    email: str
    name: str
    surname: str
    kind: UserKind
    role: str = Field(..., description="Authorization role derived from kind")
    birth_date: date | None = None

    model_config = ConfigDict(from_attributes=True)
