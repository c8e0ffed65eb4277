"""Unit tests for user service."""

import pytest

from goglobe.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from goglobe.core.security import decode_access_token
from goglobe.models.user import UserKind
from goglobe.repositories.user_repository import UserRepository
from goglobe.services.user_service import UserService


@pytest.mark.asyncio
async def test_create_client(test_session):
    service = UserService(UserRepository(test_session))

    user = await service.create_user(
        email="client@goglobe.example.com",
        password="client-password",
        name="Carl",
        surname="Client"
    )

    assert user.id is not None
    assert user.kind == UserKind.CLIENT.value
    assert user.role == "Client"
    assert user.password_hash != "client-password"
    assert user.created_at is not None


@pytest.mark.asyncio
async def test_create_user_duplicate_email(test_session):
    """Emails are unique regardless of case."""
    service = UserService(UserRepository(test_session))
    await service.create_user(email="dup@goglobe.example.com", password="password-1", name="A", surname="B")

    with pytest.raises(ConflictError):
        await service.create_user(email="DUP@goglobe.example.com", password="password-2", name="C", surname="D")


@pytest.mark.asyncio
async def test_authenticate_issues_token_with_role(test_session):
    service = UserService(UserRepository(test_session))
    admin = await service.create_user(
        email="admin@goglobe.example.com",
        password="admin-password",
        name="Ada",
        surname="Admin",
        kind=UserKind.ADMINISTRATOR
    )

    token = await service.authenticate("admin@goglobe.example.com", "admin-password")

    payload = decode_access_token(token)
    assert payload["sub"] == str(admin.id)
    assert payload["roles"] == ["Admin"]


@pytest.mark.asyncio
async def test_authenticate_rejects_unknown_user_and_wrong_password(test_session):
    service = UserService(UserRepository(test_session))
    await service.create_user(email="c@goglobe.example.com", password="right-password", name="C", surname="C")

    with pytest.raises(AuthenticationError):
        await service.authenticate("c@goglobe.example.com", "wrong-password")

    with pytest.raises(AuthenticationError):
        await service.authenticate("nobody@goglobe.example.com", "right-password")


@pytest.mark.asyncio
async def test_get_user_not_found(test_session):
    with pytest.raises(NotFoundError):
        await UserService(UserRepository(test_session)).get_user_or_raise(12345)


@pytest.mark.asyncio
async def test_email_is_stored_lower_cased(test_session):
    repository = UserRepository(test_session)
    service = UserService(repository)

    user = await service.create_user(
        email="Mixed.Case@GoGlobe.Example.com",
        password="mixed-password",
        name="M",
        surname="C"
    )

    assert user.email == "mixed.case@goglobe.example.com"
    assert (await repository.get_by_email("MIXED.case@goglobe.example.COM")).id == user.id
    assert await service.authenticate("Mixed.Case@goglobe.example.com", "mixed-password")
