"""Unit tests for password hashing, tokens and role helpers."""

import jwt
import pytest

from goglobe.core.config import settings
from goglobe.core.dependencies import is_admin, is_same_user
from goglobe.core.exceptions import AuthenticationError
from goglobe.core.security import (
    UserRoles,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_verifies():
    password_hash = hash_password("s3cret-pass")

    assert password_hash != "s3cret-pass"
    assert verify_password("s3cret-pass", password_hash)
    assert not verify_password("wrong-pass", password_hash)


def test_access_token_carries_user_and_roles():
    token = create_access_token(user_id=12, email="c@goglobe.example.com", roles=[UserRoles.CLIENT])

    payload = decode_access_token(token)

    assert payload["sub"] == "12"
    assert payload["email"] == "c@goglobe.example.com"
    assert payload["roles"] == ["Client"]
    assert payload["exp"] > payload["iat"]


def test_expired_token_is_rejected():
    token = create_access_token(user_id=1, email="a@goglobe.example.com", roles=[UserRoles.ADMIN], minutes=-1)

    with pytest.raises(AuthenticationError) as exc_info:
        decode_access_token(token)

    assert exc_info.value.status_code == 401


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "1", "roles": ["Admin"]}, "another-secret-key-of-sufficient-size", algorithm=settings.jwt_algorithm)

    with pytest.raises(AuthenticationError):
        decode_access_token(token)


def test_same_user_policy():
    admin = {"user_id": 1, "email": "a@goglobe.example.com", "roles": [UserRoles.ADMIN]}
    client = {"user_id": 5, "email": "c@goglobe.example.com", "roles": [UserRoles.CLIENT]}

    assert is_admin(admin)
    assert not is_admin(client)
    assert is_same_user(admin, 5)
    assert is_same_user(client, 5)
    assert not is_same_user(client, 6)
