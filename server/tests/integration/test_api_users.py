"""Integration tests for registration, login and user accounts."""

import pytest


@pytest.mark.asyncio
async def test_register_and_login(test_client):
    registered = await test_client.post(
        "/api/auth/register",
        json={
            "email": "new@goglobe.example.com",
            "password": "long-enough-password",
            "name": "Nina",
            "surname": "New",
            "birth_date": "1995-03-02"
        }
    )
    assert registered.status_code == 201
    user = registered.json()
    assert user["kind"] == "client"
    assert user["role"] == "Client"
    assert "password" not in user
    assert "password_hash" not in user

    login = await test_client.post(
        "/api/auth/login",
        json={"email": "NEW@goglobe.example.com", "password": "long-enough-password"}
    )
    assert login.status_code == 200
    token = login.json()
    assert token["token_type"] == "bearer"

    me = await test_client.get("/api/users/me", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]


@pytest.mark.asyncio
async def test_register_duplicate_email(test_client, client_user):
    response = await test_client.post(
        "/api/auth/register",
        json={"email": client_user.email, "password": "another-password", "name": "Dup", "surname": "User"}
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_register_duplicate_email_in_other_case(test_client, client_user):
    response = await test_client.post(
        "/api/auth/register",
        json={"email": client_user.email.upper(), "password": "another-password", "name": "Dup", "surname": "User"}
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_register_validation(test_client):
    response = await test_client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "short", "name": "", "surname": "X"}
    )

    assert response.status_code == 422
    paths = {violation["path"] for violation in response.json()["violations"]}
    assert {"body.email", "body.password", "body.name"} <= paths


@pytest.mark.asyncio
async def test_login_with_wrong_password(test_client, client_user):
    response = await test_client.post(
        "/api/auth/login",
        json={"email": client_user.email, "password": "not-the-password"}
    )

    assert response.status_code == 401
    assert response.json()["status"] == 401


@pytest.mark.asyncio
async def test_admin_login_grants_admin_role(test_client, admin_user, user_password):
    login = await test_client.post(
        "/api/auth/login",
        json={"email": admin_user.email, "password": user_password}
    )
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    response = await test_client.get("/api/users", headers=headers)

    assert response.status_code == 200
    assert [u["email"] for u in response.json()] == [admin_user.email]


@pytest.mark.asyncio
async def test_admin_creates_administrator(test_client, admin_headers):
    response = await test_client.post(
        "/api/users",
        json={
            "email": "second-admin@goglobe.example.com",
            "password": "admin-password-2",
            "name": "Second",
            "surname": "Admin",
            "kind": "administrator",
            "birth_date": "1980-01-01"
        },
        headers=admin_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["role"] == "Admin"
    assert data["birth_date"] is None


@pytest.mark.asyncio
async def test_user_management_is_admin_only(test_client, client_headers, client_user):
    listed = await test_client.get("/api/users", headers=client_headers)
    fetched = await test_client.get(f"/api/users/{client_user.id}", headers=client_headers)

    assert listed.status_code == 403
    assert fetched.status_code == 403


@pytest.mark.asyncio
@pytest.mark.parametrize("authorization", ["Bearer not-a-jwt", "Basic abc", "Bearer"])
async def test_bad_authorization_header(test_client, authorization):
    response = await test_client.get("/api/users/me", headers={"Authorization": authorization})

    assert response.status_code == 401
