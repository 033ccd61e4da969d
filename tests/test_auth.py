"""Authentication API tests."""

import pytest


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "New User",
            "email": "newuser@example.com",
            "password": "password123",
            "confirm_password": "password123",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["email"] == "newuser@example.com"
    assert data["user"]["avatar"] is None
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


def test_register_token_resolves_to_new_user(client):
    """Test the registration token authenticates the registered user."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "New User",
            "email": "newuser@example.com",
            "password": "password123",
            "confirm_password": "password123",
        },
    )
    data = response.json()

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == data["user"]["id"]


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails with 409."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Duplicate",
            "email": auth_headers.email,
            "password": "password123",
            "confirm_password": "password123",
        },
    )
    assert response.status_code == 409
    assert "already exists" in response.json()["message"]


def test_register_password_mismatch(client):
    """Test registration with mismatched passwords fails with 400."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Mismatch",
            "email": "mismatch@example.com",
            "password": "password123",
            "confirm_password": "password124",
        },
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Passwords do not match"


def test_register_validates_input(client):
    """Test malformed registration input is a 422."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "A",
            "email": "invalid-email",
            "password": "123",
            "confirm_password": "123",
        },
    )
    assert response.status_code == 422


def test_register_rejects_unknown_fields(client):
    """Test request bodies with unexpected fields are rejected."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Extra",
            "email": "extra@example.com",
            "password": "password123",
            "confirm_password": "password123",
            "is_admin": True,
        },
    )
    assert response.status_code == 422


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "password123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"]["id"] == auth_headers.user_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


def test_login_unknown_email(client):
    """Test login with an email nobody registered."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "ghost@example.com", "password": "password123"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == auth_headers.email


def test_me_requires_bearer_scheme(client, auth_headers):
    """Test a token outside the Bearer scheme is rejected."""
    response = client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Token {auth_headers.token}"}
    )
    assert response.status_code == 401


def test_me_rejects_garbage_token(client):
    """Test a malformed token is rejected."""
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_logout_revokes_token(client, auth_headers):
    """Test the token stops working after logout."""
    response = client.post("/api/v1/auth/logout", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Logout successful"

    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 401


def test_logout_requires_auth(client):
    """Test logout without a token."""
    response = client.post("/api/v1/auth/logout")
    assert response.status_code == 401


def test_logout_twice(client, auth_headers):
    """Test a repeated logout is rejected as unauthenticated, not a server error."""
    assert client.post("/api/v1/auth/logout", headers=auth_headers).status_code == 200
    assert client.post("/api/v1/auth/logout", headers=auth_headers).status_code == 401


@pytest.mark.parametrize("password", ["pass\u0000word", "é" * 40])
def test_register_rejects_passwords_bcrypt_cannot_hash(client, password):
    """Test NUL characters and passwords over 72 bytes are a 422, not a 500."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": "Edge Case",
            "email": "edge@example.com",
            "password": password,
            "confirm_password": password,
        },
    )
    assert response.status_code == 422
    assert response.json()["success"] is False


def test_login_with_overlong_password_is_401(client, auth_headers):
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "a" * 100}
    )
    assert response.status_code == 401
