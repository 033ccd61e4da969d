"""API endpoint tests."""


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert data["uptime"] >= 0


def test_root(client):
    """Test API identification endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Markers API"


def test_error_body_is_uniform(client):
    """Test that domain errors render as success=false plus a message."""
    response = client.get("/api/v1/markers/999999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Marker not found"}


def test_schema_validation_error_body(client):
    """Test that schema failures are 422 with details."""
    response = client.post("/api/v1/auth/login", json={"email": "not-an-email"})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed"
    assert isinstance(body["details"], list)


def test_unauthorized_sets_www_authenticate(client):
    """Test that 401 responses advertise the bearer scheme."""
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_single_active_session_scenario(client):
    """Register, log in again, and check the first token is revoked."""
    register = client.post(
        "/api/v1/auth/register",
        json={
            "name": "John Doe",
            "email": "john@example.com",
            "password": "password123",
            "confirm_password": "password123",
        },
    )
    assert register.status_code == 201
    first_token = register.json()["token"]

    login = client.post(
        "/api/v1/auth/login", json={"email": "john@example.com", "password": "password123"}
    )
    assert login.status_code == 200
    second_token = login.json()["token"]
    assert second_token != first_token

    old = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {first_token}"})
    assert old.status_code == 401

    new = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {second_token}"})
    assert new.status_code == 200
    assert new.json()["email"] == "john@example.com"

    wrong_password = client.post(
        "/api/v1/auth/login", json={"email": "john@example.com", "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "wrongpass"}
    )
    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_unknown_path_uses_error_body(client):
    """Test routing 404s render the same body as domain errors."""
    response = client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_wrong_method_uses_error_body(client):
    """Test 405s keep the Allow header and use the uniform body."""
    response = client.patch("/api/v1/markers")
    assert response.status_code == 405
    assert response.json() == {"success": False, "message": "Method Not Allowed"}
    assert "GET" in response.headers["allow"]
