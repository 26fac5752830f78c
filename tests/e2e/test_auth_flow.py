"""End-to-end tests for signup, login and session endpoints."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from forum.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def _signup(client, handle="alice_b", display_name="Alice"):
    return client.post(
        "/auth/signup",
        json={
            "handle": handle,
            "display_name": display_name,
            "password": "correct horse",
        },
    )


class TestAuthFlow:
    """End-to-end tests for password authentication."""

    def test_signup_sets_cookie_and_returns_token(self, client):
        # Act
        response = _signup(client)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["user"]["handle"] == "alice_b"
        assert data["user"]["rank"] == "rabbit"
        assert "access_token" in response.cookies

    def test_duplicate_handle_conflicts(self, client):
        # Arrange
        _signup(client)

        # Act
        response = _signup(client, display_name="Other Alice")

        # Assert
        assert response.status_code == 409

    def test_short_password_rejected(self, client):
        response = client.post(
            "/auth/signup",
            json={"handle": "alice_b", "display_name": "Alice", "password": "short"},
        )

        assert response.status_code == 422

    def test_login_with_wrong_password(self, client):
        # Arrange
        _signup(client)

        # Act
        response = client.post(
            "/auth/login", json={"handle": "alice_b", "password": "wrong password"}
        )

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid handle or password"

    def test_me_reports_session_state(self, client):
        # Arrange
        token = _signup(client).json()["token"]

        # Act
        client.cookies.clear()
        anonymous = client.get("/auth/me")
        authenticated = client.get(
            "/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        # Assert
        assert anonymous.status_code == 200
        assert anonymous.json()["authenticated"] is False
        assert authenticated.json()["authenticated"] is True
        assert authenticated.json()["user"]["display_name"] == "Alice"

    def test_profile_requires_auth(self, client):
        response = client.get("/users/me")

        assert response.status_code == 401

    def test_profile_with_invalid_token(self, client):
        response = client.get(
            "/users/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
