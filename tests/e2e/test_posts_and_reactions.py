"""End-to-end tests for posts, comments and reactions."""

import warnings
from uuid import uuid4

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
    client = TestClient(app_instance)
    yield client
    client.cookies.clear()


def _auth(client, handle: str, display_name: str) -> dict[str, str]:
    response = client.post(
        "/auth/signup",
        json={
            "handle": handle,
            "display_name": display_name,
            "password": "correct horse",
        },
    )
    assert response.status_code == 201
    # Rely on the Authorization header so requests are attributed explicitly
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['token']}"}


def _create_post(client, headers, title="Hello", image=None):
    files = {"image": image} if image else None
    return client.post(
        "/posts",
        data={"title": title, "body": "First post"},
        files=files,
        headers=headers,
    )


class TestPosts:
    """End-to-end tests for post endpoints."""

    def test_create_post_requires_auth(self, client):
        response = client.post("/posts", data={"title": "Hi", "body": "There"})

        assert response.status_code == 401

    def test_create_post_with_image(self, client):
        # Arrange
        headers = _auth(client, "alice_b", "Alice")

        # Act
        response = _create_post(
            client, headers, image=("cat.png", b"\x89PNG fake", "image/png")
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["image_url"].endswith(".png")
        assert data["author"]["points"] == 3

    def test_non_image_upload_rejected(self, client):
        # Arrange
        headers = _auth(client, "alice_b", "Alice")

        # Act
        response = _create_post(
            client, headers, image=("notes.txt", b"hello", "text/plain")
        )

        # Assert
        assert response.status_code == 422

    def test_missing_post_is_404(self, client):
        response = client.get(f"/posts/{uuid4()}")

        assert response.status_code == 404

    def test_malformed_post_id_is_422(self, client):
        response = client.get("/posts/not-a-uuid")

        assert response.status_code == 422

    def test_422_uses_current_status_constant(self, client):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            response = client.get("/posts/not-a-uuid")

        assert response.status_code == 422
        assert not [w for w in caught if "HTTP_422" in str(w.message)]

    def test_only_author_can_delete(self, client):
        # Arrange
        alice = _auth(client, "alice_b", "Alice")
        bob = _auth(client, "bob_c", "Bob")
        post_id = _create_post(client, alice).json()["post_id"]

        # Act
        response = client.delete(f"/posts/{post_id}", headers=bob)

        # Assert
        assert response.status_code == 403

    def test_list_posts(self, client):
        # Arrange
        headers = _auth(client, "alice_b", "Alice")
        _create_post(client, headers, title="One")
        _create_post(client, headers, title="Two")

        # Act
        response = client.get("/posts", params={"page": 1, "limit": 10})

        # Assert
        assert response.status_code == 200
        titles = [post["title"] for post in response.json()["posts"]]
        assert titles == ["Two", "One"]


class TestReactions:
    """End-to-end tests for the reputation ledger over HTTP."""

    def test_like_then_dislike_post(self, client):
        # Arrange
        alice = _auth(client, "alice_b", "Alice")
        bob = _auth(client, "bob_c", "Bob")
        post_id = _create_post(client, alice).json()["post_id"]
        bob_id = client.get("/users/me", headers=bob).json()["user_id"]

        # Act
        liked = client.post(f"/posts/{post_id}/like", headers=bob)
        disliked = client.post(f"/posts/{post_id}/dislike", headers=bob)

        # Assert
        assert liked.status_code == 200
        assert liked.json()["likes"] == [bob_id]
        assert liked.json()["author_points"] == 6
        assert disliked.json()["likes"] == []
        assert disliked.json()["dislikes"] == [bob_id]
        assert disliked.json()["author_points"] == 2

    def test_like_requires_auth(self, client):
        response = client.post(f"/posts/{uuid4()}/like")

        assert response.status_code == 401

    def test_comment_like_and_delete(self, client):
        # Arrange
        alice = _auth(client, "alice_b", "Alice")
        bob = _auth(client, "bob_c", "Bob")
        post_id = _create_post(client, alice).json()["post_id"]
        comment = client.post(
            f"/posts/{post_id}/comments", json={"body": "Nice"}, headers=bob
        )
        comment_id = comment.json()["comment_id"]

        # Act
        liked = client.post(
            f"/posts/{post_id}/comments/{comment_id}/like", headers=alice
        )
        deleted = client.delete(
            f"/posts/{post_id}/comments/{comment_id}", headers=bob
        )

        # Assert
        assert comment.status_code == 201
        assert liked.json()["author_points"] == 4
        assert deleted.json()["author_points"] == 3
        assert client.get(f"/posts/{post_id}/comments").json()["total_comments"] == 0
