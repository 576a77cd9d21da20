"""End-to-end tests for the comment endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from forum.config import Settings
from forum.interface.api.app import create_app
from forum.util.di.container import setup_di
from forum.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def app_instance():
    """Create the app wired to a test container."""
    app_instance = create_app()
    setup_di(app_instance, build_test_container(web=True))
    return app_instance


@pytest.fixture
def client(app_instance):
    """Anonymous client."""
    return TestClient(app_instance)


@pytest.fixture
def auth_client(app_instance):
    """Client carrying a valid auth_token cookie."""
    token = create_token(str(uuid4()), "tester", Settings().auth)
    return TestClient(app_instance, cookies={"auth_token": token})


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestGetComments:
    """GET /posts/{post_id}/comments"""

    def test_empty_post(self, client):
        response = client.get(f"/posts/{uuid4()}/comments")

        assert response.status_code == 200
        assert response.json() == {"data": [], "count": 0}

    def test_invalid_post_id(self, client):
        response = client.get("/posts/not-a-uuid/comments")

        assert response.status_code == 400

    def test_invalid_token_is_treated_as_anonymous(self, app_instance):
        client = TestClient(app_instance, cookies={"auth_token": "garbage"})

        response = client.get(f"/posts/{uuid4()}/comments")

        assert response.status_code == 200


class TestCreateComment:
    """POST /posts/{post_id}/comments"""

    def test_requires_authentication(self, client):
        response = client.post(f"/posts/{uuid4()}/comments", json={"body": "Hi"})

        assert response.status_code == 401

    def test_missing_post(self, auth_client):
        response = auth_client.post(f"/posts/{uuid4()}/comments", json={"body": "Hi"})

        assert response.status_code == 404

    def test_empty_body_rejected(self, auth_client):
        response = auth_client.post(f"/posts/{uuid4()}/comments", json={"body": ""})

        assert response.status_code == 422

    def test_body_too_long_rejected(self, auth_client):
        response = auth_client.post(
            f"/posts/{uuid4()}/comments", json={"body": "x" * 10001}
        )

        assert response.status_code == 422


class TestCommentMutations:
    """PATCH/DELETE /comments/{comment_id} and POST /comments/{comment_id}/like"""

    def test_edit_requires_authentication(self, client):
        response = client.patch(f"/comments/{uuid4()}", json={"body": "Edited"})

        assert response.status_code == 401

    def test_edit_missing_comment(self, auth_client):
        response = auth_client.patch(f"/comments/{uuid4()}", json={"body": "Edited"})

        assert response.status_code == 404

    def test_delete_requires_authentication(self, client):
        response = client.delete(f"/comments/{uuid4()}")

        assert response.status_code == 401

    def test_delete_missing_comment(self, auth_client):
        response = auth_client.delete(f"/comments/{uuid4()}")

        assert response.status_code == 404

    def test_like_requires_authentication(self, client):
        response = client.post(f"/comments/{uuid4()}/like")

        assert response.status_code == 401

    def test_like_missing_comment(self, auth_client):
        response = auth_client.post(f"/comments/{uuid4()}/like")

        assert response.status_code == 404

    def test_invalid_comment_id(self, auth_client):
        response = auth_client.delete("/comments/not-a-uuid")

        assert response.status_code == 400
