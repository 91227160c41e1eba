"""End-to-end tests for the admin session and admin mutations."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from civic.config import Settings
from civic.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by the in-memory test container."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def credentials():
    auth = Settings().auth
    return {
        "username": auth.admin_username,
        "password": auth.admin_password.get_secret_value(),
    }


class TestAdminSession:
    """Login, session check and logout."""

    def test_login_sets_http_only_cookie(self, client, credentials):
        response = client.post("/admin/login", json=credentials)

        assert response.status_code == 200
        assert response.json()["authenticated"] is True
        assert "token" not in response.json()
        set_cookie = response.headers["set-cookie"]
        assert "admin_token=" in set_cookie
        assert "HttpOnly" in set_cookie

        session = client.get("/admin/session")
        assert session.json() == {
            "authenticated": True,
            "username": credentials["username"],
        }

    def test_wrong_password(self, client, credentials):
        response = client.post(
            "/admin/login",
            json={"username": credentials["username"], "password": "nope"},
        )

        assert response.status_code == 401
        assert "admin_token" not in client.cookies

    def test_logout_ends_session(self, client, credentials):
        client.post("/admin/login", json=credentials)

        client.post("/admin/logout")

        assert client.get("/admin/session").json()["authenticated"] is False
        response = client.post(
            "/admin/topics", json={"title": "T", "description": "D"}
        )
        assert response.status_code == 401


class TestAdminMutations:
    """Admin-only topic and comment management."""

    def test_mutations_require_session(self, client):
        topic = f"/admin/topics/{uuid4()}"

        assert client.post(
            "/admin/topics", json={"title": "T", "description": "D"}
        ).status_code == 401
        assert client.delete(topic).status_code == 401
        assert client.post(f"{topic}/reconcile").status_code == 401
        assert client.delete(f"/admin/comments/{uuid4()}").status_code == 401

    def test_tampered_cookie_is_rejected(self, client):
        client.cookies.set("admin_token", "eyJhbGciOiJIUzI1NiJ9.e30.forged")

        response = client.post(
            "/admin/topics", json={"title": "T", "description": "D"}
        )

        assert response.status_code == 401

    def test_create_topic_validation(self, client, credentials):
        client.post("/admin/login", json=credentials)

        response = client.post(
            "/admin/topics", json={"title": "  ", "description": "D"}
        )

        assert response.status_code == 400
        assert client.get("/topics").json()["total"] == 0

    def test_delete_topic_removes_votes_and_comments(self, client, credentials):
        client.post("/admin/login", json=credentials)
        topic_id = client.post(
            "/admin/topics",
            json={
                "title": "Hospital municipal",
                "description": "Nova ala pediátrica.",
                "external_link": "https://example.org/hospital",
            },
        ).json()["topic_id"]
        client.post(f"/topics/{topic_id}/vote", json={"choice": "up"})
        client.post(f"/topics/{topic_id}/comments", json={"text": "Ótimo"})

        response = client.delete(f"/admin/topics/{topic_id}")

        assert response.status_code == 200
        assert response.json() == {
            "topic_id": topic_id,
            "deleted_votes": 1,
            "deleted_comments": 1,
        }
        assert client.get(f"/topics/{topic_id}").status_code == 404
        assert client.get(f"/topics/{topic_id}/comments").status_code == 404
        assert client.delete(f"/admin/topics/{topic_id}").status_code == 404

    def test_delete_comment(self, client, credentials):
        client.post("/admin/login", json=credentials)
        topic_id = client.post(
            "/admin/topics", json={"title": "T", "description": "D"}
        ).json()["topic_id"]
        comment_id = client.post(
            f"/topics/{topic_id}/comments", json={"text": "spam"}
        ).json()["comment_id"]

        response = client.delete(f"/admin/comments/{comment_id}")

        assert response.status_code == 200
        assert response.json()["topic_id"] == topic_id
        assert client.get(f"/topics/{topic_id}/comments").json()["comments"] == []
        assert client.delete(f"/admin/comments/{comment_id}").status_code == 404

    def test_reconcile_reports_counted_tally(self, client, credentials):
        client.post("/admin/login", json=credentials)
        topic_id = client.post(
            "/admin/topics", json={"title": "T", "description": "D"}
        ).json()["topic_id"]
        client.post(f"/topics/{topic_id}/vote", json={"choice": "down"})

        response = client.post(f"/admin/topics/{topic_id}/reconcile")

        assert response.status_code == 200
        assert response.json() == {
            "topic_id": topic_id,
            "upvotes": 0,
            "downvotes": 1,
        }
