"""End-to-end tests for topic listing and voting endpoints."""

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


def _login(client: TestClient) -> None:
    auth = Settings().auth
    response = client.post(
        "/admin/login",
        json={
            "username": auth.admin_username,
            "password": auth.admin_password.get_secret_value(),
        },
    )
    assert response.status_code == 200


def _create_topic(client: TestClient, title: str = "Nova ciclovia") -> str:
    _login(client)
    response = client.post(
        "/admin/topics",
        json={"title": title, "description": "Ciclovia de 4 km na zona norte."},
    )
    assert response.status_code == 201
    client.post("/admin/logout")
    return response.json()["topic_id"]


class TestTopicEndpoints:
    """End-to-end tests for topic API endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_empty_list(self, client):
        response = client.get("/topics")

        assert response.status_code == 200
        assert response.json()["topics"] == []
        assert response.json()["total"] == 0

    def test_list_newest_first(self, client):
        _create_topic(client, "Primeiro")
        _create_topic(client, "Segundo")

        response = client.get("/topics")

        titles = [t["title"] for t in response.json()["topics"]]
        assert titles == ["Segundo", "Primeiro"]

    def test_get_missing_topic(self, client):
        response = client.get(f"/topics/{uuid4()}")

        assert response.status_code == 404


class TestVoteEndpoints:
    """End-to-end tests for the vote toggle."""

    def test_first_vote_mints_user_token(self, client):
        """A caller without a token should get one set as a cookie."""
        topic_id = _create_topic(client)

        response = client.post(f"/topics/{topic_id}/vote", json={"choice": "up"})

        assert response.status_code == 200
        assert response.json() == {
            "topic_id": topic_id,
            "upvotes": 1,
            "downvotes": 0,
            "user_vote": "up",
        }
        assert client.cookies.get("user_id")

    def test_toggle_and_switch(self, client):
        """Same choice twice clears; the other choice switches."""
        topic_id = _create_topic(client)

        client.post(f"/topics/{topic_id}/vote", json={"choice": "up"})
        switched = client.post(f"/topics/{topic_id}/vote", json={"choice": "down"})
        cleared = client.post(f"/topics/{topic_id}/vote", json={"choice": "down"})

        assert (switched.json()["upvotes"], switched.json()["downvotes"]) == (0, 1)
        assert switched.json()["user_vote"] == "down"
        assert (cleared.json()["upvotes"], cleared.json()["downvotes"]) == (0, 0)
        assert cleared.json()["user_vote"] is None

    def test_listing_shows_callers_vote(self, client):
        topic_id = _create_topic(client)
        client.post(f"/topics/{topic_id}/vote", json={"choice": "down"})

        item = client.get(f"/topics/{topic_id}").json()

        assert item["user_vote"] == "down"
        assert item["downvotes"] == 1

    def test_two_browsers_count_separately(self, client):
        topic_id = _create_topic(client)
        client.post(f"/topics/{topic_id}/vote", json={"choice": "up"})

        client.cookies.clear()
        response = client.post(f"/topics/{topic_id}/vote", json={"choice": "up"})

        assert response.json()["upvotes"] == 2

    def test_invalid_choice_is_rejected(self, client):
        topic_id = _create_topic(client)

        response = client.post(f"/topics/{topic_id}/vote", json={"choice": "sideways"})

        assert response.status_code == 422

    def test_vote_on_missing_topic(self, client):
        response = client.post(f"/topics/{uuid4()}/vote", json={"choice": "up"})

        assert response.status_code == 404

    def test_clear_vote(self, client):
        topic_id = _create_topic(client)
        client.post(f"/topics/{topic_id}/vote", json={"choice": "up"})

        response = client.delete(f"/topics/{topic_id}/vote")

        assert response.status_code == 200
        assert response.json()["upvotes"] == 0
        assert response.json()["user_vote"] is None

    def test_clear_vote_without_token(self, client):
        topic_id = _create_topic(client)

        response = client.delete(f"/topics/{topic_id}/vote")

        assert response.status_code == 400
