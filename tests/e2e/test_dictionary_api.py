"""End-to-end tests for the dictionary HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from jerga.config import Settings
from jerga.interface.api.app import create_app
from jerga.util.di.container import setup_di
from jerga.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def auth_headers():
    token = create_token("user_e2e", Settings().auth, email="e2e@example.com")
    return {"Authorization": f"Bearer {token}"}


class TestDictionaryEndpoints:
    """End-to-end tests for the dictionary API.

    Note: in-memory repositories live for a single request, so these tests
    check the HTTP contract. Cross-request behavior is covered by unit tests.
    """

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_submit_term_returns_created(self, client, auth_headers):
        # Act
        response = client.post(
            "/terms",
            json={
                "word": "  Chamba ",
                "region": "Mexico",
                "definition": "Trabajo, empleo u ocupación.",
                "tags": ["trabajo"],
            },
            headers=auth_headers,
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["is_new_term"] is True
        assert body["term"]["word"] == "chamba"
        assert body["definition"]["votes"] == {"up": 0, "down": 0, "score": 0}

    def test_submit_term_without_auth_fails(self, client):
        response = client.post(
            "/terms",
            json={"word": "chamba", "definition": "Trabajo, empleo u ocupación."},
        )

        assert response.status_code == 401

    def test_vote_with_invalid_token_fails(self, client):
        response = client.post(
            "/votes",
            json={
                "votable_type": "definition",
                "votable_id": str(uuid4()),
                "vote_type": "up",
            },
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_vote_on_missing_item_is_not_found(self, client, auth_headers):
        response = client.post(
            "/votes",
            json={
                "votable_type": "comment",
                "votable_id": str(uuid4()),
                "vote_type": "up",
            },
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_word_of_day_without_terms_is_not_found(self, client):
        response = client.get("/word-of-day", params={"date": "2025-03-14"})

        assert response.status_code == 404

    def test_word_of_day_region_all_means_every_region(self, client):
        response = client.get("/word-of-day", params={"region": "all"})

        assert response.status_code == 404

    def test_trending_accepts_region_all(self, client):
        response = client.get("/trending", params={"region": "All"})

        assert response.status_code == 200

    def test_unknown_region_is_rejected(self, client):
        response = client.get("/word-of-day", params={"region": "Atlantis"})

        assert response.status_code == 400

    def test_trending_on_empty_dictionary(self, client):
        response = client.get("/trending", params={"period": "week"})

        assert response.status_code == 200

    def test_flag_queue_requires_auth(self, client):
        response = client.get("/flags")

        assert response.status_code == 401
