"""End-to-end tests for the rating and vote endpoints."""

import pytest
from fastapi.testclient import TestClient

from tally.domain.service import FrozenClock
from tally.domain.value import ItemId
from tally.interface.api.app import create_app
from tally.persistence.repository.inmemory import InMemoryDocumentStore
from tests.di import build_test_container
from tests.harness import COOLDOWN_MS, DAY_MS


@pytest.fixture
def container():
    """Test container with in-memory store and frozen clock."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client bound to the test container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def store(client, container) -> InMemoryDocumentStore:
    return client.portal.call(container.get, InMemoryDocumentStore)


@pytest.fixture
def clock(client, container) -> FrozenClock:
    return client.portal.call(container.get, FrozenClock)


def _vote(**overrides):
    body = {"item_id": "a", "vote": 1, "user_hash": "u1", "user_agent": "agent1"}
    body.update(overrides)
    return {k: v for k, v in body.items() if v is not None}


class TestRatingEndpoint:
    """Tests for GET /rating/{item_id}."""

    def test_unknown_item_returns_zeros(self, client, store):
        response = client.get("/rating/never-voted")

        assert response.status_code == 200
        assert response.json() == {"rating": 0, "votes": 0}
        assert store.saves == []

    def test_reflects_accepted_votes(self, client):
        client.post("/vote", json=_vote(user_hash="u1"))
        client.post("/vote", json=_vote(user_hash="u2", vote=-1))
        client.post("/vote", json=_vote(user_hash="u3"))

        response = client.get("/rating/a")

        assert response.json() == {"rating": 1, "votes": 3}

    def test_load_failure_returns_500(self, client, store):
        store.fail_load = True

        response = client.get("/rating/a")

        assert response.status_code == 500
        assert response.json() == {"error": "load_failed"}


class TestVoteEndpoint:
    """Tests for POST /vote."""

    def test_vote_scenario(self, client):
        """Accepted votes accumulate; an immediate repeat is throttled."""
        first = client.post("/vote", json=_vote())
        assert first.status_code == 200
        assert first.json() == {"success": True, "rating": 1, "votes": 1}

        repeat = client.post("/vote", json=_vote())
        assert repeat.status_code == 429
        assert repeat.json() == {"message": "cooldown", "retry_after_ms": COOLDOWN_MS}

        second = client.post("/vote", json=_vote(user_hash="u2"))
        assert second.json() == {"success": True, "rating": 2, "votes": 2}

        third = client.post("/vote", json=_vote(user_hash="u3", vote=-1))
        assert third.json() == {"success": True, "rating": 1, "votes": 3}

    def test_retry_after_counts_down(self, client, clock):
        client.post("/vote", json=_vote())
        clock.advance(10 * DAY_MS)

        response = client.post("/vote", json=_vote())

        assert response.status_code == 429
        assert response.json()["retry_after_ms"] == COOLDOWN_MS - 10 * DAY_MS

    def test_vote_accepted_after_cooldown(self, client, clock):
        client.post("/vote", json=_vote())
        clock.advance(COOLDOWN_MS)

        response = client.post("/vote", json=_vote(vote=-1))

        assert response.status_code == 200
        assert response.json() == {"success": True, "rating": 0, "votes": 2}

    @pytest.mark.parametrize(
        "body",
        [
            _vote(user_agent=None),
            _vote(user_hash=None),
            _vote(item_id=None),
            _vote(vote=None),
            _vote(user_agent=""),
            _vote(item_id=""),
            _vote(vote=2),
            _vote(vote=0),
            _vote(vote="1"),
            _vote(vote=True),
            _vote(item_id=7),
            [],
        ],
    )
    def test_bad_request(self, client, store, body):
        response = client.post("/vote", json=body)

        assert response.status_code == 400
        assert response.json() == {"message": "bad_request"}
        assert store.saves == []

    def test_malformed_json_is_bad_request(self, client):
        response = client.post(
            "/vote",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "bad_request"}

    def test_save_failure_returns_500(self, client, store):
        store.fail_save = True

        response = client.post("/vote", json=_vote())

        assert response.status_code == 500
        assert response.json() == {"message": "vote_failed"}
        assert store.document.get(ItemId("a")) is None

    def test_forwarded_address_is_recorded(self, client, store):
        client.post(
            "/vote",
            json=_vote(),
            headers={"X-Forwarded-For": "203.0.113.9, 10.0.0.1"},
        )

        record = store.document.get(ItemId("a")).history[0]
        assert record.source_address == "203.0.113.9"
        assert store.saves == ["vote: a (1)"]


class TestAmbientEndpoints:
    """Tests for health and CORS."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_cors_allows_any_origin(self, client):
        response = client.get(
            "/rating/a", headers={"Origin": "https://blog.example.org"}
        )

        assert response.headers["access-control-allow-origin"] == "*"
