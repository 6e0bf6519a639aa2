"""Tests for matches API endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from cricket_tracker.core.errors import StoreError
from cricket_tracker.db.schema import Base

SCENARIO = [
    {"matchDate": "2025-01-10", "opponent": "India", "runsScored": 50, "ballsFaced": 40, "catches": 1},
    {
        "matchDate": "2025-01-17",
        "opponent": "Australia",
        "wicketsTaken": 3,
        "oversBowled": 4.0,
        "runsConceded": 20,
    },
    {
        "matchDate": "2025-01-24",
        "opponent": "England",
        "runsScored": 30,
        "ballsFaced": 20,
        "wicketsTaken": 1,
        "oversBowled": 2.3,
        "runsConceded": 15,
        "catches": 2,
    },
]


def create_test_app_and_client():
    """Create app with test database and return (client, engine)."""
    from cricket_tracker.api.app import create_app, get_db_session

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    app = create_app()

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db
    client = TestClient(app)

    return client, engine


def seed_scenario(client: TestClient) -> list[str]:
    """Post the scenario matches. Returns their IDs."""
    ids = []
    for payload in SCENARIO:
        response = client.post("/api/matches", json=payload)
        assert response.status_code == 201
        ids.append(response.json()["id"])
    return ids


class TestCreateMatchEndpoint:
    """Test POST /api/matches."""

    def test_returns_201_with_id(self):
        client, _ = create_test_app_and_client()

        response = client.post("/api/matches", json=SCENARIO[0])

        assert response.status_code == 201
        assert response.json()["id"]

    def test_returns_409_for_duplicate(self):
        client, _ = create_test_app_and_client()
        seed_scenario(client)

        response = client.post("/api/matches", json={"matchDate": "2025-01-10", "opponent": "india"})

        assert response.status_code == 409
        assert "india" in response.json()["detail"]

    def test_returns_422_for_invalid_overs(self):
        client, _ = create_test_app_and_client()

        response = client.post(
            "/api/matches",
            json={"matchDate": "2025-01-10", "opponent": "India", "oversBowled": 4.7},
        )

        assert response.status_code == 422

    def test_returns_422_for_missing_opponent(self):
        client, _ = create_test_app_and_client()

        response = client.post("/api/matches", json={"matchDate": "2025-01-10"})

        assert response.status_code == 422


class TestListMatchesEndpoint:
    """Test GET /api/matches."""

    def test_newest_first(self):
        client, _ = create_test_app_and_client()
        seed_scenario(client)

        response = client.get("/api/matches")

        assert response.status_code == 200
        assert [m["opponent"] for m in response.json()] == ["England", "Australia", "India"]

    def test_limit(self):
        client, _ = create_test_app_and_client()
        seed_scenario(client)

        response = client.get("/api/matches", params={"limit": 1})

        assert [m["opponent"] for m in response.json()] == ["England"]

    def test_camel_case_payload(self):
        client, _ = create_test_app_and_client()
        seed_scenario(client)

        match = client.get("/api/matches").json()[-1]

        assert match["matchDate"] == "2025-01-10"
        assert match["runsScored"] == 50
        assert match["ballsFaced"] == 40
        assert "createdAt" in match

    def test_empty(self):
        client, _ = create_test_app_and_client()
        assert client.get("/api/matches").json() == []


class TestGetMatchEndpoint:
    """Test GET /api/matches/{match_id}."""

    def test_returns_match(self):
        client, _ = create_test_app_and_client()
        ids = seed_scenario(client)

        response = client.get(f"/api/matches/{ids[1]}")

        assert response.status_code == 200
        assert response.json()["opponent"] == "Australia"
        assert response.json()["oversBowled"] == 4.0

    def test_returns_404_for_nonexistent_match(self):
        client, _ = create_test_app_and_client()

        response = client.get("/api/matches/nonexistent")

        assert response.status_code == 404


class TestUpdateMatchEndpoint:
    """Test PUT /api/matches/{match_id}."""

    def test_returns_204_and_updates_stats(self):
        client, _ = create_test_app_and_client()
        ids = seed_scenario(client)

        payload = dict(SCENARIO[0], runsScored=70, ballsFaced=50)
        response = client.put(f"/api/matches/{ids[0]}", json=payload)

        assert response.status_code == 204
        assert client.get("/api/stats").json()["totalRuns"] == 100

    def test_resubmitting_same_match_is_allowed(self):
        client, _ = create_test_app_and_client()
        ids = seed_scenario(client)

        response = client.put(f"/api/matches/{ids[0]}", json=SCENARIO[0])

        assert response.status_code == 204

    def test_returns_409_for_collision(self):
        client, _ = create_test_app_and_client()
        ids = seed_scenario(client)

        response = client.put(
            f"/api/matches/{ids[0]}",
            json={"matchDate": "2025-01-17", "opponent": "AUSTRALIA"},
        )

        assert response.status_code == 409

    def test_returns_404_for_nonexistent_match(self):
        client, _ = create_test_app_and_client()

        response = client.put("/api/matches/nonexistent", json=SCENARIO[0])

        assert response.status_code == 404


class TestDeleteMatchEndpoint:
    """Test DELETE /api/matches/{match_id}."""

    def test_returns_204_and_recomputes(self):
        client, _ = create_test_app_and_client()
        ids = seed_scenario(client)

        response = client.delete(f"/api/matches/{ids[1]}")

        assert response.status_code == 204
        stats = client.get("/api/stats").json()
        assert stats["totalMatches"] == 2
        assert stats["totalWickets"] == 1
        assert stats["economyRate"] == 6.52

    def test_returns_404_for_nonexistent_match(self):
        client, _ = create_test_app_and_client()

        response = client.delete("/api/matches/nonexistent")

        assert response.status_code == 404


class TestStoreFailures:
    """Store failures on the match routes map to 503."""

    def test_create_returns_503(self):
        client, _ = create_test_app_and_client()

        with patch(
            "cricket_tracker.service.matches.add_match",
            side_effect=StoreError("Store failure while adding match"),
        ):
            response = client.post("/api/matches", json=SCENARIO[0])

        assert response.status_code == 503
        assert response.json()["detail"] == "Store failure while adding match"

    def test_list_returns_503(self):
        client, _ = create_test_app_and_client()

        with patch(
            "cricket_tracker.service.matches.get_all_matches",
            side_effect=StoreError("Store failure while listing matches"),
        ):
            response = client.get("/api/matches")

        assert response.status_code == 503

    def test_update_refresh_failure_returns_503_and_keeps_edit(self):
        client, _ = create_test_app_and_client()
        ids = seed_scenario(client)
        edited = {**SCENARIO[0], "runsScored": 99, "ballsFaced": 60}

        with patch(
            "cricket_tracker.service.matches.refresh_player_stats",
            side_effect=RuntimeError("aggregation exploded"),
        ):
            response = client.put(f"/api/matches/{ids[0]}", json=edited)

        assert response.status_code == 503
        assert client.get(f"/api/matches/{ids[0]}").json()["runsScored"] == 99

    def test_delete_returns_503(self):
        client, _ = create_test_app_and_client()
        ids = seed_scenario(client)

        with patch(
            "cricket_tracker.service.matches.delete_match",
            side_effect=StoreError("Store failure while deleting match"),
        ):
            response = client.delete(f"/api/matches/{ids[0]}")

        assert response.status_code == 503


class TestHealth:
    def test_health(self):
        client, _ = create_test_app_and_client()
        assert client.get("/health").json() == {"status": "ok"}
