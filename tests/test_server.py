"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from idle_galaxy.server import main
from idle_galaxy.server.session import SystemStore


@pytest.fixture
def client(monkeypatch):
    """Test client backed by a fresh store."""
    monkeypatch.setattr(main, "store", SystemStore(seed=7))
    return TestClient(main.app)


def create(client, **overrides):
    body = {
        "ownerId": "alice",
        "name": "Test",
        "starType": "enana_amarilla",
        "starMass": 1.0,
        "starAge": 4500,
        "planetsCount": 3,
        "governmentType": "democratica",
        "coordinates": [10000, 10000],
        "seed": 42,
    }
    body.update(overrides)
    return client.post("/api/systems", json=body)


class TestSystems:
    """Test system creation and retrieval."""

    def test_health(self, client):
        """Test the API root."""
        response = client.get("/api")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_create_system(self, client):
        """Test creating a Sun-like system."""
        response = create(client)

        assert response.status_code == 201
        data = response.json()
        planets = data["system"]["planets"]
        assert [p["orbit"]["semi_major_axis"] for p in planets] == pytest.approx([0.4, 2.1, 3.8])
        assert data["system"]["primary_star"]["luminosity"] == pytest.approx(1.0)
        assert data["system"]["owner_id"] == "alice"

    def test_create_reports_drawn_seed(self, client):
        """Test that a system created without a seed reports the one it used."""
        first = create(client, seed=None).json()
        client.delete(f"/api/systems/{first['systemId']}")
        replay = create(client, seed=first["seed"]).json()

        assert isinstance(first["seed"], int)
        assert replay["systemId"] == first["systemId"]
        assert replay["system"]["planets"] == first["system"]["planets"]

    def test_invalid_parameters(self, client):
        """Test that out-of-range parameters list every problem."""
        response = create(client, starMass=500, planetsCount=30)

        assert response.status_code == 422
        assert len(response.json()["detail"]) == 2

    def test_get_and_list(self, client):
        """Test reading a system and listing by owner."""
        system_id = create(client).json()["systemId"]
        create(client, ownerId="bob", name="Vega", coordinates=[40000, 40000], seed=3)

        response = client.get(f"/api/systems/{system_id}")
        assert response.status_code == 200
        assert response.json()["version"] == 0

        listing = client.get("/api/systems", params={"ownerId": "bob"}).json()
        assert listing["count"] == 1
        assert listing["systems"][0]["name"] == "Vega"

    def test_missing_system(self, client):
        """Test 404 for unknown systems."""
        assert client.get("/api/systems/system_none").status_code == 404
        assert client.delete("/api/systems/system_none").status_code == 404

    def test_delete(self, client):
        """Test deleting a system."""
        system_id = create(client).json()["systemId"]

        assert client.delete(f"/api/systems/{system_id}").status_code == 200
        assert client.get(f"/api/systems/{system_id}").status_code == 404


class TestAdvance:
    """Test time advance over HTTP."""

    def test_advance(self, client):
        """Test advancing a player's systems."""
        system_id = create(client).json()["systemId"]

        response = client.post("/api/advance", json={"ownerId": "alice", "years": 100})

        assert response.status_code == 200
        data = response.json()
        assert data["galacticYear"] == 100
        assert data["systems"][0]["galactic_year"] == 100
        assert all(set(c) >= {"type", "severity", "planetId", "message"} for c in data["crises"])
        assert client.get(f"/api/systems/{system_id}").json()["version"] == 1

    def test_negative_years_rejected(self, client):
        """Test request validation for years."""
        response = client.post("/api/advance", json={"ownerId": "alice", "years": -1})
        assert response.status_code == 422

    def test_unexpected_failure_is_500(self, client, monkeypatch):
        """Test that unexpected store errors surface as 500."""
        create(client)

        def broken(*args, **kwargs):
            raise RuntimeError("disk full")

        monkeypatch.setattr(main.store, "advance_owned", broken)
        monkeypatch.setattr(main.store, "explore", broken)

        advance = client.post("/api/advance", json={"ownerId": "alice", "years": 100})
        explore = client.post("/api/explore", json={"userId": "bob", "x": 0, "y": 0})

        assert advance.status_code == 500
        assert "disk full" in advance.json()["detail"]
        assert explore.status_code == 500


class TestExploration:
    """Test exploration endpoints."""

    def test_explore_search_and_stats(self, client):
        """Test discovering, searching and statistics."""
        create(client)
        create(client, ownerId="bob", name="Vega", coordinates=[10500, 10000], seed=3)

        explored = client.post("/api/explore", json={"userId": "alice", "x": 10000, "y": 10000})
        assert [s["name"] for s in explored.json()["discovered"]] == ["Vega"]

        search = client.get("/api/search", params={"q": "veg"}).json()
        assert [s["name"] for s in search["systems"]] == ["Vega"]

        stats = client.get("/api/stats/alice").json()
        assert stats["userDiscovered"] == 2
        assert stats["userCreated"] == 1
        assert stats["counters"]["worldsCreated"] == 1
        assert stats["counters"]["systemsDiscovered"] == 1

    def test_nearby(self, client):
        """Test nearby systems sorted by distance."""
        create(client)
        create(client, ownerId="bob", name="Vega", coordinates=[10000, 11000], seed=3)

        nearby = client.get("/api/nearby", params={"x": 10000, "y": 10000}).json()

        assert [(n["name"], n["distance"], n["direction"]) for n in nearby] == [
            ("Test", 0, "este"),
            ("Vega", 1000, "sur"),
        ]

    def test_popular_and_events(self, client):
        """Test popularity listing and the event feed."""
        create(client)

        assert client.get("/api/popular").json()["count"] == 1
        assert "events" in client.get("/api/events").json()

    def test_recent_discoveries(self, client):
        """Test that the latest discovery is listed first with its discoverer."""
        create(client)
        create(client, ownerId="bob", name="Vega", coordinates=[10500, 10000], seed=3)
        client.post("/api/explore", json={"userId": "alice", "x": 10000, "y": 10000})

        recent = client.get("/api/recent", params={"userId": "alice"}).json()

        assert [(r["name"], r["discovererName"]) for r in recent] == [
            ("Vega", "Explorador bob"),
            ("Test", "Tú"),
        ]
        assert {r["timeAgo"] for r in recent} == {"ahora mismo"}
        assert len(client.get("/api/recent", params={"limit": 1}).json()) == 1
