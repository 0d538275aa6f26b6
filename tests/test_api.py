"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from py_dungeon.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestDungeonAPI:
    """Test the dungeon endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_generate(self, client):
        response = client.post("/dungeons/generate", json={
            "width": 40, "height": 30, "room_count": 6, "seed": "api",
        })
        assert response.status_code == 200

        data = response.json()
        assert data["width"] == 40
        assert data["height"] == 30
        assert len(data["grid"]) == 30
        assert len(data["grid"][0]) == 40
        assert len(data["rooms"]) == 6
        assert len(data["mst_edges"]) == 5

    def test_generate_is_reproducible(self, client):
        payload = {"width": 40, "height": 40, "room_count": 8, "seed": 11}
        first = client.post("/dungeons/generate", json=payload).json()
        second = client.post("/dungeons/generate", json=payload).json()
        assert first["grid"] == second["grid"]

    def test_unsatisfiable_request(self, client):
        response = client.post("/dungeons/generate", json={
            "width": 10, "height": 10, "room_count": 20,
            "room_min_width": 5, "room_min_height": 5,
            "room_max_width": 6, "room_max_height": 6,
        })
        assert response.status_code == 422

    def test_invalid_size_rejected(self, client):
        response = client.post("/dungeons/generate", json={"width": 100000})
        assert response.status_code == 422

    def test_min_above_max_rejected(self, client):
        response = client.post("/dungeons/generate", json={
            "room_min_width": 8, "room_max_width": 4,
        })
        assert response.status_code == 422
