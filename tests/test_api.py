"""Tests for the REST API."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from gridrestart import __version__
from gridrestart.api import app
from gridrestart.api.services import simulation_service


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with no current simulation."""
    simulation_service.reset()
    with TestClient(app) as test_client:
        yield test_client
    simulation_service.reset()


class TestRootEndpoints:
    """Tests for root and health endpoints."""

    def test_root(self, client: TestClient) -> None:
        """Test the root endpoint describes the API."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Grid Restart Engine"
        assert response.json()["version"] == __version__

    def test_health(self, client: TestClient) -> None:
        """Test the health endpoint reports the loaded data."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["plants_loaded"] == 32
        assert data["demand_points_loaded"] == 1440


class TestPlantEndpoints:
    """Tests for the plant catalog endpoint."""

    def test_list_plants(self, client: TestClient) -> None:
        """Test plants are returned with front-end field names."""
        response = client.get("/api/v1/plants")

        assert response.status_code == 200
        plants = response.json()
        assert len(plants) == 32
        first = plants[0]
        assert set(first) == {
            "name",
            "type",
            "city",
            "latitude",
            "longitude",
            "maxCapacityMW",
            "icon",
        }
        assert first["type"] == "Nuclear"


class TestSimulationEndpoints:
    """Tests for running and reading simulations."""

    def test_no_current_simulation(self, client: TestClient) -> None:
        """Test reading results before any run."""
        assert client.get("/api/v1/simulations/current").status_code == 404
        assert client.get("/api/v1/simulations/current/summary").status_code == 404

    def test_run_simulation(self, client: TestClient) -> None:
        """Test a short run returns one result per minute."""
        response = client.post(
            "/api/v1/simulations",
            json={"start_time": "2025-04-28T12:33:00", "horizon_minutes": 30},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["simulation_id"].startswith("blackout_")
        assert len(data["results"]) == 30

        first = data["results"][0]
        assert set(first) == {
            "time",
            "generatedMW",
            "expectedDemandMW",
            "averageStability",
            "generatedByTypeMW",
        }
        assert first["generatedMW"] == 0.0
        assert first["generatedByTypeMW"] == {}
        assert data["results"][4]["generatedByTypeMW"] == {"Hydroelectric": 0.0}

    def test_current_after_run(self, client: TestClient) -> None:
        """Test the last run becomes the current simulation."""
        run = client.post(
            "/api/v1/simulations",
            json={"start_time": "2025-04-28T12:33:00", "horizon_minutes": 20},
        ).json()

        current = client.get("/api/v1/simulations/current")
        assert current.status_code == 200
        assert current.json()["simulation_id"] == run["simulation_id"]

        summary = client.get("/api/v1/simulations/current/summary")
        assert summary.status_code == 200
        assert summary.json()["simulation_id"] == run["simulation_id"]
        assert summary.json()["shortage_minutes"] >= 7

    def test_invalid_request(self, client: TestClient) -> None:
        """Test malformed requests are rejected."""
        response = client.post(
            "/api/v1/simulations",
            json={"start_time": "2025-04-28T12:33:00", "horizon_minutes": 0},
        )
        assert response.status_code == 422

        response = client.post(
            "/api/v1/simulations",
            json={"start_time": "2025-04-28T12:33:00", "unknown": 1},
        )
        assert response.status_code == 422
