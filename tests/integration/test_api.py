"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient
from command_search.config import get_settings
from command_search.main import app


class TestAPI:
    """Integration tests for API endpoints."""

    @pytest.fixture
    def sample_records(self):
        """Sample records for testing."""
        return [
            {
                "id": "1",
                "name": "Git Status",
                "value": "git status",
                "description": "Show the working tree status",
                "tags": ["git", "status"]
            },
            {
                "id": "2",
                "name": "List Files",
                "value": "ls -la",
                "description": "List all files with details",
                "tags": ["filesystem", "list"]
            },
            {
                "id": "3",
                "name": "Docker Compose Up",
                "value": "docker-compose up -d",
                "description": "Start services in detached mode",
                "tags": ["docker", "compose"]
            }
        ]

    @pytest.fixture
    def client(self, sample_records):
        """Create a test client with the sample records loaded."""
        with TestClient(app) as client:
            response = client.put("/api/v1/records", json={"records": sample_records})
            assert response.status_code == 200
            yield client

    def test_startup_loads_sample_records(self):
        """Test that the bundled commands are loaded on startup."""
        with TestClient(app) as client:
            response = client.get("/api/v1/records")

        assert response.status_code == 200
        names = [record["name"] for record in response.json()["records"]]
        assert names == ["Git Status", "List Files", "Docker Compose Up"]

    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Command Search"
        assert data["version"] == "1.0.0"
        assert data["status"] == "running"

    def test_api_info_endpoint(self, client):
        """Test the API info endpoint."""
        response = client.get("/api")
        assert response.status_code == 200

        data = response.json()
        assert "endpoints" in data
        assert "features" in data
        assert "limits" in data

    def test_search_library(self, client):
        """Test searching the loaded records."""
        response = client.get("/api/v1/search", params={"q": "git"})
        assert response.status_code == 200

        data = response.json()
        assert data["total_records"] == 3
        assert data["total_results"] == 1
        assert data["suggestions"] is None

        result = data["results"][0]
        assert result["record"]["id"] == "1"
        assert result["score"] > 0.1
        assert result["relevance_percent"] == round(result["score"] * 100)
        assert result["highlights"]["name"] == [{"start": 0, "end": 3}]
        assert result["highlights"]["tags"] == [[{"start": 0, "end": 3}], []]

    def test_blank_search_lists_everything(self, client):
        """Test that a blank query lists every record in order."""
        response = client.get("/api/v1/search")
        assert response.status_code == 200

        data = response.json()
        assert data["total_results"] == 3
        assert [r["record"]["id"] for r in data["results"]] == ["1", "2", "3"]
        assert all(r["score"] is None and r["highlights"] is None for r in data["results"])

    def test_search_no_match_suggests(self, client):
        """Test suggestions when nothing matches."""
        response = client.get("/api/v1/search", params={"q": "zit stat"})
        assert response.status_code == 200

        data = response.json()
        assert data["total_results"] == 0
        assert data["results"] == []
        assert data["suggestions"] == ["Git Status"]

    def test_search_query_too_long(self, client):
        """Test that over-long queries are rejected."""
        response = client.get("/api/v1/search", params={"q": "a" * 201})
        assert response.status_code == 400

    def test_search_with_body(self, client):
        """Test searching the library with a request body."""
        response = client.post("/api/v1/search", json={"query": "docker"})
        assert response.status_code == 200

        data = response.json()
        assert data["results"][0]["record"]["id"] == "3"

    def test_search_supplied_records(self, client):
        """Test searching records sent with the request."""
        request_data = {
            "query": "uptime",
            "records": [
                {"id": "a", "name": "Uptime", "value": "uptime"},
                {"id": "b", "name": "Disk Usage", "value": "df -h", "description": None}
            ]
        }

        response = client.post("/api/v1/search", json=request_data)
        assert response.status_code == 200

        data = response.json()
        assert data["total_records"] == 2
        assert data["results"][0]["record"]["id"] == "a"
        assert data["results"][0]["field_scores"]["name"] == 1.0

    def test_search_invalid_record(self, client):
        """Test that records without a command are rejected."""
        request_data = {
            "query": "git",
            "records": [{"name": "Broken"}]
        }

        response = client.post("/api/v1/search", json=request_data)
        assert response.status_code == 422

    def test_add_and_remove_record(self, client):
        """Test adding then removing a record."""
        response = client.post(
            "/api/v1/records",
            json={"id": "4", "name": "Uptime", "value": "uptime", "tags": ["system"]}
        )
        assert response.status_code == 201
        assert response.json()["tags"] == ["system"]

        response = client.get("/api/v1/records")
        assert response.json()["total_records"] == 4

        response = client.get("/api/v1/search", params={"q": "uptime"})
        assert response.json()["results"][0]["record"]["id"] == "4"

        response = client.delete("/api/v1/records/4")
        assert response.status_code == 200

        response = client.get("/api/v1/records")
        assert response.json()["total_records"] == 3

    def test_add_record_over_limit(self, client, monkeypatch):
        """Test that adding past the record limit is rejected."""
        monkeypatch.setattr(get_settings(), "max_records", 3)

        response = client.post("/api/v1/records", json={"id": "4", "name": "Uptime", "value": "uptime"})
        assert response.status_code == 400

        # replacing an existing record does not grow the library
        response = client.post("/api/v1/records", json={"id": "1", "name": "Git Log", "value": "git log"})
        assert response.status_code == 201

        response = client.get("/api/v1/records")
        assert response.json()["total_records"] == 3

    def test_remove_unknown_record(self, client):
        """Test removing a record that does not exist."""
        response = client.delete("/api/v1/records/missing")
        assert response.status_code == 404

    def test_health_check(self, client):
        """Test the health check endpoint."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["total_records"] == 3
        assert data["dependencies"]["search_engine"] == "healthy"
