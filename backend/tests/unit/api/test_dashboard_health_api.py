"""
API Tests for the dashboard and health endpoints
"""
import pytest
from unittest.mock import patch

from campushub.core.logging_config import logger

API = "/api/v1"


class TestDashboard:
    """Test /dashboard"""

    @pytest.mark.asyncio
    async def test_admin_sees_everything(self, client, admin_headers):
        response = await client.get(f"{API}/dashboard", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "admin"
        assert data["counts"]["students"] == 6
        assert data["counts"]["books"] == 4
        assert len(data["counts"]) == 11
        assert data["canGenerateStudyQuestions"] is True
        assert "students" in data["canManage"]

    @pytest.mark.asyncio
    async def test_parent_sees_public_collections_only(self, client, login_as):
        headers = await login_as("parent")

        response = await client.get(f"{API}/dashboard", headers=headers)

        data = response.json()
        assert "fee_records" not in data["counts"]
        assert "salaries" not in data["counts"]
        assert "notices" in data["counts"]
        assert data["canManage"] == []
        assert data["canGenerateStudyQuestions"] is False

    @pytest.mark.asyncio
    async def test_requires_session(self, client):
        response = await client.get(f"{API}/dashboard")

        assert response.status_code == 401


class TestHealth:
    """Test health endpoints"""

    @pytest.mark.asyncio
    async def test_live(self, client):
        response = await client.get(f"{API}/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    @pytest.mark.asyncio
    async def test_ready(self, client):
        response = await client.get(f"{API}/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["checks"]["records"]["collections"]["students"] == 6

    @pytest.mark.asyncio
    async def test_requests_are_logged(self, client, admin_headers):
        with patch.object(logger, "log_request") as log_request:
            response = await client.get(f"{API}/books/BK404", headers=admin_headers)

        assert response.status_code == 404
        method, path, status_code, duration_ms = log_request.call_args.args
        assert (method, path, status_code) == ("GET", f"{API}/books/BK404", 404)
        assert duration_ms >= 0

    @pytest.mark.asyncio
    async def test_liveness_is_not_logged(self, client):
        with patch.object(logger, "log_request") as log_request:
            await client.get(f"{API}/health/live")

        log_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["health"] == f"{API}/health"
