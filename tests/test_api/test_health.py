"""Tests for health check endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Tests for health check routes."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    @pytest.mark.asyncio
    async def test_health_live_endpoint(self, client: AsyncClient):
        response = await client.get("/health/live")
        assert response.status_code == 200

        data = response.json()
        assert data["checks"] == {"alive": True}

    @pytest.mark.asyncio
    async def test_health_ready_with_database(self, client: AsyncClient):
        with patch(
            "app.api.routes.health.verify_db_connection", AsyncMock(return_value=True)
        ):
            response = await client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"] == {"database": True}

    @pytest.mark.asyncio
    async def test_health_ready_without_database(self, client: AsyncClient):
        with patch(
            "app.api.routes.health.verify_db_connection", AsyncMock(return_value=False)
        ):
            response = await client.get("/health/ready")

        data = response.json()
        assert data["status"] == "degraded"
        assert data["checks"] == {"database": False}

    @pytest.mark.asyncio
    async def test_root_endpoint(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "Product Category Service"
