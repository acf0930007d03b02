"""
Integration tests for request-id, timing and security-header middleware.
"""

import re
import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestRequestId:
    async def test_generated_when_absent(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/articles")
        request_id = response.headers["X-Request-ID"]
        assert str(uuid.UUID(request_id)) == request_id

    async def test_valid_uuid_echoed(self, async_client: AsyncClient):
        incoming = str(uuid.uuid4())
        response = await async_client.get("/api/v1/articles", headers={"X-Request-ID": incoming})
        assert response.headers["X-Request-ID"] == incoming

    @pytest.mark.parametrize("incoming", ["not-a-uuid", "bad value; injected=1", "12345"])
    async def test_malformed_id_replaced(self, async_client: AsyncClient, incoming: str):
        response = await async_client.get("/api/v1/articles", headers={"X-Request-ID": incoming})
        request_id = response.headers["X-Request-ID"]
        assert request_id != incoming
        assert str(uuid.UUID(request_id)) == request_id

    async def test_present_on_error_responses(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/articles/9999")
        assert response.status_code == 404
        assert "X-Request-ID" in response.headers


class TestResponseTime:
    async def test_header_present(self, async_client: AsyncClient):
        response = await async_client.get("/")
        assert re.fullmatch(r"\d+\.\dms", response.headers["X-Response-Time"])


class TestSecurityHeaders:
    async def test_headers_set(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/articles")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"

    async def test_no_hsts_outside_production(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/articles")
        assert "Strict-Transport-Security" not in response.headers
