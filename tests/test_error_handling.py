"""
Error envelope, routing fallbacks and ambient endpoints
"""

import pytest


class TestRoutingFallbacks:
    """Unmatched method/path combinations are a plain 404"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path", [
        ("GET", "/nowhere"),
        ("GET", "/users/1/extra"),
        ("PATCH", "/users/1"),
        ("DELETE", "/users"),
        ("PUT", "/users"),
        ("POST", "/users/1"),
    ])
    async def test_unmatched_route_is_404(self, client, method, path):
        response = await client.request(method, path)

        assert response.status_code == 404
        assert "allow" not in response.headers


class TestErrorEnvelope:
    """Error bodies share one small JSON shape"""

    @pytest.mark.asyncio
    async def test_not_found_envelope(self, client):
        response = await client.get("/users/9")

        body = response.json()
        assert response.headers["content-type"] == "application/json"
        assert body["error"] == "HTTP 404"
        assert body["message"] == "User not found"
        assert "timestamp" in body
        assert body["trace_id"] == response.headers["x-trace-id"]

    @pytest.mark.asyncio
    async def test_bad_request_envelope_lists_rejected_fields(self, client):
        response = await client.post("/users", json={"name": "Jane"})

        body = response.json()
        assert body["error"] == "HTTP 400"
        assert body["message"] == "Invalid request body"
        assert any(item["field"].endswith("email") for item in body["detail"])

    @pytest.mark.asyncio
    async def test_every_response_has_a_trace_id(self, client, jane):
        first = await client.post("/users", json=jane)
        second = await client.get("/users/1")

        assert first.headers["x-trace-id"]
        assert second.headers["x-trace-id"]
        assert first.headers["x-trace-id"] != second.headers["x-trace-id"]


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_user_count(self, client, jane):
        await client.post("/users", json=jane)

        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["users"] == 1
