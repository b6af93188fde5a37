# tests/test_admin_api_client.py

"""
Tests for the authenticated back office client.
"""

import httpx
import pytest

from news_portal.adapters.admin_api_client import AdminApiClient
from news_portal.core.config import settings
from news_portal.utils.dependencies import create_admin_api_client, get_auth_state_store
from news_portal.utils.errors import AdminApiError

BACKEND_URL = "http://backend.test"

ADMIN_PAYLOAD = {
    "_id": "a1",
    "name": "Site Admin",
    "email": "admin@example.com",
    "role": "admin",
}


def make_client(backend, auth_store) -> AdminApiClient:
    return AdminApiClient(BACKEND_URL, auth_store, transport=backend.transport())


class TestAdminApiClient:
    @pytest.mark.asyncio
    async def test_login_stores_session(self, backend, auth_store):
        backend.add(
            "POST",
            "/api/auth/login",
            json={"success": True, "token": "jwt-token", "admin": ADMIN_PAYLOAD},
        )

        async with make_client(backend, auth_store) as api:
            admin = await api.login("admin@example.com", "secret")

        assert admin.email == "admin@example.com"
        assert auth_store.get_auth_token() == "jwt-token"
        assert auth_store.get_admin_data().name == "Site Admin"
        assert backend.last_request.url.path == "/api/auth/login"

    @pytest.mark.asyncio
    async def test_login_failure_keeps_session_empty(self, backend, auth_store):
        backend.add(
            "POST", "/api/auth/login", status=401, json={"error": "Invalid credentials"}
        )

        async with make_client(backend, auth_store) as api:
            with pytest.raises(AdminApiError, match="Invalid credentials") as exc_info:
                await api.login("admin@example.com", "wrong")

        assert exc_info.value.status_code == 401
        assert auth_store.is_authenticated() is False

    @pytest.mark.asyncio
    async def test_call_sends_stored_bearer_token(self, backend, auth_store):
        backend.add("GET", "/api/admin/stats", json={"success": True, "articles": 4})
        auth_store.storage.set("adminToken", "stored-token")

        async with make_client(backend, auth_store) as api:
            data = await api.call("/admin/stats")

        assert data == {"success": True, "articles": 4}
        assert backend.last_request.headers["Authorization"] == "Bearer stored-token"

    @pytest.mark.asyncio
    async def test_call_without_session_sends_no_authorization(self, backend, auth_store):
        backend.add("GET", "/api/categories", json=[])

        async with make_client(backend, auth_store) as api:
            await api.call("/categories")

        assert "Authorization" not in backend.last_request.headers

    @pytest.mark.asyncio
    async def test_error_without_message_uses_status(self, backend, auth_store):
        backend.add("DELETE", "/api/admin/users/u1", status=403, json={"success": False})

        async with make_client(backend, auth_store) as api:
            with pytest.raises(AdminApiError, match="HTTP 403"):
                await api.call("/admin/users/u1", method="DELETE")

    @pytest.mark.asyncio
    async def test_unparsable_error_body(self, backend, auth_store):
        backend.add("GET", "/api/admin/stats", status=502, text="<html>Bad gateway</html>")

        async with make_client(backend, auth_store) as api:
            with pytest.raises(AdminApiError, match="Network error"):
                await api.call("/admin/stats")

    @pytest.mark.asyncio
    async def test_network_failure(self, backend, auth_store):
        backend.add(
            "GET", "/api/admin/stats", error=httpx.ConnectError("connection refused")
        )

        async with make_client(backend, auth_store) as api:
            with pytest.raises(AdminApiError, match="Network error"):
                await api.call("/admin/stats")

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, backend, auth_store):
        backend.add(
            "POST",
            "/api/auth/login",
            json={"success": True, "token": "jwt-token", "admin": ADMIN_PAYLOAD},
        )

        async with make_client(backend, auth_store) as api:
            await api.login("admin@example.com", "secret")
            api.logout()

        assert auth_store.is_authenticated() is False
        assert auth_store.get_admin_data() is None


class TestAdminApiClientFactory:
    @pytest.mark.asyncio
    async def test_bound_to_shared_session_store(self):
        api = create_admin_api_client()
        try:
            assert api.auth_state is get_auth_state_store()
            assert api.base_url == settings.api_base_url.rstrip("/")
        finally:
            await api.close()
