# adapters/admin_api_client.py

"""
Authenticated client for the back office: logs in against the backend, keeps
the session in an AuthStateStore and attaches the bearer token to calls.
"""

from typing import Any, Dict, Optional

import httpx

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..schemas.news_schemas import AdminUser
from ..services.auth_state import AuthStateStore
from ..utils.errors import AdminApiError

logger = LoggerFactory.get_logger(
    name="admin-api-client", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)


class AdminApiClient:
    """Back office API wrapper around the stored session"""

    def __init__(
        self,
        base_url: str,
        auth_state: AuthStateStore,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.auth_state = auth_state
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "AdminApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def call(
        self,
        endpoint: str,
        method: str = "GET",
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Call <base_url>/api<endpoint> with the stored token.

        Raises:
            AdminApiError: non-2xx reply, with the backend "error" text when
                present, otherwise "HTTP <status>"
        """
        request_headers = {"Content-Type": "application/json"}
        request_headers.update(self.auth_state.auth_headers())
        if headers:
            request_headers.update(headers)

        try:
            response = await self._client.request(
                method, f"/api{endpoint}", json=json, headers=request_headers
            )
        except httpx.HTTPError as e:
            logger.error(f"Admin API {method} {endpoint} failed: {e}")
            raise AdminApiError("Network error") from e

        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = {"error": "Network error"}
            message = (
                payload.get("error") if isinstance(payload, dict) else None
            ) or f"HTTP {response.status_code}"
            logger.warning(f"Admin API {method} {endpoint} -> {response.status_code}")
            raise AdminApiError(message, response.status_code)

        return response.json()

    async def login(self, email: str, password: str) -> AdminUser:
        """Authenticate and store the returned token and admin profile"""
        data = await self.call(
            "/auth/login", method="POST", json={"email": email, "password": password}
        )
        token = data.get("token") if isinstance(data, dict) else None
        if not token or not data.get("admin"):
            raise AdminApiError("Login response did not include a token")

        admin = AdminUser.model_validate(data["admin"])
        self.auth_state.set_auth_data(token, admin)
        return admin

    def logout(self) -> None:
        self.auth_state.clear_auth_data()
