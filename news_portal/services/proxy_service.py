# services/proxy_service.py

"""
Proxy service: forwards browser requests to the backend REST API and relays
the reply, turning backend failures into envelope errors.
"""

from dataclasses import dataclass
from typing import Any, Optional

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..adapters.backend_client import BackendClient, QueryParams
from ..utils.errors import BackendError

logger = LoggerFactory.get_logger(
    name="proxy-service",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)


@dataclass
class ProxyResult:
    """Successful backend reply ready to be relayed"""

    status_code: int
    data: Any


def extract_error_message(data: Any, fallback: str) -> str:
    """Pick the backend's error text: "error", then "message", then fallback"""
    if isinstance(data, dict):
        for key in ("error", "message"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return fallback


class ProxyService:
    """Thin forwarder in front of the backend service"""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def forward(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams = None,
        body: Any = None,
        authorization: Optional[str] = None,
        error_message: str = "Request failed",
        timeout: Optional[float] = None,
    ) -> ProxyResult:
        """
        Forward one request.

        Args:
            method: HTTP verb
            path: backend path, e.g. /api/articles
            params: query string or mapping, forwarded verbatim
            body: JSON body for write requests
            authorization: Authorization header value to pass through
            error_message: fallback text when the backend gives none

        Returns:
            ProxyResult: backend status and decoded body

        Raises:
            BackendError: the backend answered with a non-2xx status
            BackendUnavailableError: the backend could not be reached
        """
        headers = {"Authorization": authorization} if authorization else None
        response = await self.backend.request(
            method, path, params=params, json=body, headers=headers, timeout=timeout
        )

        if not response.ok:
            message = extract_error_message(response.data, error_message)
            logger.warning(
                f"Backend {method} {path} returned {response.status_code}: {message}"
            )
            raise BackendError(message, response.status_code, payload=response.data)

        return ProxyResult(status_code=response.status_code, data=response.data)

    async def get(self, path: str, **kwargs: Any) -> ProxyResult:
        return await self.forward("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> ProxyResult:
        return await self.forward("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> ProxyResult:
        return await self.forward("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> ProxyResult:
        return await self.forward("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> ProxyResult:
        return await self.forward("DELETE", path, **kwargs)
