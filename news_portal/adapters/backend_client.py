# adapters/backend_client.py

"""
HTTP client for the backend REST API, built on a shared httpx.AsyncClient.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from common.logger import LoggerFactory, LoggerType, LogLevel

from ..utils.errors import BackendUnavailableError

logger = LoggerFactory.get_logger(
    name="backend-client", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
)

QueryParams = Union[Mapping[str, Any], str, None]


@dataclass
class BackendResponse:
    """Decoded backend reply"""

    status_code: int
    data: Any
    headers: Mapping[str, str]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class BackendClient:
    """
    Forwards requests to the backend service.

    A single instance is shared by all routes; open() and close() are driven by
    the application lifespan.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Backend base URL, e.g. http://localhost:5000
            timeout: Default request timeout in seconds
            transport: Optional transport override (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
            logger.info(f"Backend client opened for {self.base_url}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Backend client closed")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Backend client not opened. Call open() first.")
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> BackendResponse:
        """
        Send one request and decode the JSON body.

        Raises:
            BackendUnavailableError: network failure or a body that is not JSON
        """
        await self.open()
        request_kwargs: Dict[str, Any] = {
            "params": params,
            "headers": headers,
            "timeout": timeout if timeout is not None else self.timeout,
        }
        if json is not None:
            request_kwargs["json"] = json
        try:
            response = await self.client.request(method, path, **request_kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Backend request {method} {path} failed: {e}")
            raise BackendUnavailableError(cause=e) from e

        try:
            data = response.json() if response.content else None
        except ValueError as e:
            logger.error(
                f"Backend returned non-JSON body for {method} {path} "
                f"(status {response.status_code})"
            )
            raise BackendUnavailableError(cause=e) from e

        logger.debug(f"Backend {method} {path} -> {response.status_code}")
        return BackendResponse(
            status_code=response.status_code, data=data, headers=response.headers
        )
