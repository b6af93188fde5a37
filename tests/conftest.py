# tests/conftest.py

"""
Shared fixtures: a scripted fake backend behind httpx.MockTransport and a
TestClient whose container uses it.
"""

from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from common.cache import CacheFactory, InMemoryCache
from news_portal.adapters.backend_client import BackendClient
from news_portal.main import app
from news_portal.services.auth_state import AuthStateStore
from news_portal.utils.dependencies import container

BACKEND_URL = "http://backend.test"


class FakeBackend:
    """Answers requests from a (method, path) table and records them."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.routes[(method.upper(), path)] = {
            "status": status,
            "json": json,
            "text": text,
            "error": error,
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"success": False, "message": "Not found"})
        if route["error"] is not None:
            raise route["error"]
        if route["text"] is not None:
            return httpx.Response(route["status"], text=route["text"])
        return httpx.Response(route["status"], json=route["json"])

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend_client(backend) -> BackendClient:
    return BackendClient(BACKEND_URL, timeout=5.0, transport=backend.transport())


@pytest.fixture
def client(backend_client):
    container.reset_singletons()
    container.backend_client.override(providers.Object(backend_client))
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.backend_client.reset_override()
        container.reset_singletons()


@pytest.fixture
def auth_store() -> AuthStateStore:
    return AuthStateStore(InMemoryCache(name="test-auth"))


@pytest.fixture(autouse=True)
def clear_cache_instances():
    yield
    CacheFactory.clear_instances()
