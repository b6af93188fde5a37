# adapters/__init__.py

"""
HTTP clients for the backend service.
"""

from .backend_client import BackendClient, BackendResponse
from .admin_api_client import AdminApiClient

__all__ = [
    "BackendClient",
    "BackendResponse",
    "AdminApiClient",
]
