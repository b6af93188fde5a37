# utils/response_converters.py

"""
Conversions from proxy results and errors to HTTP responses.
"""

from typing import Dict, Optional

from fastapi.responses import JSONResponse

from ..services.proxy_service import ProxyResult
from .errors import GatewayError


def relay_response(
    result: ProxyResult, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Relay a backend reply with its original status code"""
    return JSONResponse(
        content=result.data, status_code=result.status_code, headers=headers
    )


def error_response(
    error: GatewayError, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Render a GatewayError as the {"success": false, "error": ...} envelope"""
    return JSONResponse(
        content=error.to_envelope(), status_code=error.status_code, headers=headers
    )
