# utils/errors.py

"""
Exceptions raised by the gateway and the admin API client.

GatewayError subclasses carry the HTTP status and message that end up in the
{"success": false, "error": ...} envelope.
"""

from ..schemas.common_schemas import ErrorEnvelope

INTERNAL_SERVER_ERROR = "Internal server error"
AUTHORIZATION_REQUIRED = "Authorization header required"


class GatewayError(Exception):
    """Error that maps directly onto an envelope response"""

    status_code: int = 500

    def __init__(self, message: str = INTERNAL_SERVER_ERROR, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_envelope(self) -> dict:
        return ErrorEnvelope(error=self.message).model_dump()


class AuthorizationRequiredError(GatewayError):
    status_code = 401

    def __init__(self, message: str = AUTHORIZATION_REQUIRED):
        super().__init__(message)


class InvalidRequestError(GatewayError):
    status_code = 400


class BackendError(GatewayError):
    """Backend answered with a non-2xx status"""

    def __init__(self, message: str, status_code: int, payload: object = None):
        super().__init__(message, status_code)
        self.payload = payload


class BackendUnavailableError(GatewayError):
    """Backend could not be reached or returned an unreadable body"""

    def __init__(self, message: str = INTERNAL_SERVER_ERROR, cause: Exception = None):
        super().__init__(message, 500)
        self.cause = cause


class AdminApiError(Exception):
    """Raised by AdminApiClient when an authenticated call fails"""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
