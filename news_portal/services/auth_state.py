# services/auth_state.py

"""
Client-side admin session state.

Keeps the bearer token and a snapshot of the signed-in admin in a key-value
store under the keys "adminToken" and "adminData". Nothing here validates the
token: is_authenticated() only checks that one is stored, and every backend
call is authorized by the backend itself.

Listeners registered with subscribe() are notified with an AuthChangeEvent
whenever the stored state changes.
"""

import json
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from common.cache import CacheInterface
from common.logger import LoggerFactory, LoggerType, LogLevel

from ..schemas.news_schemas import AdminUser

logger = LoggerFactory.get_logger(
    name="auth-state",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
)

ADMIN_TOKEN_KEY = "adminToken"
ADMIN_DATA_KEY = "adminData"
AUTH_CHANGE_EVENT = "authChange"


class AuthChangeType(Enum):
    LOGIN = "login"
    LOGOUT = "logout"


@dataclass(frozen=True)
class AuthChangeEvent:
    """Payload handed to listeners"""

    type: AuthChangeType
    is_authenticated: bool
    admin: Optional[AdminUser] = None
    name: str = AUTH_CHANGE_EVENT


AuthListener = Callable[[AuthChangeEvent], None]


class AuthStateStore:
    """Token and admin snapshot storage with change notifications"""

    def __init__(self, storage: CacheInterface):
        self.storage = storage
        self._listeners: List[AuthListener] = []
        self._lock = threading.Lock()

    def get_auth_token(self) -> Optional[str]:
        return self.storage.get(ADMIN_TOKEN_KEY)

    def get_admin_data(self) -> Optional[AdminUser]:
        raw = self.storage.get(ADMIN_DATA_KEY)
        if not raw:
            return None
        try:
            return AdminUser.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning(f"Discarding unreadable {ADMIN_DATA_KEY}: {e}")
            return None

    def set_auth_data(self, token: str, admin: AdminUser) -> None:
        """Store the token and admin snapshot, then notify listeners"""
        self.storage.set(ADMIN_TOKEN_KEY, token)
        self.storage.set(ADMIN_DATA_KEY, json.dumps(admin.to_document()))
        logger.info(f"Stored session for {admin.email}")
        self._notify(
            AuthChangeEvent(type=AuthChangeType.LOGIN, is_authenticated=True, admin=admin)
        )

    def clear_auth_data(self) -> None:
        self.storage.delete(ADMIN_TOKEN_KEY)
        self.storage.delete(ADMIN_DATA_KEY)
        logger.info("Cleared stored session")
        self._notify(
            AuthChangeEvent(type=AuthChangeType.LOGOUT, is_authenticated=False)
        )

    def is_authenticated(self) -> bool:
        return bool(self.get_auth_token())

    def auth_headers(self) -> Dict[str, str]:
        token = self.get_auth_token()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register listener; returns a callable that unregisters it"""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: AuthChangeEvent) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                logger.warning(f"Auth listener {listener!r} failed: {e}")
