# tests/test_auth_state.py

"""
Tests for the admin session store.
"""

import json

from common.cache import FileCache
from news_portal.schemas.news_schemas import AdminRole, AdminUser
from news_portal.services.auth_state import (
    ADMIN_DATA_KEY,
    ADMIN_TOKEN_KEY,
    AUTH_CHANGE_EVENT,
    AuthChangeType,
    AuthStateStore,
)


def make_admin(**overrides) -> AdminUser:
    data = {
        "_id": "64f0c0ffee",
        "name": "Jane Editor",
        "email": "jane@example.com",
        "role": "editor",
        "profilePicture": "/uploads/jane.png",
    }
    data.update(overrides)
    return AdminUser.model_validate(data)


class TestAuthStateStore:
    """Token and profile storage."""

    def test_initially_unauthenticated(self, auth_store):
        assert auth_store.get_auth_token() is None
        assert auth_store.get_admin_data() is None
        assert auth_store.is_authenticated() is False
        assert auth_store.auth_headers() == {}

    def test_set_and_get(self, auth_store):
        admin = make_admin()

        auth_store.set_auth_data("token-123", admin)

        assert auth_store.get_auth_token() == "token-123"
        assert auth_store.get_admin_data() == admin
        assert auth_store.get_admin_data().role == AdminRole.EDITOR
        assert auth_store.is_authenticated() is True

    def test_null_fields_survive_round_trip(self, auth_store):
        admin = make_admin(description=None, permissions=None)

        auth_store.set_auth_data("token-123", admin)

        stored = auth_store.get_admin_data()
        assert stored == admin
        assert stored.model_extra == {"permissions": None}
        data = json.loads(auth_store.storage.get(ADMIN_DATA_KEY))
        assert data["permissions"] is None
        assert data["description"] is None

    def test_profile_stored_as_camel_case_json(self, auth_store):
        auth_store.set_auth_data("token-123", make_admin())

        raw = auth_store.storage.get(ADMIN_DATA_KEY)
        data = json.loads(raw)
        assert data["_id"] == "64f0c0ffee"
        assert data["profilePicture"] == "/uploads/jane.png"
        assert auth_store.storage.get(ADMIN_TOKEN_KEY) == "token-123"

    def test_auth_headers(self, auth_store):
        auth_store.set_auth_data("abc", make_admin())

        assert auth_store.auth_headers() == {"Authorization": "Bearer abc"}

    def test_clear(self, auth_store):
        auth_store.set_auth_data("token-123", make_admin())

        auth_store.clear_auth_data()

        assert auth_store.get_auth_token() is None
        assert auth_store.get_admin_data() is None
        assert auth_store.is_authenticated() is False

    def test_authenticated_is_only_a_presence_check(self, auth_store):
        auth_store.storage.set(ADMIN_TOKEN_KEY, "expired-or-garbage")

        assert auth_store.is_authenticated() is True

    def test_unreadable_profile_is_ignored(self, auth_store):
        auth_store.storage.set(ADMIN_DATA_KEY, "{not json")

        assert auth_store.get_admin_data() is None


class TestAuthChangeEvents:
    def test_login_and_logout_events(self, auth_store):
        events = []
        auth_store.subscribe(events.append)

        admin = make_admin()
        auth_store.set_auth_data("t", admin)
        auth_store.clear_auth_data()

        assert [e.type for e in events] == [AuthChangeType.LOGIN, AuthChangeType.LOGOUT]
        assert events[0].is_authenticated is True
        assert events[0].admin.email == admin.email
        assert events[1].is_authenticated is False
        assert events[1].admin is None
        assert all(e.name == AUTH_CHANGE_EVENT for e in events)

    def test_unsubscribe(self, auth_store):
        events = []
        unsubscribe = auth_store.subscribe(events.append)

        unsubscribe()
        auth_store.set_auth_data("t", make_admin())

        assert events == []

    def test_failing_listener_does_not_stop_others(self, auth_store):
        def broken(event):
            raise RuntimeError("listener failure")

        events = []
        auth_store.subscribe(broken)
        auth_store.subscribe(events.append)

        auth_store.set_auth_data("t", make_admin())

        assert len(events) == 1


class TestFileBackedSession:
    def test_session_survives_new_store(self, tmp_path):
        first = AuthStateStore(FileCache(name="auth", cache_dir=str(tmp_path)))
        first.set_auth_data("persisted", make_admin())

        second = AuthStateStore(FileCache(name="auth", cache_dir=str(tmp_path)))

        assert second.get_auth_token() == "persisted"
        assert second.get_admin_data().name == "Jane Editor"

        second.clear_auth_data()
        assert first.is_authenticated() is False
