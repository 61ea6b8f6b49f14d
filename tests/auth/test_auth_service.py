from __future__ import annotations

import threading

import pytest

from hr_admin_portal.auth.service import AuthService
from hr_admin_portal.auth.session_store import InMemorySessionStore
from hr_admin_portal.core.exceptions import ApiError, AuthenticationError, ValidationError

LOGIN_USER = {
    "id": "u1",
    "email": "admin@example.com",
    "firstname": "Ada",
    "lastname": "Admin",
    "role": {"id": "r1", "name": "manager", "displayName": "Manager"},
    "permissions": [{"module": "leave", "actions": ["read", "approve"]}],
    "isSuperAdmin": False,
}


class FakeAuthRepo:
    def __init__(self):
        self.logout_tokens = []
        self.login_error = None
        self.logout_error = None
        self.otp_emails = []
        self.resets = []

    def login(self, *, email, password):
        if self.login_error:
            raise self.login_error
        return {"access_token": "tok-1", "user": LOGIN_USER}

    def logout(self, *, token):
        self.logout_tokens.append(token)
        if self.logout_error:
            raise self.logout_error

    def send_otp(self, *, email):
        self.otp_emails.append(email)
        return {"message": "OTP sent"}

    def reset_password(self, *, token, new_password):
        self.resets.append((token, new_password))
        return {}


def _service():
    repo = FakeAuthRepo()
    store = InMemorySessionStore()
    return AuthService(repo, store), repo, store


def test_login_stores_session_and_notifies():
    svc, _, store = _service()
    seen = []
    svc.subscribe(seen.append)

    user = svc.login("admin@example.com", "secret")

    assert store.get_token() == "tok-1"
    assert user.full_name == "Ada Admin"
    assert user.permissions[0].actions == ("read", "approve")
    assert svc.is_authenticated()
    assert seen == [user]


def test_login_validates_before_calling_backend():
    svc, repo, _ = _service()
    repo.login_error = AssertionError("backend must not be called")
    with pytest.raises(ValidationError):
        svc.login("not-an-email", "secret")
    with pytest.raises(ValidationError):
        svc.login("admin@example.com", "")


def test_login_rejected_by_backend_is_authentication_error():
    svc, repo, store = _service()
    repo.login_error = ApiError("Invalid credentials", status_code=401)

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        svc.login("admin@example.com", "wrong")
    assert store.get_token() is None


def test_login_server_error_propagates():
    svc, repo, _ = _service()
    repo.login_error = ApiError("boom", status_code=500)
    with pytest.raises(ApiError):
        svc.login("admin@example.com", "secret")


def test_logout_clears_first_then_calls_backend_with_old_token():
    svc, repo, store = _service()
    svc.login("admin@example.com", "secret")
    seen = []
    svc.subscribe(seen.append)

    svc.logout()

    assert store.get_token() is None
    assert repo.logout_tokens == ["tok-1"]
    assert seen == [None]
    assert not svc.is_logging_out


def test_logout_ignores_backend_failure():
    svc, repo, store = _service()
    svc.login("admin@example.com", "secret")
    repo.logout_error = ApiError("expired", status_code=401)

    svc.logout()

    assert store.get_token() is None


def test_unauthorized_during_logout_is_ignored():
    svc, repo, store = _service()
    svc.login("admin@example.com", "secret")
    calls = []

    def logout_that_triggers_401(*, token):
        calls.append(svc.is_logging_out)
        svc.handle_unauthorized()

    repo.logout = logout_that_triggers_401
    svc.logout()

    assert calls == [True]
    assert store.get_token() is None


def test_overlapping_logouts_each_clear_their_session():
    svc, repo, store = _service()
    svc.login("admin@example.com", "secret")
    entered = threading.Event()
    release = threading.Event()

    def slow_logout(*, token):
        repo.logout_tokens.append(token)
        if threading.current_thread() is not threading.main_thread():
            entered.set()
            release.wait(5)

    repo.logout = slow_logout
    worker = threading.Thread(target=svc.logout)
    worker.start()
    try:
        assert entered.wait(5)

        svc.login("admin@example.com", "secret")
        svc.handle_unauthorized()
        assert store.get_token() is None

        svc.login("admin@example.com", "secret")
        svc.logout()
        assert store.get_token() is None
        assert not svc.is_logging_out
    finally:
        release.set()
        worker.join(5)

    assert repo.logout_tokens == ["tok-1", "tok-1"]


def test_handle_unauthorized_clears_session():
    svc, _, store = _service()
    svc.login("admin@example.com", "secret")

    svc.handle_unauthorized()

    assert store.get_user() is None
    with pytest.raises(AuthenticationError):
        svc.require_user()


def test_password_reset_flow():
    svc, repo, _ = _service()

    assert svc.forgot_password("admin@example.com") == "OTP sent"
    assert repo.otp_emails == ["admin@example.com"]

    with pytest.raises(ValidationError):
        svc.reset_password("123456", "short")
    assert svc.reset_password("123456", "long-enough") == "Password has been reset"
    assert repo.resets == [("123456", "long-enough")]
