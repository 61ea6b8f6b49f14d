from __future__ import annotations

import logging
from typing import Callable, Optional

from ..common.events import Notifier
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.exceptions import ApiError, AuthenticationError
from .model import SessionUser
from .repository import AuthRepository
from .session_store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: login/logout and the current session.

    Auth-state listeners receive the new ``SessionUser`` (or None) whenever
    the session changes, including forced logouts after a 401/403.
    """

    def __init__(self, auth: AuthRepository, store: SessionStore):
        self._auth = auth
        self._store = store
        self.auth_state = Notifier("auth-state")

    @property
    def is_logging_out(self) -> bool:
        return self._store.logout_in_progress()

    def subscribe(self, listener: Callable[[Optional[SessionUser]], None]) -> Callable[[], None]:
        return self.auth_state.subscribe(listener)

    def login(self, email: str, password: str) -> SessionUser:
        email = require_email(email)
        password = require_non_empty(password, "Password")

        try:
            payload = self._auth.login(email=email, password=password)
        except ApiError as e:
            if e.status_code in (400, 401, 403, 404):
                raise AuthenticationError(e.message or "Invalid email or password")
            raise

        token = payload.get("access_token")
        raw_user = payload.get("user")
        if not token or not raw_user:
            raise AuthenticationError("Login response did not contain a session")

        user = SessionUser.from_api(raw_user)
        self._store.set(token, user)
        logger.info("Logged in %s (super_admin=%s)", user.email, user.is_super_admin)
        self.auth_state.emit(user)
        return user

    def logout(self) -> None:
        if self.is_logging_out:
            logger.debug("Logout already in progress, skipping")
            return

        self._store.mark_logout(True)
        try:
            token = self._store.get_token()
            self._clear()
            if token:
                try:
                    self._auth.logout(token=token)
                except ApiError as e:
                    # 401 is expected for an expired token
                    logger.debug("Backend logout answered %s, ignoring", e.status_code)
        finally:
            self._store.mark_logout(False)

    def handle_unauthorized(self) -> None:
        """Hook for the API client: the backend rejected our token."""
        if self.is_logging_out:
            logger.debug("Unauthorized response during logout, skipping")
            return
        logger.warning("Backend rejected the session token, logging out")
        self._clear()

    def _clear(self) -> None:
        self._store.clear()
        self.auth_state.emit(None)

    def is_authenticated(self) -> bool:
        return bool(self._store.get_token())

    def get_token(self) -> Optional[str]:
        return self._store.get_token()

    def get_user(self) -> Optional[SessionUser]:
        return self._store.get_user()

    def require_user(self) -> SessionUser:
        user = self.get_user()
        if not user or not self.is_authenticated():
            raise AuthenticationError("Please log in to continue")
        return user

    def full_name(self) -> str:
        user = self.get_user()
        return user.full_name if user else ""

    def is_super_admin(self) -> bool:
        user = self.get_user()
        return bool(user and user.is_super_admin)

    def forgot_password(self, email: str) -> str:
        email = require_email(email)
        payload = self._auth.send_otp(email=email)
        return str(payload.get("message") or "If the account exists, a reset code has been sent")

    def reset_password(self, token: str, new_password: str) -> str:
        token = require_non_empty(token, "Reset token")
        new_password = require_min_length(require_non_empty(new_password, "New password"), "New password", 6)
        payload = self._auth.reset_password(token=token, new_password=new_password)
        return str(payload.get("message") or "Password has been reset")
