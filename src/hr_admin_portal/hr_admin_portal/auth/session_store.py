from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol

from flask import g, has_app_context, has_request_context, session

from .model import SessionUser

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"
USER_KEY = "auth_user"
LOGOUT_FLAG = "hr_admin_portal_logging_out"


class SessionStore(Protocol):
    """Where the bearer token and the logged-in user are kept between requests."""

    def get_token(self) -> Optional[str]:
        raise NotImplementedError

    def get_user(self) -> Optional[SessionUser]:
        raise NotImplementedError

    def set(self, token: str, user: SessionUser) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def logout_in_progress(self) -> bool:
        raise NotImplementedError

    def mark_logout(self, active: bool) -> None:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    """Used by scripts and tests that run without a Flask request."""

    def __init__(self):
        self._token: Optional[str] = None
        self._user: Optional[SessionUser] = None
        self._local = threading.local()

    def get_token(self) -> Optional[str]:
        return self._token

    def get_user(self) -> Optional[SessionUser]:
        return self._user

    def set(self, token: str, user: SessionUser) -> None:
        self._token = token
        self._user = user

    def clear(self) -> None:
        self._token = None
        self._user = None

    def logout_in_progress(self) -> bool:
        return getattr(self._local, "logging_out", False)

    def mark_logout(self, active: bool) -> None:
        self._local.logging_out = active


class FlaskSessionStore(SessionStore):
    """Keeps the token and serialized user in the signed Flask session cookie."""

    def get_token(self) -> Optional[str]:
        if not has_request_context():
            return None
        return session.get(TOKEN_KEY)

    def get_user(self) -> Optional[SessionUser]:
        if not has_request_context():
            return None
        raw = session.get(USER_KEY)
        if not raw:
            return None
        try:
            return SessionUser.from_api(raw)
        except (AttributeError, TypeError, ValueError):
            logger.warning("Discarding unreadable user from session")
            session.pop(USER_KEY, None)
            return None

    def set(self, token: str, user: SessionUser) -> None:
        # lifetime comes from PERMANENT_SESSION_LIFETIME (SESSION_DAYS)
        session.permanent = True
        session[TOKEN_KEY] = token
        session[USER_KEY] = user.to_api()

    def clear(self) -> None:
        if not has_request_context():
            return
        session.pop(TOKEN_KEY, None)
        session.pop(USER_KEY, None)

    # Scoped to the current request.
    def logout_in_progress(self) -> bool:
        if not has_app_context():
            return False
        return bool(g.get(LOGOUT_FLAG, False))

    def mark_logout(self, active: bool) -> None:
        if has_app_context():
            setattr(g, LOGOUT_FLAG, active)
