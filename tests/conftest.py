from __future__ import annotations

import json as jsonlib
from urllib.parse import urlparse

import pytest
import requests

from hr_admin_portal.auth.model import SessionUser
from hr_admin_portal.roles.model import RolePermission, RoleRef

BASE_URL = "http://backend.test/api/v1"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else jsonlib.dumps(payload).encode()
        self.text = self.content.decode()

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


class FakeHttpSession:
    """Stands in for ``requests.Session``: canned answers keyed by method and path."""

    def __init__(self):
        self.routes: dict[tuple[str, str], object] = {}
        self.calls: list[dict] = []
        self.fail_with = None

    def add(self, method: str, path: str, payload=None, status: int = 200):
        self.routes[(method.upper(), path)] = (status, payload)

    def request(self, method, url, **kwargs):
        path = urlparse(url).path.replace("/api/v1", "", 1)
        self.calls.append({"method": method, "path": path, **kwargs})
        if self.fail_with is not None:
            raise self.fail_with
        status, payload = self.routes.get((method.upper(), path), (404, {"message": f"No route {method} {path}"}))
        return FakeResponse(status, payload)

    def last(self, method: str, path: str):
        for call in reversed(self.calls):
            if call["method"] == method and call["path"] == path:
                return call
        return None


def envelope(data, pagination=None):
    body = {"code": 200, "status": "success", "data": data, "timestamp": "2026-01-01T00:00:00Z", "path": "/"}
    if pagination is not None:
        body["pagination"] = pagination
    return body


def make_user(*, super_admin=False, role=True, permissions=()):
    return SessionUser(
        user_id="u1",
        email="admin@example.com",
        firstname="Ada",
        lastname="Admin",
        role=RoleRef(role_id="r1", name="manager", display_name="Manager") if role else None,
        permissions=tuple(RolePermission(module=m, actions=tuple(a)) for m, a in permissions),
        is_super_admin=super_admin,
    )


@pytest.fixture
def http():
    return FakeHttpSession()


@pytest.fixture
def network_error():
    return requests.ConnectionError("connection refused")
