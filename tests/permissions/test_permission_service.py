from __future__ import annotations

import pytest

from conftest import make_user
from hr_admin_portal.core.exceptions import AuthorizationError
from hr_admin_portal.permissions.service import PermissionService


class FakeAuth:
    def __init__(self, user):
        self.user = user

    def get_user(self):
        return self.user

    def is_super_admin(self):
        return bool(self.user and self.user.is_super_admin)


def test_checks_follow_current_user():
    auth = FakeAuth(make_user(permissions=[("leave", ["read", "approve"])]))
    svc = PermissionService(auth)

    assert svc.can_approve("leave")
    assert svc.can_read("leave")
    assert not svc.can_delete("leave")
    assert svc.has_role("manager")
    assert svc.can_access_module("leave")
    assert not svc.can_access_module("users")

    auth.user = make_user(super_admin=True)
    assert svc.can_delete("leave")
    assert svc.can_access_module("users")


def test_require_raises_authorization_error():
    svc = PermissionService(FakeAuth(make_user(permissions=[("leave", ["read"])])))

    svc.require("leave", "read")
    with pytest.raises(AuthorizationError):
        svc.require("leave", "approve")


def test_require_any_accepts_one_of_the_grants():
    svc = PermissionService(FakeAuth(make_user(permissions=[("tour", ["approve"])])))

    svc.require_any(["tour:approve", "tour:update"])
    with pytest.raises(AuthorizationError):
        svc.require_any(["tour:update", "tour:delete"])


def test_refresh_notifies_subscribers():
    svc = PermissionService(FakeAuth(make_user()))
    seen = []
    unsubscribe = svc.subscribe(seen.append)

    svc.refresh()
    unsubscribe()
    svc.refresh()

    assert seen == [None]


def test_no_user_has_no_role():
    svc = PermissionService(FakeAuth(None))
    assert not svc.has_role("manager")
    assert not svc.has_permission("leave", "read")
    assert svc.summary() == "No user logged in"
