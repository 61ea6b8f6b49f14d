from __future__ import annotations

import pytest

from hr_admin_portal.api.envelope import Page, Pagination
from hr_admin_portal.core.exceptions import ValidationError
from hr_admin_portal.users.model import Location, User
from hr_admin_portal.users.service import UserService

VALID = dict(
    firstname="Asha",
    lastname="Rao",
    email="asha@example.com",
    role="r1",
    mobilenumber="+91 (98) 765-43210",
    addressline1="12 MG Road",
    city="c1",
    state="s1",
    center="Pune",
    pincode="411001",
)


def _user(n):
    return User(user_id=f"u{n}", firstname="User", lastname=str(n), email=f"u{n}@example.com", role=None)


class FakeUserRepo:
    def __init__(self, total=5, page_size=2, echo_page=True):
        self.users = [_user(n) for n in range(1, total + 1)]
        self.page_size = page_size
        self.echo_page = echo_page
        self.calls = []
        self.logged_out = []

    def list(self, params):
        self.calls.append(params)
        page, limit = params["page"], params["limit"]
        start = (page - 1) * limit
        total_pages = -(-len(self.users) // limit)
        if not self.echo_page:
            return Page(items=self.users[start:start + limit], pagination=Pagination(total_pages=total_pages))
        return Page(
            items=self.users[start:start + limit],
            pagination=Pagination(page=page, limit=limit, total=len(self.users), total_pages=total_pages),
        )

    def get(self, user_id):
        return next((u for u in self.users if u.user_id == user_id), None)

    def create(self, data):
        return None

    def update(self, user_id, data):
        return None

    def delete(self, user_id):
        return None

    def logout_all_devices(self, user_id):
        self.logged_out.append(user_id)


class FakeLocationRepo:
    def __init__(self):
        self.city_queries = []

    def states(self):
        return [Location("s1", "Maharashtra")]

    def state(self, state_id):
        return Location(state_id, "Maharashtra")

    def cities(self, state_id=None):
        self.city_queries.append(state_id)
        return [Location("c1", "Pune", "s1")]

    def city(self, city_id):
        return Location(city_id, "Pune", "s1")


def _service(**kw):
    return UserService(FakeUserRepo(**kw), FakeLocationRepo())


def test_build_payload_on_create_requires_password():
    with pytest.raises(ValidationError, match="Password"):
        UserService.build_payload(**VALID)
    with pytest.raises(ValidationError, match="Password"):
        UserService.build_payload(**VALID, password="12345")

    payload = UserService.build_payload(**VALID, password="123456")
    assert payload["password"] == "123456"
    assert payload["addressline2"] == ""


def test_build_payload_on_update_keeps_password_optional():
    payload = UserService.build_payload(**VALID, is_new=False)
    assert "password" not in payload


@pytest.mark.parametrize(
    "field,value",
    [
        ("firstname", "A"),
        ("email", "asha.example.com"),
        ("role", ""),
        ("mobilenumber", "call me"),
        ("center", "  "),
        ("pincode", "4110"),
        ("pincode", "41100a"),
    ],
)
def test_build_payload_rejects_bad_fields(field, value):
    data = {**VALID, field: value}
    with pytest.raises(ValidationError):
        UserService.build_payload(**data, password="123456")


def test_iter_all_walks_every_page():
    svc = _service(total=5)
    users = list(svc.iter_all(limit=2))

    assert [u.user_id for u in users] == ["u1", "u2", "u3", "u4", "u5"]
    assert [c["page"] for c in svc._users.calls] == [1, 2, 3]


def test_iter_all_stops_when_backend_does_not_echo_page():
    svc = _service(total=3, echo_page=False)
    users = list(svc.iter_all(limit=2))

    assert [u.user_id for u in users] == ["u1", "u2", "u3"]
    assert [c["page"] for c in svc._users.calls] == [1, 2]


def test_list_passes_sort_and_search():
    svc = _service()
    svc.list(page=2, limit=5, search=" rao ", sort_by="firstname", sort_order="asc")
    params = svc._users.calls[0]
    assert params["search"] == "rao"
    assert params["sortBy"] == "firstname"
    assert params["sortOrder"].value == "asc"


def test_get_missing_user_raises():
    with pytest.raises(ValidationError, match="User not found"):
        _service().get("u99")


def test_logout_all_devices_and_locations():
    svc = _service()
    svc.logout_all_devices("u1")
    assert svc._users.logged_out == ["u1"]

    assert svc.states()[0].name == "Maharashtra"
    assert svc.cities(" s1 ")[0].parent_id == "s1"
    svc.cities("")
    assert svc._locations.city_queries == ["s1", None]
