from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..api.envelope import Page, unwrap, unwrap_page
from ..common.datetime_utils import parse_api_datetime
from ..roles.model import RoleRef
from .model import Location, User
from .repository import LocationRepository, UserRepository


def to_user(r: dict) -> User:
    return User(
        user_id=str(r.get("_id") or r.get("id") or ""),
        firstname=str(r.get("firstname") or ""),
        lastname=str(r.get("lastname") or ""),
        email=str(r.get("email") or ""),
        role=RoleRef.from_api(r.get("role")),
        mobilenumber=str(r.get("mobilenumber") or ""),
        addressline1=str(r.get("addressline1") or ""),
        addressline2=str(r.get("addressline2") or ""),
        city=str(r.get("city") or ""),
        state=str(r.get("state") or ""),
        center=str(r.get("center") or ""),
        pincode=str(r.get("pincode") or ""),
        is_active=bool(r.get("isActive", True)),
        is_logged_in=bool(r.get("isLoggedIn", False)),
        created_at=parse_api_datetime(r.get("createdAt")),
        updated_at=parse_api_datetime(r.get("updatedAt")),
    )


def _one(payload: Any) -> Optional[User]:
    data = unwrap(payload)
    if isinstance(data, dict) and (data.get("_id") or data.get("id")):
        return to_user(data)
    return None


def to_location(r: dict, parent_key: str = "state") -> Location:
    parent = r.get(parent_key)
    if isinstance(parent, dict):
        parent = parent.get("_id") or parent.get("id")
    return Location(
        location_id=str(r.get("_id") or r.get("id") or ""),
        name=str(r.get("name") or ""),
        parent_id=str(parent) if parent else None,
    )


class HttpUserRepository(UserRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, params: dict) -> Page:
        page = unwrap_page(self._client.get("/users", params=params))
        return Page(items=[to_user(r) for r in page.items], pagination=page.pagination)

    def get(self, user_id: str) -> Optional[User]:
        return _one(self._client.get(f"/users/{user_id}"))

    def create(self, data: dict) -> Optional[User]:
        return _one(self._client.post("/users", data))

    def update(self, user_id: str, data: dict) -> Optional[User]:
        return _one(self._client.patch(f"/users/{user_id}", data))

    def delete(self, user_id: str) -> None:
        self._client.delete(f"/users/{user_id}")

    def logout_all_devices(self, user_id: str) -> None:
        self._client.post(f"/users/{user_id}/logout-all-devices", {})


class HttpLocationRepository(LocationRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def states(self) -> Sequence[Location]:
        return [to_location(r, "country") for r in unwrap_page(self._client.get("/states")).items]

    def state(self, state_id: str) -> Optional[Location]:
        data = unwrap(self._client.get(f"/states/{state_id}"))
        return to_location(data, "country") if isinstance(data, dict) else None

    def cities(self, state_id: Optional[str] = None) -> Sequence[Location]:
        payload = self._client.get("/cities", params={"state": state_id})
        return [to_location(r) for r in unwrap_page(payload).items]

    def city(self, city_id: str) -> Optional[Location]:
        data = unwrap(self._client.get(f"/cities/{city_id}"))
        return to_location(data) if isinstance(data, dict) else None
