from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..api.envelope import Page, unwrap, unwrap_page
from .model import Role, RolePermission, role_from_api
from .repository import RoleRepository


def _one(payload: Any) -> Optional[Role]:
    data = unwrap(payload)
    if isinstance(data, dict) and (data.get("_id") or data.get("id")):
        return role_from_api(data)
    return None


class HttpRoleRepository(RoleRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, params: dict) -> Page:
        page = unwrap_page(self._client.get("/roles", params=params))
        return Page(items=[role_from_api(r) for r in page.items], pagination=page.pagination)

    def get(self, role_id: str) -> Optional[Role]:
        return _one(self._client.get(f"/roles/{role_id}"))

    def create(self, data: dict) -> Optional[Role]:
        return _one(self._client.post("/roles", data))

    def update(self, role_id: str, data: dict) -> Optional[Role]:
        return _one(self._client.patch(f"/roles/{role_id}", data))

    def delete(self, role_id: str) -> None:
        self._client.delete(f"/roles/{role_id}")

    def assign_permissions(self, role_id: str, permissions: Sequence[RolePermission]) -> Optional[Role]:
        body = {"permissions": [p.to_api() for p in permissions]}
        return _one(self._client.post(f"/roles/{role_id}/permissions", body))
