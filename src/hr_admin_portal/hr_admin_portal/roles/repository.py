from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..api.envelope import Page
from .model import Role, RolePermission


class RoleRepository(Protocol):
    def list(self, params: dict) -> Page:
        raise NotImplementedError

    def get(self, role_id: str) -> Optional[Role]:
        raise NotImplementedError

    def create(self, data: dict) -> Optional[Role]:
        raise NotImplementedError

    def update(self, role_id: str, data: dict) -> Optional[Role]:
        raise NotImplementedError

    def delete(self, role_id: str) -> None:
        raise NotImplementedError

    def assign_permissions(self, role_id: str, permissions: Sequence[RolePermission]) -> Optional[Role]:
        raise NotImplementedError
