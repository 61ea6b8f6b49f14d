from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import parse_api_datetime


@dataclass(frozen=True)
class RolePermission:
    """One ``module -> actions`` grant, e.g. ``leave -> [read, approve]``."""

    module: str
    actions: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, raw: dict) -> "RolePermission":
        return cls(module=str(raw.get("module", "")), actions=tuple(raw.get("actions") or ()))

    def to_api(self) -> dict:
        return {"module": self.module, "actions": list(self.actions)}


@dataclass(frozen=True)
class RoleRef:
    """Role as embedded in a user/login payload."""

    role_id: str
    name: str
    display_name: str
    is_super_admin: bool = False

    @classmethod
    def from_api(cls, raw: Any) -> Optional["RoleRef"]:
        if not raw:
            return None
        if isinstance(raw, str):
            return cls(role_id=raw, name="", display_name="")
        return cls(
            role_id=str(raw.get("id") or raw.get("_id") or ""),
            name=str(raw.get("name") or ""),
            display_name=str(raw.get("displayName") or raw.get("name") or ""),
            is_super_admin=bool(raw.get("isSuperAdmin", False)),
        )

    def to_api(self) -> dict:
        return {
            "id": self.role_id,
            "name": self.name,
            "displayName": self.display_name,
            "isSuperAdmin": self.is_super_admin,
        }


@dataclass(frozen=True)
class Role:
    role_id: str
    name: str
    display_name: str
    description: Optional[str] = None
    is_super_admin: bool = False
    permissions: tuple[RolePermission, ...] = field(default_factory=tuple)
    is_active: bool = True
    is_system_role: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def role_from_api(raw: dict) -> Role:
    return Role(
        role_id=str(raw.get("_id") or raw.get("id") or ""),
        name=str(raw.get("name") or ""),
        display_name=str(raw.get("displayName") or ""),
        description=raw.get("description"),
        is_super_admin=bool(raw.get("isSuperAdmin", False)),
        permissions=tuple(RolePermission.from_api(p) for p in raw.get("permissions") or []),
        is_active=bool(raw.get("isActive", True)),
        is_system_role=bool(raw.get("isSystemRole", False)),
        created_at=parse_api_datetime(raw.get("createdAt")),
        updated_at=parse_api_datetime(raw.get("updatedAt")),
    )
