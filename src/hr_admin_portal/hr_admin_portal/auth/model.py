from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..roles.model import RolePermission, RoleRef


@dataclass(frozen=True)
class SessionUser:
    """Logged-in operator as returned by ``/auth/login``.

    This is what the session store persists; permission checks read only
    ``is_super_admin``, ``role`` and ``permissions``.
    """

    user_id: str
    email: str
    firstname: str = ""
    lastname: str = ""
    role: Optional[RoleRef] = None
    permissions: tuple[RolePermission, ...] = field(default_factory=tuple)
    is_super_admin: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()

    @classmethod
    def from_api(cls, raw: dict) -> "SessionUser":
        return cls(
            user_id=str(raw.get("id") or raw.get("_id") or ""),
            email=str(raw.get("email") or ""),
            firstname=str(raw.get("firstname") or ""),
            lastname=str(raw.get("lastname") or ""),
            role=RoleRef.from_api(raw.get("role")),
            permissions=tuple(RolePermission.from_api(p) for p in raw.get("permissions") or []),
            is_super_admin=bool(raw.get("isSuperAdmin", False)),
        )

    def to_api(self) -> dict:
        return {
            "id": self.user_id,
            "email": self.email,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "role": self.role.to_api() if self.role else None,
            "permissions": [p.to_api() for p in self.permissions],
            "isSuperAdmin": self.is_super_admin,
        }
