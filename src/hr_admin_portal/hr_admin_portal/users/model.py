from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..roles.model import RoleRef


@dataclass(frozen=True)
class UserRef:
    """Owner reference on another record.

    The backend sends either a bare id or an embedded (populated) user.
    """

    user_id: str
    firstname: str = ""
    lastname: str = ""
    email: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()

    @classmethod
    def from_api(cls, raw: Any) -> Optional["UserRef"]:
        if not raw:
            return None
        if isinstance(raw, str):
            return cls(user_id=raw)
        return cls(
            user_id=str(raw.get("_id") or raw.get("id") or ""),
            firstname=str(raw.get("firstname") or ""),
            lastname=str(raw.get("lastname") or ""),
            email=str(raw.get("email") or ""),
        )


@dataclass(frozen=True)
class User:
    """Employee record as returned by ``/users``."""

    user_id: str
    firstname: str
    lastname: str
    email: str
    role: Optional[RoleRef]
    mobilenumber: str = ""
    addressline1: str = ""
    addressline2: str = ""
    city: str = ""
    state: str = ""
    center: str = ""
    pincode: str = ""
    is_active: bool = True
    is_logged_in: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}".strip()


@dataclass(frozen=True)
class Location:
    """State or city reference data."""

    location_id: str
    name: str
    parent_id: Optional[str] = None
