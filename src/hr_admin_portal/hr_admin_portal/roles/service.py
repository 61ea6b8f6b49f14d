from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..api.envelope import Page
from ..common.validators import optional_trimmed, require_length_between, require_max_length, require_non_empty
from ..core.constants import ALL_ACTIONS, ALL_MODULES, DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..core.enums import SortOrder
from ..core.exceptions import ValidationError
from .model import Role, RolePermission
from .repository import RoleRepository

logger = logging.getLogger(__name__)


class RolesService:
    """Use case: manage roles and the module/action grants attached to them."""

    def __init__(self, roles: RoleRepository):
        self._roles = roles

    def list(
        self,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> Page:
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")
        order = None
        if sort_order:
            try:
                order = SortOrder(sort_order)
            except ValueError:
                raise ValidationError("Sort order must be asc or desc")
        return self._roles.list(
            {
                "page": page,
                "limit": limit,
                "search": optional_trimmed(search),
                "sortBy": sort_by,
                "sortOrder": order,
            }
        )

    def get(self, role_id: str) -> Role:
        role = self._roles.get(require_non_empty(role_id, "Role id"))
        if not role:
            raise ValidationError("Role not found")
        return role

    @staticmethod
    def normalize_permissions(permissions: Iterable) -> list[RolePermission]:
        """Validate grants against the catalogue and merge duplicates.

        Accepts ``RolePermission`` objects or ``{"module", "actions"}`` dicts.
        Modules without any action are dropped.
        """
        merged: dict[str, dict[str, None]] = {}
        for item in permissions or ():
            grant = item if isinstance(item, RolePermission) else RolePermission.from_api(item)
            if grant.module not in ALL_MODULES:
                raise ValidationError(f"Unknown permission module: {grant.module}")
            for action in grant.actions:
                if action not in ALL_ACTIONS:
                    raise ValidationError(f"Unknown permission action: {action}")
                merged.setdefault(grant.module, {})[action] = None
        return [RolePermission(module=m, actions=tuple(a)) for m, a in merged.items() if a]

    @classmethod
    def build_payload(
        cls,
        *,
        name: str,
        display_name: str,
        description: Optional[str] = None,
        is_super_admin: bool = False,
        permissions: Iterable = (),
        is_active: Optional[bool] = None,
    ) -> dict:
        payload = {
            "name": require_length_between(name, "Name", 3, 50),
            "displayName": require_length_between(display_name, "Display name", 3, 100),
            "description": require_max_length(optional_trimmed(description), "Description", 500) or "",
            "isSuperAdmin": bool(is_super_admin),
            "permissions": [p.to_api() for p in cls.normalize_permissions(permissions)],
        }
        if is_active is not None:
            payload["isActive"] = bool(is_active)
        return payload

    def create(self, data: dict) -> Optional[Role]:
        return self._roles.create(data)

    def update(self, role_id: str, data: dict) -> Optional[Role]:
        return self._roles.update(require_non_empty(role_id, "Role id"), data)

    def delete(self, role_id: str) -> None:
        self._roles.delete(require_non_empty(role_id, "Role id"))

    def assign_permissions(self, role_id: str, permissions: Iterable) -> Optional[Role]:
        grants: Sequence[RolePermission] = self.normalize_permissions(permissions)
        logger.info("Assigning %d module grants to role %s", len(grants), role_id)
        return self._roles.assign_permissions(require_non_empty(role_id, "Role id"), grants)
