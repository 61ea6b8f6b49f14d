"""Module:action permission checks.

Rules, in order:
    1. no user                 -> deny
    2. ``is_super_admin``      -> allow
    3. user without a role     -> allow (legacy accounts, see DESIGN.md)
    4. no entry for the module -> deny
    5. otherwise               -> ``action in entry.actions``

All functions here are pure; they only log.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..auth.model import SessionUser
from ..core.constants import ADMIN_ROUTES, ALL_ACTIONS, ALL_MODULES, ROUTE_PERMISSIONS
from ..roles.model import Role, RolePermission

logger = logging.getLogger(__name__)


def _find(permissions: Iterable[RolePermission], module: str) -> Optional[RolePermission]:
    for p in permissions:
        if p.module == module:
            return p
    return None


def _has_full_access(user: SessionUser) -> bool:
    return user.is_super_admin or user.role is None


def split_permission(permission: str) -> tuple[str, str]:
    """``"leave:approve"`` -> ``("leave", "approve")``."""
    module, _, action = permission.partition(":")
    return module, action


def has_permission(user: Optional[SessionUser], module: str, action: str) -> bool:
    if user is None:
        logger.debug("Permission %s:%s denied: no user", module, action)
        return False

    if user.is_super_admin:
        logger.debug("Permission %s:%s granted: super admin", module, action)
        return True

    if user.role is None:
        logger.debug("Permission %s:%s granted: no role assigned (legacy full access)", module, action)
        return True

    entry = _find(user.permissions, module)
    if entry is None:
        logger.debug("Permission %s:%s denied: no permissions for module", module, action)
        return False

    granted = action in entry.actions
    logger.debug("Permission %s:%s %s (available: %s)", module, action, "granted" if granted else "denied", list(entry.actions))
    return granted


def role_has_permission(role: Role, module: str, action: str) -> bool:
    """Same check against a role record; roles have no legacy fallback."""
    if role.is_super_admin:
        return True
    entry = _find(role.permissions, module)
    return entry is not None and action in entry.actions


def role_module_actions(role: Role, module: str) -> list[str]:
    if role.is_super_admin:
        return list(ALL_ACTIONS)
    entry = _find(role.permissions, module)
    return list(entry.actions) if entry else []


def has_any_permission(user: Optional[SessionUser], permissions: Iterable[str]) -> bool:
    return any(has_permission(user, *split_permission(p)) for p in permissions)


def has_all_permissions(user: Optional[SessionUser], permissions: Iterable[str]) -> bool:
    return all(has_permission(user, *split_permission(p)) for p in permissions)


def module_actions(user: Optional[SessionUser], module: str) -> list[str]:
    if user is None:
        return []
    if _has_full_access(user):
        return list(ALL_ACTIONS)
    entry = _find(user.permissions, module)
    return list(entry.actions) if entry else []


def permission_map(user: Optional[SessionUser]) -> dict[str, list[str]]:
    if user is None:
        return {}
    if _has_full_access(user):
        return {module: list(ALL_ACTIONS) for module in ALL_MODULES}
    return {p.module: list(p.actions) for p in user.permissions}


def has_any_module_permission(user: Optional[SessionUser], module: str) -> bool:
    if user is None:
        return False
    if _has_full_access(user):
        return True
    entry = _find(user.permissions, module)
    return bool(entry and entry.actions)


def accessible_modules(user: Optional[SessionUser]) -> list[str]:
    return [m for m in ALL_MODULES if has_any_module_permission(user, m)]


def has_action_in_any_module(user: Optional[SessionUser], action: str) -> bool:
    if user is None:
        return False
    if _has_full_access(user):
        return True
    return any(action in p.actions for p in user.permissions)


def can_access_route(user: Optional[SessionUser], route: str) -> bool:
    if user is not None and user.is_super_admin:
        return True

    required = ROUTE_PERMISSIONS.get(route)
    if not required:
        return True

    return has_permission(user, *split_permission(required))


def accessible_routes(user: Optional[SessionUser]) -> list[str]:
    return [r for r in ADMIN_ROUTES if can_access_route(user, r)]


def permission_summary(user: Optional[SessionUser]) -> str:
    if user is None:
        return "No user logged in"
    if user.is_super_admin:
        return "Super Admin - Full Access to All Modules and Actions"
    if user.role is None:
        return "No Role Assigned - Full Access (Legacy)"
    if not user.permissions:
        return f"Role: {user.role.display_name} - No Permissions"

    summary = " | ".join(f"{p.module}: [{', '.join(p.actions)}]" for p in user.permissions)
    return f"Role: {user.role.display_name} - {summary}"
