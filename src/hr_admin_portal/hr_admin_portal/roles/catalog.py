"""Module/action catalogue used by the role editor."""

from __future__ import annotations

from ..core.constants import ALL_ACTIONS, ALL_MODULES
from .model import RolePermission

ACTION_TEXT = {
    "create": "Create new",
    "read": "View",
    "update": "Modify",
    "delete": "Remove",
    "list": "View list of",
    "approve": "Approve",
    "reject": "Reject",
    "export": "Export",
}

MODULE_TEXT = {
    "users": "users",
    "roles": "roles",
    "permissions": "permissions",
    "attendance": "attendance records",
    "leave": "leave requests",
    "holiday": "holidays",
    "tour": "tour requests",
    "timelog": "time logs",
    "reports": "reports",
}


def available_modules() -> list[str]:
    return list(ALL_MODULES)


def available_actions() -> list[str]:
    return list(ALL_ACTIONS)


def generate_all_permissions() -> list[RolePermission]:
    """Every action on every module, as a super-admin-equivalent grant list."""
    return [RolePermission(module=m, actions=tuple(ALL_ACTIONS)) for m in ALL_MODULES]


def permission_description(module: str, action: str) -> str:
    return f"{ACTION_TEXT.get(action, action)} {MODULE_TEXT.get(module, module)}"


def permission_display_name(module: str, action: str) -> str:
    return f"{action[:1].upper()}{action[1:]} {module[:1].upper()}{module[1:]}"


def total_available_permissions() -> int:
    return len(ALL_MODULES) * len(ALL_ACTIONS)
