from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..auth.service import AuthService
from ..common.events import Notifier
from ..core.exceptions import AuthorizationError
from . import evaluator

logger = logging.getLogger(__name__)


class PermissionService:
    """Permission checks bound to the currently logged-in user."""

    def __init__(self, auth: AuthService):
        self._auth = auth
        self.permissions_changed = Notifier("permissions-changed")

    def subscribe(self, listener: Callable[[None], None]) -> Callable[[], None]:
        return self.permissions_changed.subscribe(listener)

    def refresh(self) -> None:
        logger.info("Refreshing permissions: %s", self.summary())
        self.permissions_changed.emit(None)

    def has_permission(self, module: str, action: str) -> bool:
        return evaluator.has_permission(self._auth.get_user(), module, action)

    def require(self, module: str, action: str) -> None:
        if not self.has_permission(module, action):
            raise AuthorizationError(f"You do not have permission to {action} {module}")

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        return evaluator.has_any_permission(self._auth.get_user(), permissions)

    def require_any(self, permissions: Iterable[str]) -> None:
        permissions = list(permissions)
        if not self.has_any_permission(permissions):
            raise AuthorizationError(f"You need one of: {', '.join(permissions)}")

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        return evaluator.has_all_permissions(self._auth.get_user(), permissions)

    def is_super_admin(self) -> bool:
        return self._auth.is_super_admin()

    def has_role(self, role_name: str) -> bool:
        user = self._auth.get_user()
        if not user or not user.role:
            return False
        return user.role.name == role_name

    def module_actions(self, module: str) -> list[str]:
        return evaluator.module_actions(self._auth.get_user(), module)

    def permission_map(self) -> dict[str, list[str]]:
        return evaluator.permission_map(self._auth.get_user())

    def can_access_route(self, route: str) -> bool:
        return evaluator.can_access_route(self._auth.get_user(), route)

    def accessible_routes(self) -> list[str]:
        return evaluator.accessible_routes(self._auth.get_user())

    def can_access_module(self, module: str) -> bool:
        if self.is_super_admin():
            return True
        return len(self.module_actions(module)) > 0

    def accessible_modules(self) -> list[str]:
        return evaluator.accessible_modules(self._auth.get_user())

    def has_action_in_any_module(self, action: str) -> bool:
        return evaluator.has_action_in_any_module(self._auth.get_user(), action)

    def summary(self) -> str:
        return evaluator.permission_summary(self._auth.get_user())

    def can_create(self, module: str) -> bool:
        return self.has_permission(module, "create")

    def can_read(self, module: str) -> bool:
        return self.has_permission(module, "read")

    def can_update(self, module: str) -> bool:
        return self.has_permission(module, "update")

    def can_delete(self, module: str) -> bool:
        return self.has_permission(module, "delete")

    def can_list(self, module: str) -> bool:
        return self.has_permission(module, "list")

    def can_approve(self, module: str) -> bool:
        return self.has_permission(module, "approve")

    def can_reject(self, module: str) -> bool:
        return self.has_permission(module, "reject")

    def can_export(self, module: str) -> bool:
        return self.has_permission(module, "export")
