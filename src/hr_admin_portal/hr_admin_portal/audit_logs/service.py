from __future__ import annotations

from typing import Optional

from ..api.envelope import Page
from ..common.validators import optional_trimmed
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..core.exceptions import ValidationError
from .model import AuditLogFilters
from .repository import AuditLogRepository


class AuditLogService:
    def __init__(self, logs: AuditLogRepository):
        self._logs = logs

    def list(
        self,
        *,
        module: Optional[str] = None,
        action: Optional[str] = None,
        entity_id: Optional[str] = None,
        performed_by: Optional[str] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page:
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")
        filters = AuditLogFilters(
            module=optional_trimmed(module),
            action=optional_trimmed(action),
            entity_id=optional_trimmed(entity_id),
            performed_by=optional_trimmed(performed_by),
            page=page,
            limit=limit,
        )
        return self._logs.list(filters)
