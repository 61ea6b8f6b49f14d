from __future__ import annotations

from typing import Protocol

from ..api.envelope import Page
from .model import AuditLogFilters


class AuditLogRepository(Protocol):
    def list(self, filters: AuditLogFilters) -> Page:
        raise NotImplementedError
