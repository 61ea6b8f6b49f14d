from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class FieldChange:
    field_name: str
    old_value: Any = None
    new_value: Any = None


@dataclass(frozen=True)
class AuditLog:
    """Who changed what. Written by the backend, read-only here."""

    log_id: str
    module: str
    action: str
    performed_by: str
    entity_id: Optional[str] = None
    entity_type: Optional[str] = None
    performed_by_email: Optional[str] = None
    changes: tuple[FieldChange, ...] = field(default_factory=tuple)
    metadata: dict = field(default_factory=dict)
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AuditLogFilters:
    module: Optional[str] = None
    action: Optional[str] = None
    entity_id: Optional[str] = None
    performed_by: Optional[str] = None
    page: int = 1
    limit: int = 10

    def to_params(self) -> dict:
        return {
            "module": self.module,
            "action": self.action,
            "entityId": self.entity_id,
            "performedBy": self.performed_by,
            "page": self.page,
            "limit": self.limit,
        }
