from __future__ import annotations

from ..api.client import ApiClient
from ..api.envelope import Page, unwrap_page
from ..common.datetime_utils import parse_api_datetime
from .model import AuditLog, AuditLogFilters, FieldChange
from .repository import AuditLogRepository


def to_audit_log(r: dict) -> AuditLog:
    return AuditLog(
        log_id=str(r.get("_id") or r.get("id") or ""),
        module=str(r.get("module") or ""),
        action=str(r.get("action") or ""),
        performed_by=str(r.get("performedBy") or ""),
        entity_id=r.get("entityId"),
        entity_type=r.get("entityType"),
        performed_by_email=r.get("performedByEmail"),
        changes=tuple(
            FieldChange(field_name=str(c.get("field") or ""), old_value=c.get("oldValue"), new_value=c.get("newValue"))
            for c in r.get("changes") or []
        ),
        metadata=dict(r.get("metadata") or {}),
        created_at=parse_api_datetime(r.get("createdAt")),
    )


class HttpAuditLogRepository(AuditLogRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, filters: AuditLogFilters) -> Page:
        page = unwrap_page(self._client.get("/audit-logs", params=filters.to_params()))
        return Page(items=[to_audit_log(r) for r in page.items], pagination=page.pagination)
