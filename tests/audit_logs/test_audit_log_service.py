from __future__ import annotations

import pytest

from conftest import BASE_URL
from hr_admin_portal.api.client import ApiClient, ApiConfig
from hr_admin_portal.audit_logs.http_audit_log_repository import HttpAuditLogRepository
from hr_admin_portal.audit_logs.service import AuditLogService
from hr_admin_portal.core.exceptions import ValidationError


def _service(http):
    client = ApiClient(ApiConfig(base_url=BASE_URL), token_provider=lambda: "tok", http_session=http)
    return AuditLogService(HttpAuditLogRepository(client))


def test_list_drops_empty_filters_and_reads_root_totals(http):
    http.add(
        "GET",
        "/audit-logs",
        {
            "data": [
                {
                    "_id": "a1",
                    "module": "leave",
                    "action": "update",
                    "performedBy": "u1",
                    "performedByEmail": "admin@example.com",
                    "changes": [{"field": "status", "oldValue": "pending", "newValue": "approved"}],
                    "createdAt": "2026-02-03T10:00:00.000Z",
                }
            ],
            "total": 21,
            "page": 1,
            "limit": 20,
            "totalPages": 2,
        },
    )

    page = _service(http).list(module="leave", action="", entity_id=None, page=1, limit=20)

    assert http.calls[0]["params"] == {"module": "leave", "page": "1", "limit": "20"}
    log = page.items[0]
    assert log.changes[0].field_name == "status"
    assert log.changes[0].new_value == "approved"
    assert log.created_at.year == 2026
    assert page.pagination.total == 21
    assert page.pagination.has_next


def test_list_rejects_bad_paging(http):
    with pytest.raises(ValidationError):
        _service(http).list(page=0)
    assert http.calls == []
