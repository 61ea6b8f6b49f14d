from __future__ import annotations

from typing import Any, Optional

from ..api.client import ApiClient
from ..api.envelope import Page, unwrap, unwrap_page
from ..common.datetime_utils import parse_api_date, parse_api_datetime
from ..core.enums import HalfDayType, LeaveStatus, LeaveType
from ..users.model import UserRef
from .model import LeaveFilters, LeaveRequest
from .repository import LeaveRepository

BASE = "/leave-management/leave-requests"


def to_leave_request(r: dict) -> LeaveRequest:
    half_day = r.get("halfDayType")
    approved_by = r.get("approvedBy")
    if isinstance(approved_by, dict):
        approved_by = approved_by.get("_id") or approved_by.get("id")
    return LeaveRequest(
        request_id=str(r.get("_id") or r.get("id") or ""),
        user=UserRef.from_api(r.get("userId")),
        leave_type=LeaveType(r.get("leaveType") or LeaveType.OTHER.value),
        start_date=parse_api_date(r.get("startDate")),
        end_date=parse_api_date(r.get("endDate")),
        reason=str(r.get("reason") or ""),
        status=LeaveStatus(r.get("status") or LeaveStatus.PENDING.value),
        is_half_day=bool(r.get("isHalfDay", False)),
        half_day_type=HalfDayType(half_day) if half_day else None,
        total_days=float(r.get("totalDays") or 0),
        notes=r.get("notes"),
        rejection_reason=r.get("rejectionReason"),
        created_at=parse_api_datetime(r.get("createdAt")),
        updated_at=parse_api_datetime(r.get("updatedAt")),
        approved_at=parse_api_datetime(r.get("approvedAt")),
        approved_by=approved_by,
    )


def _one(payload: Any) -> Optional[LeaveRequest]:
    data = unwrap(payload)
    if isinstance(data, dict) and (data.get("_id") or data.get("id")):
        return to_leave_request(data)
    return None


class HttpLeaveRepository(LeaveRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, filters: LeaveFilters) -> Page:
        page = unwrap_page(self._client.get(BASE, params=filters.to_params()))
        return Page(items=[to_leave_request(r) for r in page.items], pagination=page.pagination)

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        return _one(self._client.get(f"{BASE}/{request_id}"))

    def create(self, data: dict) -> Optional[LeaveRequest]:
        return _one(self._client.post(BASE, data))

    def update(self, request_id: str, data: dict) -> Optional[LeaveRequest]:
        return _one(self._client.put(f"{BASE}/{request_id}", data))

    def delete(self, request_id: str) -> None:
        self._client.delete(f"{BASE}/{request_id}")

    def update_status(self, request_id: str, data: dict) -> Optional[LeaveRequest]:
        return _one(self._client.put(f"{BASE}/{request_id}/status", data))
