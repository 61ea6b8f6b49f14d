from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import HalfDayType, LeaveStatus, LeaveType, SortOrder
from ..users.model import UserRef


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    user: Optional[UserRef]
    leave_type: LeaveType
    start_date: Optional[date]
    end_date: Optional[date]
    reason: str
    status: LeaveStatus
    is_half_day: bool = False
    half_day_type: Optional[HalfDayType] = None
    total_days: float = 0
    notes: Optional[str] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    approved_by: Optional[str] = None


@dataclass(frozen=True)
class LeaveFilters:
    page: int = 1
    limit: int = 10
    status: Optional[LeaveStatus] = None
    leave_type: Optional[LeaveType] = None
    user_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_half_day: Optional[bool] = None
    approved_by: Optional[str] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None

    def to_params(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "status": self.status,
            "leaveType": self.leave_type,
            "userId": self.user_id,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "isHalfDay": self.is_half_day,
            "approvedBy": self.approved_by,
            "search": self.search,
            "sortBy": self.sort_by,
            "sortOrder": self.sort_order,
        }


@dataclass(frozen=True)
class LeaveForm:
    """Validated create/update payload."""

    user_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    is_half_day: bool = False
    half_day_type: Optional[HalfDayType] = None
    notes: Optional[str] = None

    def to_api(self) -> dict:
        data = {
            "userId": self.user_id,
            "leaveType": self.leave_type.value,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "reason": self.reason,
            "isHalfDay": self.is_half_day,
        }
        if self.is_half_day and self.half_day_type:
            data["halfDayType"] = self.half_day_type.value
        if self.notes:
            data["notes"] = self.notes
        return data
