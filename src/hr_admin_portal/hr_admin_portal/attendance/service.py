from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..api.envelope import Page
from ..common.datetime_utils import format_date, today_local
from ..common.validators import (
    optional_trimmed,
    require_choice,
    require_iso_date,
    require_iso_datetime,
    require_non_empty,
)
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceSession, AttendanceStatusSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

STATUS_CLASSES = {
    "present": "status-present",
    "late": "status-late",
    "early": "status-early",
    "absent": "status-absent",
}


def _location_payload(latitude: Optional[float], longitude: Optional[float]) -> dict:
    if latitude is None or longitude is None:
        return {}
    return {"latitude": float(latitude), "longitude": float(longitude)}


class AttendanceService:
    """Check-in/check-out for the signed-in user plus admin record maintenance.

    Coordinates are optional and supplied by the caller.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def check_in(self, *, latitude: Optional[float] = None, longitude: Optional[float] = None):
        return self._attendance.check_in(_location_payload(latitude, longitude))

    def check_out(self, *, latitude: Optional[float] = None, longitude: Optional[float] = None):
        return self._attendance.check_out(_location_payload(latitude, longitude))

    def start_new_session(self, *, latitude: Optional[float] = None, longitude: Optional[float] = None):
        return self._attendance.start_new_session(_location_payload(latitude, longitude))

    def today(self) -> Sequence[AttendanceSession]:
        return self._attendance.today()

    def current_status(self, sessions: Optional[Sequence[AttendanceSession]] = None) -> AttendanceStatusSummary:
        if sessions is None:
            sessions = self.today()
        active = next((s for s in sessions if not s.is_checked_out), None)
        return AttendanceStatusSummary(has_active_session=active is not None, last_session=active)

    @staticmethod
    def build_record(
        *,
        user_id: Optional[str],
        day: Optional[str],
        check_in_time: Optional[str],
        status: Optional[str],
        check_out_time: Optional[str] = None,
        notes: Optional[str] = None,
        session_number: Optional[int] = None,
        check_in_latitude: Optional[float] = None,
        check_in_longitude: Optional[float] = None,
        check_out_latitude: Optional[float] = None,
        check_out_longitude: Optional[float] = None,
        partial: bool = False,
    ) -> dict:
        """Validate an admin attendance record.

        With ``partial=True`` (update) every field is optional, but whatever is
        given is still validated.
        """
        payload: dict = {}

        if user_id or not partial:
            payload["userId"] = require_non_empty(user_id, "Employee")
        if day or not partial:
            payload["date"] = format_date(require_iso_date(day, "Date"))

        check_in = None
        if check_in_time or not partial:
            check_in = require_iso_datetime(check_in_time, "Check-in time")
            payload["checkInTime"] = check_in_time
        if check_out_time:
            check_out = require_iso_datetime(check_out_time, "Check-out time")
            if check_in is not None and (check_in.tzinfo is None) != (check_out.tzinfo is None):
                raise ValidationError("Check-in and check-out times must use the same time zone")
            if check_in is not None and check_out < check_in:
                raise ValidationError("Check-out time cannot be before check-in time")
            payload["checkOutTime"] = check_out_time

        if status or not partial:
            allowed = [s.value for s in AttendanceStatus]
            payload["status"] = require_choice(status, "Status", allowed)

        if notes is not None:
            payload["notes"] = optional_trimmed(notes) or ""
        if session_number is not None:
            if int(session_number) < 1:
                raise ValidationError("Session number must be at least 1")
            payload["sessionNumber"] = int(session_number)

        for key, value in (
            ("checkInLatitude", check_in_latitude),
            ("checkInLongitude", check_in_longitude),
            ("checkOutLatitude", check_out_latitude),
            ("checkOutLongitude", check_out_longitude),
        ):
            if value is not None:
                payload[key] = float(value)
        return payload

    def create_record(self, data: dict) -> Optional[AttendanceSession]:
        return self._attendance.create_record(data)

    def update_record(self, record_id: str, data: dict) -> Optional[AttendanceSession]:
        return self._attendance.update_record(require_non_empty(record_id, "Record id"), data)

    def delete_record(self, record_id: str) -> None:
        self._attendance.delete_record(require_non_empty(record_id, "Record id"))
        logger.info("Deleted attendance record %s", record_id)


@dataclass(frozen=True)
class TimelogRowUI:
    employee: str
    date: str
    check_in: str
    check_out: str
    total_hours: str
    status: str
    css_class: str


class TimelogService:
    """Read-only view over every user's sessions for one day."""

    def __init__(self, attendance: AttendanceRepository, *, today=today_local):
        self._attendance = attendance
        self._today = today

    def all_users(
        self,
        day: Optional[str] = None,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page:
        when: date = require_iso_date(day, "Date") if day else self._today()
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")
        return self._attendance.all_users({"date": format_date(when), "page": page, "limit": limit})

    @staticmethod
    def status_class(status: Optional[str]) -> str:
        return STATUS_CLASSES.get((status or "").lower(), "status-unknown")

    @staticmethod
    def status_text(status: Optional[str]) -> str:
        status = status or ""
        return status[:1].upper() + status[1:]

    @classmethod
    def to_row(cls, s: AttendanceSession) -> TimelogRowUI:
        return TimelogRowUI(
            employee=s.user.full_name or s.user.email or s.user.user_id if s.user else "",
            date=format_date(s.day),
            check_in=s.check_in_time.strftime("%I:%M %p") if s.check_in_time else "",
            check_out=s.check_out_time.strftime("%I:%M %p") if s.check_out_time else "",
            total_hours=f"{s.total_hours:.2f}" if s.total_hours is not None else "",
            status=cls.status_text(s.status),
            css_class=cls.status_class(s.status),
        )
