from __future__ import annotations

from datetime import date, datetime

import pytest

from hr_admin_portal.attendance.model import AttendanceSession
from hr_admin_portal.attendance.service import AttendanceService, TimelogService
from hr_admin_portal.core.exceptions import ValidationError
from hr_admin_portal.users.model import UserRef


def _session(checked_out=True, status="present"):
    return AttendanceSession(
        session_id="s1",
        user=UserRef(user_id="u1", firstname="Asha", lastname="Rao"),
        day=date(2026, 2, 3),
        check_in_time=datetime(2026, 2, 3, 9, 5),
        check_out_time=datetime(2026, 2, 3, 18, 0) if checked_out else None,
        is_checked_out=checked_out,
        total_hours=8.9166 if checked_out else None,
        status=status,
    )


class FakeAttendanceRepo:
    def __init__(self, sessions=()):
        self.sessions = list(sessions)
        self.posted = []
        self.params = []

    def check_in(self, data):
        self.posted.append(("checkin", data))

    def check_out(self, data):
        self.posted.append(("checkout", data))

    def start_new_session(self, data):
        self.posted.append(("new", data))

    def today(self):
        return self.sessions

    def create_record(self, data):
        return None

    def update_record(self, record_id, data):
        return None

    def delete_record(self, record_id):
        return None

    def all_users(self, params):
        self.params.append(params)
        return None


def test_current_status_detects_open_session():
    assert not AttendanceService(FakeAttendanceRepo([_session()])).current_status().has_active_session

    summary = AttendanceService(FakeAttendanceRepo([_session(), _session(checked_out=False)])).current_status()
    assert summary.has_active_session
    assert summary.last_session.check_out_time is None


def test_coordinates_are_sent_only_when_complete():
    repo = FakeAttendanceRepo()
    svc = AttendanceService(repo)
    svc.check_in(latitude=18.52, longitude=73.85)
    svc.check_out(latitude=18.52)
    svc.start_new_session()
    assert repo.posted == [
        ("checkin", {"latitude": 18.52, "longitude": 73.85}),
        ("checkout", {}),
        ("new", {}),
    ]


def test_build_record_validates_status_and_times():
    with pytest.raises(ValidationError, match="Status"):
        AttendanceService.build_record(
            user_id="u1", day="2026-02-03", check_in_time="2026-02-03T09:00:00Z", status="early"
        )
    with pytest.raises(ValidationError, match="before check-in"):
        AttendanceService.build_record(
            user_id="u1",
            day="2026-02-03",
            check_in_time="2026-02-03T09:00:00Z",
            check_out_time="2026-02-03T08:00:00Z",
            status="present",
        )

    data = AttendanceService.build_record(
        user_id="u1",
        day="2026-02-03",
        check_in_time="2026-02-03T09:00:00Z",
        check_out_time="2026-02-03T17:00:00Z",
        status="half-day",
        session_number=2,
    )
    assert data["status"] == "half-day"
    assert data["sessionNumber"] == 2
    assert data["date"] == "2026-02-03"


def test_partial_update_only_validates_given_fields():
    data = AttendanceService.build_record(
        user_id=None, day=None, check_in_time=None, status="late", partial=True
    )
    assert data == {"status": "late"}


def test_timelog_defaults_to_today_and_formats_rows():
    repo = FakeAttendanceRepo()
    svc = TimelogService(repo, today=lambda: date(2026, 2, 3))
    svc.all_users(page=2, limit=20)
    assert repo.params == [{"date": "2026-02-03", "page": 2, "limit": 20}]

    row = TimelogService.to_row(_session(status="late"))
    assert row.employee == "Asha Rao"
    assert row.check_in == "09:05 AM"
    assert row.total_hours == "8.92"
    assert row.css_class == "status-late"
    assert row.status == "Late"


def test_status_class_fallback():
    assert TimelogService.status_class("EARLY") == "status-early"
    assert TimelogService.status_class("half-day") == "status-unknown"
    assert TimelogService.status_class(None) == "status-unknown"
