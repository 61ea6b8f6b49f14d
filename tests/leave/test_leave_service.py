from __future__ import annotations

from datetime import date

import pytest

from hr_admin_portal.api.envelope import Page
from hr_admin_portal.core.enums import HalfDayType, LeaveStatus, LeaveType
from hr_admin_portal.core.exceptions import InvalidTransitionError, ValidationError
from hr_admin_portal.leave.model import LeaveRequest
from hr_admin_portal.leave.service import LeaveService
from hr_admin_portal.leave.status import LeaveStatusWorkflow


def _leave(status=LeaveStatus.PENDING, request_id="l1"):
    return LeaveRequest(
        request_id=request_id,
        user=None,
        leave_type=LeaveType.ANNUAL,
        start_date=date(2026, 3, 2),
        end_date=date(2026, 3, 4),
        reason="Family trip",
        status=status,
    )


class FakeLeaveRepo:
    def __init__(self):
        self.status_updates = []
        self.created = []
        self.items = {"l1": _leave()}

    def list(self, filters):
        return Page(items=list(self.items.values()))

    def get(self, request_id):
        return self.items.get(request_id)

    def create(self, data):
        self.created.append(data)
        return None

    def update(self, request_id, data):
        return None

    def delete(self, request_id):
        self.items.pop(request_id, None)

    def update_status(self, request_id, data):
        self.status_updates.append((request_id, data))
        return None


def test_pending_offers_three_targets_and_others_are_terminal():
    wf = LeaveStatusWorkflow()
    assert wf.allowed_next(LeaveStatus.PENDING) == ["approved", "rejected", "cancelled"]
    for status in ("approved", "rejected", "cancelled"):
        assert wf.is_terminal(status)


def test_transition_from_approved_is_rejected_before_any_call():
    repo = FakeLeaveRepo()
    svc = LeaveService(repo)

    with pytest.raises(InvalidTransitionError):
        svc.update_status(_leave(LeaveStatus.APPROVED), "rejected", rejection_reason="late")

    assert repo.status_updates == []


def test_same_status_is_rejected_with_message():
    svc = LeaveService(FakeLeaveRepo())
    with pytest.raises(InvalidTransitionError, match="Please select a different status to update."):
        svc.update_status(_leave(), "pending")


def test_approve_sends_status_and_notes():
    repo = FakeLeaveRepo()
    LeaveService(repo).approve(_leave(), notes="  enjoy  ")
    assert repo.status_updates == [("l1", {"status": "approved", "notes": "enjoy"})]


def test_reject_requires_reason():
    repo = FakeLeaveRepo()
    svc = LeaveService(repo)

    with pytest.raises(ValidationError):
        svc.reject(_leave(), rejection_reason="  ")
    assert repo.status_updates == []

    svc.reject(_leave(), rejection_reason="Busy quarter")
    assert repo.status_updates == [("l1", {"status": "rejected", "rejectionReason": "Busy quarter"})]


def test_build_form_validates_dates_and_half_day():
    with pytest.raises(ValidationError, match="End date must be after start date"):
        LeaveService.build_form(
            user_id="u1", leave_type="annual", start_date="2026-03-05", end_date="2026-03-01", reason="x"
        )

    with pytest.raises(ValidationError, match="half day type"):
        LeaveService.build_form(
            user_id="u1", leave_type="half-day", start_date="2026-03-05", end_date="2026-03-05", reason="x"
        )

    form = LeaveService.build_form(
        user_id="u1",
        leave_type="half-day",
        start_date="2026-03-05",
        end_date="2026-03-05",
        reason=" Doctor ",
        half_day_type="morning",
    )
    assert form.is_half_day
    assert form.half_day_type == HalfDayType.MORNING
    assert form.to_api() == {
        "userId": "u1",
        "leaveType": "half-day",
        "startDate": "2026-03-05",
        "endDate": "2026-03-05",
        "reason": "Doctor",
        "isHalfDay": True,
        "halfDayType": "morning",
    }


def test_build_form_rejects_unknown_leave_type():
    with pytest.raises(ValidationError, match="Invalid leave type"):
        LeaveService.build_form(
            user_id="u1", leave_type="sabbatical", start_date="2026-03-01", end_date="2026-03-02", reason="x"
        )


def test_get_missing_raises():
    with pytest.raises(ValidationError, match="not found"):
        LeaveService(FakeLeaveRepo()).get("nope")


def test_css_class_defaults_to_pending():
    wf = LeaveStatusWorkflow()
    assert wf.css_class(LeaveStatus.APPROVED) == "status-approved"
    assert wf.css_class("pending") == "status-pending"
