from __future__ import annotations

import logging
from typing import Optional

from ..api.envelope import Page
from ..common.validators import optional_trimmed, require_iso_date, require_non_empty
from ..core.enums import HalfDayType, LeaveStatus, LeaveType
from ..core.exceptions import ValidationError
from .model import LeaveFilters, LeaveForm, LeaveRequest
from .repository import LeaveRepository
from .status import LeaveStatusWorkflow

logger = logging.getLogger(__name__)


class LeaveService:
    """Use case: manage leave requests and their approval workflow."""

    def __init__(self, leaves: LeaveRepository, workflow: Optional[LeaveStatusWorkflow] = None):
        self._leaves = leaves
        self.workflow = workflow or LeaveStatusWorkflow()

    def list(self, filters: Optional[LeaveFilters] = None) -> Page:
        return self._leaves.list(filters or LeaveFilters())

    def get(self, request_id: str) -> LeaveRequest:
        leave = self._leaves.get(require_non_empty(request_id, "Leave request id"))
        if not leave:
            raise ValidationError("Leave request not found")
        return leave

    @staticmethod
    def build_form(
        *,
        user_id: str,
        leave_type: str,
        start_date: str,
        end_date: str,
        reason: str,
        is_half_day: bool = False,
        half_day_type: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> LeaveForm:
        if not user_id:
            raise ValidationError("Please select an employee")
        if not start_date:
            raise ValidationError("Please select a start date")
        if not end_date:
            raise ValidationError("Please select an end date")

        start = require_iso_date(start_date, "Start date")
        end = require_iso_date(end_date, "End date")
        if start > end:
            raise ValidationError("End date must be after start date")

        if not (reason or "").strip():
            raise ValidationError("Please provide a reason for the leave")

        try:
            l_type = LeaveType(leave_type or LeaveType.ANNUAL.value)
        except ValueError:
            raise ValidationError("Invalid leave type")

        # half-day leave type always means a half-day request
        half = bool(is_half_day) or l_type == LeaveType.HALF_DAY
        h_type = None
        if half:
            if not half_day_type:
                raise ValidationError("Please select half day type (morning or afternoon)")
            try:
                h_type = HalfDayType(half_day_type)
            except ValueError:
                raise ValidationError("Please select half day type (morning or afternoon)")

        return LeaveForm(
            user_id=str(user_id),
            leave_type=l_type,
            start_date=start,
            end_date=end,
            reason=reason.strip(),
            is_half_day=half,
            half_day_type=h_type,
            notes=optional_trimmed(notes),
        )

    def create(self, form: LeaveForm) -> Optional[LeaveRequest]:
        return self._leaves.create(form.to_api())

    def update(self, request_id: str, form: LeaveForm) -> Optional[LeaveRequest]:
        return self._leaves.update(require_non_empty(request_id, "Leave request id"), form.to_api())

    def delete(self, request_id: str) -> None:
        self._leaves.delete(require_non_empty(request_id, "Leave request id"))

    def offered_statuses(self, leave: LeaveRequest) -> list[str]:
        return self.workflow.allowed_next(leave.status)

    def update_status(
        self,
        leave: LeaveRequest,
        status: str,
        *,
        notes: Optional[str] = None,
        rejection_reason: Optional[str] = None,
    ) -> Optional[LeaveRequest]:
        """Move ``leave`` out of pending.

        The transition is checked against the record the caller holds before
        anything is sent; concurrent edits are not reconciled (last write wins).
        """
        target = self.workflow.validate(leave.status, status)

        data: dict = {"status": target}
        note = optional_trimmed(notes)
        if note:
            data["notes"] = note
        if target == LeaveStatus.REJECTED.value:
            data["rejectionReason"] = require_non_empty(rejection_reason, "Rejection reason")

        logger.info("Leave %s: %s -> %s", leave.request_id, leave.status.value, target)
        return self._leaves.update_status(leave.request_id, data)

    def approve(self, leave: LeaveRequest, notes: Optional[str] = None) -> Optional[LeaveRequest]:
        return self.update_status(leave, LeaveStatus.APPROVED.value, notes=notes)

    def reject(self, leave: LeaveRequest, rejection_reason: str, notes: Optional[str] = None) -> Optional[LeaveRequest]:
        return self.update_status(leave, LeaveStatus.REJECTED.value, notes=notes, rejection_reason=rejection_reason)

    def cancel(self, leave: LeaveRequest, notes: Optional[str] = None) -> Optional[LeaveRequest]:
        return self.update_status(leave, LeaveStatus.CANCELLED.value, notes=notes)
