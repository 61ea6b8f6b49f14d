from __future__ import annotations

from ..common.workflow import StatusWorkflow
from ..core.enums import LeaveStatus


class LeaveStatusWorkflow(StatusWorkflow):
    """pending -> approved | rejected | cancelled; every other state is terminal."""

    TRANSITIONS = {
        LeaveStatus.PENDING.value: (
            LeaveStatus.APPROVED.value,
            LeaveStatus.REJECTED.value,
            LeaveStatus.CANCELLED.value,
        ),
    }

    DISPLAY_NAMES = {
        LeaveStatus.PENDING.value: "Pending",
        LeaveStatus.APPROVED.value: "Approved",
        LeaveStatus.REJECTED.value: "Rejected",
        LeaveStatus.CANCELLED.value: "Cancelled",
    }

    CSS_CLASSES = {
        LeaveStatus.APPROVED.value: "status-approved",
        LeaveStatus.REJECTED.value: "status-rejected",
        LeaveStatus.CANCELLED.value: "status-cancelled",
    }

    def css_class(self, status: str) -> str:
        return self.CSS_CLASSES.get(getattr(status, "value", status), "status-pending")
