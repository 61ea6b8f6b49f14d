from __future__ import annotations

from ..common.workflow import StatusWorkflow
from ..core.enums import TourStatus

_S = TourStatus


class TourStatusWorkflow(StatusWorkflow):
    TRANSITIONS = {
        _S.PENDING.value: (_S.ASSIGNED.value, _S.CANCELLED.value),
        _S.ASSIGNED.value: (_S.IN_PROGRESS.value, _S.CANCELLED.value, _S.APPROVED.value, _S.REJECTED.value),
        _S.IN_PROGRESS.value: (_S.COMPLETED.value, _S.CANCELLED.value),
        _S.COMPLETED.value: (_S.APPROVED.value, _S.REJECTED.value),
        _S.APPROVED.value: (_S.IN_PROGRESS.value,),  # restart
        _S.REJECTED.value: (_S.ASSIGNED.value,),  # reassign
        _S.CANCELLED.value: (_S.ASSIGNED.value,),  # reassign
    }

    DISPLAY_NAMES = {
        _S.PENDING.value: "Pending",
        _S.ASSIGNED.value: "Assigned",
        _S.IN_PROGRESS.value: "In Progress",
        _S.COMPLETED.value: "Completed",
        _S.CANCELLED.value: "Cancelled",
        _S.APPROVED.value: "Approved",
        _S.REJECTED.value: "Rejected",
    }

    BADGE_CLASSES = {
        _S.PENDING.value: "badge-warning",
        _S.ASSIGNED.value: "badge-info",
        _S.IN_PROGRESS.value: "badge-primary",
        _S.COMPLETED.value: "badge-success",
        _S.CANCELLED.value: "badge-danger",
        _S.APPROVED.value: "badge-success",
        _S.REJECTED.value: "badge-danger",
    }

    # statuses the list view offers a quick status change for
    QUICK_UPDATABLE = (_S.PENDING.value, _S.ASSIGNED.value, _S.IN_PROGRESS.value)

    def status_options(self, current: str) -> list[str]:
        """Current status first (for display), then the allowed targets."""
        current = getattr(current, "value", current)
        return [current] + [s for s in self.allowed_next(current) if s != current]

    def badge_class(self, status: str) -> str:
        return self.BADGE_CLASSES.get(getattr(status, "value", status), "badge-secondary")

    def is_quick_updatable(self, status: str) -> bool:
        return getattr(status, "value", status) in self.QUICK_UPDATABLE
