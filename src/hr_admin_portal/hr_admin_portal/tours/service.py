from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..api.envelope import Page
from ..common.validators import (
    optional_trimmed,
    require_iso_datetime,
    require_length_between,
    require_max_length,
    require_non_empty,
)
from ..core.exceptions import ValidationError
from .model import Tour, TourDocument, TourFilters, TourStatusChange
from .repository import TourRepository
from .status import TourStatusWorkflow

logger = logging.getLogger(__name__)


class TourService:
    def __init__(self, tours: TourRepository, workflow: Optional[TourStatusWorkflow] = None):
        self._tours = tours
        self.workflow = workflow or TourStatusWorkflow()

    def list(self, filters: Optional[TourFilters] = None) -> Page:
        filters = filters or TourFilters()
        if filters.status and filters.status not in self.workflow.statuses():
            raise ValidationError("Invalid status filter")
        return self._tours.list(filters)

    def get(self, tour_id: str) -> Tour:
        tour = self._tours.get(require_non_empty(tour_id, "Tour id"))
        if not tour:
            raise ValidationError("Tour not found")
        return tour

    @staticmethod
    def build_payload(
        *,
        assigned_to: str,
        purpose: str,
        location: str,
        expected_time: str,
        user_notes: Optional[str] = None,
        admin_notes: Optional[str] = None,
        documents: Sequence[TourDocument] = (),
    ) -> dict:
        assigned_to = require_non_empty(assigned_to, "Assigned employee")
        purpose = require_length_between(purpose, "Purpose", 10, 500)
        location = require_length_between(location, "Location", 5, 200)
        when: datetime = require_iso_datetime(expected_time, "Expected time")
        require_max_length(user_notes, "User notes", 1000)
        require_max_length(admin_notes, "Admin notes", 1000)

        data = {
            "assignedTo": assigned_to,
            "purpose": purpose,
            "location": location,
            "expectedTime": when.isoformat(),
        }
        if optional_trimmed(user_notes):
            data["userNotes"] = optional_trimmed(user_notes)
        if optional_trimmed(admin_notes):
            data["adminNotes"] = optional_trimmed(admin_notes)
        if documents:
            data["documents"] = [d.to_api() for d in documents]
        return data

    def create(self, data: dict) -> Optional[Tour]:
        return self._tours.create(data)

    def update(self, tour_id: str, data: dict) -> Optional[Tour]:
        return self._tours.update(require_non_empty(tour_id, "Tour id"), data)

    def delete(self, tour_id: str) -> None:
        self._tours.delete(require_non_empty(tour_id, "Tour id"))

    def status_options(self, tour: Tour) -> list[str]:
        return self.workflow.status_options(tour.status)

    def update_status(self, tour: Tour, status: str, *, notes: Optional[str] = None) -> Optional[Tour]:
        target = self.workflow.validate(tour.status, status)
        data: dict = {"status": target}
        note = optional_trimmed(notes)
        if note:
            data["notes"] = note
        logger.info("Tour %s: %s -> %s", tour.tour_id, tour.status, target)
        return self._tours.update_status(tour.tour_id, data)

    @staticmethod
    def timeline(tour: Tour) -> list[TourStatusChange]:
        """Status history, newest first."""
        return sorted(
            tour.status_history,
            key=lambda h: h.changed_at.timestamp() if h.changed_at else float("-inf"),
            reverse=True,
        )
