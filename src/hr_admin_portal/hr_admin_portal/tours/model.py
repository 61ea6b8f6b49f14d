from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..users.model import UserRef


@dataclass(frozen=True)
class TourDocument:
    file_name: str
    file_url: str
    file_type: str = ""
    file_size: int = 0

    def to_api(self) -> dict:
        return {
            "fileName": self.file_name,
            "fileUrl": self.file_url,
            "fileType": self.file_type,
            "fileSize": self.file_size,
        }


@dataclass(frozen=True)
class TourStatusChange:
    status: str
    changed_by: str
    changed_by_name: str
    changed_at: Optional[datetime]
    notes: Optional[str] = None


@dataclass(frozen=True)
class Tour:
    """A scheduled field visit assigned to an employee."""

    tour_id: str
    assigned_to: Optional[UserRef]
    created_by: Optional[UserRef]
    purpose: str
    location: str
    expected_time: Optional[datetime]
    status: str
    documents: tuple[TourDocument, ...] = field(default_factory=tuple)
    status_history: tuple[TourStatusChange, ...] = field(default_factory=tuple)
    user_notes: Optional[str] = None
    admin_notes: Optional[str] = None
    actual_visit_time: Optional[datetime] = None
    completion_notes: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class TourFilters:
    page: int = 1
    limit: int = 10
    status: Optional[str] = None
    assigned_to: Optional[str] = None
    created_by: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    def to_params(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "status": self.status,
            "assignedTo": self.assigned_to,
            "createdBy": self.created_by,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }
