from __future__ import annotations

from typing import Any, Optional

from ..api.client import ApiClient
from ..api.envelope import Page, unwrap, unwrap_page
from ..common.datetime_utils import parse_api_datetime
from ..users.model import UserRef
from .model import Tour, TourDocument, TourFilters, TourStatusChange
from .repository import TourRepository

BASE = "/tour-management/tours"


def to_tour(r: dict) -> Tour:
    return Tour(
        tour_id=str(r.get("_id") or r.get("id") or ""),
        assigned_to=UserRef.from_api(r.get("assignedTo")),
        created_by=UserRef.from_api(r.get("createdBy")),
        purpose=str(r.get("purpose") or ""),
        location=str(r.get("location") or ""),
        expected_time=parse_api_datetime(r.get("expectedTime")),
        status=str(r.get("status") or "pending"),
        documents=tuple(
            TourDocument(
                file_name=str(d.get("fileName") or ""),
                file_url=str(d.get("fileUrl") or ""),
                file_type=str(d.get("fileType") or ""),
                file_size=int(d.get("fileSize") or 0),
            )
            for d in r.get("documents") or []
        ),
        status_history=tuple(
            TourStatusChange(
                status=str(h.get("status") or ""),
                changed_by=str(h.get("changedBy") or ""),
                changed_by_name=str(h.get("changedByName") or ""),
                changed_at=parse_api_datetime(h.get("changedAt")),
                notes=h.get("notes"),
            )
            for h in r.get("statusHistory") or []
        ),
        user_notes=r.get("userNotes"),
        admin_notes=r.get("adminNotes"),
        actual_visit_time=parse_api_datetime(r.get("actualVisitTime")),
        completion_notes=r.get("completionNotes"),
        is_active=bool(r.get("isActive", True)),
        created_at=parse_api_datetime(r.get("createdAt")),
        updated_at=parse_api_datetime(r.get("updatedAt")),
    )


def _one(payload: Any) -> Optional[Tour]:
    data = unwrap(payload)
    if isinstance(data, dict) and (data.get("_id") or data.get("id")):
        return to_tour(data)
    return None


class HttpTourRepository(TourRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list(self, filters: TourFilters) -> Page:
        page = unwrap_page(self._client.get(BASE, params=filters.to_params()))
        return Page(items=[to_tour(r) for r in page.items], pagination=page.pagination)

    def get(self, tour_id: str) -> Optional[Tour]:
        return _one(self._client.get(f"{BASE}/{tour_id}"))

    def create(self, data: dict) -> Optional[Tour]:
        return _one(self._client.post(BASE, data))

    def update(self, tour_id: str, data: dict) -> Optional[Tour]:
        return _one(self._client.patch(f"{BASE}/{tour_id}", data))

    def update_status(self, tour_id: str, data: dict) -> Optional[Tour]:
        return _one(self._client.patch(f"{BASE}/{tour_id}/status", data))

    def delete(self, tour_id: str) -> None:
        self._client.delete(f"{BASE}/{tour_id}")
