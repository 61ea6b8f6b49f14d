from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..api.envelope import Page, unwrap, unwrap_page
from ..common.datetime_utils import parse_api_date, parse_api_datetime
from ..users.model import UserRef
from .model import AttendanceSession, Coordinates
from .repository import AttendanceRepository

BASE = "/attendance"


def _coords(r: dict, prefix: str) -> Optional[Coordinates]:
    lat = r.get(f"{prefix}Latitude")
    lng = r.get(f"{prefix}Longitude")
    if lat is None or lng is None:
        return None
    return Coordinates(latitude=float(lat), longitude=float(lng))


def to_session(r: dict) -> AttendanceSession:
    total = r.get("totalHours")
    return AttendanceSession(
        session_id=str(r.get("_id") or r.get("id") or ""),
        user=UserRef.from_api(r.get("userId")),
        day=parse_api_date(r.get("date")),
        check_in_time=parse_api_datetime(r.get("checkInTime")),
        check_out_time=parse_api_datetime(r.get("checkOutTime")),
        is_checked_out=bool(r.get("isCheckedOut", False)),
        total_hours=float(total) if total is not None else None,
        status=str(r.get("status") or ""),
        session_number=int(r.get("sessionNumber") or 1),
        check_in_location=_coords(r, "checkIn"),
        check_out_location=_coords(r, "checkOut"),
        notes=r.get("notes"),
        created_at=parse_api_datetime(r.get("createdAt")),
        updated_at=parse_api_datetime(r.get("updatedAt")),
    )


def _one(payload: Any) -> Optional[AttendanceSession]:
    data = unwrap(payload)
    if isinstance(data, dict) and (data.get("_id") or data.get("id")):
        return to_session(data)
    return None


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def check_in(self, data: dict) -> Optional[AttendanceSession]:
        return _one(self._client.post(f"{BASE}/checkin", data))

    def check_out(self, data: dict) -> Optional[AttendanceSession]:
        return _one(self._client.post(f"{BASE}/checkout", data))

    def start_new_session(self, data: dict) -> Optional[AttendanceSession]:
        return _one(self._client.post(f"{BASE}/start-new-session", data))

    def today(self) -> Sequence[AttendanceSession]:
        return [to_session(r) for r in unwrap_page(self._client.get(f"{BASE}/today")).items]

    def create_record(self, data: dict) -> Optional[AttendanceSession]:
        return _one(self._client.post(f"{BASE}/admin/create", data))

    def update_record(self, record_id: str, data: dict) -> Optional[AttendanceSession]:
        return _one(self._client.put(f"{BASE}/admin/update/{record_id}", data))

    def delete_record(self, record_id: str) -> None:
        self._client.delete(f"{BASE}/admin/delete/{record_id}")

    def all_users(self, params: dict) -> Page:
        page = unwrap_page(self._client.get(f"{BASE}/admin/all-users", params=params))
        return Page(items=[to_session(r) for r in page.items], pagination=page.pagination)
