from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from ..api.envelope import unwrap, unwrap_page
from ..common.datetime_utils import parse_api_date, parse_api_datetime
from .model import Holiday
from .repository import HolidayRepository

BASE = "/leave-management/holidays"


def to_holiday(r: dict) -> Holiday:
    return Holiday(
        holiday_id=str(r.get("_id") or r.get("id") or ""),
        name=str(r.get("name") or ""),
        holiday_date=parse_api_date(r.get("date")),
        description=str(r.get("description") or ""),
        is_active=bool(r.get("isActive", True)),
        is_optional=bool(r.get("isOptional", False)),
        created_at=parse_api_datetime(r.get("createdAt")),
        updated_at=parse_api_datetime(r.get("updatedAt")),
    )


def _one(payload: Any) -> Optional[Holiday]:
    data = unwrap(payload)
    if isinstance(data, dict) and (data.get("_id") or data.get("id")):
        return to_holiday(data)
    return None


class HttpHolidayRepository(HolidayRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Holiday]:
        return [to_holiday(r) for r in unwrap_page(self._client.get(BASE)).items]

    def list_by_year(self, year: int) -> Sequence[Holiday]:
        return [to_holiday(r) for r in unwrap_page(self._client.get(f"{BASE}/year/{int(year)}")).items]

    def get(self, holiday_id: str) -> Optional[Holiday]:
        return _one(self._client.get(f"{BASE}/{holiday_id}"))

    def create(self, data: dict) -> Optional[Holiday]:
        return _one(self._client.post(BASE, data))

    def update(self, holiday_id: str, data: dict) -> Optional[Holiday]:
        return _one(self._client.put(f"{BASE}/{holiday_id}", data))

    def delete(self, holiday_id: str) -> None:
        self._client.delete(f"{BASE}/{holiday_id}")
