from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_iso_date, require_non_empty
from ..core.exceptions import ValidationError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    def __init__(self, holidays: HolidayRepository, *, today: Callable[[], date] = today_local):
        self._holidays = holidays
        self._today = today

    def list(self, year: Optional[int] = None) -> Sequence[Holiday]:
        if year is None:
            return self._holidays.list_all()
        if year < 1900 or year > 9999:
            raise ValidationError("Invalid year")
        return self._holidays.list_by_year(year)

    def get(self, holiday_id: str) -> Holiday:
        holiday = self._holidays.get(require_non_empty(holiday_id, "Holiday id"))
        if not holiday:
            raise ValidationError("Holiday not found")
        return holiday

    def build_payload(
        self,
        *,
        name: str,
        holiday_date: str,
        description: str,
        is_active: bool = True,
        is_optional: bool = False,
        is_new: bool = True,
    ) -> dict:
        if not (name or "").strip() or not holiday_date or not (description or "").strip():
            raise ValidationError("Please fill in all required fields.")

        day = require_iso_date(holiday_date, "Date")
        if is_new and day < self._today():
            raise ValidationError("Holiday date cannot be in the past.")

        return {
            "name": name.strip(),
            "date": day.isoformat(),
            "description": description.strip(),
            "isActive": bool(is_active),
            "isOptional": bool(is_optional),
        }

    def create(self, data: dict) -> Optional[Holiday]:
        return self._holidays.create(data)

    def update(self, holiday_id: str, data: dict) -> Optional[Holiday]:
        return self._holidays.update(require_non_empty(holiday_id, "Holiday id"), data)

    def delete(self, holiday_id: str) -> None:
        self._holidays.delete(require_non_empty(holiday_id, "Holiday id"))
