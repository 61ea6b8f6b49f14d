from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def list_by_year(self, year: int) -> Sequence[Holiday]:
        raise NotImplementedError

    def get(self, holiday_id: str) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, data: dict) -> Optional[Holiday]:
        raise NotImplementedError

    def update(self, holiday_id: str, data: dict) -> Optional[Holiday]:
        raise NotImplementedError

    def delete(self, holiday_id: str) -> None:
        raise NotImplementedError
