from __future__ import annotations

from typing import Optional, Protocol

from ..api.envelope import Page
from .model import Tour, TourFilters


class TourRepository(Protocol):
    def list(self, filters: TourFilters) -> Page:
        raise NotImplementedError

    def get(self, tour_id: str) -> Optional[Tour]:
        raise NotImplementedError

    def create(self, data: dict) -> Optional[Tour]:
        raise NotImplementedError

    def update(self, tour_id: str, data: dict) -> Optional[Tour]:
        raise NotImplementedError

    def update_status(self, tour_id: str, data: dict) -> Optional[Tour]:
        raise NotImplementedError

    def delete(self, tour_id: str) -> None:
        raise NotImplementedError
