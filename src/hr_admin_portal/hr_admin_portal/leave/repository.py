from __future__ import annotations

from typing import Optional, Protocol

from ..api.envelope import Page
from .model import LeaveFilters, LeaveRequest


class LeaveRepository(Protocol):
    def list(self, filters: LeaveFilters) -> Page:
        """Return a page of ``LeaveRequest`` items."""

        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def create(self, data: dict) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def update(self, request_id: str, data: dict) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def delete(self, request_id: str) -> None:
        raise NotImplementedError

    def update_status(self, request_id: str, data: dict) -> Optional[LeaveRequest]:
        raise NotImplementedError
