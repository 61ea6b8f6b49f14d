from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..api.envelope import Page
from .model import AttendanceSession


class AttendanceRepository(Protocol):
    def check_in(self, data: dict) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def check_out(self, data: dict) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def start_new_session(self, data: dict) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def today(self) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def create_record(self, data: dict) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def update_record(self, record_id: str, data: dict) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def delete_record(self, record_id: str) -> None:
        raise NotImplementedError

    def all_users(self, params: dict) -> Page:
        raise NotImplementedError
