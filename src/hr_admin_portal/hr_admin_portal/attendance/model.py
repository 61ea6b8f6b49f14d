from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..users.model import UserRef


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class AttendanceSession:
    """One check-in/check-out pair. A user may have several per day."""

    session_id: str
    user: Optional[UserRef]
    day: Optional[date]
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime] = None
    is_checked_out: bool = False
    total_hours: Optional[float] = None
    status: str = ""
    session_number: int = 1
    check_in_location: Optional[Coordinates] = None
    check_out_location: Optional[Coordinates] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceStatusSummary:
    has_active_session: bool
    last_session: Optional[AttendanceSession] = None
