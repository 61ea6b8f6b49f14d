from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    holiday_id: str
    name: str
    holiday_date: Optional[date]
    description: str = ""
    is_active: bool = True
    is_optional: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
