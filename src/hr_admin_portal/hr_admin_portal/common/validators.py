from __future__ import annotations

import re
from datetime import date, datetime
from typing import Iterable, Optional

from ..core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_max_length(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_length_between(value: Optional[str], field_name: str, min_len: int, max_len: int) -> str:
    value = require_non_empty(value, field_name)
    require_min_length(value, field_name, min_len)
    require_max_length(value, field_name, max_len)
    return value


def require_pattern(value: Optional[str], field_name: str, pattern: str | re.Pattern) -> str:
    value = require_non_empty(value, field_name)
    if not re.match(pattern, value):
        raise ValidationError(f"{field_name} is not valid")
    return value


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    return require_pattern(value, field_name, EMAIL_PATTERN)


def require_choice(value: Optional[str], field_name: str, choices: Iterable[str]) -> str:
    allowed = list(choices)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value


def require_iso_date(value: Optional[str], field_name: str) -> date:
    value = require_non_empty(value, field_name)
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid date (YYYY-MM-DD)")


def require_iso_datetime(value: Optional[str], field_name: str) -> datetime:
    value = require_non_empty(value, field_name)
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"{field_name} must be a valid date and time")


def optional_trimmed(value: Optional[str]) -> Optional[str]:
    return (value or "").strip() or None
