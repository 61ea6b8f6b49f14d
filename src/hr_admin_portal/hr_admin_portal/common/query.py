from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional


def build_params(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Turn filter values into query-string params.

    Empty values (None, "") are dropped so the backend applies its defaults;
    booleans are sent as lowercase strings.
    """
    out: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            out[key] = str(value.value)
        else:
            out[key] = str(value)
    return out


def parse_bool(value: Any, default: bool = False) -> bool:
    """Read a JSON or form flag; only ``True`` and ``"true"`` count as set."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"
