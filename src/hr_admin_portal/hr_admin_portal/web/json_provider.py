from __future__ import annotations

import dataclasses
from datetime import date
from enum import Enum

from flask.json.provider import DefaultJSONProvider


class PortalJSONProvider(DefaultJSONProvider):
    """Dataclasses as objects, dates as ISO-8601 instead of HTTP dates."""

    @staticmethod
    def default(o):
        if isinstance(o, date):
            return o.isoformat()
        if isinstance(o, Enum):
            return o.value
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return dataclasses.asdict(o)
        return DefaultJSONProvider.default(o)
