"""Helpers for the backend response envelope.

Most endpoints answer ``{code, status, data, pagination?, timestamp, path}``.
Some list endpoints nest a second envelope inside ``data`` and audit logs
answer a bare ``{data, total, page, limit, totalPages}``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    limit: int = 0
    total: int = 0
    total_pages: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class Page:
    items: list = field(default_factory=list)
    pagination: Optional[Pagination] = None


def is_envelope(payload: Any) -> bool:
    return isinstance(payload, dict) and "data" in payload and ("code" in payload or "status" in payload)


def unwrap(payload: Any) -> Any:
    """Return the ``data`` member of an envelope, or the payload itself."""
    if is_envelope(payload):
        return payload["data"]
    return payload


def _pagination_from(raw: Any) -> Optional[Pagination]:
    if not isinstance(raw, dict):
        return None
    return Pagination(
        page=int(raw.get("page") or 1),
        limit=int(raw.get("limit") or 0),
        total=int(raw.get("total") or 0),
        total_pages=int(raw.get("totalPages") or 0),
    )


def unwrap_page(payload: Any) -> Page:
    if payload is None:
        return Page()
    if isinstance(payload, list):
        return Page(items=list(payload))

    pagination = _pagination_from(payload.get("pagination"))
    data = payload.get("data")

    # nested envelope: {data: {data: [...], totalPages}}
    while isinstance(data, dict):
        if pagination is None:
            pagination = _pagination_from(data.get("pagination"))
        if pagination is None and "totalPages" in data:
            pagination = Pagination(total_pages=int(data.get("totalPages") or 0))
        data = data.get("data")

    if pagination is None and "totalPages" in payload:
        pagination = _pagination_from(payload)

    return Page(items=list(data or []), pagination=pagination)
