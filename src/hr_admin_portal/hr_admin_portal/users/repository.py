from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..api.envelope import Page
from .model import Location, User


class UserRepository(Protocol):
    """Repository interface for employee records.

    The service layer depends on this interface, never on the HTTP client.
    """

    def list(self, params: dict) -> Page:
        raise NotImplementedError

    def get(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, data: dict) -> Optional[User]:
        raise NotImplementedError

    def update(self, user_id: str, data: dict) -> Optional[User]:
        raise NotImplementedError

    def delete(self, user_id: str) -> None:
        raise NotImplementedError

    def logout_all_devices(self, user_id: str) -> None:
        raise NotImplementedError


class LocationRepository(Protocol):
    def states(self) -> Sequence[Location]:
        raise NotImplementedError

    def state(self, state_id: str) -> Optional[Location]:
        raise NotImplementedError

    def cities(self, state_id: Optional[str] = None) -> Sequence[Location]:
        raise NotImplementedError

    def city(self, city_id: str) -> Optional[Location]:
        raise NotImplementedError
