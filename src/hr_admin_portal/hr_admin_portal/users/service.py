from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from ..api.envelope import Page
from ..common.validators import (
    optional_trimmed,
    require_email,
    require_min_length,
    require_non_empty,
    require_pattern,
)
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, DROPDOWN_PAGE_SIZE
from ..core.enums import SortOrder
from ..core.exceptions import ValidationError
from .model import Location, User
from .repository import LocationRepository, UserRepository

logger = logging.getLogger(__name__)

MOBILE_PATTERN = r"^\+?[\d\s\-\(\)]+$"
PINCODE_PATTERN = r"^\d{5,6}$"


class UserService:
    """Use case: employee CRUD plus the state/city reference data the form needs."""

    def __init__(self, users: UserRepository, locations: LocationRepository):
        self._users = users
        self._locations = locations

    def list(
        self,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> Page:
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")
        order = None
        if sort_order:
            try:
                order = SortOrder(sort_order)
            except ValueError:
                raise ValidationError("Sort order must be asc or desc")
        return self._users.list(
            {
                "page": page,
                "limit": limit,
                "search": optional_trimmed(search),
                "sortBy": sort_by,
                "sortOrder": order,
            }
        )

    def iter_all(self, limit: int = DROPDOWN_PAGE_SIZE, search: Optional[str] = None) -> Iterator[User]:
        """Yield every user, one page at a time, up to the backend's ``totalPages``."""
        page = DEFAULT_PAGE
        while True:
            result = self.list(page=page, limit=limit, search=search)
            yield from result.items
            if not result.items or result.pagination is None or page >= result.pagination.total_pages:
                return
            page += 1

    def get(self, user_id: str) -> User:
        user = self._users.get(require_non_empty(user_id, "User id"))
        if not user:
            raise ValidationError("User not found")
        return user

    @staticmethod
    def build_payload(
        *,
        firstname: str,
        lastname: str,
        email: str,
        role: str,
        mobilenumber: str,
        addressline1: str,
        city: str,
        state: str,
        center: str,
        pincode: str,
        addressline2: Optional[str] = None,
        password: Optional[str] = None,
        is_new: bool = True,
    ) -> dict:
        payload = {
            "firstname": require_min_length(require_non_empty(firstname, "First name"), "First name", 2),
            "lastname": require_min_length(require_non_empty(lastname, "Last name"), "Last name", 2),
            "email": require_email(email),
            "role": require_non_empty(role, "Role"),
            "mobilenumber": require_pattern(mobilenumber, "Mobile number", MOBILE_PATTERN),
            "addressline1": require_non_empty(addressline1, "Address line 1"),
            "addressline2": optional_trimmed(addressline2) or "",
            "city": require_non_empty(city, "City"),
            "state": require_non_empty(state, "State"),
            "center": require_non_empty(center, "Center"),
            "pincode": require_pattern(pincode, "Pincode", PINCODE_PATTERN),
        }

        # Blank password on edit keeps the current one.
        if is_new or password:
            payload["password"] = require_min_length(require_non_empty(password, "Password"), "Password", 6)
        return payload

    def create(self, data: dict) -> Optional[User]:
        return self._users.create(data)

    def update(self, user_id: str, data: dict) -> Optional[User]:
        return self._users.update(require_non_empty(user_id, "User id"), data)

    def delete(self, user_id: str) -> None:
        self._users.delete(require_non_empty(user_id, "User id"))

    def logout_all_devices(self, user_id: str) -> None:
        self._users.logout_all_devices(require_non_empty(user_id, "User id"))
        logger.info("Forced logout on all devices for user %s", user_id)

    def states(self) -> Sequence[Location]:
        return self._locations.states()

    def state(self, state_id: str) -> Optional[Location]:
        return self._locations.state(require_non_empty(state_id, "State id"))

    def cities(self, state_id: Optional[str] = None) -> Sequence[Location]:
        return self._locations.cities(optional_trimmed(state_id))

    def city(self, city_id: str) -> Optional[Location]:
        return self._locations.city(require_non_empty(city_id, "City id"))
