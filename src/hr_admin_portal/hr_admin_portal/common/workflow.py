from __future__ import annotations

from abc import ABC
from typing import ClassVar, Mapping

from ..core.exceptions import InvalidTransitionError


class StatusWorkflow(ABC):
    """Declarative status adjacency map shared by leave and tour workflows.

    Subclasses only fill in ``TRANSITIONS`` and ``DISPLAY_NAMES``. The map is
    client-side guidance; the backend stays the authority.
    """

    TRANSITIONS: ClassVar[Mapping[str, tuple[str, ...]]] = {}
    DISPLAY_NAMES: ClassVar[Mapping[str, str]] = {}

    def statuses(self) -> list[str]:
        return list(self.DISPLAY_NAMES) or list(self.TRANSITIONS)

    def allowed_next(self, current: str) -> list[str]:
        return list(self.TRANSITIONS.get(_value(current), ()))

    def is_terminal(self, current: str) -> bool:
        return not self.allowed_next(current)

    def can_transition(self, current: str, target: str) -> bool:
        return _value(target) in self.allowed_next(current)

    def display_name(self, status: str) -> str:
        status = _value(status)
        return self.DISPLAY_NAMES.get(status, status)

    def validate(self, current: str, target: str) -> str:
        current, target = _value(current), _value(target)
        if target not in self.statuses():
            raise InvalidTransitionError(f"Unknown status '{target}'")
        if current == target:
            raise InvalidTransitionError("Please select a different status to update.")
        if not self.can_transition(current, target):
            raise InvalidTransitionError(
                f"Invalid status transition from '{self.display_name(current)}' to '{self.display_name(target)}'."
            )
        return target


def _value(status) -> str:
    return getattr(status, "value", status)
