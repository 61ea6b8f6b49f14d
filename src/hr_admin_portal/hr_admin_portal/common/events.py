from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class Notifier:
    """Minimal observer list used for auth-state and permission-change events."""

    def __init__(self, name: str):
        self._name = name
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, value: Any = None) -> None:
        logger.debug("%s: notifying %d listener(s)", self._name, len(self._listeners))
        for listener in list(self._listeners):
            listener(value)
