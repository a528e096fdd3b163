from __future__ import annotations

import logging
from typing import Callable, List

from ..entities import Idle, QueryState


logger = logging.getLogger(__name__)

Subscriber = Callable[[QueryState], None]


class StateStore:
    """Single state cell broadcasting every change to read-only subscribers.

    Only the owning controller calls :meth:`set`.
    """

    def __init__(self, initial: QueryState = Idle()) -> None:
        self._state: QueryState = initial
        self._subscribers: List[Subscriber] = []

    @property
    def state(self) -> QueryState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            self._subscribers = [cb for cb in self._subscribers if cb is not callback]

        return unsubscribe

    def set(self, state: QueryState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:  # noqa: BLE001 - one bad observer must not block the rest
                logger.exception("State subscriber %r failed", callback)


__all__ = ["StateStore", "Subscriber"]
