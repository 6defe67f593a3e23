from __future__ import annotations

import logging
from typing import Any, Callable

from storefront.application.ports.store import StorePort
from storefront.application.reducers import root_reducer
from storefront.domain.entities.action import Action
from storefront.domain.entities.app_state import AppState

Reducer = Callable[[AppState, Action], AppState]


class MemoryStore(StorePort):
    def __init__(self, reducer: Reducer = root_reducer, initial_state: AppState | None = None) -> None:
        self._reducer = reducer
        self._state = initial_state or AppState()
        self._listeners: list[Callable[[], None]] = []
        self._logger = logging.getLogger(__name__)

    def dispatch(self, action: Any) -> Any:
        if callable(action):
            return action(self.dispatch, self.get_state)
        if not isinstance(action, Action):
            raise TypeError(f"Cannot dispatch {type(action).__name__}; expected Action or thunk")

        self._state = self._reducer(self._state, action)
        self._logger.debug("Action dispatched", extra={"action": action.type})

        for listener in list(self._listeners):
            listener()
        return action

    def get_state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
