from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from storefront.domain.entities.action import Action
from storefront.domain.entities.app_state import AppState

Dispatch = Callable[[Any], Any]
GetState = Callable[[], AppState]
Thunk = Callable[[Dispatch, GetState], Any]


class StorePort(ABC):
    @abstractmethod
    def dispatch(self, action: Action | Thunk) -> Any:
        """
        Apply an action to the state tree and notify subscribers.
        A callable is treated as a thunk and invoked with (dispatch, get_state);
        its return value is handed back to the caller.
        """
        raise NotImplementedError

    @abstractmethod
    def get_state(self) -> AppState:
        raise NotImplementedError

    @abstractmethod
    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a change listener. Returns a callable that removes it."""
        raise NotImplementedError
