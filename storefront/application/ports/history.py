from __future__ import annotations

from abc import ABC, abstractmethod


class HistoryPort(ABC):
    @property
    @abstractmethod
    def current_path(self) -> str:
        """Path of the current route including its query string."""
        raise NotImplementedError

    @abstractmethod
    def get_query_param(self, name: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def push(self, path: str) -> None:
        raise NotImplementedError
