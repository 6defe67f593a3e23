from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

from storefront.application.ports.history import HistoryPort


class MemoryHistory(HistoryPort):
    def __init__(self, initial_path: str = "/") -> None:
        self._stack: list[str] = [initial_path]
        self._logger = logging.getLogger(__name__)

    @property
    def current_path(self) -> str:
        return self._stack[-1]

    @property
    def entries(self) -> list[str]:
        return list(self._stack)

    def get_query_param(self, name: str) -> str | None:
        query = urlsplit(self.current_path).query
        values = parse_qs(query, keep_blank_values=True).get(name)
        return values[0] if values else None

    def push(self, path: str) -> None:
        self._stack.append(path)
        self._logger.info("Route pushed", extra={"path": path})

    def pop(self) -> str | None:
        if len(self._stack) <= 1:
            return None
        return self._stack.pop()
