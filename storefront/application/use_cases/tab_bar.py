from __future__ import annotations

from dataclasses import dataclass

from storefront.application.constants import INDEX_PATH
from storefront.application.ports.history import HistoryPort


@dataclass(frozen=True)
class TabBarActionView:
    label: str
    icon_portal: str
    is_highlighted: bool


class TabBarHomeAction:
    def __init__(self, path: str, history: HistoryPort, label: str = "navigation.home") -> None:
        self._path = path
        self._history = history
        self._label = label

    def handle_click(self) -> None:
        if self._path == INDEX_PATH:
            return
        self._history.push(INDEX_PATH)

    def render(self) -> TabBarActionView:
        return TabBarActionView(
            label=self._label,
            icon_portal="tabbar.home-icon",
            is_highlighted=self._path == INDEX_PATH,
        )
