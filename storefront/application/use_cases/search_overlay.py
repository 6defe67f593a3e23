from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Callable

from storefront.application.constants import SEARCH_QUERY_PARAM
from storefront.application.ports.input_element import InputElementPort
from storefront.application.utils.debounce import Debouncer
from storefront.core.config import settings
from storefront.domain.entities.search_session import SearchSessionState


@dataclass(frozen=True)
class SearchView:
    input_value: str
    placeholder: str
    animation: str  # "in" while the overlay is active, "out" while it is closing


class SearchOverlay:
    """
    The navigator search field.

    Keystrokes only touch the local input mirror; the store receives a debounced
    copy of it, and blur, focus and submit push the latest value immediately.
    """

    def __init__(
        self,
        input_element: InputElementPort,
        get_query_param: Callable[[str], str | None],
        set_search_phrase: Callable[[str], None],
        submit_search: Callable[[], None],
        toggle_search: Callable[[bool], None],
        placeholder: str = "Search",
        debounce_ms: int | None = None,
    ) -> None:
        self._input = input_element
        self._get_query_param = get_query_param
        self._set_search_phrase = set_search_phrase
        self._submit_search = submit_search
        self._toggle_search = toggle_search
        self._placeholder = placeholder
        delay_ms = settings.SEARCH_DEBOUNCE_MS if debounce_ms is None else debounce_ms
        self._commit_debounced = Debouncer(self._set_search_phrase, delay_ms / 1000)
        self._active = False
        self._state = SearchSessionState()
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> SearchSessionState:
        return self._state

    @property
    def active(self) -> bool:
        """The external visibility flag, as last received."""
        return self._active

    def receive_active(self, active: bool) -> None:
        if active == self._active:
            return
        self._active = active
        if active:
            self.activate(self._get_query_param(SEARCH_QUERY_PARAM) or "")

    def activate(self, current_query_phrase: str) -> None:
        if self._state.is_visible:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        self._state = SearchSessionState(is_visible=True, input_value=current_query_phrase)
        if loop is None:
            self._input.focus()
            return
        # The field exists only after the next render.
        loop.call_soon(self._input.focus)

    def on_keystroke(self, raw_value: str) -> None:
        if not self._state.is_visible:
            return
        self._state = replace(self._state, input_value=raw_value)
        self._commit_debounced.schedule(raw_value)

    def on_blur(self) -> None:
        if not self._state.is_visible:
            return
        self._commit_now()

    def on_focus(self) -> None:
        if not self._state.is_visible:
            return
        self._commit_now()
        end = len(self._state.input_value)
        self._input.set_selection(end, end)

    def on_submit(self) -> None:
        if not self._state.is_visible or not self._state.input_value:
            return
        self._input.blur()
        self._commit_now()
        self._logger.info("Search submitted", extra={"phrase": self._state.input_value})
        self._submit_search()

    def on_overlay_dismiss(self) -> None:
        self._toggle_search(False)

    def on_visual_transition_end(self) -> None:
        if self._state.is_visible == self._active:
            return
        self._state = replace(self._state, is_visible=self._active)

    def render(self) -> SearchView | None:
        if not self._state.is_visible:
            return None
        return SearchView(
            input_value=self._state.input_value,
            placeholder=self._placeholder,
            animation="in" if self._active else "out",
        )

    def _commit_now(self) -> None:
        self._commit_debounced.cancel()
        self._set_search_phrase(self._state.input_value)
