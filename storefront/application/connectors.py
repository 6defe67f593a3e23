from __future__ import annotations

from typing import Callable

from storefront.application.actions import set_search_phrase, toggle_search
from storefront.application.ports.history import HistoryPort
from storefront.application.ports.input_element import InputElementPort
from storefront.application.ports.store import StorePort
from storefront.application.use_cases.search_overlay import SearchOverlay
from storefront.application.use_cases.submit_search import submit_search


def build_search_overlay(
    store: StorePort,
    history: HistoryPort,
    input_element: InputElementPort,
    placeholder: str = "Search",
    debounce_ms: int | None = None,
) -> SearchOverlay:
    return SearchOverlay(
        input_element=input_element,
        get_query_param=history.get_query_param,
        set_search_phrase=lambda phrase: store.dispatch(set_search_phrase(phrase)),
        submit_search=lambda: store.dispatch(submit_search(history)),
        toggle_search=lambda active: store.dispatch(toggle_search(active)),
        placeholder=placeholder,
        debounce_ms=debounce_ms,
    )


def connect_search_overlay(store: StorePort, overlay: SearchOverlay) -> Callable[[], None]:
    """Feed the store's search.active flag into the overlay. Returns the unsubscribe callable."""

    def sync() -> None:
        overlay.receive_active(store.get_state().search.active)

    sync()
    return store.subscribe(sync)
