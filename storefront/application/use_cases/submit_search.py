from __future__ import annotations

from urllib.parse import urlencode

from storefront.application.actions import toggle_search
from storefront.application.constants import SEARCH_PATH, SEARCH_QUERY_PARAM
from storefront.application.ports.history import HistoryPort
from storefront.application.ports.store import Dispatch, GetState, Thunk


def submit_search(history: HistoryPort) -> Thunk:
    """Close the search overlay and open the results for the committed phrase."""

    def thunk(dispatch: Dispatch, get_state: GetState) -> None:
        phrase = get_state().search.phrase.strip()
        if not phrase:
            return
        dispatch(toggle_search(False))
        history.push(f"{SEARCH_PATH}?{urlencode({SEARCH_QUERY_PARAM: phrase})}")

    return thunk
