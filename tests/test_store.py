"""
Tests for the in-memory store and its reducers.
"""

from __future__ import annotations

from storefront.application.actions import (
    error_product_variants,
    error_submit_review,
    receive_product_variants,
    receive_submit_review,
    request_product_variants,
    request_submit_review,
    set_search_phrase,
    toggle_search,
)
from storefront.application.utils.freshness import should_fetch_data
from storefront.domain.entities.variant_cache import VariantCacheEntry, VariantStatus
from storefront.infrastructure.store.memory_store import MemoryStore


def test_variant_life_cycle():
    """request -> receive -> error moves the entry through its states."""
    store = MemoryStore()
    store.dispatch(request_product_variants("P1"))
    assert store.get_state().product.variants_by_product_id["P1"].is_fetching

    store.dispatch(receive_product_variants("P1", {"products": [1]}, ttl_seconds=10, now_ts=100.0))
    entry = store.get_state().product.variants_by_product_id["P1"]
    assert entry.status is VariantStatus.present
    assert entry.data == {"products": [1]}
    assert entry.expires == 110.0

    store.dispatch(error_product_variants("P1"))
    assert store.get_state().product.variants_by_product_id["P1"].status is VariantStatus.error


def test_reducers_do_not_mutate_previous_state():
    store = MemoryStore()
    before = store.get_state()
    store.dispatch(request_product_variants("P1"))
    assert before.product.variants_by_product_id == {}


def test_search_phrase_and_toggle():
    store = MemoryStore()
    store.dispatch(set_search_phrase("shoes"))
    store.dispatch(toggle_search(True))
    assert store.get_state().search.phrase == "shoes"
    assert store.get_state().search.active is True


def test_review_submission_state():
    store = MemoryStore()
    store.dispatch(request_submit_review("P1"))
    assert store.get_state().reviews.submitting_by_product_id["P1"] is True

    store.dispatch(error_submit_review("P1", "boom"))
    assert store.get_state().reviews.submitting_by_product_id["P1"] is False
    assert store.get_state().reviews.last_error_by_product_id["P1"] == "boom"

    store.dispatch(receive_submit_review("P1"))
    assert "P1" not in store.get_state().reviews.last_error_by_product_id


def test_subscribe_and_unsubscribe():
    store = MemoryStore()
    calls: list[str] = []
    unsubscribe = store.subscribe(lambda: calls.append(store.get_state().search.phrase))

    store.dispatch(set_search_phrase("a"))
    unsubscribe()
    store.dispatch(set_search_phrase("b"))
    assert calls == ["a"]


def test_thunk_receives_dispatch_and_get_state():
    store = MemoryStore()

    def thunk(dispatch, get_state):
        dispatch(set_search_phrase("from thunk"))
        return get_state().search.phrase

    assert store.dispatch(thunk) == "from thunk"


def test_should_fetch_data_policy():
    assert should_fetch_data(None) is True
    assert should_fetch_data(VariantCacheEntry(status=VariantStatus.pending)) is False
    assert should_fetch_data(VariantCacheEntry(status=VariantStatus.error)) is True
    fresh = VariantCacheEntry(status=VariantStatus.present, data={}, expires=200.0)
    assert should_fetch_data(fresh, now_ts=100.0) is False
    assert should_fetch_data(fresh, now_ts=300.0) is True
    never_expires = VariantCacheEntry(status=VariantStatus.present, data={}, expires=0.0)
    assert should_fetch_data(never_expires, now_ts=10**12) is False
