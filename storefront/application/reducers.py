from __future__ import annotations

from dataclasses import replace

from storefront.application.actions import (
    ERROR_PRODUCT_VARIANTS,
    ERROR_SUBMIT_REVIEW,
    RECEIVE_PRODUCT_VARIANTS,
    RECEIVE_SUBMIT_REVIEW,
    REQUEST_PRODUCT_VARIANTS,
    REQUEST_SUBMIT_REVIEW,
    SET_SEARCH_PHRASE,
    TOGGLE_SEARCH,
)
from storefront.domain.entities.action import Action
from storefront.domain.entities.app_state import AppState, ProductState, ReviewsState, SearchState
from storefront.domain.entities.variant_cache import VariantCacheEntry, VariantStatus


def product_reducer(state: ProductState, action: Action) -> ProductState:
    product_id = action.payload.get("product_id")

    if action.type == REQUEST_PRODUCT_VARIANTS:
        previous = state.variants_by_product_id.get(product_id)
        entry = VariantCacheEntry(
            status=VariantStatus.pending,
            data=previous.data if previous else None,
        )
    elif action.type == RECEIVE_PRODUCT_VARIANTS:
        entry = VariantCacheEntry(
            status=VariantStatus.present,
            data=action.payload.get("variants"),
            expires=action.payload.get("expires", 0.0),
        )
    elif action.type == ERROR_PRODUCT_VARIANTS:
        entry = VariantCacheEntry(status=VariantStatus.error)
    else:
        return state

    variants = dict(state.variants_by_product_id)
    variants[product_id] = entry
    return replace(state, variants_by_product_id=variants)


def search_reducer(state: SearchState, action: Action) -> SearchState:
    if action.type == SET_SEARCH_PHRASE:
        return replace(state, phrase=action.payload["phrase"])
    if action.type == TOGGLE_SEARCH:
        return replace(state, active=action.payload["active"])
    return state


def reviews_reducer(state: ReviewsState, action: Action) -> ReviewsState:
    if action.type not in {REQUEST_SUBMIT_REVIEW, RECEIVE_SUBMIT_REVIEW, ERROR_SUBMIT_REVIEW}:
        return state

    product_id = action.payload["product_id"]
    submitting = dict(state.submitting_by_product_id)
    errors = dict(state.last_error_by_product_id)

    submitting[product_id] = action.type == REQUEST_SUBMIT_REVIEW
    if action.type == ERROR_SUBMIT_REVIEW:
        errors[product_id] = action.payload["message"]
    else:
        errors.pop(product_id, None)

    return ReviewsState(submitting_by_product_id=submitting, last_error_by_product_id=errors)


def root_reducer(state: AppState, action: Action) -> AppState:
    return AppState(
        product=product_reducer(state.product, action),
        search=search_reducer(state.search, action),
        reviews=reviews_reducer(state.reviews, action),
    )
