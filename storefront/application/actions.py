from __future__ import annotations

import time
from typing import Any

from storefront.core.config import settings
from storefront.domain.entities.action import Action

REQUEST_PRODUCT_VARIANTS = "REQUEST_PRODUCT_VARIANTS"
RECEIVE_PRODUCT_VARIANTS = "RECEIVE_PRODUCT_VARIANTS"
ERROR_PRODUCT_VARIANTS = "ERROR_PRODUCT_VARIANTS"

SET_SEARCH_PHRASE = "SET_SEARCH_PHRASE"
TOGGLE_SEARCH = "TOGGLE_SEARCH"

REQUEST_SUBMIT_REVIEW = "REQUEST_SUBMIT_REVIEW"
RECEIVE_SUBMIT_REVIEW = "RECEIVE_SUBMIT_REVIEW"
ERROR_SUBMIT_REVIEW = "ERROR_SUBMIT_REVIEW"


def request_product_variants(product_id: str) -> Action:
    return Action(REQUEST_PRODUCT_VARIANTS, {"product_id": product_id})


def receive_product_variants(
    product_id: str,
    result: Any,
    ttl_seconds: int | None = None,
    now_ts: float | None = None,
) -> Action:
    ttl = settings.VARIANTS_CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
    now = time.time() if now_ts is None else now_ts
    return Action(
        RECEIVE_PRODUCT_VARIANTS,
        {
            "product_id": product_id,
            "variants": result,
            "expires": now + ttl if ttl > 0 else 0.0,
        },
    )


def error_product_variants(product_id: str) -> Action:
    return Action(ERROR_PRODUCT_VARIANTS, {"product_id": product_id})


def set_search_phrase(phrase: str) -> Action:
    return Action(SET_SEARCH_PHRASE, {"phrase": phrase})


def toggle_search(active: bool) -> Action:
    return Action(TOGGLE_SEARCH, {"active": bool(active)})


def request_submit_review(product_id: str) -> Action:
    return Action(REQUEST_SUBMIT_REVIEW, {"product_id": product_id})


def receive_submit_review(product_id: str, result: Any = None) -> Action:
    return Action(RECEIVE_SUBMIT_REVIEW, {"product_id": product_id, "result": result})


def error_submit_review(product_id: str, message: str) -> Action:
    return Action(ERROR_SUBMIT_REVIEW, {"product_id": product_id, "message": message})
