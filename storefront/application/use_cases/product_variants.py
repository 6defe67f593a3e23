from __future__ import annotations

import asyncio
import logging
from typing import Any

from storefront.application.actions import (
    error_product_variants,
    receive_product_variants,
    request_product_variants,
)
from storefront.application.constants import PIPELINE_GET_PRODUCT_VARIANTS
from storefront.application.ports.pipeline import PipelineRequestFactory, PipelineRequestPort
from storefront.application.ports.store import Dispatch, GetState, Thunk
from storefront.application.utils.freshness import FreshnessPolicy, should_fetch_data

logger = logging.getLogger(__name__)

# Strong references for scheduled requests until they settle.
_in_flight: set[asyncio.Task[Any]] = set()


def get_product_variants(
    product_id: str,
    pipeline: PipelineRequestFactory,
    should_fetch: FreshnessPolicy = should_fetch_data,
) -> Thunk:
    """
    Fetch the variants of a product unless the store already holds usable data.

    The returned thunk hands back the scheduled request task, or None when the
    cache was reused. Failures end up as an error entry and are not raised; a
    cancelled task leaves an error entry as well.
    """

    def thunk(dispatch: Dispatch, get_state: GetState) -> asyncio.Task[None] | None:
        cached = get_state().product.variants_by_product_id.get(product_id)
        if not should_fetch(cached):
            return None

        # Written before the first suspension point so concurrent callers see "pending".
        dispatch(request_product_variants(product_id))

        request = pipeline(PIPELINE_GET_PRODUCT_VARIANTS).set_input({"productId": product_id})
        task = asyncio.get_running_loop().create_task(_fetch(request, product_id, dispatch))
        _in_flight.add(task)
        task.add_done_callback(_in_flight.discard)
        task.add_done_callback(lambda done: _settle_cancelled(done, product_id, dispatch))
        return task

    return thunk


async def _fetch(request: PipelineRequestPort, product_id: str, dispatch: Dispatch) -> None:
    try:
        result = await request.dispatch()
    except Exception as e:
        logger.error(
            "Fetching product variants failed",
            extra={"product_id": product_id, "operation": request.name, "error": str(e)},
        )
        dispatch(error_product_variants(product_id))
        return
    dispatch(receive_product_variants(product_id, result))


def _settle_cancelled(task: asyncio.Task[None], product_id: str, dispatch: Dispatch) -> None:
    # Also covers a task cancelled before its first step, when _fetch never ran.
    if not task.cancelled():
        return
    logger.warning("Fetching product variants cancelled", extra={"product_id": product_id})
    dispatch(error_product_variants(product_id))
