from __future__ import annotations

import asyncio
import logging

from storefront.application.actions import (
    error_submit_review,
    receive_submit_review,
    request_submit_review,
)
from storefront.application.constants import (
    PIPELINE_ADD_PRODUCT_REVIEW,
    PIPELINE_UPDATE_PRODUCT_REVIEW,
)
from storefront.application.ports.pipeline import PipelineRequestFactory
from storefront.application.ports.store import Dispatch, GetState, Thunk
from storefront.domain.entities.review import ReviewDraft

logger = logging.getLogger(__name__)


def submit_review(draft: ReviewDraft, is_update: bool, pipeline: PipelineRequestFactory) -> Thunk:
    """Send a validated draft to the shop. Resolves to True when the shop accepted it."""

    async def thunk(dispatch: Dispatch, get_state: GetState) -> bool:
        product_id = draft.product_id or ""
        operation = PIPELINE_UPDATE_PRODUCT_REVIEW if is_update else PIPELINE_ADD_PRODUCT_REVIEW
        dispatch(request_submit_review(product_id))

        try:
            result = await pipeline(operation).set_input(draft.to_payload()).dispatch()
        except asyncio.CancelledError:
            dispatch(error_submit_review(product_id, "cancelled"))
            raise
        except Exception as e:
            logger.error(
                "Submitting review failed",
                extra={"product_id": product_id, "operation": operation, "error": str(e)},
            )
            dispatch(error_submit_review(product_id, str(e)))
            return False

        dispatch(receive_submit_review(product_id, result))
        return True

    return thunk
