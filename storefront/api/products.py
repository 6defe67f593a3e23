from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from storefront.api.schemas import (
    ReviewRequestSchema,
    ReviewResponseSchema,
    ValidationErrorsSchema,
    VariantsResponseSchema,
)
from storefront.application.constants import FIELD_NAME_AUTHOR, FIELD_NAME_REVIEW, FIELD_NAME_TITLE
from storefront.application.ports.pipeline import PipelineRequestFactory
from storefront.application.ports.store import StorePort
from storefront.application.use_cases.product_variants import get_product_variants
from storefront.application.use_cases.review_form import ReviewForm, SubmitReview
from storefront.application.use_cases.submit_review import submit_review
from storefront.domain.entities.review import Review, ReviewDraft
from storefront.domain.entities.variant_cache import VariantStatus
from storefront.wiring.dependencies import get_pipeline_factory, get_review_form_factory, get_store


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/products/{product_id}/variants", response_model=VariantsResponseSchema)
async def product_variants(
    product_id: str,
    store: StorePort = Depends(get_store),
    pipeline: PipelineRequestFactory = Depends(get_pipeline_factory),
):
    task = store.dispatch(get_product_variants(product_id, pipeline=pipeline))
    if task is not None:
        # Shielded: a dropped client must not cancel a fetch other callers share.
        await asyncio.shield(task)

    entry = store.get_state().product.variants_by_product_id.get(product_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Unknown product")
    if entry.status is VariantStatus.error:
        raise HTTPException(status_code=502, detail="Product variants are unavailable")

    return VariantsResponseSchema(product_id=product_id, status=entry.status.value, data=entry.data)


@router.post(
    "/products/{product_id}/reviews",
    response_model=ReviewResponseSchema,
    responses={422: {"model": ValidationErrorsSchema}},
)
async def write_review(
    product_id: str,
    req: ReviewRequestSchema,
    store: StorePort = Depends(get_store),
    pipeline: PipelineRequestFactory = Depends(get_pipeline_factory),
    build_form: Callable[[SubmitReview], ReviewForm] = Depends(get_review_form_factory),
):
    submitted: list[Any] = []

    def submit(draft: ReviewDraft, is_update: bool) -> None:
        submitted.append((is_update, store.dispatch(submit_review(draft, is_update, pipeline=pipeline))))

    form = build_form(submit)
    existing = Review(**req.existing.model_dump()) if req.existing else None
    form.initialize(existing, fallback_author=req.author_name, product_id=product_id)

    for field in (FIELD_NAME_AUTHOR, FIELD_NAME_TITLE, FIELD_NAME_REVIEW):
        value = getattr(req, field)
        if value is not None:
            form.update_field(field, value)
    if req.rate is not None:
        form.set_rate(req.rate)

    if not form.submit():
        return JSONResponse(
            status_code=422,
            content=ValidationErrorsSchema(validation_errors=form.validation_errors).model_dump(),
        )

    is_update, pending = submitted[0]
    if not await pending:
        raise HTTPException(status_code=502, detail="Review could not be saved")

    logger.info("Review submitted", extra={"product_id": product_id, "status": "update" if is_update else "create"})
    return ReviewResponseSchema(status="submitted", is_update=is_update)
