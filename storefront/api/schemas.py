from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class VariantStatusSchema(str, Enum):
    pending = "pending"
    present = "present"
    error = "error"


class VariantsResponseSchema(BaseModel):
    product_id: str
    status: VariantStatusSchema
    data: Any = None


class ExistingReviewSchema(BaseModel):
    author: str = ""
    title: str = ""
    review: str = ""
    rate: int | None = None


class ReviewRequestSchema(BaseModel):
    author: str | None = None
    title: str | None = None
    review: str | None = None
    rate: int | None = Field(default=None, ge=0, le=5)
    author_name: str = ""
    existing: ExistingReviewSchema | None = None


class ReviewResponseSchema(BaseModel):
    status: str
    is_update: bool


class ValidationErrorsSchema(BaseModel):
    validation_errors: dict[str, str]
