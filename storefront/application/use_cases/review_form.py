from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from storefront.application.constants import (
    FIELD_NAME_AUTHOR,
    FIELD_NAME_REVIEW,
    FIELD_NAME_TITLE,
)
from storefront.application.utils.review_rules import ReviewRules, fold_rules
from storefront.domain.entities.review import Review, ReviewDraft

SubmitReview = Callable[[ReviewDraft, bool], None]

TEXT_FIELDS = (FIELD_NAME_AUTHOR, FIELD_NAME_TITLE, FIELD_NAME_REVIEW)


@dataclass(frozen=True)
class ReviewFormView:
    author: str
    title: str
    review: str
    rate: int | None
    errors: dict[str, str]


class ReviewForm:
    def __init__(self, rules: ReviewRules, submit: SubmitReview) -> None:
        self._rules = rules
        self._submit = submit
        self._original = Review()
        self._fallback_author = ""
        self._draft = ReviewDraft()
        self._logger = logging.getLogger(__name__)

    @property
    def draft(self) -> ReviewDraft:
        return self._draft

    @property
    def validation_errors(self) -> dict[str, str]:
        return dict(self._draft.validation_errors)

    def initialize(
        self,
        existing_review: Review | None,
        fallback_author: str = "",
        product_id: str | None = None,
    ) -> ReviewDraft:
        self._original = existing_review or Review()
        self._fallback_author = fallback_author
        self._draft = ReviewDraft(
            author=self._original.author or fallback_author,
            title=self._original.title,
            review=self._original.review,
            rate=self._original.rate,
            product_id=product_id,
        )
        return self._draft

    def receive_props(self, existing_review: Review | None, fallback_author: str = "") -> None:
        """Rebuild the draft when the incoming review or author name changed."""
        incoming = existing_review or Review()
        if incoming == self._original and fallback_author == self._fallback_author:
            return
        self.initialize(incoming, fallback_author, self._draft.product_id)

    def update_field(self, field: str, value: str) -> None:
        if field not in TEXT_FIELDS:
            raise ValueError(f"Unknown review form field '{field}'")

        candidate = replace(self._draft, **{field: value})
        errors = dict(self._draft.validation_errors)
        message = self._rules.for_field(field)(candidate)
        if message:
            errors[field] = message
        else:
            errors.pop(field, None)

        self._draft = replace(candidate, validation_errors=errors)

    def set_rate(self, value: int | None) -> None:
        # Rate is checked on submit only.
        self._draft = replace(self._draft, rate=value)

    def validate_all(self) -> bool:
        errors = fold_rules(self._draft, self._rules.ordered())
        self._draft = replace(self._draft, validation_errors=errors)
        return not errors

    def submit(self) -> bool:
        if not self.validate_all():
            self._logger.info(
                "Review form invalid",
                extra={"product_id": self._draft.product_id, "field": ",".join(sorted(self._draft.validation_errors))},
            )
            return False

        is_update = bool(self._original.rate)
        self._submit(self._draft, is_update)
        return True

    def render(self) -> ReviewFormView | None:
        if self._draft.product_id is None:
            return None
        return ReviewFormView(
            author=self._draft.author,
            title=self._draft.title,
            review=self._draft.review,
            rate=self._draft.rate,
            errors=dict(self._draft.validation_errors),
        )
