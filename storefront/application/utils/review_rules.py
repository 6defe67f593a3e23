from __future__ import annotations

from typing import Callable, Iterable

from storefront.application.constants import (
    FIELD_NAME_AUTHOR,
    FIELD_NAME_RATE,
    FIELD_NAME_REVIEW,
    FIELD_NAME_TITLE,
)
from storefront.application.ports.translator import TranslatorPort
from storefront.domain.entities.review import ReviewDraft

Rule = Callable[[ReviewDraft], "str | None"]


class ReviewRules:
    """Validation rules for the review form. Each rule returns an error message or None."""

    def __init__(self, translator: TranslatorPort, max_length: int) -> None:
        self._translator = translator
        self.max_length = max_length

    def rate(self, draft: ReviewDraft) -> str | None:
        if not draft.rate:
            return self._translator.translate("reviews.review_form_rate_error")
        return None

    def author(self, draft: ReviewDraft) -> str | None:
        if not draft.author:
            return self._translator.translate("reviews.review_form_error_author_empty")
        if len(draft.author) > self.max_length:
            return self._too_long()
        return None

    def length(self, field: str) -> Rule:
        def rule(draft: ReviewDraft) -> str | None:
            value = getattr(draft, field)
            if value and len(value) > self.max_length:
                return self._too_long()
            return None

        return rule

    def ordered(self) -> list[tuple[str, Rule]]:
        # Order matters: a later result replaces an earlier one for the same field.
        return [
            (FIELD_NAME_RATE, self.rate),
            (FIELD_NAME_AUTHOR, self.author),
            (FIELD_NAME_AUTHOR, self.length(FIELD_NAME_AUTHOR)),
            (FIELD_NAME_TITLE, self.length(FIELD_NAME_TITLE)),
            (FIELD_NAME_REVIEW, self.length(FIELD_NAME_REVIEW)),
        ]

    def for_field(self, field: str) -> Rule:
        if field == FIELD_NAME_AUTHOR:
            return self.author
        if field in {FIELD_NAME_TITLE, FIELD_NAME_REVIEW}:
            return self.length(field)
        raise ValueError(f"No validation rule for field '{field}'")

    def _too_long(self) -> str:
        return self._translator.translate("reviews.review_form_error_length", length=self.max_length)


def fold_rules(draft: ReviewDraft, rules: Iterable[tuple[str, Rule]]) -> dict[str, str]:
    """
    Run rules left to right into one fresh mapping.
    A failing rule writes its field, replacing an earlier message for the same
    field; a passing rule leaves the mapping untouched.
    """
    errors: dict[str, str] = {}
    for field, rule in rules:
        message = rule(draft)
        if message:
            errors[field] = message
    return errors
