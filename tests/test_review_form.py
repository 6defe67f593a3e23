"""
Tests for review form validation and submission.
"""

from __future__ import annotations

import pytest

from storefront.application.use_cases.review_form import ReviewForm
from storefront.application.utils.review_rules import ReviewRules
from storefront.domain.entities.review import Review, ReviewDraft
from storefront.infrastructure.i18n.dict_translator import DictTranslator

MAX_LENGTH = 10

RATE_REQUIRED = "Please rate the product"
AUTHOR_REQUIRED = "Please enter your name"
TOO_LONG = f"Please use no more than {MAX_LENGTH} characters"


def make_form(
    existing: Review | None = None,
    author_name: str = "",
    product_id: str | None = "P1",
) -> tuple[ReviewForm, list[tuple[ReviewDraft, bool]]]:
    submitted: list[tuple[ReviewDraft, bool]] = []
    rules = ReviewRules(translator=DictTranslator("en"), max_length=MAX_LENGTH)
    form = ReviewForm(rules=rules, submit=lambda draft, is_update: submitted.append((draft, is_update)))
    form.initialize(existing, fallback_author=author_name, product_id=product_id)
    return form, submitted


def test_initialize_merges_review_over_fallback_author():
    """An existing review wins over the fallback author, but an empty author falls back."""
    form, _ = make_form(Review(author="Kim", title="Nice", rate=4), author_name="Guest")
    assert form.draft.author == "Kim"
    assert form.draft.title == "Nice"
    assert form.draft.rate == 4
    assert form.validation_errors == {}

    form, _ = make_form(Review(title="Nice"), author_name="Guest")
    assert form.draft.author == "Guest"


def test_validate_all_on_empty_draft_reports_rate_and_author():
    """Empty strings pass the length rule, so only rate and author are required."""
    form, _ = make_form()
    form.set_rate(0)

    assert form.validate_all() is False
    assert form.validation_errors == {"rate": RATE_REQUIRED, "author": AUTHOR_REQUIRED}


def test_overlong_author_reports_only_too_long():
    """An over-long author gets a single length message."""
    form, _ = make_form()
    form.set_rate(5)
    form.update_field("author", "x" * (MAX_LENGTH + 1))

    assert form.validate_all() is False
    assert form.validation_errors == {"author": TOO_LONG}


def test_update_field_touches_only_its_own_entry():
    """Per-field validation leaves the other fields' errors as they were."""
    form, _ = make_form()
    form.validate_all()
    before = form.validation_errors

    form.update_field("title", "t" * (MAX_LENGTH + 1))
    errors = form.validation_errors
    assert errors["title"] == TOO_LONG
    assert errors["author"] == before["author"]
    assert errors["rate"] == before["rate"]

    form.update_field("title", "short")
    assert "title" not in form.validation_errors
    assert form.draft.title == "short"


def test_update_author_clears_required_error():
    """Typing a name removes the required error; clearing it brings it back."""
    form, _ = make_form()
    form.validate_all()

    form.update_field("author", "Kim")
    assert "author" not in form.validation_errors

    form.update_field("author", "")
    assert form.validation_errors["author"] == AUTHOR_REQUIRED


def test_set_rate_does_not_validate():
    """Rate errors only appear on a full validation."""
    form, _ = make_form()
    form.set_rate(None)
    assert form.validation_errors == {}
    assert form.draft.rate is None


def test_unknown_field_is_rejected():
    form, _ = make_form()
    with pytest.raises(ValueError):
        form.update_field("rating", "5")


def test_invalid_submit_does_not_call_back():
    """An invalid draft keeps its errors and never reaches the submit callback."""
    form, submitted = make_form()
    assert form.submit() is False
    assert submitted == []
    assert set(form.validation_errors) == {"rate", "author"}


def test_submit_flags_update_from_original_review():
    """The update flag follows the review we started from, not the edited draft."""
    form, submitted = make_form(Review(author="Kim", rate=3))
    form.set_rate(5)
    assert form.submit() is True
    draft, is_update = submitted[0]
    assert is_update is True
    assert draft.rate == 5
    assert draft.product_id == "P1"

    form, submitted = make_form(Review(author="Kim"))
    form.set_rate(4)
    assert form.submit() is True
    assert submitted[0][1] is False


def test_no_product_renders_nothing():
    """Without a product id the form renders nothing, whatever the draft contains."""
    form, _ = make_form(Review(author="Kim", rate=3), product_id=None)
    assert form.render() is None

    form, _ = make_form(Review(author="Kim", rate=3))
    view = form.render()
    assert view is not None
    assert view.author == "Kim"


def test_receive_props_rebuilds_draft_on_change():
    """A new incoming review replaces the draft and keeps the product."""
    form, _ = make_form(Review(author="Kim"), author_name="Guest")
    form.update_field("title", "draft title")
    form.receive_props(Review(author="Kim"), "Guest")
    assert form.draft.title == "draft title"

    form.receive_props(Review(title="From shop", rate=2), "Lee")
    assert form.draft.author == "Lee"
    assert form.draft.title == "From shop"
    assert form.draft.product_id == "P1"
    assert form.validation_errors == {}
