from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Review:
    """A review as it comes back from the shop, if the customer already wrote one."""

    author: str = ""
    title: str = ""
    review: str = ""
    rate: int | None = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any] | None) -> "Review":
        data = dict(payload or {})
        rate = data.get("rate")
        return Review(
            author=str(data.get("author") or ""),
            title=str(data.get("title") or ""),
            review=str(data.get("review") or ""),
            rate=int(rate) if rate not in (None, "") else None,
        )


@dataclass(frozen=True)
class ReviewDraft:
    author: str = ""
    title: str = ""
    review: str = ""
    rate: int | None = None
    product_id: str | None = None  # None means there is nothing to review
    # Only failing fields are present; a passing field has no key at all.
    validation_errors: dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "author": self.author,
            "title": self.title,
            "review": self.review,
            "rate": self.rate,
        }
