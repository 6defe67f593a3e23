from dataclasses import dataclass, field

from storefront.domain.entities.variant_cache import VariantCacheEntry


@dataclass(frozen=True)
class ProductState:
    # An absent key is the "absent" cache state.
    variants_by_product_id: dict[str, VariantCacheEntry] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchState:
    phrase: str = ""
    active: bool = False


@dataclass(frozen=True)
class ReviewsState:
    submitting_by_product_id: dict[str, bool] = field(default_factory=dict)
    last_error_by_product_id: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AppState:
    product: ProductState = ProductState()
    search: SearchState = SearchState()
    reviews: ReviewsState = ReviewsState()
