from __future__ import annotations

import time
from typing import Callable

from storefront.domain.entities.variant_cache import VariantCacheEntry, VariantStatus

FreshnessPolicy = Callable[[VariantCacheEntry | None], bool]


def should_fetch_data(entry: VariantCacheEntry | None, now_ts: float | None = None) -> bool:
    """Return True when the cached entry cannot be used as is."""
    if entry is None:
        return True
    if entry.status is VariantStatus.pending:
        return False
    if entry.status is VariantStatus.error:
        return True

    now = time.time() if now_ts is None else now_ts
    if entry.expires and entry.expires < now:
        return True
    return entry.data is None
