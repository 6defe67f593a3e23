from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class VariantStatus(str, Enum):
    pending = "pending"
    present = "present"
    error = "error"


@dataclass(frozen=True)
class VariantCacheEntry:
    status: VariantStatus
    data: Any = None
    expires: float = 0.0  # epoch seconds, 0 means the entry never expires

    @property
    def is_fetching(self) -> bool:
        return self.status is VariantStatus.pending
