from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from storefront.application.exceptions import PipelineError


class PipelineRequestPort(ABC):
    """
    A single named remote call.

    Contract:
    - set_input stores the input record and returns the request for chaining
    - dispatch resolves with the pipeline output or raises PipelineError
    - dispatch settles exactly once; a second dispatch raises PipelineError
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.input: dict[str, Any] = {}
        self._dispatched = False

    def set_input(self, input: dict[str, Any] | None = None) -> "PipelineRequestPort":
        self.input = dict(input or {})
        return self

    def _mark_dispatched(self) -> None:
        if self._dispatched:
            raise PipelineError(f"Pipeline request '{self.name}' was already dispatched")
        self._dispatched = True

    @abstractmethod
    async def dispatch(self) -> Any:
        raise NotImplementedError


PipelineRequestFactory = Callable[[str], PipelineRequestPort]
