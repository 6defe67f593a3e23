from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from storefront.application.exceptions import PipelineError
from storefront.application.ports.pipeline import PipelineRequestPort

Handler = Callable[[dict[str, Any]], Any]


def _product_variants(input: dict[str, Any]) -> dict[str, Any]:
    product_id = input.get("productId")
    return {
        "products": [
            {"id": f"{product_id}-S", "characteristics": {"1": "S"}},
            {"id": f"{product_id}-M", "characteristics": {"1": "M"}},
            {"id": f"{product_id}-L", "characteristics": {"1": "L"}},
        ],
        "characteristics": [
            {"id": "1", "label": "Size", "values": [{"id": v, "label": v} for v in ("S", "M", "L")]},
        ],
    }


def _review_echo(input: dict[str, Any]) -> dict[str, Any]:
    return {"review": dict(input)}


DEFAULT_HANDLERS: dict[str, Handler] = {
    "getProductVariants": _product_variants,
    "addProductReview": _review_echo,
    "updateProductReview": _review_echo,
}


class MockPipelineRequest(PipelineRequestPort):
    def __init__(self, name: str, client: "MockPipelineClient") -> None:
        super().__init__(name)
        self._client = client

    async def dispatch(self) -> Any:
        self._mark_dispatched()
        self._client.calls.append((self.name, dict(self.input)))
        # Yield once so callers observe a real suspension point.
        await asyncio.sleep(self._client.latency)

        if self.name in self._client.failing:
            raise PipelineError(f"Pipeline '{self.name}' failed (mock)")

        handler = self._client.handlers.get(self.name)
        if handler is None:
            raise PipelineError(f"Unknown pipeline '{self.name}'")
        return handler(self.input)


class MockPipelineClient:
    """In-process pipeline with canned responses. Records every dispatched call."""

    def __init__(
        self,
        handlers: dict[str, Handler] | None = None,
        failing: set[str] | None = None,
        latency: float = 0.0,
    ) -> None:
        self.handlers = {**DEFAULT_HANDLERS, **(handlers or {})}
        self.failing = set(failing or ())
        self.latency = latency
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._logger = logging.getLogger(__name__)

    def __call__(self, name: str) -> MockPipelineRequest:
        self._logger.debug("Mock pipeline request created", extra={"operation": name})
        return MockPipelineRequest(name, client=self)
