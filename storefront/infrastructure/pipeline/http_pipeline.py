from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.application.exceptions import PipelineError
from storefront.application.ports.pipeline import PipelineRequestPort
from storefront.core.config import settings


class HttpPipelineRequest(PipelineRequestPort):
    def __init__(
        self,
        name: str,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(name)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    async def dispatch(self) -> Any:
        self._mark_dispatched()
        url = f"{self._base_url}/{self.name}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(url, json=self.input)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.warning(
                "Pipeline request failed",
                extra={"operation": self.name, "status": e.response.status_code, "error": str(e)},
            )
            raise PipelineError(f"Pipeline '{self.name}' returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.warning("Pipeline request failed", extra={"operation": self.name, "error": str(e)})
            raise PipelineError(f"Pipeline '{self.name}' is unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise PipelineError(f"Pipeline '{self.name}' returned invalid JSON") from e

        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise PipelineError(f"Pipeline '{self.name}' failed: {message}")

        if isinstance(data, dict) and "output" in data:
            return data["output"]
        return data


class HttpPipelineClient:
    """Builds pipeline requests against one pipeline endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url or settings.PIPELINE_BASE_URL
        self._timeout = timeout if timeout is not None else settings.PIPELINE_TIMEOUT_SECONDS
        self._transport = transport

        if not self._base_url:
            raise ValueError("PIPELINE_BASE_URL is required for the HTTP pipeline client")

    def __call__(self, name: str) -> HttpPipelineRequest:
        return HttpPipelineRequest(
            name,
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
