from __future__ import annotations

import asyncio
from typing import Any, Callable


class Debouncer:
    """
    Delays calls to `func` until `delay_seconds` passed without a new call.

    Holds a single timer handle: every schedule cancels the previous one, so only
    the arguments of the latest call are ever delivered. Outside a running event
    loop the call is delivered immediately.
    """

    def __init__(self, func: Callable[..., Any], delay_seconds: float) -> None:
        self._func = func
        self._delay = delay_seconds
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, *args: Any) -> None:
        self.cancel()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Without an event loop there is nothing to wait on; deliver right away.
            self._func(*args)
            return
        self._handle = loop.call_later(self._delay, self._fire, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple[Any, ...]) -> None:
        self._handle = None
        self._func(*args)
