"""
Tests for the cancel-and-replace debouncer.
"""

from __future__ import annotations

import asyncio

from storefront.application.utils.debounce import Debouncer


def test_only_last_scheduled_call_is_delivered():
    delivered: list[str] = []

    async def scenario():
        debouncer = Debouncer(delivered.append, 0.01)
        debouncer.schedule("a")
        debouncer.schedule("ab")
        assert debouncer.pending is True
        await asyncio.sleep(0.05)
        assert debouncer.pending is False

    asyncio.run(scenario())
    assert delivered == ["ab"]


def test_cancel_drops_pending_call():
    delivered: list[str] = []

    async def scenario():
        debouncer = Debouncer(delivered.append, 0.01)
        debouncer.schedule("a")
        debouncer.cancel()
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert delivered == []


def test_schedule_without_event_loop_delivers_immediately():
    delivered: list[str] = []
    debouncer = Debouncer(delivered.append, 0.25)

    debouncer.schedule("v")

    assert delivered == ["v"]
    assert debouncer.pending is False
