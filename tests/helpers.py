"""Error payloads and call counters shared by the test modules."""

from __future__ import annotations

import asyncio
from typing import Any

import msgspec


class Message(msgspec.Struct, frozen=True, gc=False):
    """Error payload carrying a free-form message."""

    message: str


class Code(msgspec.Struct, frozen=True, gc=False):
    """Error payload carrying a parsed numeric code."""

    code: int | None


class CallCounter:
    """Wraps a function and records how often it was invoked."""

    def __init__(self, f: Any) -> None:
        self.f = f
        self.calls = 0

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        return self.f(*args)


class AsyncCallCounter(CallCounter):
    """Async counterpart of CallCounter: awaits the wrapped coroutine function."""

    async def __call__(self, *args: Any) -> Any:
        self.calls += 1
        return await self.f(*args)


def parse_int(text: str) -> int | None:
    """Parse text as an int, None when it is not a number."""
    try:
        return int(text)
    except ValueError:
        return None


async def parse_int_async(text: str) -> int | None:
    """parse_int behind a real suspension point."""
    await asyncio.sleep(0)
    return parse_int(text)
