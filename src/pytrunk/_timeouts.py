"""Optional bound on remote calls."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def bounded(awaitable: Awaitable[T], timeout: float | None) -> T:
    """Await *awaitable*, raising :class:`TimeoutError` after *timeout* seconds.

    ``None`` waits indefinitely.
    """
    if timeout is None:
        return await awaitable
    return await asyncio.wait_for(awaitable, timeout)
