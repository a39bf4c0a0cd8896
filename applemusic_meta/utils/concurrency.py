"""Order-preserving, all-or-nothing fan-out for catalog page lookups.

The metadata source fans out in two places: resolving every artist stub
found on an album page, and resolving every item link found on a search
page.  Both need the same guarantees:

1. **Order** -- results come back in the order the awaitables were given,
   regardless of completion order.
2. **All-or-nothing** -- if one branch raises (a transport failure) the
   remaining branches are cancelled and the error propagates; if the caller
   itself is cancelled every outstanding branch is cancelled too, so no
   partial result escapes and no further fetches start.

The concurrency bound is not applied here but around each page fetch in the
metadata source, so nested fan-outs (search -> album -> artists) cannot
exhaust the slots their own children need.

``asyncio.gather`` alone gives (1) but leaves sibling tasks running when one
of them fails, so the tasks are managed explicitly here.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

import structlog

from applemusic_meta.utils.logging import get_logger

_T = TypeVar("_T")

_logger: structlog.BoundLogger = get_logger(__name__)


async def ordered_gather(coros: list[Awaitable[_T]]) -> list[_T]:
    """Run *coros* concurrently and return their results in input order.

    Parameters
    ----------
    coros:
        Awaitables to execute.  An empty list returns immediately.

    Returns
    -------
    list[_T]
        One result per awaitable, in the same order as *coros*.
    """
    if not coros:
        return []

    tasks = [asyncio.ensure_future(c) for c in coros]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        pending = [t for t in tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            _logger.debug("fan_out_cancelled", pending=len(pending), total=len(tasks))
            # Wait for the cancellations to land so no fetch outlives the caller.
            await asyncio.gather(*pending, return_exceptions=True)
        raise
