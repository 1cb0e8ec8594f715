"""Drive a fetch through a refreshable pair.

:func:`refresh_request` returns the "now refreshing" pair synchronously,
together with a future for the pair the fetch eventually settles into.
At most one fetch is in flight per pair: a pair that is already refreshing
is handed back unchanged and the fetch is not invoked.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pyrefreshable._redact import redact_for_log
from pyrefreshable.refreshable import RefreshableRemoteData, is_refreshing
from pyrefreshable.remote_data import Either, RemoteData, failure, fold, from_either, pending
from pyrefreshable.strategies import RefreshStrategy, Transition, refresh_with_strategy, stale_while_revalidate

_logger = logging.getLogger(__name__)

# The loop only keeps weak references to tasks.
_inflight: set[asyncio.Task[RefreshableRemoteData]] = set()

Fetch = Callable[[], Awaitable[Either]]
"""Deferred fetch: a zero-argument callable returning an awaitable ``Either``."""


def _payload(event: RemoteData) -> Any:
    return fold(event, lambda: None, lambda: None, lambda error: error, lambda value: value)


async def _settle(
    rrd: RefreshableRemoteData,
    run: Fetch,
    update: Callable[[RefreshableRemoteData], Transition],
    *,
    log_payloads: bool,
) -> RefreshableRemoteData:
    try:
        event = from_either(await run())
    except Exception as exc:
        _logger.debug("Fetch raised outside its Either result", exc_info=True)
        event = failure(exc)

    if log_payloads:
        _logger.debug("Fetch settled kind=%s payload=%s", event.kind, redact_for_log(_payload(event)))
    else:
        _logger.debug("Fetch settled kind=%s", event.kind)
    return update(rrd)(event)


def refresh_request(
    rrd: RefreshableRemoteData,
    run: Fetch,
    *,
    strategy: RefreshStrategy = stale_while_revalidate,
    log_payloads: bool = False,
) -> tuple[RefreshableRemoteData, asyncio.Future[RefreshableRemoteData]]:
    """Transition *rrd* to the next state using a fetch.

    Must be called from a running event loop.

    Parameters
    ----------
    rrd : RefreshableRemoteData
        The pair to refresh.
    run : Fetch
        Zero-argument callable returning an awaitable that resolves to
        ``Left(error)`` or ``Right(value)``.  Not invoked when *rrd* is
        already refreshing.
    strategy : RefreshStrategy
        Transition used for both the immediate and the final pair.
        Defaults to :func:`stale_while_revalidate`.
    log_payloads : bool
        Include the redacted settled payload in DEBUG logs.

    Returns
    -------
    tuple
        ``(immediate, eventual)``.  ``immediate`` is the intermediary
        "request pending" pair; ``eventual`` is a future resolving to the
        final pair.  ``eventual`` never carries an exception: anything the
        fetch raises becomes the payload of a ``Failure``.  Cancelling
        ``eventual`` does not cancel the fetch; it still runs to completion.
    """
    loop = asyncio.get_running_loop()

    if is_refreshing(rrd):
        _logger.debug("Refresh already outstanding; not launching another fetch")
        settled: asyncio.Future[RefreshableRemoteData] = loop.create_future()
        settled.set_result(rrd)
        return rrd, settled

    update = refresh_with_strategy(strategy)
    next_rrd = update(rrd)(pending)
    _logger.debug("Launching fetch current=%s", next_rrd.current.kind)
    task = loop.create_task(_settle(next_rrd, run, update, log_payloads=log_payloads))
    _inflight.add(task)

    eventual: asyncio.Future[RefreshableRemoteData] = loop.create_future()

    def _resolve(done: asyncio.Task[RefreshableRemoteData]) -> None:
        _inflight.discard(done)
        if eventual.done():
            return
        if done.cancelled():
            eventual.cancel()
        else:
            eventual.set_result(done.result())

    task.add_done_callback(_resolve)
    return next_rrd, eventual
