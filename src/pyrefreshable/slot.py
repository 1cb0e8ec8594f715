"""Single-slot holder for a refreshable value.

The pair itself is an immutable snapshot; something has to keep the latest
one and feed it back into the next refresh.  :class:`RefreshableSlot` is
that something for one logical value.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pyrefreshable.config import RefreshConfig
from pyrefreshable.refreshable import RefreshableRemoteData, from_remote_data, is_refreshing
from pyrefreshable.remote_data import RemoteData, initial
from pyrefreshable.request import Fetch, refresh_request
from pyrefreshable.strategies import RefreshStrategy, refresh_with_strategy, stale_while_revalidate

_logger = logging.getLogger(__name__)

Subscriber = Callable[[RefreshableRemoteData], None]


class RefreshableSlot:
    """Holds the latest pair for one value and notifies subscribers on change."""

    def __init__(
        self,
        value: RemoteData = initial,
        *,
        strategy: RefreshStrategy = stale_while_revalidate,
        log_payloads: bool = False,
    ) -> None:
        self._strategy = strategy
        self._log_payloads = log_payloads
        self._state = from_remote_data(value)
        self._subscribers: list[Subscriber] = []

    @classmethod
    def from_config(cls, config: RefreshConfig, value: RemoteData = initial) -> RefreshableSlot:
        return cls(value, strategy=config.resolve_strategy(), log_payloads=config.log_payloads)

    @property
    def state(self) -> RefreshableRemoteData:
        return self._state

    @property
    def current(self) -> RemoteData:
        return self._state.current

    @property
    def is_refreshing(self) -> bool:
        return is_refreshing(self._state)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for every newly stored pair; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def apply(self, event: RemoteData) -> RefreshableRemoteData:
        """Transition the stored pair with *event* using the slot's strategy."""
        return self._store(refresh_with_strategy(self._strategy)(self._state)(event))

    async def refresh(self, run: Fetch) -> RefreshableRemoteData:
        """Refresh the stored value with *run* and return the settled pair.

        While a refresh is outstanding, further calls do not launch a fetch
        and return the stored pair as is.  Cancelling the caller does not
        cancel the fetch; the settled pair is stored when it arrives.
        """
        already_refreshing = self.is_refreshing
        immediate, eventual = refresh_request(
            self._state,
            run,
            strategy=self._strategy,
            log_payloads=self._log_payloads,
        )
        if already_refreshing:
            return await eventual

        self._store(immediate)
        eventual.add_done_callback(self._on_settled)
        return await asyncio.shield(eventual)

    def _on_settled(self, eventual: asyncio.Future[RefreshableRemoteData]) -> None:
        if not eventual.cancelled():
            self._store(eventual.result())

    def _store(self, state: RefreshableRemoteData) -> RefreshableRemoteData:
        if state == self._state:
            return self._state
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                _logger.debug("Slot subscriber failed", exc_info=True)
        return state
