"""Refresh strategies.

A strategy is a pure, curried transition ``strategy(current)(event)``.
``current`` is the previously displayable value and ``event`` the latest
observed state of the background fetch; the result is the next pair.
New strategies are plain functions conforming to :class:`RefreshStrategy`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from pyrefreshable.exceptions import RefreshableConfigError
from pyrefreshable.refreshable import RefreshableRemoteData
from pyrefreshable.remote_data import (
    RemoteData,
    failure,
    fold,
    initial,
    is_failure,
    is_initial,
    is_success,
    pending,
    success,
)

Transition = Callable[[RemoteData], RefreshableRemoteData]


class RefreshStrategy(Protocol):
    def __call__(self, current: RemoteData, /) -> Transition: ...


def stale_while_revalidate(current: RemoteData) -> Transition:
    """Stale-while-revalidate.

    - returns an initial or pending value as long as no data has been fetched
    - keeps returning the current value, including a failure, until it is
      replaced by another success or failure
    """

    def transition(event: RemoteData) -> RefreshableRemoteData:
        return fold(
            event,
            lambda: RefreshableRemoteData(current=current, request=initial),
            lambda: RefreshableRemoteData(
                current=pending if is_initial(current) else current,
                request=pending,
            ),
            lambda error: RefreshableRemoteData(current=failure(error), request=initial),
            lambda value: RefreshableRemoteData(current=success(value), request=initial),
        )

    return transition


def stale_if_error(current: RemoteData) -> Transition:
    """Stale-if-error.

    - returns an initial or pending value as long as no data has been fetched
    - a stale failure is not kept while refreshing; it falls back to pending
    - returns a failure only if no success has been fetched before; newer
      failures replace older ones
    - keeps returning the cached success until another success replaces it
    """

    def transition(event: RemoteData) -> RefreshableRemoteData:
        return fold(
            event,
            lambda: RefreshableRemoteData(current=current, request=initial),
            lambda: RefreshableRemoteData(
                current=pending if is_initial(current) or is_failure(current) else current,
                request=pending,
            ),
            lambda error: RefreshableRemoteData(
                current=current if is_success(current) else failure(error),
                request=initial,
            ),
            lambda value: RefreshableRemoteData(current=success(value), request=initial),
        )

    return transition


def refresh_with_strategy(
    strategy: RefreshStrategy = stale_while_revalidate,
) -> Callable[[RefreshableRemoteData], Transition]:
    """Build an update function for a pair using *strategy*.

    Only ``rrd.current`` feeds the transition; the previous ``request`` is
    irrelevant to the next state.
    """

    def bind(rrd: RefreshableRemoteData) -> Transition:
        return strategy(rrd.current)

    return bind


refresh_swr = refresh_with_strategy(stale_while_revalidate)
refresh_sie = refresh_with_strategy(stale_if_error)
refresh = refresh_swr

STRATEGIES: dict[str, RefreshStrategy] = {
    "stale-while-revalidate": stale_while_revalidate,
    "stale-if-error": stale_if_error,
}


def get_strategy(name: str) -> RefreshStrategy:
    """Look up a strategy by its configuration name."""
    try:
        return STRATEGIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise RefreshableConfigError(f"Unknown refresh strategy {name!r} (expected one of: {known})") from None
