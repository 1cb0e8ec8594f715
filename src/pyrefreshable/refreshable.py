"""Refreshable remote data.

A :class:`RefreshableRemoteData` pairs two remote values.  ``current`` is
the cached (possibly stale) value that should be displayed, ``request``
tracks the background fetch that will eventually refresh it.  Depending on
the refresh strategy, ``current`` is replaced once the fetch settles.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from pyrefreshable.remote_data import Initial, Pending, RemoteData, initial, is_pending

RequestState = Annotated[Initial | Pending, Field(discriminator="kind")]
"""A completed fetch is always folded into ``current``, so ``request`` is never terminal."""


class RefreshableRemoteData(BaseModel):
    """A remote value that can be refreshed without losing the existing state."""

    model_config = ConfigDict(frozen=True)

    current: RemoteData
    """Latest loaded value; shown while a refresh is outstanding."""
    request: RequestState = initial
    """``Pending`` while a background fetch is in flight, otherwise ``Initial``."""


def from_remote_data(current: RemoteData) -> RefreshableRemoteData:
    """Create a pair from a single remote value, with no request outstanding."""
    return RefreshableRemoteData(current=current, request=initial)


def is_refreshing(rrd: RefreshableRemoteData) -> bool:
    """A pending request means no further fetch should be launched."""
    return is_pending(rrd.request)
