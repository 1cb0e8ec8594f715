"""pyrefreshable - remote data that can be refreshed without losing the last known value."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrefreshable")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrefreshable.config import RefreshConfig
from pyrefreshable.exceptions import RefreshableConfigError, RefreshableError, RemoteDataError
from pyrefreshable.refreshable import RefreshableRemoteData, RequestState, from_remote_data, is_refreshing
from pyrefreshable.remote_data import (
    Either,
    Failure,
    Initial,
    Left,
    Pending,
    RemoteData,
    Right,
    Success,
    failure,
    fold,
    from_either,
    initial,
    is_failure,
    is_initial,
    is_left,
    is_pending,
    is_right,
    is_success,
    left,
    pending,
    right,
    success,
)
from pyrefreshable.request import Fetch, refresh_request
from pyrefreshable.slot import RefreshableSlot
from pyrefreshable.strategies import (
    STRATEGIES,
    RefreshStrategy,
    get_strategy,
    refresh,
    refresh_sie,
    refresh_swr,
    refresh_with_strategy,
    stale_if_error,
    stale_while_revalidate,
)

__all__ = [
    "__version__",
    "STRATEGIES",
    "Either",
    "Failure",
    "Fetch",
    "Initial",
    "Left",
    "Pending",
    "RefreshConfig",
    "RefreshStrategy",
    "RefreshableConfigError",
    "RefreshableError",
    "RefreshableRemoteData",
    "RefreshableSlot",
    "RemoteData",
    "RemoteDataError",
    "RequestState",
    "Right",
    "Success",
    "failure",
    "fold",
    "from_either",
    "from_remote_data",
    "get_strategy",
    "initial",
    "is_failure",
    "is_initial",
    "is_left",
    "is_pending",
    "is_refreshing",
    "is_right",
    "is_success",
    "left",
    "pending",
    "refresh",
    "refresh_request",
    "refresh_sie",
    "refresh_swr",
    "refresh_with_strategy",
    "right",
    "stale_if_error",
    "stale_while_revalidate",
    "success",
]
