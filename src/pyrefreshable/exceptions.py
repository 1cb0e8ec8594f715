"""Custom exception hierarchy for pyrefreshable."""

from __future__ import annotations


class RefreshableError(Exception):
    """Base exception for all pyrefreshable errors."""


class RefreshableConfigError(RefreshableError):
    """Invalid or missing configuration."""


class RemoteDataError(RefreshableError, TypeError):
    """A value is not one of the expected remote-data or either cases.

    Raised by :func:`pyrefreshable.remote_data.fold` and
    :func:`pyrefreshable.remote_data.from_either` when handed an object
    outside their closed set of cases.  Inside
    :func:`pyrefreshable.request.refresh_request` the error is caught like
    any other fetch failure and ends up as the payload of a ``Failure``.
    """

    def __init__(self, message: str, *, value: object = None) -> None:
        self.value = value
        super().__init__(message)
