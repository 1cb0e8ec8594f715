"""Remote-data variant and the ``Either`` result of a completed fetch.

A remote value is exactly one of four cases:

* :class:`Initial` -- nothing has been requested yet
* :class:`Pending` -- a request is in flight
* :class:`Failure` -- the request failed; carries the ``error`` payload
* :class:`Success` -- the request succeeded; carries the ``value`` payload

Every case is a frozen pydantic model with a ``kind`` discriminant, so
values compare by case plus payload and :data:`RemoteData` can be used as a
discriminated-union field type in other models.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pyrefreshable.exceptions import RemoteDataError

E = TypeVar("E")
A = TypeVar("A")
R = TypeVar("R")


class _Case(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        payload = ", ".join(f"{name}={value!r}" for name, value in self if name != "kind")
        return f"{type(self).__name__}({payload})"


class Initial(_Case):
    kind: Literal["initial"] = "initial"


class Pending(_Case):
    kind: Literal["pending"] = "pending"


class Failure(_Case, Generic[E]):
    kind: Literal["failure"] = "failure"
    error: E


class Success(_Case, Generic[A]):
    kind: Literal["success"] = "success"
    value: A


RemoteData = Annotated[Initial | Pending | Failure | Success, Field(discriminator="kind")]
"""Discriminated union over the four remote-data cases."""

initial = Initial()
pending = Pending()


def failure(error: E) -> Failure[E]:
    return Failure(error=error)


def success(value: A) -> Success[A]:
    return Success(value=value)


def is_initial(rd: RemoteData) -> bool:
    return isinstance(rd, Initial)


def is_pending(rd: RemoteData) -> bool:
    return isinstance(rd, Pending)


def is_failure(rd: RemoteData) -> bool:
    return isinstance(rd, Failure)


def is_success(rd: RemoteData) -> bool:
    return isinstance(rd, Success)


def fold(
    rd: RemoteData,
    on_initial: Callable[[], R],
    on_pending: Callable[[], R],
    on_failure: Callable[[Any], R],
    on_success: Callable[[Any], R],
) -> R:
    """Dispatch on the case of *rd*, with one handler per case.

    ``on_failure`` receives the error payload and ``on_success`` the value.

    Raises
    ------
    RemoteDataError
        If *rd* is not one of the four cases.
    """
    match rd:
        case Initial():
            return on_initial()
        case Pending():
            return on_pending()
        case Failure(error=error):
            return on_failure(error)
        case Success(value=value):
            return on_success(value)
        case _:
            raise RemoteDataError(f"Not a remote-data value: {rd!r}", value=rd)


# ---------------------------------------------------------------------------
# Either
# ---------------------------------------------------------------------------


class Left(_Case, Generic[E]):
    kind: Literal["left"] = "left"
    error: E


class Right(_Case, Generic[A]):
    kind: Literal["right"] = "right"
    value: A


Either = Annotated[Left | Right, Field(discriminator="kind")]
"""Result of a completed fetch: ``Left(error)`` or ``Right(value)``."""


def left(error: E) -> Left[E]:
    return Left(error=error)


def right(value: A) -> Right[A]:
    return Right(value=value)


def is_left(result: Either) -> bool:
    return isinstance(result, Left)


def is_right(result: Either) -> bool:
    return isinstance(result, Right)


def from_either(result: Either) -> RemoteData:
    """Convert a fetch result: ``Left(e)`` -> ``Failure(e)``, ``Right(a)`` -> ``Success(a)``."""
    match result:
        case Left(error=error):
            return failure(error)
        case Right(value=value):
            return success(value)
        case _:
            raise RemoteDataError(f"Not an Either value: {result!r}", value=result)
