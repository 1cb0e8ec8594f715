from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from pyrefreshable.exceptions import RemoteDataError
from pyrefreshable.remote_data import (
    Either,
    Failure,
    Initial,
    Pending,
    RemoteData,
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


def _describe(rd) -> str:
    return fold(
        rd,
        lambda: "initial",
        lambda: "pending",
        lambda error: f"failure:{error}",
        lambda value: f"success:{value}",
    )


def test_fold_dispatches_on_case() -> None:
    assert _describe(initial) == "initial"
    assert _describe(pending) == "pending"
    assert _describe(failure("boom")) == "failure:boom"
    assert _describe(success(42)) == "success:42"


def test_fold_rejects_foreign_values() -> None:
    with pytest.raises(RemoteDataError) as excinfo:
        _describe("not remote data")
    assert excinfo.value.value == "not remote data"
    assert isinstance(excinfo.value, TypeError)


def test_predicates_match_exactly_one_case() -> None:
    predicates = (is_initial, is_pending, is_failure, is_success)
    for index, rd in enumerate((initial, pending, failure("e"), success("a"))):
        assert [p(rd) for p in predicates] == [i == index for i in range(4)]


def test_values_compare_by_case_and_payload() -> None:
    assert Initial() == initial
    assert Pending() == pending
    assert failure("e") == Failure(error="e")
    assert success("a") == Success(value="a")
    assert failure("e") != failure("f")
    assert failure("a") != success("a")
    assert initial != pending


def test_parametrized_case_equals_plain_case() -> None:
    assert Failure[str](error="e") == failure("e")
    assert is_failure(Failure[str](error="e"))


def test_cases_are_frozen() -> None:
    rd = success("a")
    with pytest.raises(ValidationError):
        rd.value = "b"  # type: ignore[misc]


def test_remote_data_validates_from_tagged_dict() -> None:
    adapter = TypeAdapter(RemoteData)
    assert adapter.validate_python({"kind": "success", "value": 3}) == success(3)
    assert adapter.validate_python({"kind": "pending"}) == pending


def test_repr_omits_discriminant() -> None:
    assert repr(initial) == "Initial()"
    assert repr(failure("e")) == "Failure(error='e')"


def test_either_helpers() -> None:
    assert is_left(left("e"))
    assert not is_left(right("a"))
    assert is_right(right("a"))
    assert TypeAdapter(Either).validate_python({"kind": "left", "error": "e"}) == left("e")


def test_from_either() -> None:
    assert from_either(right("OK")) == success("OK")
    assert from_either(left("FAIL")) == failure("FAIL")


def test_from_either_rejects_foreign_values() -> None:
    with pytest.raises(RemoteDataError, match="Not an Either value"):
        from_either(success("OK"))
