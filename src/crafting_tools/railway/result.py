"""Railway-oriented result type.

A ``Result`` is on exactly one of two tracks: success (carrying a
value) or failure (carrying an :class:`Error`).  Every result also
carries an ``id``, a free-form correlation label naming the operation
or field that produced it.

Usage::

    failures: list[Result[Any]] = []
    count = (
        to_result(raw_count, "count")
        .check(lambda value: value > 0, "Count must be positive.")
        .unwrap_or_add_to_failures(failures, 0)
    )

Failed steps append themselves to ``failures`` and hand back the
placeholder, so later steps in the same scope still run and report
their own problems.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from crafting_tools.core.enums import ResultStatus
from crafting_tools.core.errors import InvalidResultError, ResultUnwrapError
from crafting_tools.railway.errors import Error

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_RESULT_ID = "result"


class Result(Generic[T]):
    """Either a validated value or an error, plus a correlation id."""

    __slots__ = ("_status", "_value", "_error", "_id")

    def __init__(
        self,
        status: ResultStatus,
        value: T | None = None,
        error: Error | None = None,
        result_id: str | None = None,
    ) -> None:
        if status == ResultStatus.SUCCESS and error is not None:
            raise InvalidResultError("A successful result cannot carry an error.")
        if status == ResultStatus.FAILURE:
            if error is None:
                raise InvalidResultError("A failed result must carry an error.")
            if value is not None:
                raise InvalidResultError("A failed result cannot carry a value.")
        self._status = status
        self._value = value
        self._error = error
        self._id = result_id or DEFAULT_RESULT_ID

    # -- constructors -------------------------------------------------

    @classmethod
    def success(cls, value: T, result_id: str | None = None) -> Result[T]:
        return cls(ResultStatus.SUCCESS, value=value, result_id=result_id)

    @classmethod
    def failure(cls, error: Error | str, result_id: str | None = None) -> Result[T]:
        """Build a failure; a plain message becomes a leaf ``Error`` sourced at ``result_id``."""
        result_id = result_id or DEFAULT_RESULT_ID
        if isinstance(error, str):
            error = Error(message=error, source=result_id)
        return cls(ResultStatus.FAILURE, error=error, result_id=result_id)

    # -- inspection ---------------------------------------------------

    @property
    def status(self) -> ResultStatus:
        return self._status

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_success(self) -> bool:
        return self._status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self._status == ResultStatus.FAILURE

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ResultUnwrapError(
                f"Result '{self._id}' succeeded and carries no error."
            )
        return self._error

    def unwrap(self) -> T:
        """Return the value.  Calling this on a failure is a programming error."""
        if self._error is not None:
            raise ResultUnwrapError(
                f"Cannot unwrap failed result '{self._id}': {self._error.detail}"
            )
        return self._value  # type: ignore[return-value]

    # -- composition --------------------------------------------------

    def check(self, predicate: Callable[[T], bool], failure_message: str) -> Result[T]:
        """Re-validate the value; failures pass through untouched."""
        if self.is_failure or predicate(self._value):  # type: ignore[arg-type]
            return self
        return Result.failure(failure_message, self._id)

    def on_success(self, func: Callable[[T], Result[U]]) -> Result[U]:
        """Bind: run ``func`` on the value, or propagate this failure unchanged."""
        if self.is_failure:
            return self  # type: ignore[return-value]
        return func(self._value)  # type: ignore[arg-type]

    def unwrap_or_add_to_failures(self, failures: list[Result[Any]], placeholder: T) -> T:
        """Return the value, or record this failure and return ``placeholder``."""
        if self.is_success:
            return self._value  # type: ignore[return-value]
        failures.append(self)
        return placeholder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (
            self._status == other._status
            and self._value == other._value
            and self._error == other._error
            and self._id == other._id
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self._value!r}, {self._id!r})"
        return f"Result.failure({self._error.message!r}, {self._id!r})"  # type: ignore[union-attr]


def to_result(value: T, result_id: str | None = None) -> Result[T]:
    """Lift any value onto the success track."""
    return Result.success(value, result_id)


def to_result_is_not_null(
    value: T | None,
    failure_message: str,
    result_id: str | None = None,
) -> Result[T]:
    """Lift an optional value, failing with ``failure_message`` when it is None."""
    if value is None:
        return Result.failure(failure_message, result_id)
    return Result.success(value, result_id)
