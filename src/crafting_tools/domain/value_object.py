"""Shared contract for immutable domain entities.

Entities are frozen dataclasses, so equality and hashing are
structural over their fields.  Each entity class publishes a ``NONE``
sentinel: a valid placeholder (used while accumulating failures) but
an invalid input to every operation that needs a real instance.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar
from uuid import UUID

from crafting_tools.core.ids import EMPTY_ID
from crafting_tools.railway.result import Result, to_result_is_not_null

V = TypeVar("V", bound="ValueObject")


class ValueObject:
    """Mixin for frozen-dataclass entities with a ``NONE`` sentinel."""

    NONE: ClassVar[Any]
    # Human-readable entity name used in failure messages.
    entity_name: ClassVar[str] = "Value"

    @property
    def is_none(self) -> bool:
        return self == type(self).NONE

    @classmethod
    def validate(cls: type[V], value: V | None, result_id: str | None = None) -> Result[V]:
        """Lift ``value`` into a result, rejecting None, the sentinel and
        instances built directly with broken invariants."""
        return (
            to_result_is_not_null(value, f"{cls.entity_name} cannot be null.", result_id)
            .check(lambda v: isinstance(v, cls), f"{cls.entity_name} has the wrong type.")
            .check(lambda v: not v.is_none, f"{cls.entity_name} cannot be none.")
            .on_success(lambda v: v.check_invariants(result_id))
        )

    def check_invariants(self: V, result_id: str | None = None) -> Result[V]:
        """Re-run the factory checks against this instance's fields."""
        return Result.success(self, result_id)

    def _keep(self: V, rebuilt: Result[Any], result_id: str | None) -> Result[V]:
        # Success yields this instance, not the rebuilt copy.
        return rebuilt.on_success(lambda _: Result.success(self, result_id))

    def to_valid_result(self: V, result_id: str | None = None) -> Result[V]:
        return type(self).validate(self, result_id)


def validate_id(value: UUID | None, entity_name: str, result_id: str = "id") -> Result[UUID]:
    """Validation chain shared by every entity identifier."""
    return (
        to_result_is_not_null(value, f"{entity_name} ID cannot be null.", result_id)
        .check(lambda v: isinstance(v, UUID), f"{entity_name} ID must be a UUID.")
        .check(lambda v: v != EMPTY_ID, f"{entity_name} ID cannot be empty.")
    )
