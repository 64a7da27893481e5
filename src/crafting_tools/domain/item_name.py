"""The display name of an item."""

from __future__ import annotations

from dataclasses import dataclass

from crafting_tools.domain.value_object import ValueObject
from crafting_tools.railway.result import Result, to_result_is_not_null


@dataclass(frozen=True)
class ItemName(ValueObject):
    value: str

    entity_name = "Item name"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_parameter(cls, value: str | None, result_id: str | None = None) -> Result[ItemName]:
        return (
            to_result_is_not_null(value, "Item name cannot be null.", result_id or "name")
            .check(lambda v: isinstance(v, str), "Item name must be a string.")
            .check(lambda v: bool(v.strip()), "Item name cannot be empty.")
            .on_success(lambda v: Result.success(cls(v), result_id or "name"))
        )

    def check_invariants(self, result_id: str | None = None) -> Result[ItemName]:
        return self._keep(ItemName.from_parameter(self.value, result_id), result_id)


ItemName.NONE = ItemName("")
