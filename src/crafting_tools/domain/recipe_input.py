"""Recipe inputs: an item and how many of it a recipe consumes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from crafting_tools.domain.item import Item
from crafting_tools.domain.value_object import ValueObject
from crafting_tools.railway.accumulate import fail_with
from crafting_tools.railway.result import Result, to_result

_RESULT_ID = "recipe_input"


def validate_count(count: int, result_id: str = "count") -> Result[int]:
    """Counts are strictly positive integers."""
    return (
        to_result(count, result_id)
        .check(
            lambda v: isinstance(v, int) and not isinstance(v, bool),
            "Count must be an integer.",
        )
        .check(lambda v: v > 0, "Count must be positive.")
    )


@dataclass(frozen=True)
class RecipeInput(ValueObject):
    item: Item
    count: int

    entity_name = "Recipe input"

    def __str__(self) -> str:
        return f"{self.count} x {self.item}"

    @classmethod
    def from_parameters(
        cls,
        item: Item | None,
        count: int,
        result_id: str | None = None,
    ) -> Result[RecipeInput]:
        result_id = result_id or _RESULT_ID
        failures: list[Result[Any]] = []

        valid_item = Item.validate(item, "item").unwrap_or_add_to_failures(
            failures, Item.NONE
        )
        valid_count = validate_count(count).unwrap_or_add_to_failures(failures, 0)

        if failures:
            return fail_with(failures, "Unable to create recipe input.", result_id)
        return Result.success(cls(valid_item, valid_count), result_id)

    def check_invariants(self, result_id: str | None = None) -> Result[RecipeInput]:
        return self._keep(
            RecipeInput.from_parameters(self.item, self.count, result_id), result_id
        )


RecipeInput.NONE = RecipeInput(Item.NONE, 0)
