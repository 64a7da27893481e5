"""Recipe outputs: the item a recipe produces and in what quantity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from crafting_tools.domain.item import Item
from crafting_tools.domain.recipe_input import validate_count
from crafting_tools.domain.value_object import ValueObject
from crafting_tools.railway.accumulate import fail_with
from crafting_tools.railway.result import Result

_RESULT_ID = "recipe_output"


@dataclass(frozen=True)
class RecipeOutput(ValueObject):
    item: Item
    count: int

    entity_name = "Recipe output"

    def __str__(self) -> str:
        return f"{self.count} x {self.item}"

    @classmethod
    def from_parameters(
        cls,
        item: Item | None,
        count: int,
        result_id: str | None = None,
    ) -> Result[RecipeOutput]:
        result_id = result_id or _RESULT_ID
        failures: list[Result[Any]] = []

        valid_item = Item.validate(item, "item").unwrap_or_add_to_failures(
            failures, Item.NONE
        )
        valid_count = validate_count(count).unwrap_or_add_to_failures(failures, 0)

        if failures:
            return fail_with(failures, "Unable to create recipe output.", result_id)
        return Result.success(cls(valid_item, valid_count), result_id)

    def check_invariants(self, result_id: str | None = None) -> Result[RecipeOutput]:
        return self._keep(
            RecipeOutput.from_parameters(self.item, self.count, result_id), result_id
        )


RecipeOutput.NONE = RecipeOutput(Item.NONE, 0)
