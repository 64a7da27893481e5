"""Recipes and the pure operations that derive updated recipes.

A recipe is never changed in place.  Each mutator validates the recipe
and the new part (accumulating both failures), then either returns the
original recipe when the change is a no-op or rebuilds a new recipe
through ``Recipe.from_parameters`` so every invariant is re-checked.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from crafting_tools.core.ids import EMPTY_ID
from crafting_tools.domain.item import Item
from crafting_tools.domain.profession import Profession
from crafting_tools.domain.recipe_input import RecipeInput
from crafting_tools.domain.recipe_output import RecipeOutput
from crafting_tools.domain.value_object import ValueObject, validate_id
from crafting_tools.railway.accumulate import fail_with
from crafting_tools.railway.result import Result, to_result, to_result_is_not_null

_RESULT_ID = "recipe"


@dataclass(frozen=True)
class Recipe(ValueObject):
    id: UUID
    profession: Profession
    output: RecipeOutput
    inputs: frozenset[RecipeInput] = field(default_factory=frozenset)

    entity_name = "Recipe"

    @classmethod
    def from_parameters(
        cls,
        recipe_id: UUID | None,
        profession: Profession | None,
        output: RecipeOutput | None,
        inputs: Iterable[RecipeInput] | None,
        result_id: str | None = None,
    ) -> Result[Recipe]:
        """Validate every part of a recipe, reporting all problems at once.

        Each input is validated on its own, and no two inputs may
        consume the same item (inputs with equal items but different
        counts are distinct set members, so this is checked explicitly).
        """
        result_id = result_id or _RESULT_ID
        failures: list[Result[Any]] = []

        valid_id = validate_id(recipe_id, "Recipe").unwrap_or_add_to_failures(
            failures, EMPTY_ID
        )
        valid_profession = Profession.validate(
            profession, "profession"
        ).unwrap_or_add_to_failures(failures, Profession.NONE)
        valid_output = RecipeOutput.validate(output, "output").unwrap_or_add_to_failures(
            failures, RecipeOutput.NONE
        )

        raw_inputs = to_result_is_not_null(
            inputs, "Recipe inputs cannot be null.", "inputs"
        ).unwrap_or_add_to_failures(failures, ())
        checked_inputs = frozenset(
            RecipeInput.validate(recipe_input, "inputs").unwrap_or_add_to_failures(
                failures, RecipeInput.NONE
            )
            for recipe_input in raw_inputs
        )
        valid_inputs = (
            to_result(checked_inputs - {RecipeInput.NONE}, "inputs")
            .check(_has_distinct_items, "Recipe inputs must have distinct items.")
            .unwrap_or_add_to_failures(failures, frozenset())
        )

        if failures:
            return fail_with(failures, "Unable to create recipe.", result_id)
        return Result.success(
            cls(valid_id, valid_profession, valid_output, valid_inputs), result_id
        )

    def check_invariants(self, result_id: str | None = None) -> Result[Recipe]:
        return self._keep(
            Recipe.from_parameters(
                self.id, self.profession, self.output, self.inputs, result_id
            ),
            result_id,
        )

    def input_for(self, item: Item) -> RecipeInput | None:
        """Return the input consuming ``item``, if any."""
        for recipe_input in self.inputs:
            if recipe_input.item == item:
                return recipe_input
        return None

    # Convenience methods delegating to the module-level operations.

    def set_output(self, output: RecipeOutput, result_id: str | None = None) -> Result[Recipe]:
        return set_output(self, output, result_id)

    def add_input(self, recipe_input: RecipeInput, result_id: str | None = None) -> Result[Recipe]:
        return add_input(self, recipe_input, result_id)

    def add_item_input(self, item: Item, count: int, result_id: str | None = None) -> Result[Recipe]:
        return add_item_input(self, item, count, result_id)

    def delete_input(self, item: Item, result_id: str | None = None) -> Result[Recipe]:
        return delete_input(self, item, result_id)

    def set_input(self, recipe_input: RecipeInput, result_id: str | None = None) -> Result[Recipe]:
        return set_input(self, recipe_input, result_id)


Recipe.NONE = Recipe(EMPTY_ID, Profession.NONE, RecipeOutput.NONE, frozenset())


def _has_distinct_items(inputs: frozenset[RecipeInput]) -> bool:
    return len({recipe_input.item for recipe_input in inputs}) == len(inputs)


def _validate_recipe_and_part(
    recipe: Recipe | None,
    part: Any,
    part_type: type[Any],
    part_label: str,
    message: str,
    result_id: str,
) -> Result[tuple[Recipe, Any]]:
    """Validate a recipe and the part being applied to it, accumulating both."""
    failures: list[Result[Any]] = []

    valid_recipe = Recipe.validate(recipe, "recipe").unwrap_or_add_to_failures(
        failures, Recipe.NONE
    )
    valid_part = part_type.validate(part, part_label).unwrap_or_add_to_failures(
        failures, part_type.NONE
    )

    if failures:
        return fail_with(failures, message, result_id)
    return Result.success((valid_recipe, valid_part), result_id)


def _rebuild(recipe: Recipe, result_id: str, **changes: Any) -> Result[Recipe]:
    return Recipe.from_parameters(
        recipe.id,
        recipe.profession,
        changes.get("output", recipe.output),
        changes.get("inputs", recipe.inputs),
        result_id,
    )


def set_output(
    recipe: Recipe | None,
    output: RecipeOutput | None,
    result_id: str | None = None,
) -> Result[Recipe]:
    """Replace the output; an equal output leaves the recipe unchanged."""
    result_id = result_id or _RESULT_ID

    def apply(parts: tuple[Recipe, RecipeOutput]) -> Result[Recipe]:
        valid_recipe, valid_output = parts
        if valid_recipe.output == valid_output:
            return Result.success(valid_recipe, result_id)
        return _rebuild(valid_recipe, result_id, output=valid_output)

    return _validate_recipe_and_part(
        recipe, output, RecipeOutput, "output", "Unable to set output.", result_id
    ).on_success(apply)


def add_input(
    recipe: Recipe | None,
    recipe_input: RecipeInput | None,
    result_id: str | None = None,
) -> Result[Recipe]:
    """Add an input.

    Adding an input that is already present is a no-op; adding a second
    input for an item already consumed fails the distinct-items check.
    """
    result_id = result_id or _RESULT_ID

    def apply(parts: tuple[Recipe, RecipeInput]) -> Result[Recipe]:
        valid_recipe, valid_input = parts
        if valid_input in valid_recipe.inputs:
            return Result.success(valid_recipe, result_id)
        return _rebuild(valid_recipe, result_id, inputs=valid_recipe.inputs | {valid_input})

    return _validate_recipe_and_part(
        recipe, recipe_input, RecipeInput, "input", "Unable to add input.", result_id
    ).on_success(apply)


def add_item_input(
    recipe: Recipe | None,
    item: Item | None,
    count: int,
    result_id: str | None = None,
) -> Result[Recipe]:
    """Build a ``RecipeInput`` from ``(item, count)`` and add it."""
    result_id = result_id or _RESULT_ID
    return RecipeInput.from_parameters(item, count, result_id).on_success(
        lambda recipe_input: add_input(recipe, recipe_input, result_id)
    )


def delete_input(
    recipe: Recipe | None,
    item: Item | None,
    result_id: str | None = None,
) -> Result[Recipe]:
    """Remove every input consuming ``item``; unchanged when there is none."""
    result_id = result_id or _RESULT_ID

    def apply(parts: tuple[Recipe, Item]) -> Result[Recipe]:
        valid_recipe, valid_item = parts
        remaining = frozenset(
            recipe_input
            for recipe_input in valid_recipe.inputs
            if recipe_input.item != valid_item
        )
        if len(remaining) == len(valid_recipe.inputs):
            return Result.success(valid_recipe, result_id)
        return _rebuild(valid_recipe, result_id, inputs=remaining)

    return _validate_recipe_and_part(
        recipe, item, Item, "item", "Unable to delete input.", result_id
    ).on_success(apply)


def set_input(
    recipe: Recipe | None,
    recipe_input: RecipeInput | None,
    result_id: str | None = None,
) -> Result[Recipe]:
    """Set the input for an item, replacing any input for the same item.

    The recipe is returned unchanged only when this exact input (same
    item and count) is already present.
    """
    result_id = result_id or _RESULT_ID

    def apply(parts: tuple[Recipe, RecipeInput]) -> Result[Recipe]:
        valid_recipe, valid_input = parts
        if valid_input in valid_recipe.inputs:
            return Result.success(valid_recipe, result_id)
        remaining = frozenset(
            existing
            for existing in valid_recipe.inputs
            if existing.item != valid_input.item
        )
        return _rebuild(valid_recipe, result_id, inputs=remaining | {valid_input})

    return _validate_recipe_and_part(
        recipe, recipe_input, RecipeInput, "input", "Unable to set input.", result_id
    ).on_success(apply)
