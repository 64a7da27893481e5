"""Tests for RecipeInput, RecipeOutput and Profession factories."""

from uuid import UUID

import pytest

from crafting_tools.core.ids import EMPTY_ID
from crafting_tools.domain.item import Item
from crafting_tools.domain.profession import Profession
from crafting_tools.domain.recipe_input import RecipeInput
from crafting_tools.domain.recipe_output import RecipeOutput


class TestRecipeInput:
    def test_valid(self, iron_ore):
        result = RecipeInput.from_parameters(iron_ore, 5, result_id="ore")
        assert result.id == "ore"
        recipe_input = result.unwrap()
        assert recipe_input.item == iron_ore
        assert recipe_input.count == 5

    def test_none_item(self):
        result = RecipeInput.from_parameters(Item.NONE, 5)
        assert result.error.message == "Unable to create recipe input."
        assert result.error.messages == ["Item cannot be none."]
        assert result.id == "recipe_input"

    def test_null_item(self):
        result = RecipeInput.from_parameters(None, 5)
        assert result.error.messages == ["Item cannot be null."]

    @pytest.mark.parametrize("count", [0, -1, -100])
    def test_non_positive_count(self, iron_ore, count):
        result = RecipeInput.from_parameters(iron_ore, count)
        assert result.is_failure
        assert result.error.messages == ["Count must be positive."]

    def test_non_integer_count(self, iron_ore):
        result = RecipeInput.from_parameters(iron_ore, 1.5)
        assert result.error.messages == ["Count must be an integer."]

    def test_bool_is_not_a_count(self, iron_ore):
        assert RecipeInput.from_parameters(iron_ore, True).is_failure

    def test_accumulates_both_failures(self):
        result = RecipeInput.from_parameters(Item.NONE, 0)
        assert result.error.message == "Unable to create recipe input."
        assert result.error.messages == [
            "Item cannot be none.",
            "Count must be positive.",
        ]
        assert [e.source for e in result.error.errors] == ["item", "count"]

    def test_equality_includes_count(self, iron_ore):
        two = RecipeInput.from_parameters(iron_ore, 2).unwrap()
        assert two == RecipeInput.from_parameters(iron_ore, 2).unwrap()
        assert two != RecipeInput.from_parameters(iron_ore, 3).unwrap()
        assert len({two, RecipeInput.from_parameters(iron_ore, 3).unwrap()}) == 2

    def test_sentinel(self):
        assert RecipeInput.NONE.item == Item.NONE
        assert RecipeInput.NONE.count == 0
        assert RecipeInput.NONE.to_valid_result().error.message == "Recipe input cannot be none."


class TestRecipeOutput:
    def test_valid(self, iron_bar):
        output = RecipeOutput.from_parameters(iron_bar, 1).unwrap()
        assert output.item == iron_bar
        assert output.count == 1

    def test_accumulates_both_failures(self):
        result = RecipeOutput.from_parameters(None, -3)
        assert result.error.message == "Unable to create recipe output."
        assert result.error.messages == [
            "Item cannot be null.",
            "Count must be positive.",
        ]
        assert result.id == "recipe_output"

    def test_not_equal_to_input_with_same_fields(self, iron_bar):
        output = RecipeOutput.from_parameters(iron_bar, 1).unwrap()
        recipe_input = RecipeInput.from_parameters(iron_bar, 1).unwrap()
        assert output != recipe_input

    def test_wrong_entity_type_is_rejected(self, iron_bar):
        recipe_input = RecipeInput.from_parameters(iron_bar, 1).unwrap()
        result = RecipeOutput.validate(recipe_input, "output")
        assert result.error.message == "Recipe output has the wrong type."

    def test_sentinel(self):
        assert RecipeOutput.NONE.to_valid_result().error.message == "Recipe output cannot be none."


class TestProfession:
    def test_valid(self):
        profession_id = UUID("3a1f6c2e-8b4d-4e7a-9c5f-1d2e3f4a5b6c")
        profession = Profession.from_parameters(profession_id, "Smithing").unwrap()
        assert profession.id == profession_id
        assert profession.name == "Smithing"
        assert str(profession) == "Smithing"

    def test_accumulates_failures(self):
        result = Profession.from_parameters(EMPTY_ID, " ")
        assert result.error.message == "Unable to create profession."
        assert result.error.messages == [
            "Profession ID cannot be empty.",
            "Profession name cannot be empty.",
        ]
        assert result.id == "profession"

    def test_null_name(self):
        result = Profession.from_parameters(
            UUID("3a1f6c2e-8b4d-4e7a-9c5f-1d2e3f4a5b6c"), None
        )
        assert result.error.messages == ["Profession name cannot be null."]

    def test_sentinel(self):
        assert Profession.NONE.is_none
        assert Profession.validate(Profession.NONE).error.message == "Profession cannot be none."
