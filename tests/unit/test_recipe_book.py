"""Tests for the RecipeBook application service."""

import structlog
from structlog.testing import capture_logs

from crafting_tools.core.config import Settings
from crafting_tools.core.ids import new_id
from crafting_tools.domain.item import Item
from crafting_tools.domain.recipe_input import RecipeInput
from crafting_tools.services.recipe_book import RecipeBook


class TestRecipeBook:
    def test_list_professions(self, repository, smithing):
        assert RecipeBook(repository).list_professions() == [smithing]

    def test_get_profession(self, repository, smithing):
        book = RecipeBook(repository)
        assert book.get_profession(smithing.id).unwrap() == smithing
        missing = book.get_profession(new_id())
        assert missing.error.message == "Profession not found."

    def test_create_recipe(self, repository, smithing, iron_ore, coal, iron_bar):
        recipe_id = new_id()
        result = RecipeBook(repository).create_recipe(
            recipe_id,
            smithing.id,
            iron_bar,
            1,
            [(iron_ore, 2), (coal, 1)],
            result_id="smelt",
        )
        assert result.id == "smelt"
        recipe = result.unwrap()
        assert recipe.id == recipe_id
        assert recipe.profession == smithing
        assert recipe.output.item == iron_bar
        assert recipe.input_for(iron_ore) == RecipeInput.from_parameters(iron_ore, 2).unwrap()

    def test_create_recipe_reports_every_failure(self, repository, iron_ore):
        result = RecipeBook(repository).create_recipe(
            new_id(),
            new_id(),
            Item.NONE,
            0,
            [(iron_ore, -1)],
        )
        assert result.id == "recipe"
        assert result.error.message == "Unable to create recipe."
        assert result.error.messages == [
            "Profession not found.",
            "Item cannot be none.",
            "Count must be positive.",
            "Count must be positive.",
        ]
        assert [e.source for e in result.error.errors] == [
            "profession",
            "output",
            "inputs[0]",
        ]

    def test_create_recipe_checks_whole_recipe(self, repository, smithing, iron_ore, iron_bar):
        result = RecipeBook(repository).create_recipe(
            new_id(), smithing.id, iron_bar, 1, [(iron_ore, 1), (iron_ore, 2)]
        )
        assert result.error.messages == ["Recipe inputs must have distinct items."]

    def test_each_operation_gets_its_own_correlation_id(self, repository, iron_bar):
        structlog.reset_defaults()
        book = RecipeBook(repository)
        with capture_logs() as logs:
            book.create_recipe(new_id(), new_id(), iron_bar, 1)
            book.create_recipe(new_id(), new_id(), iron_bar, 1)
        ids = [entry["correlation_id"] for entry in logs]
        assert len(ids) == 2
        assert ids[0] != ids[1]
        assert all(entry["event"] == "operation_failed" for entry in logs)

    def test_from_settings(self):
        settings = Settings(
            observability={"log_level": "WARNING", "log_format": "console"},
            professions=[{"id": "3a1f6c2e-8b4d-4e7a-9c5f-1d2e3f4a5b6c", "name": "Smithing"}],
        )
        book = RecipeBook.from_settings(settings)
        assert [p.name for p in book.list_professions()] == ["Smithing"]
