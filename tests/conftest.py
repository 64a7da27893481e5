"""Shared fixtures for the crafting-tools test suite."""

from __future__ import annotations

from uuid import UUID

import pytest

from crafting_tools.domain.item import Item
from crafting_tools.domain.item_name import ItemName
from crafting_tools.domain.profession import Profession
from crafting_tools.domain.recipe import Recipe
from crafting_tools.domain.recipe_input import RecipeInput
from crafting_tools.domain.recipe_output import RecipeOutput
from crafting_tools.domain.repository import InMemoryProfessionRepository


def _item(name: str, item_id: str) -> Item:
    return Item.from_parameters(
        UUID(item_id), ItemName.from_parameter(name).unwrap()
    ).unwrap()


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

@pytest.fixture
def iron_ore() -> Item:
    return _item("Iron Ore", "5e226140-df07-47a8-b290-21f5b7e581b6")


@pytest.fixture
def coal() -> Item:
    return _item("Coal", "b13ba385-5aed-4ae7-9fa8-69f3d6fd24a1")


@pytest.fixture
def iron_bar() -> Item:
    return _item("Iron Bar", "0c3f2a51-6f0e-4d3c-9a8e-2f4b1d6e7a90")


@pytest.fixture
def flux() -> Item:
    return _item("Flux", "9d8e7f60-1a2b-4c3d-8e9f-a0b1c2d3e4f5")


# ---------------------------------------------------------------------------
# Professions
# ---------------------------------------------------------------------------

@pytest.fixture
def smithing() -> Profession:
    return Profession.from_parameters(
        UUID("3a1f6c2e-8b4d-4e7a-9c5f-1d2e3f4a5b6c"), "Smithing"
    ).unwrap()


@pytest.fixture
def repository(smithing: Profession) -> InMemoryProfessionRepository:
    return InMemoryProfessionRepository([smithing])


# ---------------------------------------------------------------------------
# Recipes
# ---------------------------------------------------------------------------

@pytest.fixture
def smelt_iron(smithing: Profession, iron_ore: Item, coal: Item, iron_bar: Item) -> Recipe:
    """Two ore and one coal make one iron bar."""
    return Recipe.from_parameters(
        UUID("7f9e8d7c-6b5a-4948-8776-655443322110"),
        smithing,
        RecipeOutput.from_parameters(iron_bar, 1).unwrap(),
        [
            RecipeInput.from_parameters(iron_ore, 2).unwrap(),
            RecipeInput.from_parameters(coal, 1).unwrap(),
        ],
    ).unwrap()
