"""Domain layer: immutable crafting entities and their factories.

Every entity is a frozen value object built through a validating
factory that returns a ``Result``.  "Updating" an entity always
reconstructs a new, re-validated instance.
"""

from crafting_tools.domain.item import Item, ItemPoco
from crafting_tools.domain.item_name import ItemName
from crafting_tools.domain.profession import Profession
from crafting_tools.domain.recipe import (
    Recipe,
    add_input,
    add_item_input,
    delete_input,
    set_input,
    set_output,
)
from crafting_tools.domain.recipe_input import RecipeInput
from crafting_tools.domain.recipe_output import RecipeOutput

__all__ = [
    "Item",
    "ItemName",
    "ItemPoco",
    "Profession",
    "Recipe",
    "RecipeInput",
    "RecipeOutput",
    "add_input",
    "add_item_input",
    "delete_input",
    "set_input",
    "set_output",
]
