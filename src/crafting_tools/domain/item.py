"""Items: the things recipes consume and produce."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from crafting_tools.core.ids import EMPTY_ID
from crafting_tools.domain.item_name import ItemName
from crafting_tools.domain.value_object import ValueObject, validate_id
from crafting_tools.railway.accumulate import fail_with
from crafting_tools.railway.result import Result

_RESULT_ID = "item"


class ItemPoco(BaseModel):
    """Plain transport shape for an item crossing a boundary.

    Fields are optional and unvalidated; ``Item.from_poco`` does the
    validation.
    """

    id: UUID | None = None
    name: str | None = ""


@dataclass(frozen=True)
class Item(ValueObject):
    id: UUID
    name: ItemName

    entity_name = "Item"

    def __str__(self) -> str:
        return str(self.name)

    @classmethod
    def from_parameters(
        cls,
        item_id: UUID | None,
        name: ItemName | None,
        result_id: str | None = None,
    ) -> Result[Item]:
        """Validate the id and name, reporting every problem at once."""
        result_id = result_id or _RESULT_ID
        failures: list[Result[Any]] = []

        valid_id = validate_id(item_id, "Item").unwrap_or_add_to_failures(
            failures, EMPTY_ID
        )
        valid_name = ItemName.validate(name, "name").unwrap_or_add_to_failures(
            failures, ItemName.NONE
        )

        if failures:
            return fail_with(failures, "Unable to create item.", result_id)
        return Result.success(cls(valid_id, valid_name), result_id)

    def check_invariants(self, result_id: str | None = None) -> Result[Item]:
        return self._keep(Item.from_parameters(self.id, self.name, result_id), result_id)

    @classmethod
    def from_poco(cls, poco: ItemPoco | None, result_id: str | None = None) -> Result[Item]:
        """Build an item from its transport shape.

        A missing poco means "no item" and yields ``Item.NONE``; a
        present poco is validated like ``from_parameters``.
        """
        result_id = result_id or _RESULT_ID
        if poco is None:
            return Result.success(cls.NONE, result_id)
        return ItemName.from_parameter(poco.name, result_id).on_success(
            lambda name: cls.from_parameters(poco.id, name, result_id)
        )


Item.NONE = Item(EMPTY_ID, ItemName.NONE)
