"""Professions: the crafting trade a recipe belongs to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from crafting_tools.core.ids import EMPTY_ID
from crafting_tools.domain.value_object import ValueObject, validate_id
from crafting_tools.railway.accumulate import fail_with
from crafting_tools.railway.result import Result, to_result_is_not_null

_RESULT_ID = "profession"


@dataclass(frozen=True)
class Profession(ValueObject):
    id: UUID
    name: str

    entity_name = "Profession"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_parameters(
        cls,
        profession_id: UUID | None,
        name: str | None,
        result_id: str | None = None,
    ) -> Result[Profession]:
        result_id = result_id or _RESULT_ID
        failures: list[Result[Any]] = []

        valid_id = validate_id(profession_id, "Profession").unwrap_or_add_to_failures(
            failures, EMPTY_ID
        )
        valid_name = (
            to_result_is_not_null(name, "Profession name cannot be null.", "name")
            .check(lambda v: isinstance(v, str), "Profession name must be a string.")
            .check(lambda v: bool(v.strip()), "Profession name cannot be empty.")
            .unwrap_or_add_to_failures(failures, "")
        )

        if failures:
            return fail_with(failures, "Unable to create profession.", result_id)
        return Result.success(cls(valid_id, valid_name), result_id)

    def check_invariants(self, result_id: str | None = None) -> Result[Profession]:
        return self._keep(
            Profession.from_parameters(self.id, self.name, result_id), result_id
        )


Profession.NONE = Profession(EMPTY_ID, "")
