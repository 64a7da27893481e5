"""Application service building recipes from raw caller input.

Composes the profession repository with the entity factories: every
part of the requested recipe is validated and every failure reported
in one aggregate, then ``Recipe.from_parameters`` checks the whole.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from uuid import UUID

from crafting_tools.core.config import Settings
from crafting_tools.domain.item import Item
from crafting_tools.domain.profession import Profession
from crafting_tools.domain.recipe import Recipe
from crafting_tools.domain.recipe_input import RecipeInput
from crafting_tools.domain.recipe_output import RecipeOutput
from crafting_tools.domain.repository import (
    InMemoryProfessionRepository,
    ProfessionRepository,
)
from crafting_tools.observability.logger import (
    get_logger,
    log_result,
    new_correlation_id,
    setup_logging,
)
from crafting_tools.railway.accumulate import fail_with
from crafting_tools.railway.result import Result, to_result_is_not_null

logger = get_logger(__name__)


class RecipeBook:
    """Creates recipes against a profession repository."""

    def __init__(self, repository: ProfessionRepository) -> None:
        self._repository = repository

    @classmethod
    def from_settings(cls, settings: Settings) -> RecipeBook:
        """Configure logging and seed an in-memory repository from settings."""
        setup_logging(
            level=settings.observability.log_level,
            format=settings.observability.log_format,
        )
        return cls(InMemoryProfessionRepository.from_settings(settings))

    def list_professions(self) -> list[Profession]:
        return self._repository.get_professions()

    def get_profession(self, profession_id: UUID, result_id: str | None = None) -> Result[Profession]:
        return to_result_is_not_null(
            self._repository.get_profession_by_id(profession_id),
            "Profession not found.",
            result_id or "profession",
        )

    def create_recipe(
        self,
        recipe_id: UUID,
        profession_id: UUID,
        output_item: Item,
        output_count: int,
        inputs: Iterable[tuple[Item, int]] = (),
        result_id: str | None = None,
    ) -> Result[Recipe]:
        result_id = result_id or "recipe"
        log = logger.bind(correlation_id=new_correlation_id())
        failures: list[Result[Any]] = []

        profession = self.get_profession(profession_id).unwrap_or_add_to_failures(
            failures, Profession.NONE
        )
        output = RecipeOutput.from_parameters(
            output_item, output_count, "output"
        ).unwrap_or_add_to_failures(failures, RecipeOutput.NONE)
        recipe_inputs = [
            RecipeInput.from_parameters(
                item, count, f"inputs[{index}]"
            ).unwrap_or_add_to_failures(failures, RecipeInput.NONE)
            for index, (item, count) in enumerate(inputs)
        ]

        if failures:
            result = fail_with(failures, "Unable to create recipe.", result_id)
        else:
            result = Recipe.from_parameters(
                recipe_id, profession, output, recipe_inputs, result_id
            )
        log_result(log, "create_recipe", result)
        return result
