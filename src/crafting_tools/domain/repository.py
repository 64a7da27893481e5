"""Profession repository collaborator.

The domain only consumes this boundary; ``InMemoryProfessionRepository``
is the implementation used by the service layer and the tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID

from crafting_tools.core.config import Settings
from crafting_tools.core.errors import ConfigError
from crafting_tools.domain.profession import Profession


@runtime_checkable
class ProfessionRepository(Protocol):
    """Read access to already-validated professions."""

    def get_profession_by_id(self, profession_id: UUID) -> Profession | None:
        ...

    def get_professions(self) -> list[Profession]:
        ...


class InMemoryProfessionRepository:
    """Dict-backed repository, iterated in insertion order."""

    def __init__(self, professions: list[Profession] | None = None) -> None:
        self._professions: dict[UUID, Profession] = {}
        for profession in professions or []:
            self.add(profession)

    @classmethod
    def from_settings(cls, settings: Settings) -> InMemoryProfessionRepository:
        """Seed from configured professions; an invalid entry is a config fault."""
        repository = cls()
        for index, config in enumerate(settings.professions):
            result = Profession.from_parameters(
                config.id, config.name, f"professions[{index}]"
            )
            if result.is_failure:
                raise ConfigError(result.error.detail)
            repository.add(result.unwrap())
        return repository

    def add(self, profession: Profession) -> None:
        self._professions[profession.id] = profession

    def get_profession_by_id(self, profession_id: UUID) -> Profession | None:
        return self._professions.get(profession_id)

    def get_professions(self) -> list[Profession]:
        return list(self._professions.values())

    def __len__(self) -> int:
        return len(self._professions)
