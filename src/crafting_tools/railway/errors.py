"""The error value carried by failed results.

An ``Error`` is either a leaf (one validation message, tagged with the
``source`` label of the step that produced it) or an aggregate built
from accumulated failures, in which case ``errors`` holds the
underlying errors in the order they were collected.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel


class Error(BaseModel):
    message: str
    source: str = ""
    errors: tuple[Error, ...] = ()

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.message

    @property
    def is_aggregate(self) -> bool:
        return bool(self.errors)

    def leaves(self) -> Iterator[Error]:
        """Yield the leaf errors depth-first, in collection order."""
        if not self.errors:
            yield self
            return
        for error in self.errors:
            yield from error.leaves()

    @property
    def messages(self) -> list[str]:
        return [leaf.message for leaf in self.leaves()]

    @property
    def detail(self) -> str:
        """Diagnostic rendering: ``"<message> (<source>: <leaf>; ...)"``."""
        if not self.errors:
            return self.message
        parts = [
            f"{leaf.source}: {leaf.message}" if leaf.source else leaf.message
            for leaf in self.leaves()
        ]
        return f"{self.message} ({'; '.join(parts)})"


Error.model_rebuild()
