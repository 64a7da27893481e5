"""Aggregation of accumulated failures into one error."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from crafting_tools.core.errors import InvalidResultError
from crafting_tools.railway.errors import Error
from crafting_tools.railway.result import Result

logger = logging.getLogger(__name__)


def to_error(
    failures: Sequence[Result[Any]],
    message: str,
    source: str = "",
) -> Error:
    """Fold a non-empty sequence of failed results into one aggregate ``Error``."""
    if not failures:
        raise InvalidResultError("Cannot build an error from an empty failure list.")
    if any(result.is_success for result in failures):
        raise InvalidResultError("Failure list contains a successful result.")
    return Error(
        message=message,
        source=source,
        errors=tuple(result.error for result in failures),
    )


def fail_with(
    failures: Sequence[Result[Any]],
    message: str,
    result_id: str | None = None,
) -> Result[Any]:
    """Return a failed result carrying the aggregate of ``failures``."""
    error = to_error(failures, message, result_id or "")
    logger.debug("%s", error.detail)
    return Result.failure(error, result_id)
