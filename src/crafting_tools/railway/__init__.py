"""Railway-oriented validation: results, errors and failure accumulation."""

from crafting_tools.railway.accumulate import fail_with, to_error
from crafting_tools.railway.errors import Error
from crafting_tools.railway.result import (
    Result,
    to_result,
    to_result_is_not_null,
)

__all__ = [
    "Error",
    "Result",
    "fail_with",
    "to_error",
    "to_result",
    "to_result_is_not_null",
]
