"""Custom exception hierarchy for crafting tools.

Validation problems are never raised: they travel as failed
``Result`` values.  Exceptions are reserved for programmer misuse of
the railway API and for broken configuration.
"""


class CraftingError(Exception):
    """Base exception for all crafting tools errors."""


# --- Configuration ---
class ConfigError(CraftingError):
    """Invalid or missing configuration."""


# --- Railway ---
class ResultError(CraftingError):
    """Misuse of a ``Result`` value."""


class ResultUnwrapError(ResultError):
    """A value or error was read from a result carrying the other track."""


class InvalidResultError(ResultError):
    """A result was constructed in an inconsistent state."""
