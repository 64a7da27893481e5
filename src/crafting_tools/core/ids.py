"""Canonical identifier helpers.

Every entity is keyed by a ``uuid.UUID``.  The all-zero UUID is the
empty identifier: it marks the sentinel instances and is rejected by
every factory.
"""

from __future__ import annotations

import uuid

EMPTY_ID = uuid.UUID(int=0)


def new_id() -> uuid.UUID:
    """Generate a new UUID v4.  Use for all entity IDs."""
    return uuid.uuid4()
