"""Success outcomes of mutating registry operations."""
from enum import IntEnum


class Outcome(IntEnum):
    """HTTP-equivalent result codes."""

    CREATED = 201
    UPDATED = 202
    DELETED = 204
