"""Outcome kinds, sort directions and their display labels.

Kinds serialize by their stable string value, never by ordinal, so adding a
new kind never shifts existing wire values.
"""

from __future__ import annotations

from enum import Enum, StrEnum


class OutcomeKind(StrEnum):
    """Discriminant of an Outcome. NONE means the operation succeeded."""

    NONE = "None"
    VALIDATION_ERROR = "ValidationError"
    NOT_FOUND = "NotFound"
    GENERAL_ERROR = "GeneralError"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"


class SortDirection(StrEnum):
    """Ordering direction for query collections."""

    ASCENDING = "Ascending"
    DESCENDING = "Descending"


# Static label table (enum member -> human label)
_LABELS: dict[Enum, str] = {
    OutcomeKind.NONE: "None",
    OutcomeKind.VALIDATION_ERROR: "Validation Error",
    OutcomeKind.NOT_FOUND: "Not Found",
    OutcomeKind.GENERAL_ERROR: "Error",
    OutcomeKind.UNAUTHORIZED: "Unauthorized",
    OutcomeKind.FORBIDDEN: "Forbidden",
    SortDirection.ASCENDING: "Asc",
    SortDirection.DESCENDING: "Desc",
}

# Field key used when a validation failure carries a single unscoped message
GENERAL_FIELD = "General"
INTERNAL_ERROR = "Internal error"
UNKNOWN_ERROR = "Unknown error"


def describe(value: Enum) -> str:
    """Human label for an enum member, falling back to its value."""
    if (label := _LABELS.get(value)) is not None:
        return label
    return str(value.value)
