"""Turn database affected-row counts into outcomes."""

from __future__ import annotations

from typing import TypeVar

from outcomekit.core import Outcome
from outcomekit.foundation.config import get_settings

T = TypeVar("T")


def outcome_from_rows(model: T, rows_affected: int, error_message: str | None = None) -> Outcome[T]:
    """Success carrying ``model`` when at least one row changed, else a general failure.

    Without an explicit message the failure reads ``"Error saving <TypeName>"``.
    """
    if rows_affected > 0:
        return Outcome.success(model)
    if error_message and error_message.strip():
        return Outcome.failure(error_message.strip())
    template = get_settings().messages.save_failure_template
    return Outcome.failure(template.format(name=type(model).__name__))


def empty_outcome_from_rows(rows_affected: int, error_message: str | None = None) -> Outcome[None]:
    """Payload-less variant of ``outcome_from_rows``."""
    if rows_affected > 0:
        return Outcome.success()
    if error_message and error_message.strip():
        return Outcome.failure(error_message.strip())
    return Outcome.failure(get_settings().messages.db_failure)
