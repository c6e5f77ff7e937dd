"""Cross-shape mapping between outcomes at layer boundaries.

These mappers translate an outcome from one layer's payload type into
another's, kind by kind. An absent (``None``) source is normalized into a
general failure with the configured internal-error text instead of raising.

| source kind                     | target                                        |
|---------------------------------|-----------------------------------------------|
| absent                          | failure(internal error)                       |
| GENERAL_ERROR                   | failure(errors, message)                      |
| NOT_FOUND / UNAUTHORIZED / ...  | same kind, message kept                       |
| VALIDATION_ERROR, payload       | validation_failure(..., mapper(payload))      |
| VALIDATION_ERROR, no payload    | validation_failure(validation_errors, message)|
| success, payload                | success(mapper(payload), count, message)      |
| success, no payload             | success(None, count, message)                 |
"""

from __future__ import annotations

from typing import Callable, TypeVar

from outcomekit.errors import OutcomeKind
from outcomekit.foundation.config import get_settings
from outcomekit.observability import get_logger

from .outcome import Outcome

T1 = TypeVar("T1")
T2 = TypeVar("T2")

_log = get_logger("outcomekit.mapper")

# Result counts for single-to-collection mapping
_SINGLE_RESULT_COUNT = 1
_ZERO_RESULT_COUNT = 0


def _absent(target: str) -> Outcome[T2]:
    _log.warning("normalized absent outcome", target=target)
    return Outcome.failure(get_settings().messages.internal_error)


def _map_failure(source: Outcome[T1], mapper: Callable[[T1], T2], count: int | None = None) -> Outcome[T2]:
    """Translate a failing source. Only validation failures run ``mapper`` (on partial data)."""
    match source.kind:
        case OutcomeKind.GENERAL_ERROR:
            return Outcome.failure(source.errors, source.message)
        case OutcomeKind.VALIDATION_ERROR if source.payload is not None:
            return Outcome.validation_failure(
                source.validation_errors,
                source.message,
                mapper(source.payload),
                source.count if count is None else count,
            )
        case OutcomeKind.VALIDATION_ERROR:
            return Outcome.validation_failure(source.validation_errors, source.message)
        case _:
            return source.propagate()


def map_result(source: Outcome[T1] | None, mapper: Callable[[T1], T2]) -> Outcome[T2]:
    """Map an outcome to another payload type, preserving its kind."""
    if source is None:
        return _absent("map_result")
    if source.is_failure:
        return _map_failure(source, mapper, count=0)
    if source.payload is not None:
        return Outcome.success(mapper(source.payload), source.count, source.message)
    return Outcome.success(None, source.count, source.message)


def map_collection_result(
    source: Outcome[list[T1]] | None,
    list_mapper: Callable[[list[T1]], list[T2]],
) -> Outcome[list[T2]]:
    """Map a collection outcome to another collection outcome, keeping its count."""
    if source is None:
        return _absent("map_collection_result")
    if source.is_failure:
        return _map_failure(source, list_mapper)
    if source.payload is not None:
        return Outcome.success(list_mapper(source.payload), source.count, source.message)
    return Outcome.success(None, _ZERO_RESULT_COUNT, source.message)


def map_to_collection_result(
    source: Outcome[T1] | None,
    mapper: Callable[[T1], list[T2]],
) -> Outcome[list[T2]]:
    """Map a single-value outcome into a collection outcome (count 1, or 0 when empty)."""
    if source is None:
        return _absent("map_to_collection_result")
    if source.is_failure:
        return _map_failure(source, mapper, count=0)
    if source.payload is not None:
        return Outcome.success(mapper(source.payload), _SINGLE_RESULT_COUNT, source.message)
    return Outcome.success(None, _ZERO_RESULT_COUNT, source.message)


def map_to_empty_result(source: Outcome[T1] | None) -> Outcome[None]:
    """Collapse to a payload-less outcome keeping kind, errors and message."""
    if source is None:
        return _absent("map_to_empty_result")
    match source.kind:
        case OutcomeKind.NONE:
            return Outcome.success(message=source.message)
        case OutcomeKind.GENERAL_ERROR:
            return Outcome.failure(source.errors, source.message)
        case OutcomeKind.VALIDATION_ERROR:
            return Outcome.validation_failure(source.validation_errors, source.message)
        case _:
            return source.propagate()
