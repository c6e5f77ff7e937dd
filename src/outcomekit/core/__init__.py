"""Outcome type, its combinators and cross-shape mappers.

Example:
    >>> from outcomekit.core import Outcome, map_result
    >>>
    >>> def parse_age(raw: str) -> Outcome[int]:
    ...     if not raw.isdigit():
    ...         return Outcome.validation_failure({"age": ["must be a number"]})
    ...     return Outcome.success(int(raw))
    >>>
    >>> outcome = parse_age("42").bind(lambda n: Outcome.success(n) if n < 150 else Outcome.failure("implausible"))
    >>> map_result(outcome, str).payload
    '42'
"""

from .functional import (
    bind,
    bind_async,
    map,
    map_async,
    map_error,
    map_error_async,
    match,
    match_async,
    match_empty,
)
from .mapper import map_collection_result, map_result, map_to_collection_result, map_to_empty_result
from .outcome import (
    CollectionOutcome,
    EmptyOutcome,
    Outcome,
    combine_all,
    failure,
    forbidden,
    not_found,
    success,
    unauthorized,
    validation_failure,
)

__all__ = [
    # Core type
    "Outcome", "EmptyOutcome", "CollectionOutcome",
    # Factories
    "success", "failure", "validation_failure", "not_found", "unauthorized", "forbidden", "combine_all",
    # Combinators
    "map", "bind", "map_error", "match", "match_empty",
    "map_async", "bind_async", "map_error_async", "match_async",
    # Cross-shape mapping
    "map_result", "map_collection_result", "map_to_collection_result", "map_to_empty_result",
]
