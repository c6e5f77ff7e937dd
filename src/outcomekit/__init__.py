"""outcomekit - Tagged operation outcomes for layered applications.

An ``Outcome[T]`` carries either a successful payload or failure detail
(validation errors by field, not-found, unauthorized, forbidden, or general
errors) through application layers without exceptions, and renders onto HTTP
responses at the edge.

Quick Start:
    >>> from outcomekit import Outcome, map_result, status_code_for
    >>>
    >>> def create_user(name: str) -> Outcome[dict]:
    ...     if not name:
    ...         return Outcome.validation_failure({"name": ["required"]})
    ...     return Outcome.success({"id": 1, "name": name})
    >>>
    >>> created = create_user("ada").map(lambda u: u["id"])
    >>> created.payload, status_code_for(created)
    (1, 200)
    >>> status_code_for(create_user(""))
    400

Railway-Oriented Composition:
    >>> outcome = (
    ...     create_user("ada")
    ...     .bind(lambda u: Outcome.success(u) if u["id"] else Outcome.not_found("user"))
    ...     .map(lambda u: u["name"].upper())
    ... )
    >>> outcome.get_value_or_throw()
    'ADA'

Paging:
    >>> from outcomekit.query import Paging, apply_paging
    >>> list(apply_paging(range(100), Paging(page_number=2, page_size=10)))
    [10, 11, 12, 13, 14, 15, 16, 17, 18, 19]
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    CollectionOutcome,
    EmptyOutcome,
    Outcome,
    bind,
    bind_async,
    combine_all,
    failure,
    forbidden,
    map,
    map_async,
    map_collection_result,
    map_error,
    map_error_async,
    map_result,
    map_to_collection_result,
    map_to_empty_result,
    match,
    match_async,
    match_empty,
    not_found,
    success,
    unauthorized,
    validation_failure,
)
from .errors import ErrorCode, InvalidStateError, OutcomeError, OutcomeKind, SortDirection, describe
from .foundation import OutcomeKitSettings, clear_settings_cache, get_settings
from .http import OutcomeBody, render_response, status_code_for, to_body, to_json
from .observability import configure_logging, get_logger
from .persistence import empty_outcome_from_rows, outcome_from_rows
from .query import OrderBy, Paging, SearchModel, apply_ordering, apply_paging

__all__ = [
    "__version__",
    # Outcome
    "Outcome", "EmptyOutcome", "CollectionOutcome",
    "success", "failure", "validation_failure", "not_found", "unauthorized", "forbidden", "combine_all",
    # Combinators
    "map", "bind", "map_error", "match", "match_empty",
    "map_async", "bind_async", "map_error_async", "match_async",
    "map_result", "map_collection_result", "map_to_collection_result", "map_to_empty_result",
    # Errors
    "OutcomeKind", "SortDirection", "describe", "ErrorCode", "OutcomeError", "InvalidStateError",
    # HTTP
    "status_code_for", "to_body", "to_json", "render_response", "OutcomeBody",
    # Query
    "Paging", "OrderBy", "SearchModel", "apply_paging", "apply_ordering",
    # Persistence
    "outcome_from_rows", "empty_outcome_from_rows",
    # Ambient
    "OutcomeKitSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
