"""Paging and ordering helpers for query collections."""

from outcomekit.errors import SortDirection

from .ordering import OrderBy, apply_ordering, canonical_accessor
from .paging import DEFAULT_PAGE_SIZE, Paging, apply_paging
from .search import SearchModel

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "OrderBy",
    "Paging",
    "SearchModel",
    "SortDirection",
    "apply_ordering",
    "apply_paging",
    "canonical_accessor",
]
