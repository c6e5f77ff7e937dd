"""Search arguments combining ordering and paging."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .ordering import OrderBy, apply_ordering
from .paging import Paging, apply_paging

T = TypeVar("T")


@dataclass(slots=True)
class SearchModel(Generic[T]):
    """Optional ordering plus paging for a list query.

    Example:
        >>> search = SearchModel(order=OrderBy("last_name"), paging=Paging(page_number=2, page_size=5))
        >>> page = list(search.apply(users))
    """

    order: OrderBy[T] | None = None
    paging: Paging = field(default_factory=Paging.default)

    def apply(self, items: Iterable[T]) -> Iterable[T]:
        """Order, then page."""
        return apply_paging(apply_ordering(items, self.order), self.paging)
