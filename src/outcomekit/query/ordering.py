"""Ordering instructions for query collections."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from outcomekit.errors import SortDirection

T = TypeVar("T")

Accessor = str | Callable[[Any], Any]


def canonical_accessor(accessor: Accessor) -> str:
    """Stable string form of an accessor, used for equality and hashing.

    Field names are used as-is, ``operator`` getters by their repr, other
    callables by ``module.qualname``.
    """
    if isinstance(accessor, str):
        return accessor
    if isinstance(accessor, (operator.attrgetter, operator.itemgetter, operator.methodcaller)):
        return repr(accessor)
    return f"{getattr(accessor, '__module__', '')}.{getattr(accessor, '__qualname__', repr(accessor))}"


@dataclass(frozen=True, slots=True, eq=False)
class OrderBy(Generic[T]):
    """Sort key plus direction.

    Two instructions are equal when their directions match and their
    accessors have the same canonical form.

    Example:
        >>> OrderBy("last_name") == OrderBy("last_name", SortDirection.ASCENDING)
        True
        >>> OrderBy("last_name") == OrderBy("last_name", SortDirection.DESCENDING)
        False
    """

    accessor: Accessor
    direction: SortDirection = SortDirection.ASCENDING
    _getter: Callable[[T], Any] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.accessor is None:
            raise ValueError("OrderBy requires an accessor")
        getter = operator.attrgetter(self.accessor) if isinstance(self.accessor, str) else self.accessor
        object.__setattr__(self, "_getter", getter)

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESCENDING

    def key(self, item: T) -> Any:
        return self._getter(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderBy):
            return NotImplemented
        return self.direction == other.direction and canonical_accessor(self.accessor) == canonical_accessor(other.accessor)

    def __hash__(self) -> int:
        return hash((canonical_accessor(self.accessor), self.direction))


def apply_ordering(items: Iterable[T], order: OrderBy[T] | None = None) -> Iterable[T]:
    """Sort ``items`` by ``order``; without an order the input is returned as-is."""
    if order is None:
        return items
    return sorted(items, key=order.key, reverse=order.descending)
