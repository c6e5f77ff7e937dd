"""Paging arguments and their application to sequences and queries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from itertools import islice
from typing import Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
FIRST_PAGE = 1


class Paging(BaseModel):
    """Page number, page size and whether paging applies at all.

    Invalid input is clamped instead of rejected, on construction and on
    assignment: page numbers below 1 become 1, page sizes below 1 become
    the default of 20.

    Example:
        >>> paging = Paging(page_number=3, page_size=10)
        >>> paging.skip_amount
        20
        >>> paging.page_size = 0
        >>> paging.page_size
        20
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    page_number: int = Field(default=FIRST_PAGE, description="1-based page index")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, description="Items per page")
    use_paging: bool = True

    # Runs after int coercion so query-string input ("0", "-3") is clamped too
    @field_validator("page_number")
    @classmethod
    def _clamp_page_number(cls, v: int) -> int:
        return FIRST_PAGE if v < FIRST_PAGE else v

    @field_validator("page_size")
    @classmethod
    def _clamp_page_size(cls, v: int) -> int:
        return DEFAULT_PAGE_SIZE if v < 1 else v

    @computed_field
    @property
    def skip_amount(self) -> int:
        """Number of items before the current page."""
        return (self.page_number - 1) * self.page_size

    @classmethod
    def default(cls) -> Self:
        return cls(page_number=FIRST_PAGE, page_size=DEFAULT_PAGE_SIZE, use_paging=True)

    @classmethod
    def no_paging(cls) -> Self:
        return cls(use_paging=False)


def apply_paging(items: Iterable[T], paging: Paging | None = None) -> Iterable[T]:
    """Return the requested page of ``items`` without materializing the source.

    Objects supporting slices (lists, ranges, ORM query objects) are sliced so
    they can push the window down; other iterables go through ``islice``.
    With paging disabled the input object itself is returned.
    """
    args = paging if paging is not None else Paging.default()
    if not args.use_paging:
        return items
    start, stop = args.skip_amount, args.skip_amount + args.page_size
    if hasattr(items, "__getitem__") and not isinstance(items, Mapping):
        try:
            return items[start:stop]  # type: ignore[index]
        except TypeError:
            # Indexable but not sliceable, e.g. deque
            return islice(items, start, stop)
    return islice(items, start, stop)
