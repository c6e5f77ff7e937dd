"""Tests for paging, ordering and search models."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from outcomekit.query import DEFAULT_PAGE_SIZE, OrderBy, Paging, SearchModel, SortDirection, apply_ordering, apply_paging


@dataclass
class Person:
    last_name: str
    age: int


PEOPLE = [Person("lovelace", 36), Person("babbage", 79), Person("hopper", 85)]


# ═════════════════════════════════════════════════════════════════════════════
# Paging
# ═════════════════════════════════════════════════════════════════════════════


class TestPaging:
    def test_defaults(self) -> None:
        paging = Paging()

        assert (paging.page_number, paging.page_size, paging.use_paging) == (1, DEFAULT_PAGE_SIZE, True)
        assert paging.skip_amount == 0

    def test_skip_amount(self) -> None:
        assert Paging(page_number=3, page_size=10).skip_amount == 20

    def test_invalid_page_size_clamps_to_default(self) -> None:
        paging = Paging(page_size=5)
        paging.page_size = 0

        assert paging.page_size == 20
        assert Paging(page_size=-4).page_size == 20

    def test_invalid_page_number_clamps_to_first(self) -> None:
        paging = Paging(page_number=4)
        paging.page_number = -3

        assert paging.page_number == 1
        assert Paging(page_number=0).page_number == 1

    @pytest.mark.parametrize(("raw", "expected"), [("0", 1), ("-3", 1), (0.0, 1), ("4", 4)])
    def test_coerced_page_number_is_clamped(self, raw: object, expected: int) -> None:
        assert Paging(page_number=raw).page_number == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize(("raw", "expected"), [("0", 20), ("-1", 20), (0.0, 20), ("15", 15)])
    def test_coerced_page_size_is_clamped(self, raw: object, expected: int) -> None:
        assert Paging(page_size=raw).page_size == expected  # type: ignore[arg-type]

    def test_query_string_paging_never_slices_from_the_end(self) -> None:
        assert apply_paging(list(range(100)), Paging(page_number="-3", page_size=10)) == list(range(10))  # type: ignore[arg-type]

    def test_factories(self) -> None:
        assert Paging.default() == Paging(page_number=1, page_size=20, use_paging=True)
        assert Paging.no_paging().use_paging is False

    def test_serializes_skip_amount(self) -> None:
        assert Paging(page_number=2, page_size=5).model_dump() == {
            "page_number": 2, "page_size": 5, "use_paging": True, "skip_amount": 5,
        }


class TestApplyPaging:
    def test_disabled_returns_input_object(self) -> None:
        items = list(range(50))

        assert apply_paging(items, Paging(page_number=3, page_size=2, use_paging=False)) is items

    def test_slices_sequences(self) -> None:
        assert apply_paging(list(range(50)), Paging(page_number=2, page_size=10)) == list(range(10, 20))

    def test_none_uses_default_paging(self) -> None:
        assert list(apply_paging(range(100))) == list(range(20))

    def test_last_partial_page(self) -> None:
        assert list(apply_paging(range(25), Paging(page_number=2, page_size=20))) == list(range(20, 25))

    def test_lazy_over_generators(self) -> None:
        pulled: list[int] = []

        def source() -> Iterator[int]:
            for i in range(1_000_000):
                pulled.append(i)
                yield i

        page = apply_paging(source(), Paging(page_number=2, page_size=3))

        assert pulled == []
        assert list(page) == [3, 4, 5]
        assert len(pulled) == 6

    def test_pages_indexable_non_sliceable_iterables(self) -> None:
        assert list(apply_paging(deque(range(50)), Paging(page_number=2, page_size=10))) == list(range(10, 20))

    def test_pushes_slice_to_query_objects(self) -> None:
        class Query:
            def __init__(self) -> None:
                self.window: slice | None = None

            def __getitem__(self, window: slice) -> Query:
                self.window = window
                return self

        query = Query()
        apply_paging(query, Paging(page_number=3, page_size=10))

        assert query.window == slice(20, 30)


# ═════════════════════════════════════════════════════════════════════════════
# Ordering
# ═════════════════════════════════════════════════════════════════════════════


class TestOrderBy:
    def test_equality_by_direction_and_accessor(self) -> None:
        assert OrderBy("last_name") == OrderBy("last_name", SortDirection.ASCENDING)
        assert OrderBy("last_name") != OrderBy("last_name", SortDirection.DESCENDING)
        assert OrderBy("last_name") != OrderBy("age")
        assert OrderBy(operator.attrgetter("age")) == OrderBy(operator.attrgetter("age"))

    def test_hash_consistent_with_equality(self) -> None:
        assert len({OrderBy("age"), OrderBy("age"), OrderBy("age", SortDirection.DESCENDING)}) == 2

    def test_named_function_accessors(self) -> None:
        def by_age(p: Person) -> int:
            return p.age

        assert OrderBy(by_age) == OrderBy(by_age)
        assert OrderBy(by_age).key(PEOPLE[0]) == 36

    def test_requires_accessor(self) -> None:
        with pytest.raises(ValueError, match="accessor"):
            OrderBy(None)  # type: ignore[arg-type]

    def test_apply_ordering(self) -> None:
        ascending = apply_ordering(PEOPLE, OrderBy("last_name"))
        descending = apply_ordering(PEOPLE, OrderBy(lambda p: p.age, SortDirection.DESCENDING))

        assert [p.last_name for p in ascending] == ["babbage", "hopper", "lovelace"]
        assert [p.age for p in descending] == [85, 79, 36]
        assert apply_ordering(PEOPLE) is PEOPLE


def test_search_model_orders_then_pages() -> None:
    search = SearchModel(order=OrderBy("age", SortDirection.DESCENDING), paging=Paging(page_number=2, page_size=1))

    assert [p.last_name for p in search.apply(PEOPLE)] == ["babbage"]
    assert SearchModel().paging == Paging.default()
