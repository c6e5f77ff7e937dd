"""Free-function combinators over Outcome, sync and async.

The sync functions mirror the ``Outcome`` methods so pipelines can be written
either way. The async variants take an outcome or an awaitable producing one,
and a transform that may itself be sync or async. Each call awaits the source
once and the transform at most once; nothing runs concurrently.

Example:
    >>> async def load_user(user_id: int) -> Outcome[dict]:
    ...     return Outcome.success({"id": user_id, "name": "ada"})
    >>>
    >>> name = await map_async(load_user(7), lambda u: u["name"])
    >>> name.payload
    'ada'
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Iterable
from typing import Callable, TypeVar

from .outcome import Outcome

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

OutcomeSource = Outcome[T] | Awaitable[Outcome[T]]


async def _resolve(value: object) -> object:
    """Await value when it is awaitable, otherwise return it as-is."""
    return await value if inspect.isawaitable(value) else value


# ═══════════════════════════════════════════════════════════════════════════════
# Sync
# ═══════════════════════════════════════════════════════════════════════════════


def map(outcome: Outcome[T], f: Callable[[T], U]) -> Outcome[U]:  # noqa: A001
    """Apply f to the payload of a success. Failures propagate untouched."""
    return outcome.map(f)


def bind(outcome: Outcome[T], f: Callable[[T], Outcome[U]]) -> Outcome[U]:
    """Chain a fallible step on success; short-circuit on failure."""
    return outcome.bind(f)


def map_error(outcome: Outcome[T], f: Callable[[tuple[str, ...]], Iterable[str] | str]) -> Outcome[T]:
    """Rewrite a failure as a general failure with f(errors). Successes pass through."""
    return outcome.map_error(f)


def match(outcome: Outcome[T], on_success: Callable[[T], R], on_failure: Callable[[tuple[str, ...]], R]) -> R:
    return outcome.match(on_success, on_failure)


def match_empty(
    outcome: Outcome[None],
    on_success: Callable[[str | None], R],
    on_failure: Callable[[tuple[str, ...]], R],
) -> R:
    """Match for payload-less outcomes: ``on_success`` receives the message."""
    if outcome.is_success:
        return on_success(outcome.message)
    return on_failure(outcome.errors)


# ═══════════════════════════════════════════════════════════════════════════════
# Async
# ═══════════════════════════════════════════════════════════════════════════════


async def map_async(source: OutcomeSource[T], f: Callable[[T], U | Awaitable[U]]) -> Outcome[U]:
    outcome: Outcome[T] = await _resolve(source)  # type: ignore[assignment]
    if outcome.is_failure:
        return outcome.propagate()
    value: U = await _resolve(f(outcome.payload))  # type: ignore[arg-type,assignment]
    return Outcome.success(value, outcome.count, outcome.message)


async def bind_async(
    source: OutcomeSource[T],
    f: Callable[[T], Outcome[U] | Awaitable[Outcome[U]]],
) -> Outcome[U]:
    outcome: Outcome[T] = await _resolve(source)  # type: ignore[assignment]
    if outcome.is_failure:
        return outcome.propagate()
    return await _resolve(f(outcome.payload))  # type: ignore[arg-type,return-value]


async def map_error_async(
    source: OutcomeSource[T],
    f: Callable[[tuple[str, ...]], Iterable[str] | str | Awaitable[Iterable[str] | str]],
) -> Outcome[T]:
    outcome: Outcome[T] = await _resolve(source)  # type: ignore[assignment]
    if outcome.is_success:
        return outcome
    replaced = await _resolve(f(outcome.errors))
    return outcome.map_error(lambda _: replaced)  # type: ignore[arg-type,return-value]


async def match_async(
    source: OutcomeSource[T],
    on_success: Callable[[T], R | Awaitable[R]],
    on_failure: Callable[[tuple[str, ...]], R | Awaitable[R]],
) -> R:
    outcome: Outcome[T] = await _resolve(source)  # type: ignore[assignment]
    if outcome.is_success:
        return await _resolve(on_success(outcome.payload))  # type: ignore[arg-type,return-value]
    return await _resolve(on_failure(outcome.errors))  # type: ignore[return-value]
