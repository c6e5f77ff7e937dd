"""Outcome type: a tagged result carrying success or failure detail.

An Outcome is one of six kinds (see ``OutcomeKind``). Which fields are
populated depends on the kind:

- NONE (success): payload, count, message
- VALIDATION_ERROR: validation_errors keyed by field, optional partial payload
- NOT_FOUND / UNAUTHORIZED / FORBIDDEN: message only
- GENERAL_ERROR: errors, message

Outcomes are built through the classmethod factories, composed with the
combinators (``map``, ``bind``, ``map_error``, ``match``) and consumed once at a
boundary. The two mutators ``add_error`` and ``add_validation_error`` exist for
the builder that created the outcome, before it is handed on.

Example:
    >>> def find_user(user_id: int) -> Outcome[dict]:
    ...     if user_id < 1:
    ...         return Outcome.validation_failure({"user_id": ["must be positive"]})
    ...     return Outcome.success({"id": user_id, "name": "ada"})
    >>>
    >>> find_user(7).map(lambda u: u["name"]).get_value_or_throw()
    'ada'
    >>> find_user(0).map(lambda u: u["name"]).kind
    <OutcomeKind.VALIDATION_ERROR: 'ValidationError'>
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Callable, Generic, TypeAlias, TypeVar

from outcomekit.errors import GENERAL_FIELD, InvalidStateError, OutcomeKind, describe
from outcomekit.foundation.config import get_settings

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_NONE = OutcomeKind.NONE
_GENERAL = OutcomeKind.GENERAL_ERROR
_VALIDATION = OutcomeKind.VALIDATION_ERROR


def _as_list(errors: Iterable[str] | str | None) -> list[str]:
    """Normalize a single message or a sequence of messages to a fresh list."""
    if errors is None:
        return []
    if isinstance(errors, str):
        return [errors]
    return list(errors)


def _copy_field_errors(errors: Mapping[str, Iterable[str] | str] | None) -> dict[str, list[str]]:
    return {name: _as_list(messages) for name, messages in (errors or {}).items()}


class Outcome(Generic[T]):
    """Result of a fallible operation, discriminated by ``kind``.

    Notes:
        - Uses __slots__; construct only through the factories
        - Accessors hand out copies, so holders cannot alter internal state
        - Equality is structural over all fields; outcomes are not hashable
    """

    __slots__ = ("_kind", "_payload", "_count", "_message", "_errors", "_validation_errors")

    def __init__(
        self,
        kind: OutcomeKind,
        payload: T | None = None,
        count: int = 0,
        message: str | None = None,
        errors: list[str] | None = None,
        validation_errors: dict[str, list[str]] | None = None,
    ) -> None:
        """Private constructor. Use the factories instead."""
        self._kind = kind
        self._payload = payload
        self._count = count
        self._message = message
        self._errors: list[str] = errors if errors is not None else []
        self._validation_errors: dict[str, list[str]] = validation_errors if validation_errors is not None else {}

    # ─── Factories ─────────────────────────────────────────────────────

    @classmethod
    def success(cls, payload: T | None = None, count: int = 0, message: str | None = None) -> Outcome[T]:
        """Successful outcome, optionally carrying a payload and its count."""
        return cls(_NONE, payload, count, message)

    @classmethod
    def failure(cls, errors: Iterable[str] | str | BaseException, message: str | None = None) -> Outcome[T]:
        """General failure. A single string becomes a one-element error list.

        Exceptions are routed to ``from_exception``.
        """
        if isinstance(errors, BaseException):
            return cls.from_exception(errors)
        return cls(_GENERAL, message=message, errors=_as_list(errors))

    @classmethod
    def from_exception(cls, exc: BaseException) -> Outcome[T]:
        """General failure built from an exception.

        The exception text is the primary error; the chained cause's text,
        when there is one, becomes the message. A context hidden with
        ``raise ... from None`` is not reported.
        """
        primary = str(exc) or get_settings().messages.unknown_error
        inner = exc.__cause__ or (None if exc.__suppress_context__ else exc.__context__)
        return cls(_GENERAL, message=(str(inner) or None) if inner is not None else None, errors=[primary])

    @classmethod
    def validation_failure(
        cls,
        errors: Mapping[str, Iterable[str] | str] | str | None = None,
        message: str | None = None,
        payload: T | None = None,
        count: int = 0,
    ) -> Outcome[T]:
        """Validation failure keyed by field name.

        A single string is filed under the ``"General"`` field. The payload is
        kept for callers that still want to show partially valid data.
        """
        field_errors = {GENERAL_FIELD: [errors]} if isinstance(errors, str) else _copy_field_errors(errors)
        return cls(_VALIDATION, payload, count, message, validation_errors=field_errors)

    @classmethod
    def not_found(cls, message: str | None = None) -> Outcome[T]:
        return cls(OutcomeKind.NOT_FOUND, message=message)

    @classmethod
    def unauthorized(cls, message: str | None = None) -> Outcome[T]:
        return cls(OutcomeKind.UNAUTHORIZED, message=message)

    @classmethod
    def forbidden(cls, message: str | None = None) -> Outcome[T]:
        return cls(OutcomeKind.FORBIDDEN, message=message)

    # ─── Accessors ─────────────────────────────────────────────────────

    @property
    def kind(self) -> OutcomeKind:
        return self._kind

    @property
    def payload(self) -> T | None:
        return self._payload

    @property
    def count(self) -> int:
        return self._count

    @property
    def message(self) -> str | None:
        return self._message

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    @property
    def validation_errors(self) -> dict[str, tuple[str, ...]]:
        return {name: tuple(messages) for name, messages in self._validation_errors.items()}

    @property
    def is_success(self) -> bool:
        return self._kind is _NONE

    @property
    def is_failure(self) -> bool:
        return self._kind is not _NONE

    def has_error(self) -> bool:
        """Same predicate as ``is_failure``, kept under its historical name."""
        return self._kind is not _NONE

    # ─── Mutators (builder only) ───────────────────────────────────────

    def add_error(self, error: str) -> Outcome[T]:
        """Append a general error, switching the outcome to GENERAL_ERROR.

        Payload, count and validation errors are cleared on the switch.
        """
        if self._kind is not _GENERAL:
            self._kind = _GENERAL
            self._payload, self._count = None, 0
            self._validation_errors.clear()
        self._errors.append(error)
        return self

    def add_validation_error(self, field: str, errors: Iterable[str] | str) -> Outcome[T]:
        """Append messages for ``field``, switching the outcome to VALIDATION_ERROR.

        Messages for an already known field are appended to its list; new
        fields keep insertion order. General errors are cleared on the switch;
        a success payload is kept as the partial payload.
        """
        if self._kind is not _VALIDATION:
            self._kind = _VALIDATION
            self._errors.clear()
        self._validation_errors.setdefault(field, []).extend(_as_list(errors))
        return self

    # ─── Unwrapping ────────────────────────────────────────────────────

    def get_value_or_throw(self) -> T | None:
        """Return the payload, or raise InvalidStateError when not successful."""
        if self._kind is _NONE:
            return self._payload
        raise InvalidStateError.for_kind(self._kind, self.describe_failure())

    def get_value_or_default(self, default: T) -> T:
        """Return the payload on success (when present), otherwise ``default``."""
        if self._kind is _NONE and self._payload is not None:
            return self._payload
        return default

    def describe_failure(self) -> str:
        """Joined error text: errors, else validation messages, else message, else the kind label."""
        if self._errors:
            return "; ".join(self._errors)
        if self._validation_errors:
            return "; ".join(f"{name}: {msg}" for name, msgs in self._validation_errors.items() for msg in msgs)
        return self._message or describe(self._kind)

    # ─── Combining ─────────────────────────────────────────────────────

    def combine_with(self, other: Outcome[U]) -> Outcome[T]:
        """Combine two outcomes. First success wins; failures concatenate left to right.

        A failing side without ``errors`` contributes its message (or kind
        label) so the combined failure always explains itself.
        """
        if self._kind is _NONE and other._kind is _NONE:
            return self
        collected: list[str] = []
        for side in (self, other):
            if side._kind is not _NONE:
                collected.extend(side._errors or [side._message or describe(side._kind)])
        return Outcome(_GENERAL, errors=collected)

    # ─── Combinators ───────────────────────────────────────────────────

    def propagate(self) -> Outcome[U]:
        """Copy of a failing outcome retyped for a new payload type (payload dropped)."""
        return Outcome(
            self._kind,
            message=self._message,
            errors=list(self._errors),
            validation_errors=_copy_field_errors(self._validation_errors),
        )

    def map(self, f: Callable[[T], U]) -> Outcome[U]:
        """Apply f to the payload on success, keeping count and message.

        Failures propagate with kind, errors and message unchanged; f is not called.
        """
        if self._kind is _NONE:
            return Outcome(_NONE, f(self._payload), self._count, self._message)  # type: ignore[arg-type]
        return self.propagate()

    def bind(self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Chain a fallible step. On success the callee's outcome is returned as-is."""
        if self._kind is _NONE:
            return f(self._payload)  # type: ignore[arg-type]
        return self.propagate()

    def map_error(self, f: Callable[[tuple[str, ...]], Iterable[str] | str]) -> Outcome[T]:
        """Rewrite a failure as a general failure carrying f(errors).

        The message is kept. Successes pass through unchanged.
        """
        if self._kind is _NONE:
            return self
        return Outcome(_GENERAL, message=self._message, errors=_as_list(f(tuple(self._errors))))

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[tuple[str, ...]], R]) -> R:
        """Exhaustive case split: exactly one branch runs."""
        if self._kind is _NONE:
            return on_success(self._payload)  # type: ignore[arg-type]
        return on_failure(tuple(self._errors))

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._kind is _NONE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return (
            self._kind is other._kind
            and self._payload == other._payload
            and self._count == other._count
            and self._message == other._message
            and self._errors == other._errors
            and self._validation_errors == other._validation_errors
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = [f"kind={self._kind.value}"]
        if self._payload is not None:
            parts.append(f"payload={self._payload!r}")
        if self._count:
            parts.append(f"count={self._count}")
        if self._message is not None:
            parts.append(f"message={self._message!r}")
        if self._errors:
            parts.append(f"errors={self._errors!r}")
        if self._validation_errors:
            parts.append(f"validation_errors={self._validation_errors!r}")
        return f"Outcome({', '.join(parts)})"


# Payload-less outcome and collection-shaped outcome
EmptyOutcome: TypeAlias = Outcome[None]
CollectionOutcome: TypeAlias = Outcome[list[T]]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═══════════════════════════════════════════════════════════════════════════════


def success(payload: T | None = None, count: int = 0, message: str | None = None) -> Outcome[T]:
    return Outcome.success(payload, count, message)


def failure(errors: Iterable[str] | str | BaseException, message: str | None = None) -> Outcome[T]:
    return Outcome.failure(errors, message)


def validation_failure(
    errors: Mapping[str, Iterable[str] | str] | str | None = None,
    message: str | None = None,
    payload: T | None = None,
    count: int = 0,
) -> Outcome[T]:
    return Outcome.validation_failure(errors, message, payload, count)


def not_found(message: str | None = None) -> Outcome[T]:
    return Outcome.not_found(message)


def unauthorized(message: str | None = None) -> Outcome[T]:
    return Outcome.unauthorized(message)


def forbidden(message: str | None = None) -> Outcome[T]:
    return Outcome.forbidden(message)


def combine_all(outcomes: Iterable[Outcome[T]]) -> Outcome[T]:
    """Fold outcomes left to right with ``combine_with``. Empty input is a success."""
    combined: Outcome[T] | None = None
    for outcome in outcomes:
        combined = outcome if combined is None else combined.combine_with(outcome)
    return combined if combined is not None else Outcome.success()
