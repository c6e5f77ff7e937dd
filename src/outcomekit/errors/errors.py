"""Exceptions raised at the few points where an outcome becomes a fault.

Outcomes themselves never raise for expected failures. Code that has decided a
failure is not recoverable calls ``get_value_or_throw`` and gets an
``InvalidStateError`` carrying the outcome's kind and joined error text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from .kinds import OutcomeKind


class ErrorCode(StrEnum):
    """Machine-readable codes for library exceptions."""

    INVALID_STATE = "INVALID_STATE"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


class OutcomeError(Exception):
    """Base exception for outcomekit."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN) -> None:
        self.code = code
        super().__init__(message)


class InvalidStateError(OutcomeError, RuntimeError):
    """Raised when a failed outcome is unwrapped as if it had succeeded."""

    def __init__(self, message: str, kind: OutcomeKind = OutcomeKind.GENERAL_ERROR) -> None:
        self.kind = kind
        super().__init__(message, ErrorCode.INVALID_STATE)

    @classmethod
    def for_kind(cls, kind: OutcomeKind, detail: str) -> Self:
        """Build with the kind prefixed to the detail text."""
        return cls(f"{kind.value}: {detail}" if detail else kind.value, kind)
