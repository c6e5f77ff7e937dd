"""HTTP status codes for outcome kinds."""

from __future__ import annotations

from outcomekit.core import Outcome
from outcomekit.errors import OutcomeKind

INTERNAL_SERVER_ERROR = 500

_STATUS_CODES: dict[OutcomeKind, int] = {
    OutcomeKind.NONE: 200,
    OutcomeKind.VALIDATION_ERROR: 400,
    OutcomeKind.UNAUTHORIZED: 401,
    OutcomeKind.FORBIDDEN: 403,
    OutcomeKind.NOT_FOUND: 404,
    OutcomeKind.GENERAL_ERROR: INTERNAL_SERVER_ERROR,
}


def status_code_for(outcome: Outcome[object] | OutcomeKind) -> int:
    """Status code for an outcome or kind; anything unmapped is a 500."""
    kind = outcome if isinstance(outcome, OutcomeKind) else outcome.kind
    return _STATUS_CODES.get(kind, INTERNAL_SERVER_ERROR)
