"""Error taxonomy for outcomekit.

- OutcomeKind: closed enumeration of outcome kinds
- SortDirection: ordering direction for query helpers
- describe: static label lookup for both enumerations
- OutcomeError/InvalidStateError: exceptions for unwrapping failed outcomes
"""

from .errors import ErrorCode, InvalidStateError, OutcomeError
from .kinds import GENERAL_FIELD, INTERNAL_ERROR, UNKNOWN_ERROR, OutcomeKind, SortDirection, describe

__all__ = [
    # Kinds
    "OutcomeKind", "SortDirection", "describe",
    # Constants
    "GENERAL_FIELD", "INTERNAL_ERROR", "UNKNOWN_ERROR",
    # Exceptions
    "ErrorCode", "OutcomeError", "InvalidStateError",
]
