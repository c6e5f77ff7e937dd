"""Render outcomes as HTTP responses.

The body is always the full outcome, never just the payload, so clients see
the kind, message and both error collections (empty ones included).

Example:
    >>> body = to_body(Outcome.not_found("user 7"))
    >>> body["kind"], body["message"], body["errors"]
    ('NotFound', 'user 7', [])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from outcomekit.core import Outcome
from outcomekit.errors import OutcomeKind
from outcomekit.observability import get_logger

from .status import INTERNAL_SERVER_ERROR, status_code_for

if TYPE_CHECKING:
    from starlette.responses import JSONResponse

_log = get_logger("outcomekit.http")


class OutcomeBody(BaseModel):
    """Wire shape of an outcome. Field names are camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        json_schema_extra={
            "title": "Outcome",
            "examples": [{
                "kind": "NotFound",
                "isSuccess": False,
                "payload": None,
                "count": 0,
                "message": "user 7",
                "errors": [],
                "validationErrors": {},
            }],
        },
    )

    kind: OutcomeKind
    is_success: bool
    payload: Any = None
    count: int = 0
    message: str | None = None
    errors: list[str] = Field(default_factory=list)
    validation_errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def from_outcome(cls, outcome: Outcome[Any]) -> OutcomeBody:
        return cls(
            kind=outcome.kind,
            is_success=outcome.is_success,
            payload=outcome.payload,
            count=outcome.count,
            message=outcome.message,
            errors=list(outcome.errors),
            validation_errors={name: list(msgs) for name, msgs in outcome.validation_errors.items()},
        )

    @field_serializer("payload", when_used="json")
    def _serialize_payload(self, payload: Any) -> Any:
        return to_jsonable_python(payload, fallback=_plain_object)


def _plain_object(value: Any) -> Any:
    """JSON form of payloads pydantic does not know: attributes, else text."""
    if hasattr(value, "__dict__"):
        return to_jsonable_python(vars(value), fallback=_plain_object)
    return str(value)


def to_body(outcome: Outcome[Any]) -> dict[str, Any]:
    """JSON-compatible dict of the full outcome."""
    return OutcomeBody.from_outcome(outcome).model_dump(mode="json", by_alias=True)


def to_json(outcome: Outcome[Any]) -> bytes:
    """Serialized body as UTF-8 JSON bytes."""
    return orjson.dumps(to_body(outcome))


def render_response(outcome: Outcome[Any]) -> JSONResponse:
    """Starlette response with the mapped status code and the full outcome as body.

    Requires the ``http`` extra.
    """
    try:
        from starlette.responses import JSONResponse
    except ImportError as e:
        raise ImportError(
            "HTTP responses require starlette. "
            "Install with: pip install outcomekit[http]"
        ) from e

    status = status_code_for(outcome)
    if status >= INTERNAL_SERVER_ERROR:
        _log.error("outcome rendered", status=status, kind=outcome.kind.value, errors=list(outcome.errors))
    else:
        _log.debug("outcome rendered", status=status, kind=outcome.kind.value)
    return JSONResponse(to_body(outcome), status_code=status)
