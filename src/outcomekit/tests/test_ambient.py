"""Tests for settings, labels and structured logging."""

from __future__ import annotations

import io

import orjson
import pytest

from outcomekit.errors import INTERNAL_ERROR, ErrorCode, InvalidStateError, OutcomeError, OutcomeKind, SortDirection, describe
from outcomekit.foundation.config import clear_settings_cache, get_settings
from outcomekit.observability import ConsoleRenderer, JsonRenderer, NoOpRenderer, configure_logging, get_logger, log_context

# ═════════════════════════════════════════════════════════════════════════════
# Labels & Exceptions
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("value", "label"),
    [
        (OutcomeKind.NONE, "None"),
        (OutcomeKind.VALIDATION_ERROR, "Validation Error"),
        (OutcomeKind.NOT_FOUND, "Not Found"),
        (OutcomeKind.GENERAL_ERROR, "Error"),
        (OutcomeKind.UNAUTHORIZED, "Unauthorized"),
        (OutcomeKind.FORBIDDEN, "Forbidden"),
        (SortDirection.ASCENDING, "Asc"),
        (SortDirection.DESCENDING, "Desc"),
    ],
)
def test_describe(value: OutcomeKind | SortDirection, label: str) -> None:
    assert describe(value) == label


def test_describe_falls_back_to_value() -> None:
    assert describe(ErrorCode.INTERNAL) == "INTERNAL"


def test_kinds_serialize_by_name() -> None:
    assert orjson.dumps([OutcomeKind.NOT_FOUND, OutcomeKind.NONE]) == b'["NotFound","None"]'
    assert OutcomeKind("ValidationError") is OutcomeKind.VALIDATION_ERROR


def test_invalid_state_error_hierarchy() -> None:
    err = InvalidStateError.for_kind(OutcomeKind.NOT_FOUND, "user 7")

    assert isinstance(err, OutcomeError) and isinstance(err, RuntimeError)
    assert err.code is ErrorCode.INVALID_STATE
    assert str(err) == "NotFound: user 7"


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_default_settings() -> None:
    settings = get_settings()

    assert settings.messages.internal_error == INTERNAL_ERROR
    assert settings.logging.level == "INFO"
    assert settings.is_production is False


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMEKIT_ENVIRONMENT", "PRODUCTION")
    monkeypatch.setenv("OUTCOMEKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("OUTCOMEKIT_LOG_FORMAT", "json")
    clear_settings_cache()
    settings = get_settings()

    assert settings.is_production
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_json_renderer_output() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="INFO", output=out)
    get_logger("svc", region="eu").bind(request_id="r1").info("outcome rendered", status=200)

    line = orjson.loads(out.getvalue())
    assert line["event"] == "outcome rendered"
    assert line["level"] == "info"
    assert (line["logger"], line["region"], line["request_id"], line["status"]) == ("svc", "eu", "r1", 200)


def test_level_filtering() -> None:
    out = io.StringIO()
    configure_logging(format="console", level="WARNING", output=out)
    log = get_logger("svc")
    log.info("hidden")
    log.warning("shown", kind="NotFound")

    text = out.getvalue()
    assert "hidden" not in text
    assert '[warning] shown kind="NotFound" logger="svc"' in text


def test_log_context_scopes_fields() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=out)
    log = get_logger()
    with log_context(tenant="acme"):
        log.debug("inside")
    log.debug("outside")

    first, second = (orjson.loads(line) for line in out.getvalue().splitlines())
    assert first["tenant"] == "acme"
    assert "tenant" not in second


def test_unbind() -> None:
    log = get_logger("svc", a=1, b=2).unbind("a")

    assert log.context == {"b": 2, "logger": "svc"}


def test_configure_logging_defaults_come_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTCOMEKIT_LOG_FORMAT", "none")
    clear_settings_cache()

    assert isinstance(configure_logging(), NoOpRenderer)
    assert isinstance(configure_logging(format="console"), ConsoleRenderer)
    assert isinstance(configure_logging(format="json"), JsonRenderer)


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")
