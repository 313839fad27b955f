"""Testes da validação de settings no startup."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import BaseSettings, FlowRelaySettings

VALID_FLOW = FlowRelaySettings(forward_url="https://hook.example.com/flow")
INVALID_FLOW = FlowRelaySettings(forward_url="not-a-url", forward_timeout_seconds=0)


def test_valid_settings_pass_in_production(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="app.bootstrap")

    validate_runtime_settings(BaseSettings(environment="production"), VALID_FLOW)

    messages = [record.getMessage() for record in caplog.records]
    assert "flow_features_configured" in messages
    assert "settings_validated" in messages


def test_invalid_settings_raise_in_strict_environment() -> None:
    with pytest.raises(RuntimeError, match="Configuração inválida para staging") as exc_info:
        validate_runtime_settings(BaseSettings(environment="staging"), INVALID_FLOW)

    assert "flow: FORWARD_TIMEOUT_SECONDS deve ser > 0" in str(exc_info.value)
    assert "flow: MAKE_WEBHOOK_URL deve ser uma URL http(s) válida" in str(exc_info.value)


def test_invalid_settings_only_warn_in_development(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="app.bootstrap")

    validate_runtime_settings(BaseSettings(environment="development"), INVALID_FLOW)

    failed = [r for r in caplog.records if r.getMessage() == "settings_validation_failed"]
    assert len(failed) == 1
    assert failed[0].error_count == 2


def test_features_are_reported_as_disabled(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="app.bootstrap")

    validate_runtime_settings(BaseSettings(), FlowRelaySettings())

    record = next(r for r in caplog.records if r.getMessage() == "flow_features_configured")
    assert record.decryption_enabled is False
    assert record.forward_enabled is False
