"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from secure_webhooks.config import WebhookSigningSettings
from secure_webhooks.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)
from secure_webhooks.security.signing import dispatch_sign, dispatch_verify, hmac_verify


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        result = SensitiveFieldsFilter().redact({"secret": "whsec_x", "scheme": "hmac-sha256"})
        assert result["secret"] == SensitiveFieldsFilter.REDACTED
        assert result["scheme"] == "hmac-sha256"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        data = {field: "value" for field in DEFAULT_SENSITIVE_FIELDS}
        result = SensitiveFieldsFilter().redact(data)
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        result = SensitiveFieldsFilter().redact({"Signature": "abc", "normal": "ok"})
        assert result["Signature"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"tenant_token"}))
        result = f.redact({"tenant_token": "abc", "secret": "keep"})
        assert result["tenant_token"] == SensitiveFieldsFilter.REDACTED
        assert result["secret"] == "keep"

    def test_redact_deep_nested(self) -> None:
        data: dict[str, Any] = {"event": "x", "keys": {"private_key": "pem", "kid": "k1"}}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["keys"] == {"private_key": SensitiveFieldsFilter.REDACTED, "kid": "k1"}

    def test_redact_does_not_modify_original(self) -> None:
        original = {"secret": "s", "name": "n"}
        SensitiveFieldsFilter().redact(original)
        assert original["secret"] == "s"

    def test_processor_signature(self) -> None:
        out = SensitiveFieldsFilter()(None, "info", {"event": "e", "key": "k"})
        assert out == {"event": "e", "key": SensitiveFieldsFilter.REDACTED}


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test", component="signer").info("hello")
        assert logs == [{"component": "signer", "event": "hello", "log_level": "info"}]


# ---------------------------------------------------------------------------
# Log events emitted by the signing schemes
# ---------------------------------------------------------------------------


class TestSigningLogEvents:
    def test_dispatch_logs_selected_scheme(self) -> None:
        with capture_logs() as logs:
            dispatch_sign(b"hello", "whsec_test")
        assert {"operation": "sign", "scheme": "hmac-sha256"}.items() <= logs[0].items()

    def test_mismatch_logged_without_secret_or_signature(self) -> None:
        with capture_logs() as logs:
            assert hmac_verify(b"hello", "whsec_test", "deadbeef") is False
        assert logs[-1]["event"] == "webhook.signature_mismatch"
        rendered = repr(logs)
        assert "whsec_test" not in rendered
        assert "deadbeef" not in rendered

    def test_rejected_key_logged_as_warning(self) -> None:
        with capture_logs() as logs, pytest.raises(Exception):
            dispatch_verify(b"hello", "-----BEGIN PUBLIC KEY-----\n!!\n-----END PUBLIC KEY-----", "x")
        warnings = [e for e in logs if e["log_level"] == "warning"]
        assert warnings and warnings[0]["event"] == "webhook.key_rejected"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING

    def test_configure_accepts_settings_level_name(self) -> None:
        JsonLoggerFactory.configure(level=WebhookSigningSettings(log_level="debug").log_level)
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_installs_single_handler(self) -> None:
        JsonLoggerFactory.configure()
        assert len(logging.getLogger().handlers) == 1

    def test_redactor_runs_after_context_merge(self) -> None:
        JsonLoggerFactory.configure(sensitive_fields=frozenset({"tenant_token"}))
        merge, redactor = structlog.get_config()["processors"][:2]
        assert merge is structlog.contextvars.merge_contextvars
        assert isinstance(redactor, SensitiveFieldsFilter)
        structlog.contextvars.bind_contextvars(secret="whsec_ctx", tenant_token="t")
        try:
            event = {"event": "e", "ok": 1}
            for processor in (merge, redactor):
                event = processor(None, "info", event)
        finally:
            structlog.contextvars.clear_contextvars()
        assert event == {
            "event": "e",
            "ok": 1,
            "secret": "[REDACTED]",
            "tenant_token": "[REDACTED]",
        }


# ---------------------------------------------------------------------------
# Public surface smoke test
# ---------------------------------------------------------------------------


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("secure_webhooks.observability.logging")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
