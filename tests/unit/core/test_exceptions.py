"""Unit tests for the compose2kube exception hierarchy."""

from __future__ import annotations

import pytest

from compose2kube.core.exceptions import (
    Compose2KubeError,
    InvalidPortError,
    InvalidQuantityError,
    MalformedEnvEntryError,
    MalformedNodeSelectorError,
    ParseError,
    ServiceTranslationError,
    TranslationFailedError,
    UnknownPullPolicyError,
    UnknownRestartPolicyError,
    ValidationError,
)


class TestBaseError:
    def test_str_with_code_and_context(self):
        err = Compose2KubeError("boom", "CODE", {"a": 1})
        assert str(err) == "[CODE] boom (Context: a=1)"

    def test_plain_message(self):
        assert str(Compose2KubeError("boom")) == "boom"


class TestServiceTranslationErrors:
    @pytest.mark.parametrize(
        "error, code, field",
        [
            (MalformedEnvEntryError("X", "web"), "MALFORMED_ENV_ENTRY", "environment"),
            (InvalidPortError("x", "not an integer", "web"), "INVALID_PORT", "ports"),
            (UnknownPullPolicyError("x", "web"), "UNKNOWN_PULL_POLICY", "image_pull_policy"),
            (
                MalformedNodeSelectorError("x", "x", "web"),
                "MALFORMED_NODE_SELECTOR",
                "node_selector",
            ),
            (UnknownRestartPolicyError("x", "web"), "UNKNOWN_RESTART_POLICY", "restart"),
            (InvalidQuantityError("cpu", 0, "web"), "INVALID_QUANTITY", "cpu"),
        ],
    )
    def test_codes_and_context(self, error, code, field):
        assert isinstance(error, ServiceTranslationError)
        assert error.error_code == code
        assert error.service_name == "web"
        assert error.field_name == field
        assert error.context["service"] == "web"
        assert error.get_recovery_hint()

    def test_restart_message_names_token(self):
        err = UnknownRestartPolicyError("unless-stopped")
        assert "Unknown restart policy 'unless-stopped'" in str(err)
        assert "service" not in err.context


class TestOtherErrors:
    def test_parse_error_context(self):
        err = ParseError("bad", source_path="c.yml", service_name="web", field_name="ports")
        assert err.context == {"source_path": "c.yml", "service": "web", "field": "ports"}
        assert "ports" in err.get_recovery_hint()

    def test_validation_error_hint(self):
        err = ValidationError("missing", field_name="compose_file")
        assert "compose_file" in err.get_recovery_hint()

    def test_translation_failed_keeps_errors(self):
        errors = [MalformedEnvEntryError("X", "b"), MalformedEnvEntryError("Y", "a")]
        err = TranslationFailedError(errors)
        assert err.errors == errors
        assert "2 service(s) failed to translate: a, b" in str(err)
