"""Unit tests for ComposeMapper."""

from __future__ import annotations

import pytest

from compose2kube.core.config import TranslationConfig
from compose2kube.core.exceptions import (
    MalformedEnvEntryError,
    UnknownRestartPolicyError,
)
from compose2kube.models.v1 import (
    Pod,
    RestartPolicy,
    ServiceRecord,
    WorkloadKind,
)
from compose2kube.plugins.compose.assemblers import PodAssembler
from compose2kube.plugins.compose.mapper import ComposeMapper


@pytest.fixture
def mapper() -> ComposeMapper:
    m = ComposeMapper()
    m.register_assembler(WorkloadKind.POD, PodAssembler())
    return m


class TestComposeMapper:
    def test_maps_registered_kind(self, mapper):
        translated = mapper.map_service(
            ServiceRecord(name="Once", image="busybox", restart="no"),
            TranslationConfig(pull_policy="Never"),
        )
        assert translated.name == "Once"
        assert translated.kind is WorkloadKind.POD
        assert isinstance(translated.manifest, Pod)
        assert translated.manifest.spec.restart_policy is RestartPolicy.NEVER
        container = translated.manifest.spec.containers[0]
        assert container.name == "once"
        assert container.image_pull_policy.value == "Never"

    def test_unregistered_kind_raises_lookup_error(self, mapper):
        with pytest.raises(LookupError, match="ReplicationController"):
            mapper.map_service(ServiceRecord(name="web"), TranslationConfig())

    def test_unknown_restart_token(self, mapper):
        with pytest.raises(UnknownRestartPolicyError):
            mapper.map_service(
                ServiceRecord(name="web", restart="unless-stopped"), TranslationConfig()
            )

    def test_container_errors_propagate(self, mapper):
        with pytest.raises(MalformedEnvEntryError):
            mapper.map_service(
                ServiceRecord(name="web", restart="no", environment=["BAD"]),
                TranslationConfig(),
            )
