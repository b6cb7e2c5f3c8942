"""Unit tests for BaseOrchestrator abstract class."""

from __future__ import annotations

from pathlib import Path

import pytest

from compose2kube.core.common.base_orchestrator import BaseOrchestrator
from compose2kube.core.config import TranslationConfig
from compose2kube.core.exceptions import (
    MalformedEnvEntryError,
    TranslationFailedError,
)
from compose2kube.models.v1 import (
    ObjectMeta,
    Pod,
    PodSpec,
    Container,
    RestartPolicy,
    ServiceRecord,
    TranslatedManifest,
    WorkloadKind,
)

# -------------------- Fakes / helpers --------------------


class FakeParser:
    def __init__(self, services: dict[str, ServiceRecord]):
        self.services = services
        self.parsed: list[Path] = []

    def get_supported_extensions(self) -> list[str]:
        return [".fake"]

    def can_parse(self, file_path: Path) -> bool:
        return True

    def parse(self, file_path: Path) -> dict[str, ServiceRecord]:
        self.parsed.append(file_path)
        return self.services

    def get_parser_info(self) -> dict:
        return {"class_name": "FakeParser", "supported_extensions": [".fake"]}


class FakeMapper:
    """Fails for services whose image is 'broken'."""

    def map_service(
        self, service: ServiceRecord, config: TranslationConfig
    ) -> TranslatedManifest:
        if service.image == "broken":
            raise MalformedEnvEntryError("BROKEN", service.name)
        pod = Pod(
            metadata=ObjectMeta(name=service.name),
            spec=PodSpec(
                containers=[Container(name=service.name, image=service.image)],
                restart_policy=RestartPolicy.NEVER,
            ),
        )
        return TranslatedManifest(name=service.name, kind=WorkloadKind.POD, manifest=pod)

    def register_assembler(self, kind, assembler) -> None:
        pass

    def get_registered_assemblers(self) -> dict:
        return {}


class FakeWriter:
    def __init__(self) -> None:
        self.written: list[str] = []

    def get_extension(self) -> str:
        return "txt"

    def serialize(self, translated: TranslatedManifest) -> bytes:
        return translated.name.encode()

    def write(self, translated: TranslatedManifest, output_dir: Path) -> Path:
        self.written.append(translated.name)
        return output_dir / f"{translated.name}.txt"


class ConcreteOrchestrator(BaseOrchestrator):
    def __init__(self, services: dict[str, ServiceRecord]):
        super().__init__()
        self.parser = FakeParser(services)
        self.mapper = FakeMapper()
        self.writer = FakeWriter()

    def get_parser(self):
        return self.parser

    def get_mapper(self):
        return self.mapper

    def create_writer(self, config: TranslationConfig):
        return self.writer


def _services(*specs: tuple[str, str]) -> dict[str, ServiceRecord]:
    return {name: ServiceRecord(name=name, image=image) for name, image in specs}


# --------------------------- Tests ---------------------------


class TestTranslate:
    def test_writes_every_service_in_order(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        orch = ConcreteOrchestrator(_services(("a", "x"), ("b", "y")))
        config = TranslationConfig(compose_file=tmp_path / "c.fake", output_dir=tmp_path)

        report = orch.translate(config)

        assert orch.parser.parsed == [tmp_path / "c.fake"]
        assert orch.writer.written == ["a", "b"]
        assert report.written == [tmp_path / "a.txt", tmp_path / "b.txt"]
        assert report.succeeded
        assert capsys.readouterr().out.splitlines() == [
            str(tmp_path / "a.txt"),
            str(tmp_path / "b.txt"),
        ]

    def test_fail_fast(self, tmp_path: Path) -> None:
        orch = ConcreteOrchestrator(
            _services(("a", "x"), ("b", "broken"), ("c", "z"))
        )
        with pytest.raises(MalformedEnvEntryError):
            orch.translate(TranslationConfig(output_dir=tmp_path))
        assert orch.writer.written == ["a"]

    def test_keep_going(self, tmp_path: Path) -> None:
        orch = ConcreteOrchestrator(
            _services(("a", "broken"), ("b", "x"), ("c", "broken"))
        )
        with pytest.raises(TranslationFailedError) as exc:
            orch.translate(TranslationConfig(output_dir=tmp_path, keep_going=True))
        assert orch.writer.written == ["b"]
        assert [e.service_name for e in exc.value.errors] == ["a", "c"]
        assert "2 service(s) failed to translate: a, c" in str(exc.value)

    def test_empty_project(self, tmp_path: Path) -> None:
        report = ConcreteOrchestrator({}).translate(TranslationConfig(output_dir=tmp_path))
        assert report.written == []


class TestTranslateServices:
    def test_no_io(self) -> None:
        orch = ConcreteOrchestrator({})
        result = orch.translate_services(_services(("a", "x")), TranslationConfig())
        assert [t.name for t in result] == ["a"]
        assert orch.writer.written == []
        assert orch.parser.parsed == []

    def test_fail_fast(self) -> None:
        with pytest.raises(MalformedEnvEntryError):
            ConcreteOrchestrator({}).translate_services(
                _services(("a", "broken")), TranslationConfig()
            )


class TestOrchestratorInfo:
    def test_info(self) -> None:
        info = ConcreteOrchestrator({}).get_orchestrator_info()
        assert info["class_name"] == "ConcreteOrchestrator"
        assert info["parser"]["supported_extensions"] == [".fake"]
        assert info["kinds"] == []
