"""Unit tests for BaseSourceFileParser abstract class."""

from __future__ import annotations

from pathlib import Path

import pytest

from compose2kube.core.common.base_parser import BaseSourceFileParser
from compose2kube.core.exceptions import ParseError
from compose2kube.models.v1 import ServiceRecord

# -------- Concrete fakes for testing --------


class ConcreteTestParser(BaseSourceFileParser):
    """One service per non-empty line."""

    def get_supported_extensions(self) -> list[str]:
        return [".svc"]

    def _parse_content(self, content: str, file_path: Path) -> dict[str, ServiceRecord]:
        if content.strip() == "invalid":
            raise ValueError("Test parsing error")
        if content.strip() == "reject":
            raise ParseError("rejected", source_path=file_path)
        names = [line.strip() for line in content.splitlines() if line.strip()]
        return {name: ServiceRecord(name=name) for name in names}


class EmptyExtensionsParser(ConcreteTestParser):
    """Parser with no supported extensions (accept all files)."""

    def get_supported_extensions(self) -> list[str]:
        return []


# ------------------------- Tests -------------------------


class TestBaseSourceFileParser:
    @pytest.fixture
    def parser(self) -> ConcreteTestParser:
        return ConcreteTestParser()

    @pytest.fixture
    def temp_file(self, tmp_path: Path) -> Path:
        f = tmp_path / "sample.svc"
        f.write_text("web\ndb\n")
        return f

    # --- capabilities & can_parse ---

    def test_can_parse_valid_extension(
        self, parser: ConcreteTestParser, temp_file: Path
    ) -> None:
        assert parser.can_parse(temp_file) is True

    def test_can_parse_wrong_extension(
        self, parser: ConcreteTestParser, tmp_path: Path
    ) -> None:
        f = tmp_path / "sample.txt"
        f.write_text("web")
        assert parser.can_parse(f) is False

    def test_can_parse_missing_or_directory(
        self, parser: ConcreteTestParser, tmp_path: Path
    ) -> None:
        assert parser.can_parse(tmp_path / "missing.svc") is False
        assert parser.can_parse(tmp_path) is False

    def test_empty_extensions_accepts_any_file(self, tmp_path: Path) -> None:
        f = tmp_path / "anything.bin"
        f.write_text("web")
        assert EmptyExtensionsParser().can_parse(f) is True

    # --- parse ---

    def test_parse_success(self, parser: ConcreteTestParser, temp_file: Path) -> None:
        result = parser.parse(temp_file)
        assert list(result) == ["web", "db"]
        assert result["db"].name == "db"

    def test_parse_missing_file(self, parser: ConcreteTestParser, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="File not found"):
            parser.parse(tmp_path / "missing.svc")

    def test_parse_directory(self, parser: ConcreteTestParser, tmp_path: Path) -> None:
        d = tmp_path / "dir.svc"
        d.mkdir()
        with pytest.raises(ParseError, match="not a file"):
            parser.parse(d)

    def test_parse_wraps_foreign_errors(
        self, parser: ConcreteTestParser, tmp_path: Path
    ) -> None:
        f = tmp_path / "bad.svc"
        f.write_text("invalid")
        with pytest.raises(ParseError) as exc:
            parser.parse(f)
        assert "Cannot parse bad.svc" in str(exc.value)
        assert isinstance(exc.value.__cause__, ValueError)

    def test_parse_error_passes_through(
        self, parser: ConcreteTestParser, tmp_path: Path
    ) -> None:
        f = tmp_path / "bad.svc"
        f.write_text("reject")
        with pytest.raises(ParseError) as exc:
            parser.parse(f)
        assert str(exc.value).startswith("[PARSE_ERROR] rejected")

    def test_parse_decode_error(self, tmp_path: Path) -> None:
        f = tmp_path / "latin.svc"
        f.write_bytes("caf\xe9".encode("latin-1"))
        with pytest.raises(ParseError) as exc:
            ConcreteTestParser(encoding="utf-8").parse(f)
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)

    def test_parser_info(self, parser: ConcreteTestParser) -> None:
        info = parser.get_parser_info()
        assert info["class_name"] == "ConcreteTestParser"
        assert info["supported_extensions"] == [".svc"]
        assert info["encoding"] == "utf-8"
