"""Serialization of translated manifests to YAML or JSON files."""

import json
import logging
from io import StringIO
from pathlib import Path
from typing import Any, Final

from ruamel.yaml import YAML

from compose2kube.core.exceptions import SerializationError, WriteError
from compose2kube.core.protocols import ManifestWriter
from compose2kube.models.v1 import TranslatedManifest

logger = logging.getLogger(__name__)

_EXTENSIONS: Final[dict[str, str]] = {"yaml": "yaml", "json": "json"}


class ManifestFileWriter(ManifestWriter):
    """Writes each manifest to ``<output_dir>/<name>-<tag>.<ext>``."""

    def __init__(self, output_format: str = "yaml", encoding: str = "utf-8"):
        if output_format not in _EXTENSIONS:
            raise ValueError(
                f"Unsupported output format '{output_format}'. "
                f"Supported formats: {sorted(_EXTENSIONS)}"
            )
        self.output_format = output_format
        self.encoding = encoding
        self._logger = logger.getChild(self.__class__.__name__)
        self._yaml = YAML()
        self._configure_yaml()

    def _configure_yaml(self) -> None:
        """Block style, stable key order, no line wrapping."""
        self._yaml.indent(mapping=2, sequence=4, offset=2)
        self._yaml.default_flow_style = False
        self._yaml.allow_unicode = True
        self._yaml.width = 4096

    def get_extension(self) -> str:
        return _EXTENSIONS[self.output_format]

    def output_path(self, translated: TranslatedManifest, output_dir: Path) -> Path:
        filename = f"{translated.name}-{translated.kind.tag}.{self.get_extension()}"
        return output_dir / filename

    def to_dict(self, translated: TranslatedManifest) -> dict[str, Any]:
        """Kubernetes API representation of the manifest (camelCase, no nulls)."""
        return translated.manifest.model_dump(
            by_alias=True, exclude_none=True, mode="json"
        )

    def serialize(self, translated: TranslatedManifest) -> bytes:
        """
        Serialize a manifest in the configured format.

        Raises:
            SerializationError: If the manifest cannot be dumped
        """
        try:
            data = self.to_dict(translated)
            if self.output_format == "json":
                text = json.dumps(data, indent=2) + "\n"
            else:
                stream = StringIO()
                self._yaml.dump(data, stream)
                text = stream.getvalue()
            return text.encode(self.encoding)
        except Exception as e:
            raise SerializationError(
                f"Failed to serialize {translated.kind.value} '{translated.name}': "
                f"{e}",
                manifest_name=translated.name,
            ) from e

    def write(self, translated: TranslatedManifest, output_dir: Path) -> Path:
        """
        Serialize and write a manifest, creating the output directory.

        Returns:
            The path written

        Raises:
            SerializationError: If the manifest cannot be dumped
            WriteError: If the file cannot be written
        """
        data = self.serialize(translated)
        path = self.output_path(translated, output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise WriteError(
                f"Failed to write {translated.kind.value} '{translated.name}': {e}",
                output_path=path,
            ) from e

        self._logger.debug(f"Wrote {path} ({len(data)} bytes)")
        return path
