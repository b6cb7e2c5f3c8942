from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from compose2kube.core.common.base_orchestrator import TranslationReport
    from compose2kube.core.config import TranslationConfig
    from compose2kube.models.v1 import (
        ContainerSpec,
        Manifest,
        ServiceIdentity,
        ServiceRecord,
        TranslatedManifest,
        WorkloadKind,
        WorkloadSelection,
    )


class SourceParser(Protocol):
    """Defines the contract for turning a compose file into service records."""

    def get_supported_extensions(self) -> list[str]:
        """
        Returns the list of file extensions supported
        (e.g., [".yml", ".yaml"]).
        """
        ...

    def can_parse(self, file_path: Path) -> bool:
        """
        Checks whether this parser can handle the given file.

        Args:
            file_path: Path to the file to check

        Returns:
            True if the parser can handle this path, False otherwise
        """
        ...

    def parse(self, file_path: Path) -> dict[str, "ServiceRecord"]:
        """Parses a file into a mapping from service name to ServiceRecord."""
        ...

    def get_parser_info(self) -> dict[str, Any]:
        """Describes the parser (class, extensions, encoding)."""
        ...


class WorkloadAssembler(Protocol):
    """Defines the contract for wrapping a container spec into one workload kind."""

    def can_assemble(self, kind: "WorkloadKind") -> bool:
        """
        Checks whether this assembler produces the given kind.

        Args:
            kind: Workload kind selected for the service.

        Returns:
            True if the kind is supported, False otherwise.
        """
        ...

    def assemble(
        self,
        identity: "ServiceIdentity",
        spec: "ContainerSpec",
        selection: "WorkloadSelection",
    ) -> "Manifest":
        """
        Wrap a built container spec into the manifest of the selected kind.

        Args:
            identity: Identity of the service (names, labels, selector)
            spec: The container spec built for the service
            selection: Selected workload kind and pod restart policy
        """
        ...


class ServiceMapper(Protocol):
    """Defines the contract for mapping service records to manifests."""

    def map_service(
        self, service: "ServiceRecord", config: "TranslationConfig"
    ) -> "TranslatedManifest":
        """
        Build, select and assemble the manifest for a single service.
        """
        ...

    def register_assembler(
        self, kind: "WorkloadKind", assembler: WorkloadAssembler
    ) -> None:
        """
        Register the assembler for a workload kind.

        Args:
            kind: The workload kind to handle
            assembler: The assembler instance that builds this kind
        """
        ...

    def get_registered_assemblers(self) -> dict["WorkloadKind", WorkloadAssembler]:
        """
        Get all registered assemblers.

        Returns:
            Dictionary mapping workload kinds to their assemblers
        """
        ...


class ManifestWriter(Protocol):
    """Defines the contract for serializing and persisting manifests."""

    def get_extension(self) -> str:
        """Returns the file extension written (without the dot)."""
        ...

    def serialize(self, translated: "TranslatedManifest") -> bytes:
        """Serializes a manifest to bytes."""
        ...

    def write(self, translated: "TranslatedManifest", output_dir: Path) -> Path:
        """
        Writes a manifest to ``<output_dir>/<name>-<tag>.<ext>``.

        Returns:
            The path written
        """
        ...


class Orchestrator(Protocol):
    """Defines the contract for running a whole translation."""

    def translate(self, config: "TranslationConfig") -> "TranslationReport":
        """Parse, map and write every service named by the configuration."""
        ...

