"""Base implementation for orchestrators."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..exceptions import ServiceTranslationError, TranslationFailedError
from ..protocols import ManifestWriter, Orchestrator, ServiceMapper, SourceParser

if TYPE_CHECKING:
    from compose2kube.core.config import TranslationConfig
    from compose2kube.models.v1 import ServiceRecord, TranslatedManifest


logger = logging.getLogger(__name__)


@dataclass
class TranslationReport:
    """Outcome of one translation run."""

    written: list[Path] = field(default_factory=list)
    failures: list[ServiceTranslationError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures


class BaseOrchestrator(Orchestrator, ABC):
    """
    Abstract base class for orchestrators.

    Drives a whole run: parse the source file, map every service and hand
    each manifest to the writer. Services are translated independently;
    no state is shared between them.

    Subclasses must implement:
    - get_parser(): Return the source parser
    - get_mapper(): Return the service mapper
    - create_writer(): Return a manifest writer for a configuration
    """

    def __init__(self):
        """Initialize the orchestrator."""
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def get_parser(self) -> SourceParser:
        """Get the parser for the source format."""
        pass

    @abstractmethod
    def get_mapper(self) -> ServiceMapper:
        """Get the mapper turning service records into manifests."""
        pass

    @abstractmethod
    def create_writer(self, config: "TranslationConfig") -> ManifestWriter:
        """Create the writer for the configured output format."""
        pass

    def translate(self, config: "TranslationConfig") -> TranslationReport:
        """
        Orchestrates the entire translation process.

        1. Parse the compose file into service records
        2. Map each service to its manifest
        3. Write each manifest and print its path

        With ``config.keep_going`` unset the first error stops the run;
        files already written stay on disk. With it set, per-service input
        errors are collected, the other services are still written, and a
        TranslationFailedError is raised at the end.

        Args:
            config: Settings of this run

        Returns:
            The report of written files

        Raises:
            ParseError: If the source file cannot be parsed
            ServiceTranslationError: First failing service (fail-fast)
            TranslationFailedError: Some services failed (keep-going)
            SerializationError, WriteError: If a manifest cannot be written
        """
        self._logger.info(
            f"Starting translation: {config.compose_file} -> {config.output_dir}"
        )

        services = self.get_parser().parse(config.compose_file)
        writer = self.create_writer(config)
        report = TranslationReport()

        for name, service in services.items():
            try:
                translated = self.get_mapper().map_service(service, config)
            except ServiceTranslationError as e:
                self._logger.error(f"Failed to translate service '{name}': {e}")
                if not config.keep_going:
                    raise
                report.failures.append(e)
                continue

            path = writer.write(translated, config.output_dir)
            report.written.append(path)
            print(path)

        if report.failures:
            raise TranslationFailedError(report.failures)

        self._logger.info(
            f"Translation completed successfully: {len(report.written)} manifests"
        )
        return report

    def translate_services(
        self, services: Mapping[str, "ServiceRecord"], config: "TranslationConfig"
    ) -> list["TranslatedManifest"]:
        """
        Map already-parsed services without touching the filesystem.

        Always fail-fast.
        """
        mapper = self.get_mapper()
        return [mapper.map_service(service, config) for service in services.values()]

    def get_orchestrator_info(self) -> dict[str, Any]:
        """Describe the wired parser and the registered workload kinds."""
        return {
            "class_name": self.__class__.__name__,
            "parser": self.get_parser().get_parser_info(),
            "kinds": [k.value for k in self.get_mapper().get_registered_assemblers()],
        }
