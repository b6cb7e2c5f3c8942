import logging

from compose2kube.core.common.base_orchestrator import BaseOrchestrator
from compose2kube.core.config import TranslationConfig
from compose2kube.core.protocols import ManifestWriter, ServiceMapper, SourceParser
from compose2kube.models.v1 import WorkloadKind

from .assemblers import JobAssembler, PodAssembler, ReplicationControllerAssembler
from .mapper import ComposeMapper
from .parser import ComposeParser
from .writer import ManifestFileWriter

logger = logging.getLogger(__name__)


class ComposeOrchestrator(BaseOrchestrator):
    """
    Orchestrator for compose files.

    Connects the ComposeParser, the ComposeMapper and the ManifestFileWriter.
    """

    def __init__(self):
        super().__init__()
        self._parser = ComposeParser()
        self._mapper = ComposeMapper()

        # Central place to enable support for individual workload kinds.
        self._register_assemblers()

    def get_parser(self) -> SourceParser:
        """Return the compose parser instance."""
        return self._parser

    def get_mapper(self) -> ServiceMapper:
        """Return the compose mapper instance."""
        return self._mapper

    def create_writer(self, config: TranslationConfig) -> ManifestWriter:
        """Return a writer for the configured output format."""
        return ManifestFileWriter(config.output_format)

    def _register_assemblers(self):
        """Register one assembler per workload kind."""
        self._logger.debug("Registering workload assemblers...")

        self._mapper.register_assembler(WorkloadKind.POD, PodAssembler())
        self._mapper.register_assembler(
            WorkloadKind.REPLICATION_CONTROLLER, ReplicationControllerAssembler()
        )
        self._mapper.register_assembler(WorkloadKind.JOB, JobAssembler())
