import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..protocols import ServiceMapper, WorkloadAssembler

if TYPE_CHECKING:
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

logger = logging.getLogger(__name__)


class BaseServiceMapper(ServiceMapper, ABC):
    """
    Base class for service mappers acting as a dispatcher.

    Provides common logic for registering and delegating to one
    "WorkloadAssembler" per workload kind, keeping the source-specific
    container building and kind selection abstract.

    Subclasses must implement:
    - _build_spec(): Build the container spec of a service
    - _select_kind(): Choose the workload kind of a service
    """

    def __init__(self):
        """Initializes the mapper and the assembler registry."""
        self._logger = logger.getChild(self.__class__.__name__)
        self._assemblers: dict["WorkloadKind", WorkloadAssembler] = {}

    # --- Protocol Implementation (Common Logic) ---

    def register_assembler(
        self, kind: "WorkloadKind", assembler: WorkloadAssembler
    ) -> None:
        """Registers the assembler for a workload kind."""
        if kind in self._assemblers:
            self._logger.warning(f"Overwriting assembler for kind: '{kind.value}'")
        self._logger.debug(
            f"Registering assembler '{assembler.__class__.__name__}' "
            f"for kind '{kind.value}'"
        )
        self._assemblers[kind] = assembler

    def get_registered_assemblers(self) -> dict["WorkloadKind", WorkloadAssembler]:
        """Returns the dictionary of registered assemblers."""
        return self._assemblers

    def map_service(
        self, service: "ServiceRecord", config: "TranslationConfig"
    ) -> "TranslatedManifest":
        """
        Translates one service using the Template Method pattern.

        1. Builds the container spec (`_build_spec`).
        2. Selects the workload kind (`_select_kind`).
        3. Delegates wrapping to the assembler registered for that kind.
        """
        from compose2kube.models.v1 import TranslatedManifest

        spec = self._build_spec(service, config)
        selection = self._select_kind(service)
        manifest = self.assemble(service.identity, spec, selection)

        self._logger.debug(
            f"Mapped service '{service.name}' to {selection.kind.value} "
            f"(restartPolicy={selection.restart_policy.value})"
        )
        return TranslatedManifest(
            name=service.name, kind=selection.kind, manifest=manifest
        )

    def assemble(
        self,
        identity: "ServiceIdentity",
        spec: "ContainerSpec",
        selection: "WorkloadSelection",
    ) -> "Manifest":
        """
        Wraps a container spec into the manifest of the selected kind.

        Raises:
            LookupError: If no registered assembler handles the kind
        """
        assembler = self._assemblers.get(selection.kind)
        if assembler is None or not assembler.can_assemble(selection.kind):
            raise LookupError(
                f"No assembler registered for workload kind "
                f"'{selection.kind.value}'"
            )
        return assembler.assemble(identity, spec, selection)

    # --- Abstract Methods (Source-Specific Logic) ---

    @abstractmethod
    def _build_spec(
        self, service: "ServiceRecord", config: "TranslationConfig"
    ) -> "ContainerSpec":
        """Build the container spec of a service."""
        pass

    @abstractmethod
    def _select_kind(self, service: "ServiceRecord") -> "WorkloadSelection":
        """Choose the workload kind and restart policy of a service."""
        pass
