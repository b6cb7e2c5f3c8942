import logging

from compose2kube.models.v1 import (
    ContainerSpec,
    Pod,
    ServiceIdentity,
    WorkloadKind,
    WorkloadSelection,
)

from .utils import build_object_meta, build_pod_spec

logger = logging.getLogger(__name__)


class PodAssembler:
    """Wrap a container spec into a bare Pod (services that never restart)."""

    def can_assemble(self, kind: WorkloadKind) -> bool:
        """Return True for kind 'Pod'."""
        return kind is WorkloadKind.POD

    def assemble(
        self,
        identity: ServiceIdentity,
        spec: ContainerSpec,
        selection: WorkloadSelection,
    ) -> Pod:
        logger.info("Assembling Pod for service '%s'", identity.service_name)
        return Pod(
            metadata=build_object_meta(identity),
            spec=build_pod_spec(spec, selection.restart_policy),
        )
