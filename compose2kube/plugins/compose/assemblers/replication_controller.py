import logging
from typing import Final

from compose2kube.models.v1 import (
    ContainerSpec,
    ReplicationController,
    ReplicationControllerSpec,
    ServiceIdentity,
    WorkloadKind,
    WorkloadSelection,
)

from .utils import build_object_meta, build_pod_template

logger = logging.getLogger(__name__)

REPLICAS: Final[int] = 1


class ReplicationControllerAssembler:
    """Wrap a container spec into a ReplicationController keeping one replica.

    The selector and the pod template labels come from the same service
    identity, so the controller owns exactly the pods it creates.
    """

    def can_assemble(self, kind: WorkloadKind) -> bool:
        """Return True for kind 'ReplicationController'."""
        return kind is WorkloadKind.REPLICATION_CONTROLLER

    def assemble(
        self,
        identity: ServiceIdentity,
        spec: ContainerSpec,
        selection: WorkloadSelection,
    ) -> ReplicationController:
        logger.info(
            "Assembling ReplicationController for service '%s'",
            identity.service_name,
        )
        return ReplicationController(
            metadata=build_object_meta(identity),
            spec=ReplicationControllerSpec(
                replicas=REPLICAS,
                selector=identity.selector,
                template=build_pod_template(
                    identity, spec, selection.restart_policy
                ),
            ),
        )
