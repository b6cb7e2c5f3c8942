import logging

from compose2kube.models.v1 import (
    ContainerSpec,
    Job,
    JobSpec,
    ServiceIdentity,
    WorkloadKind,
    WorkloadSelection,
)

from .utils import build_object_meta, build_pod_template

logger = logging.getLogger(__name__)


class JobAssembler:
    """Wrap a container spec into a run-to-completion Job."""

    def can_assemble(self, kind: WorkloadKind) -> bool:
        """Return True for kind 'Job'."""
        return kind is WorkloadKind.JOB

    def assemble(
        self,
        identity: ServiceIdentity,
        spec: ContainerSpec,
        selection: WorkloadSelection,
    ) -> Job:
        logger.info("Assembling Job for service '%s'", identity.service_name)
        return Job(
            metadata=build_object_meta(identity),
            spec=JobSpec(
                template=build_pod_template(identity, spec, selection.restart_policy)
            ),
        )
