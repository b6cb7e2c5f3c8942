import logging
from typing import TYPE_CHECKING

from compose2kube.core.common.base_mapper import BaseServiceMapper
from compose2kube.models.v1 import ContainerSpec, ServiceRecord, WorkloadSelection

from .container_builder import build_container_spec
from .kind_selector import select_workload_kind

if TYPE_CHECKING:
    from compose2kube.core.config import TranslationConfig

logger = logging.getLogger(__name__)


class ComposeMapper(BaseServiceMapper):
    """
    Compose-specific mapper.

    Builds containers from compose service records and picks the workload
    kind from the compose ``restart`` token.
    """

    def _build_spec(
        self, service: ServiceRecord, config: "TranslationConfig"
    ) -> ContainerSpec:
        return build_container_spec(
            service,
            pull_policy=config.pull_policy,
            node_selector=config.node_selector,
        )

    def _select_kind(self, service: ServiceRecord) -> WorkloadSelection:
        return select_workload_kind(service.restart, service.name)
