import logging

from compose2kube.models.v1 import (
    ContainerSpec,
    ContainerSpecBuilder,
    ResourceName,
    ServiceRecord,
)

from .normalizers import parse_env, parse_node_selector, parse_port, parse_pull_policy
from .quantity import encode_cpu, encode_memory

logger = logging.getLogger(__name__)


def build_container_spec(
    service: ServiceRecord,
    pull_policy: str | None = None,
    node_selector: str | None = None,
) -> ContainerSpec:
    """Build the container spec of one service.

    The container is named after the lower-cased service name. Resource
    limits are only added for nonzero values. Every environment and port
    entry is parsed; the first bad entry aborts the whole build.

    Args:
        service: Service record read from the compose file
        pull_policy: Optional image pull policy override
        node_selector: Optional ``key=value;key2=value2`` node selector

    Returns:
        The built ContainerSpec

    Raises:
        ServiceTranslationError: Any malformed field of the service or of
            the overrides
    """
    name = service.name
    builder = (
        ContainerSpecBuilder(service.identity.resource_name)
        .with_image(service.image)
        .with_args(service.command)
        .privileged(service.privileged)
    )

    if service.cpu_shares:
        builder.with_limit(ResourceName.CPU, encode_cpu(service.cpu_shares, name))
    if service.mem_limit:
        builder.with_limit(
            ResourceName.MEMORY, encode_memory(service.mem_limit, name)
        )

    for entry in service.environment:
        key, value = parse_env(entry, name)
        builder.with_env(key, value)

    for entry in service.ports:
        builder.with_port(parse_port(entry, name))

    policy = parse_pull_policy(pull_policy, name)
    if policy is not None:
        builder.with_pull_policy(policy)

    selector = parse_node_selector(node_selector, name)
    if selector is not None:
        builder.with_node_selector(selector)

    spec = builder.build()
    logger.debug(
        "Built container '%s' for service '%s'", spec.container.name, service.name
    )
    return spec
