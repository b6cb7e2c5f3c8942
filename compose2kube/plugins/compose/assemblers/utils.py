from compose2kube.models.v1 import (
    ContainerSpec,
    ObjectMeta,
    PodSpec,
    PodTemplateSpec,
    RestartPolicy,
    ServiceIdentity,
)


def build_pod_spec(spec: ContainerSpec, restart_policy: RestartPolicy) -> PodSpec:
    """Single-container pod spec carrying the node selector of the container spec."""
    return PodSpec(
        containers=[spec.container],
        restart_policy=restart_policy,
        node_selector=spec.node_selector,
    )


def build_object_meta(identity: ServiceIdentity) -> ObjectMeta:
    return ObjectMeta(name=identity.resource_name, labels=identity.labels)


def build_pod_template(
    identity: ServiceIdentity, spec: ContainerSpec, restart_policy: RestartPolicy
) -> PodTemplateSpec:
    return PodTemplateSpec(
        metadata=ObjectMeta(labels=identity.labels),
        spec=build_pod_spec(spec, restart_policy),
    )
