from .base_k8s import KubeBase, ObjectMeta
from .builder import ContainerSpecBuilder
from .container import (
    Container,
    ContainerPort,
    ContainerSpec,
    EnvVar,
    PullPolicy,
    ResourceName,
    ResourceRequirements,
    SecurityContext,
)
from .quantity import Quantity, QuantityFormat
from .service_record import MAX_RESOURCE_VALUE, ServiceIdentity, ServiceRecord
from .workloads import (
    Job,
    JobSpec,
    Manifest,
    Pod,
    PodSpec,
    PodTemplateSpec,
    ReplicationController,
    ReplicationControllerSpec,
    RestartPolicy,
    TranslatedManifest,
    WorkloadKind,
    WorkloadSelection,
)

__all__ = [
    "KubeBase",
    "ObjectMeta",
    "Container",
    "ContainerPort",
    "ContainerSpec",
    "EnvVar",
    "PullPolicy",
    "ResourceName",
    "ResourceRequirements",
    "SecurityContext",
    "Quantity",
    "QuantityFormat",
    "MAX_RESOURCE_VALUE",
    "ServiceIdentity",
    "ServiceRecord",
    "Job",
    "JobSpec",
    "Manifest",
    "Pod",
    "PodSpec",
    "PodTemplateSpec",
    "ReplicationController",
    "ReplicationControllerSpec",
    "RestartPolicy",
    "TranslatedManifest",
    "WorkloadKind",
    "WorkloadSelection",
    "ContainerSpecBuilder",
]
