from enum import Enum

from pydantic import Field

from .base_k8s import KubeBase
from .quantity import Quantity


class PullPolicy(str, Enum):
    """Kubernetes image pull policies."""

    IF_NOT_PRESENT = "IfNotPresent"
    ALWAYS = "Always"
    NEVER = "Never"


class ResourceName(str, Enum):
    """Resource kinds that can carry a limit."""

    CPU = "cpu"
    MEMORY = "memory"


class EnvVar(KubeBase):
    name: str
    value: str


class ContainerPort(KubeBase):
    container_port: int = Field(..., alias="containerPort", ge=1, le=65535)


class SecurityContext(KubeBase):
    privileged: bool | None = None


class ResourceRequirements(KubeBase):
    """
    Resource limits of a container.

    Only explicitly set resources appear in ``limits``; there are never
    zero-valued entries.
    """

    limits: dict[ResourceName, Quantity] | None = Field(
        default=None,
        description="Optional map from resource kind to its limit.",
    )


class Container(KubeBase):
    """A single container of a pod spec."""

    name: str = Field(..., min_length=1)
    image: str = Field(default="")
    args: list[str] | None = Field(
        default=None, description="Optional argument list, passed verbatim."
    )
    resources: ResourceRequirements | None = None
    env: list[EnvVar] | None = Field(
        default=None,
        description=(
            "Optional environment pairs in input order. Duplicate names are kept."
        ),
    )
    ports: list[ContainerPort] | None = None
    security_context: SecurityContext | None = Field(
        default=None, alias="securityContext"
    )
    image_pull_policy: PullPolicy | None = Field(
        default=None, alias="imagePullPolicy"
    )


class ContainerSpec(KubeBase):
    """
    Everything built for one service before it is wrapped into a workload.

    The node selector is carried alongside the container because the
    platform places it on the pod spec, not on the container.
    """

    container: Container
    node_selector: dict[str, str] | None = Field(
        default=None,
        description="Optional node selector applied to the enclosing pod spec.",
    )
