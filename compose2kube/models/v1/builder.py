from typing import Any

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
from .quantity import Quantity


class ContainerSpecBuilder:
    """Fluent builder for creating ContainerSpec objects"""

    def __init__(self, name: str):
        self.name = name
        self._data: dict[str, Any] = {"name": name}
        self._node_selector: dict[str, str] | None = None

    def with_image(self, image: str) -> "ContainerSpecBuilder":
        """Sets the image reference"""
        self._data["image"] = image
        return self

    def with_args(self, args: list[str]) -> "ContainerSpecBuilder":
        """Sets the argument list; an empty list leaves it unset"""
        if args:
            self._data["args"] = list(args)
        return self

    def with_limit(
        self, resource: ResourceName, quantity: Quantity
    ) -> "ContainerSpecBuilder":
        """Adds a resource limit"""
        if "limits" not in self._data:
            self._data["limits"] = {}
        self._data["limits"][resource] = quantity
        return self

    def with_env(self, name: str, value: str) -> "ContainerSpecBuilder":
        """Appends an environment pair, keeping duplicates"""
        if "env" not in self._data:
            self._data["env"] = []
        self._data["env"].append(EnvVar(name=name, value=value))
        return self

    def with_port(self, container_port: int) -> "ContainerSpecBuilder":
        """Appends a container port"""
        if "ports" not in self._data:
            self._data["ports"] = []
        self._data["ports"].append(ContainerPort(container_port=container_port))
        return self

    def privileged(self, is_privileged: bool = True) -> "ContainerSpecBuilder":
        """Marks the container privileged"""
        if is_privileged:
            self._data["security_context"] = SecurityContext(privileged=True)
        return self

    def with_pull_policy(self, policy: PullPolicy) -> "ContainerSpecBuilder":
        """Sets the image pull policy"""
        self._data["image_pull_policy"] = policy
        return self

    def with_node_selector(self, selector: dict[str, str]) -> "ContainerSpecBuilder":
        """Sets the node selector for the enclosing pod"""
        self._node_selector = dict(selector)
        return self

    def build(self) -> ContainerSpec:
        """Builds the final ContainerSpec object"""
        data = dict(self._data)
        limits = data.pop("limits", None)
        if limits:
            data["resources"] = ResourceRequirements(limits=limits)
        return ContainerSpec(
            container=Container(**data), node_selector=self._node_selector
        )
