from enum import Enum
from typing import Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator

from .base_k8s import KubeBase, ObjectMeta
from .container import Container


class RestartPolicy(str, Enum):
    """Pod-level restart policies of the platform."""

    ALWAYS = "Always"
    NEVER = "Never"
    ON_FAILURE = "OnFailure"


class WorkloadKind(str, Enum):
    """Closed set of workload kinds a service can become."""

    POD = "Pod"
    REPLICATION_CONTROLLER = "ReplicationController"
    JOB = "Job"

    @property
    def tag(self) -> str:
        """Short tag used in output file names."""
        return {
            WorkloadKind.POD: "pod",
            WorkloadKind.REPLICATION_CONTROLLER: "rc",
            WorkloadKind.JOB: "job",
        }[self]

    @property
    def api_version(self) -> str:
        return {
            WorkloadKind.POD: "v1",
            WorkloadKind.REPLICATION_CONTROLLER: "v1",
            WorkloadKind.JOB: "batch/v1",
        }[self]


class WorkloadSelection(NamedTuple):
    """Workload kind and pod restart policy chosen for a service."""

    kind: WorkloadKind
    restart_policy: RestartPolicy


class PodSpec(KubeBase):
    containers: list[Container] = Field(..., min_length=1)
    restart_policy: RestartPolicy = Field(..., alias="restartPolicy")
    node_selector: dict[str, str] | None = Field(default=None, alias="nodeSelector")


class PodTemplateSpec(KubeBase):
    metadata: ObjectMeta
    spec: PodSpec


class Pod(KubeBase):
    api_version: Literal["v1"] = Field(default="v1", alias="apiVersion")
    kind: Literal["Pod"] = "Pod"
    metadata: ObjectMeta
    spec: PodSpec


class ReplicationControllerSpec(KubeBase):
    """
    Replication controller spec.

    The selector must equal the template labels, otherwise the controller
    would not own the pods it creates.
    """

    replicas: PositiveInt = 1
    selector: dict[str, str] = Field(..., min_length=1)
    template: PodTemplateSpec

    @model_validator(mode="after")
    def validate_selector_matches_template(self) -> "ReplicationControllerSpec":
        if self.template.metadata.labels != self.selector:
            raise ValueError(
                f"selector {self.selector} does not match template labels "
                f"{self.template.metadata.labels}"
            )
        return self


class ReplicationController(KubeBase):
    api_version: Literal["v1"] = Field(default="v1", alias="apiVersion")
    kind: Literal["ReplicationController"] = "ReplicationController"
    metadata: ObjectMeta
    spec: ReplicationControllerSpec


class JobSpec(KubeBase):
    template: PodTemplateSpec


class Job(KubeBase):
    api_version: Literal["batch/v1"] = Field(default="batch/v1", alias="apiVersion")
    kind: Literal["Job"] = "Job"
    metadata: ObjectMeta
    spec: JobSpec


Manifest = Pod | ReplicationController | Job


class TranslatedManifest(BaseModel):
    """The (name, kind, manifest) triple produced for one service."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: WorkloadKind
    manifest: Manifest
