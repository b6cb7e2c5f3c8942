from pydantic import BaseModel, ConfigDict, Field


class KubeBase(BaseModel):
    """
    Base class for Kubernetes API objects.

    Attributes use snake_case and serialize to the camelCase keys of the
    Kubernetes API when dumped with ``by_alias=True``. Instances are frozen.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class ObjectMeta(KubeBase):
    """Subset of the Kubernetes ObjectMeta used by generated manifests."""

    name: str | None = Field(
        default=None,
        description="Optional object name. Omitted on pod templates.",
    )
    labels: dict[str, str] | None = Field(
        default=None,
        description="Optional map of labels attached to the object.",
    )
