from functools import cached_property
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Resource amounts are signed 64-bit integers on the platform
MAX_RESOURCE_VALUE: Final[int] = 2**63 - 1


class ServiceRecord(BaseModel):
    """
    One named service read from a compose file.

    Read-only input to the mapping core. Zero-valued resource fields mean
    "unset".
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Service name, unique per file.")
    image: str = Field(default="", description="Container image reference.")
    command: list[str] = Field(
        default_factory=list, description="Container arguments, in order."
    )
    cpu_shares: int = Field(
        default=0, le=MAX_RESOURCE_VALUE, description="CPU share count. 0 = unset."
    )
    mem_limit: int = Field(
        default=0,
        le=MAX_RESOURCE_VALUE,
        description="Memory limit in bytes. 0 = unset.",
    )
    privileged: bool = Field(default=False, description="Run the container privileged.")
    environment: list[str] = Field(
        default_factory=list, description="KEY=VALUE entries, in order."
    )
    ports: list[str] = Field(
        default_factory=list, description="[host:]container port entries, in order."
    )
    restart: str = Field(default="", description="Restart policy token.")

    @cached_property
    def identity(self) -> "ServiceIdentity":
        """Identity of the service, built once per record."""
        return ServiceIdentity(service_name=self.name)


class ServiceIdentity(BaseModel):
    """
    The single identity every derived name of a service comes from.

    Manifest name, container name, labels and selector all read
    ``resource_name``; only the output file name keeps ``service_name``.
    """

    model_config = ConfigDict(frozen=True)

    service_name: str = Field(..., min_length=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def resource_name(self) -> str:
        return self.service_name.lower()

    @property
    def labels(self) -> dict[str, str]:
        return {"service": self.resource_name}

    @property
    def selector(self) -> dict[str, str]:
        return self.labels
