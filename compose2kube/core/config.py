"""Immutable configuration value handed to the translation driver."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_COMPOSE_FILE = Path("docker-compose.yml")
DEFAULT_OUTPUT_DIR = Path("output")


class TranslationConfig(BaseModel):
    """
    Settings for one translation run.

    Built once by the CLI (or by a test) and passed explicitly; the core
    never reads process-wide state. Empty ``pull_policy`` and
    ``node_selector`` mean "no override".
    """

    model_config = ConfigDict(frozen=True)

    compose_file: Path = Field(
        default=DEFAULT_COMPOSE_FILE, description="Compose file to translate."
    )
    output_dir: Path = Field(
        default=DEFAULT_OUTPUT_DIR, description="Directory receiving manifests."
    )
    pull_policy: str | None = Field(
        default=None, description="Image pull policy override for every container."
    )
    node_selector: str | None = Field(
        default=None, description="Node selector of the form key=value;key2=value2."
    )
    output_format: Literal["yaml", "json"] = Field(
        default="yaml", description="Serialization format of written manifests."
    )
    keep_going: bool = Field(
        default=False,
        description=(
            "Collect per-service errors and continue instead of stopping at the "
            "first failing service."
        ),
    )
