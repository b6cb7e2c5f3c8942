"""Compose file parser producing service records."""

import logging
import os
import re
import shlex
from decimal import Decimal
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML

from compose2kube.core.common.base_parser import BaseSourceFileParser
from compose2kube.core.exceptions import ParseError
from compose2kube.models.v1 import ServiceRecord

logger = logging.getLogger(__name__)

# Docker size units are binary; "512m", "512mb" and "512MiB" are the same size
_SIZE_UNITS: Final[dict[str, int]] = {
    "": 1,
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
    "t": 1024**4,
    "p": 1024**5,
}
_SIZE_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(\d+(?:\.\d+)?)\s*([kmgtp]?)(?:i?b)?\s*$", re.I
)


class ComposeParser(BaseSourceFileParser):
    """
    Parser for docker-compose files.

    Accepts the legacy layout (services at the top level) and the versioned
    layout (``services:`` mapping). Only the fields the translation needs are
    read; everything else in a service is ignored.
    """

    def __init__(
        self, encoding: str = "utf-8", environ: Mapping[str, str] | None = None
    ):
        """
        Initialize the compose parser.

        Args:
            encoding: File encoding to use when reading files
            environ: Environment used to resolve valueless environment keys.
                Defaults to the process environment.
        """
        super().__init__(encoding)
        self._environ = os.environ if environ is None else environ
        self._yaml = YAML(typ="safe")

    def get_supported_extensions(self) -> list[str]:
        return [".yml", ".yaml"]

    def _parse_content(self, content: str, file_path: Path) -> dict[str, ServiceRecord]:
        data = self._yaml.load(content)

        if data is None:
            raise ParseError("Compose file is empty", source_path=file_path)
        if not isinstance(data, dict):
            raise ParseError(
                "Top-level object must be a mapping", source_path=file_path
            )

        services = self._extract_services(data, file_path)

        records: dict[str, ServiceRecord] = {}
        for name, definition in services.items():
            records[str(name)] = self._parse_service(str(name), definition, file_path)

        self._logger.info(f"Found {len(records)} services in {file_path.name}")
        return records

    def _extract_services(
        self, data: dict[str, Any], file_path: Path
    ) -> dict[str, Any]:
        """
        Return the service mapping of either compose layout.

        A top-level ``services`` key selects the versioned layout whatever the
        other top-level keys are; without it every non-extension key is a
        service.
        """
        if "services" in data:
            services = data["services"]
            if not isinstance(services, dict):
                raise ParseError("'services' must be a mapping", source_path=file_path)
            self._logger.debug(
                f"Versioned compose layout (version={data.get('version', 'unset')})"
            )
            return services

        self._logger.debug("Legacy compose layout")
        return {k: v for k, v in data.items() if not str(k).startswith("x-")}

    def _parse_service(
        self, name: str, definition: Any, file_path: Path
    ) -> ServiceRecord:
        if not isinstance(definition, dict):
            raise ParseError(
                "Service definition must be a mapping",
                source_path=file_path,
                service_name=name,
            )

        def fail(field: str, message: str) -> ParseError:
            return ParseError(
                message, source_path=file_path, service_name=name, field_name=field
            )

        try:
            return ServiceRecord(
                name=name,
                image=self._parse_string(definition.get("image"), "image", fail),
                command=self._parse_command(definition.get("command"), fail),
                cpu_shares=self._parse_cpu_shares(definition.get("cpu_shares"), fail),
                mem_limit=self._parse_mem_limit(definition.get("mem_limit"), fail),
                privileged=self._parse_bool(
                    definition.get("privileged"), "privileged", fail
                ),
                environment=self._parse_environment(
                    name, definition.get("environment"), fail
                ),
                ports=self._parse_ports(definition.get("ports"), fail),
                restart=self._parse_restart(definition.get("restart"), fail),
            )
        except PydanticValidationError as e:
            raise ParseError(
                f"Invalid service definition: {e}",
                source_path=file_path,
                service_name=name,
            ) from e

    @staticmethod
    def _parse_string(value: Any, field: str, fail) -> str:
        if value is None:
            return ""
        if isinstance(value, dict | list):
            raise fail(field, f"'{field}' must be a string")
        return str(value)

    @staticmethod
    def _parse_command(value: Any, fail) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            try:
                return shlex.split(value)
            except ValueError as e:
                raise fail("command", f"Cannot split command: {e}") from e
        if isinstance(value, list):
            return [str(arg) for arg in value]
        raise fail("command", "'command' must be a string or a list")

    @staticmethod
    def _parse_cpu_shares(value: Any, fail) -> int:
        if value is None:
            return 0
        if isinstance(value, bool):
            raise fail("cpu_shares", "'cpu_shares' must be an integer")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        raise fail("cpu_shares", f"'cpu_shares' must be an integer, got {value!r}")

    @staticmethod
    def _parse_mem_limit(value: Any, fail) -> int:
        if value is None:
            return 0
        if isinstance(value, bool):
            raise fail("mem_limit", "'mem_limit' must be a size")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            match = _SIZE_RE.match(value)
            if match:
                amount, unit = match.groups()
                # Fractional sizes are truncated to whole bytes
                return int(Decimal(amount) * _SIZE_UNITS[unit.lower()])
        raise fail("mem_limit", f"'mem_limit' is not a valid size: {value!r}")

    @staticmethod
    def _parse_bool(value: Any, field: str, fail) -> bool:
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in {"true", "false"}:
            return value.lower() == "true"
        raise fail(field, f"'{field}' must be a boolean")

    def _parse_environment(self, name: str, value: Any, fail) -> list[str]:
        if value is None:
            return []
        if isinstance(value, list):
            return [str(entry) for entry in value]
        if isinstance(value, dict):
            entries = []
            for key, val in value.items():
                if val is None:
                    if key not in self._environ:
                        self._logger.debug(
                            f"Service '{name}': '{key}' is not set in the "
                            "environment, skipping"
                        )
                        continue
                    val = self._environ[key]
                entries.append(f"{key}={_scalar_to_str(val)}")
            return entries
        raise fail("environment", "'environment' must be a list or a mapping")

    @staticmethod
    def _parse_ports(value: Any, fail) -> list[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise fail("ports", "'ports' must be a list")
        ports = []
        for entry in value:
            if isinstance(entry, dict):
                if "target" not in entry:
                    raise fail("ports", f"Port mapping {entry!r} has no 'target'")
                published = entry.get("published")
                target = entry["target"]
                ports.append(f"{published}:{target}" if published else str(target))
            elif isinstance(entry, str | int) and not isinstance(entry, bool):
                ports.append(str(entry))
            else:
                raise fail("ports", f"Unsupported port entry {entry!r}")
        return ports

    @staticmethod
    def _parse_restart(value: Any, fail) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            # YAML turns an unquoted `false` into a boolean
            return str(value).lower()
        if isinstance(value, str):
            return value
        raise fail("restart", "'restart' must be a string")


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
