"""Parsing of the primitive string fields of a compose service."""

import re
from typing import Final

from compose2kube.core.exceptions import (
    InvalidPortError,
    MalformedEnvEntryError,
    MalformedNodeSelectorError,
    UnknownPullPolicyError,
)
from compose2kube.models.v1 import PullPolicy

MIN_PORT: Final[int] = 1
MAX_PORT: Final[int] = 65535

# Plain ASCII decimal with an optional sign
_PORT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

_PULL_POLICIES: Final[dict[str, PullPolicy]] = {
    "": PullPolicy.IF_NOT_PRESENT,
    "IfNotPresent": PullPolicy.IF_NOT_PRESENT,
    "Always": PullPolicy.ALWAYS,
    "Never": PullPolicy.NEVER,
}


def parse_env(entry: str, service_name: str | None = None) -> tuple[str, str]:
    """
    Split a ``KEY=VALUE`` entry on its first ``=``.

    ``parse_env("A=B=C")`` returns ``("A", "B=C")``.

    Raises:
        MalformedEnvEntryError: If the entry has no ``=``
    """
    key, sep, value = entry.partition("=")
    if not sep:
        raise MalformedEnvEntryError(entry, service_name)
    return key, value


def parse_port(entry: str, service_name: str | None = None) -> int:
    """
    Return the container port of a ``[host:]container`` entry.

    Everything up to the last ``:`` is the host side and is dropped.

    Raises:
        InvalidPortError: If the container side is not an integer in
            [1, 65535]
    """
    token = entry.rsplit(":", 1)[-1].strip()
    if not _PORT_RE.fullmatch(token):
        raise InvalidPortError(entry, "not an integer", service_name)
    port = int(token)
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidPortError(
            entry, f"out of range [{MIN_PORT}, {MAX_PORT}]", service_name
        )
    return port


def parse_pull_policy(
    policy: str | None, service_name: str | None = None
) -> PullPolicy | None:
    """
    Map a pull policy override to the platform enum.

    Returns None when no override is given (None or empty string).

    Raises:
        UnknownPullPolicyError: If a non-empty value is not a known literal
    """
    if not policy:
        return None
    try:
        return _PULL_POLICIES[policy]
    except KeyError:
        raise UnknownPullPolicyError(policy, service_name) from None


def parse_node_selector(
    selector: str | None, service_name: str | None = None
) -> dict[str, str] | None:
    """
    Parse ``key=value;key2=value2`` into a mapping.

    Returns None when no selector is given. Empty segments (e.g. a
    trailing ``;``) are skipped; later keys override earlier ones.

    Raises:
        MalformedNodeSelectorError: If a segment is not ``key=value`` or has
            an empty key
    """
    if not selector:
        return None
    result: dict[str, str] = {}
    for pair in selector.split(";"):
        if not pair.strip():
            continue
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise MalformedNodeSelectorError(selector, pair, service_name)
        result[key] = value.strip()
    return result or None
