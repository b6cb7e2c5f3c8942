"""Restart policy decision table: the only place a restart token is interpreted."""

from typing import Final

from compose2kube.core.exceptions import UnknownRestartPolicyError
from compose2kube.models.v1 import RestartPolicy, WorkloadKind, WorkloadSelection


RESTART_POLICY_TABLE: Final[dict[str, WorkloadSelection]] = {
    "": WorkloadSelection(WorkloadKind.REPLICATION_CONTROLLER, RestartPolicy.ALWAYS),
    "always": WorkloadSelection(
        WorkloadKind.REPLICATION_CONTROLLER, RestartPolicy.ALWAYS
    ),
    "no": WorkloadSelection(WorkloadKind.POD, RestartPolicy.NEVER),
    "false": WorkloadSelection(WorkloadKind.POD, RestartPolicy.NEVER),
    "on-failure": WorkloadSelection(WorkloadKind.JOB, RestartPolicy.ON_FAILURE),
}


def select_workload_kind(
    restart: str, service_name: str | None = None
) -> WorkloadSelection:
    """
    Decide the workload kind for a compose restart token.

    Raises:
        UnknownRestartPolicyError: If the token is not in the table
    """
    try:
        return RESTART_POLICY_TABLE[restart]
    except KeyError:
        raise UnknownRestartPolicyError(restart, service_name) from None
