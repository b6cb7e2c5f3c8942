"""Workload assemblers, one per workload kind."""

from .job import JobAssembler
from .pod import PodAssembler
from .replication_controller import ReplicationControllerAssembler

__all__ = ["PodAssembler", "ReplicationControllerAssembler", "JobAssembler"]
