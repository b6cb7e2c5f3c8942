"""Compose plugin translating docker-compose services to Kubernetes manifests."""

from .mapper import ComposeMapper
from .orchestrator import ComposeOrchestrator
from .parser import ComposeParser
from .writer import ManifestFileWriter

__all__ = ["ComposeParser", "ComposeMapper", "ComposeOrchestrator", "ManifestFileWriter"]
