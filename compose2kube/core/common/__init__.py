"""Common base classes and utilities for core functionality."""

from .base_mapper import BaseServiceMapper
from .base_orchestrator import BaseOrchestrator, TranslationReport
from .base_parser import BaseSourceFileParser

__all__ = [
    "BaseSourceFileParser",
    "BaseServiceMapper",
    "BaseOrchestrator",
    "TranslationReport",
]
