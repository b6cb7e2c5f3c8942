"""The core package must not depend on any plugin."""

from __future__ import annotations

from pathlib import Path

import pytest

import compose2kube.core.config as core_config

CORE_DIR = Path(core_config.__file__).parent


@pytest.mark.parametrize(
    "path", sorted(CORE_DIR.rglob("*.py")), ids=lambda p: p.name
)
def test_core_module_does_not_import_plugins(path: Path) -> None:
    assert "compose2kube.plugins" not in path.read_text(encoding="utf-8")


def test_selection_lives_in_models() -> None:
    from compose2kube.models.v1 import WorkloadSelection
    from compose2kube.plugins.compose.kind_selector import select_workload_kind

    assert isinstance(select_workload_kind("no"), WorkloadSelection)
