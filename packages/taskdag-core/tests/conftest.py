from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
import yaml


def _ensure_package_on_path() -> None:
    repo_root = Path(__file__).resolve().parents[3]
    package_dir = repo_root / "packages" / "taskdag-core"
    if str(package_dir) not in sys.path:
        sys.path.insert(0, str(package_dir))


_ensure_package_on_path()


@pytest.fixture(autouse=True)
def _clear_workflow_registry() -> Iterator[None]:
    from taskdag_core import clear_registry

    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def make_graph():
    """Build a TaskGraph from ``{id: [deps]}`` with optional durations."""
    from taskdag_core import Task, TaskGraph

    def _make(
        edges: dict[str, list[str]], durations: dict[str, int] | None = None
    ):
        durations = durations or {}
        graph = TaskGraph()
        for task_id, deps in edges.items():
            graph.add_task(
                Task(
                    id=task_id,
                    name=f"Task {task_id}",
                    duration=durations.get(task_id, 1),
                    dependencies=tuple(deps),
                )
            )
        return graph

    return _make


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a task graph definition to a temporary YAML file."""

    def _write(config: object, filename: str = "graph.yaml") -> Path:
        config_path = tmp_path / filename
        with open(config_path, "w") as f:
            yaml.dump(config, f)
        return config_path

    return _write


@pytest.fixture
def diamond_config() -> dict:
    return {
        "graph": {"name": "diamond"},
        "tasks": [
            {"id": "A", "name": "Start", "duration": 2, "depends_on": []},
            {"id": "B", "name": "Long branch", "duration": 5, "depends_on": ["A"]},
            {"id": "C", "name": "Short branch", "duration": 1, "depends_on": ["A"]},
            {"id": "D", "name": "Join", "duration": 1, "depends_on": ["B", "C"]},
        ],
    }
