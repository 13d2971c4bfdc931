"""Task graph definitions loaded from YAML with validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .graph import TaskGraph
from .models import Task
from .validator import GraphConfigValidator


logger = logging.getLogger(__name__)


class GraphConfig:
    """Task graph definition with automatic validation."""

    def __init__(self, config_path: str | Path):
        self.config_path = Path(config_path)

        with open(self.config_path, encoding="utf-8") as f:
            try:
                self.raw: dict[str, Any] = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        # Validate IMMEDIATELY on load
        self.validation_result = GraphConfigValidator().validate(self.raw)

        if not self.validation_result.is_valid:
            raise ValueError(
                f"Task graph validation failed for {config_path}:\n"
                f"{self.validation_result}"
            )

        for warning in self.validation_result.warnings:
            logger.warning(
                "%s: %s %s", self.config_path.name, warning.error_type, warning.message
            )

    @property
    def name(self) -> str:
        graph_section = self.raw.get("graph") or {}
        return str(graph_section.get("name", self.config_path.stem))

    def build_graph(self) -> TaskGraph:
        """Build a fresh TaskGraph; duplicate ids follow last-write-wins."""
        graph = TaskGraph()
        for entry in self.raw["tasks"]:
            graph.add_task(
                Task(
                    id=entry["id"],
                    name=entry.get("name", entry["id"]),
                    duration=entry.get("duration", 0),
                    dependencies=tuple(entry.get("depends_on", [])),
                )
            )
        return graph


def load_graph(config_path: str | Path) -> TaskGraph:
    return GraphConfig(config_path).build_graph()


def dump_graph(graph: TaskGraph, config_path: str | Path, name: str | None = None) -> Path:
    """Write ``graph`` in the format ``GraphConfig`` reads."""
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "graph": {"name": name or path.stem},
        "tasks": [task.to_dict() for task in graph],
    }
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(payload, f, sort_keys=False, allow_unicode=True)
    return path


__all__ = ["GraphConfig", "dump_graph", "load_graph"]
