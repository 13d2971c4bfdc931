"""Workflow catalog - named builders of prepopulated task graphs."""

from __future__ import annotations

from threading import RLock
from typing import Callable

from .graph import TaskGraph


WorkflowBuilder = Callable[[], TaskGraph]

# Workflow registry for dynamic lookup
_WORKFLOW_REGISTRY: dict[str, WorkflowBuilder] = {}
_registry_lock = RLock()


def register_workflow(fqn: str, builder: WorkflowBuilder) -> None:
    """Register a workflow builder for dynamic lookup.

    Args:
        fqn: Fully qualified name for the workflow
        builder: Zero-argument callable returning a new TaskGraph

    Raises:
        ValueError: If FQN is empty or already registered
    """
    if not fqn:
        raise ValueError("workflow FQN must be a non-empty string")

    with _registry_lock:
        if fqn in _WORKFLOW_REGISTRY:
            raise ValueError(
                f"workflow '{fqn}' already registered; "
                "use explicit removal before re-registration"
            )
        _WORKFLOW_REGISTRY[fqn] = builder


def get_workflow(fqn: str) -> WorkflowBuilder:
    """Get a workflow builder by fully qualified name.

    Raises:
        ValueError: If workflow not found
    """
    with _registry_lock:
        if fqn not in _WORKFLOW_REGISTRY:
            raise ValueError(f"Workflow '{fqn}' not found in registry")
        return _WORKFLOW_REGISTRY[fqn]


def build_workflow(fqn: str) -> TaskGraph:
    """Build a fresh graph from the registered workflow builder."""
    return get_workflow(fqn)()


def list_workflows() -> list[str]:
    with _registry_lock:
        return sorted(_WORKFLOW_REGISTRY)


def clear_registry() -> None:
    """Clear all registered workflows (for testing)."""
    with _registry_lock:
        _WORKFLOW_REGISTRY.clear()


__all__ = [
    "WorkflowBuilder",
    "register_workflow",
    "get_workflow",
    "build_workflow",
    "list_workflows",
    "clear_registry",
]
