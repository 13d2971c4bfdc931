"""CLI command implementations (used by __main__.py)."""

from __future__ import annotations

import logging
import sys
from importlib import import_module
from pathlib import Path

import click

from .catalog import build_workflow, list_workflows
from .config import GraphConfig, load_graph
from .exceptions import CycleError
from .graph import TaskGraph
from .models import ScheduleMode, TieBreak
from .report import render_json, render_text


logger = logging.getLogger(__name__)


def validate_command(config_path: str) -> int:
    """Validate a task graph definition and check it can be ordered.

    Returns:
        0 if valid, 1 if invalid
    """
    try:
        config = GraphConfig(config_path)
    except (OSError, ValueError) as e:
        click.echo(f"✗ Task graph validation failed:\n{e}")
        return 1

    click.echo(str(config.validation_result))
    graph = config.build_graph()
    try:
        graph.topological_sort()
    except CycleError as e:
        click.echo(f"✗ {config_path}: {e}")
        return 1

    click.echo(f"✓ Task graph {config_path} is valid ({len(graph)} tasks)")
    return 0


def order_command(
    graph: TaskGraph, tie_break: TieBreak, output_format: str = "text"
) -> int:
    try:
        order = graph.topological_sort(tie_break)
    except CycleError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(render_json(graph, tie_break=tie_break))
    else:
        click.echo(graph.display())
        for i, task_id in enumerate(order, start=1):
            click.echo(f"  {i}. {task_id}")
    return 0


def critical_path_command(
    graph: TaskGraph,
    mode: ScheduleMode,
    tie_break: TieBreak,
    output_format: str = "text",
) -> int:
    try:
        graph.critical_path(mode, tie_break)
    except CycleError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(render_json(graph, mode=mode, tie_break=tie_break))
    else:
        click.echo(render_text(graph, mode=mode, tie_break=tie_break))
    return 0


def workflows_command() -> int:
    names = list_workflows()
    if not names:
        click.echo("No workflows registered.")
        return 0

    click.echo(f"Registered workflows ({len(names)}):")
    for fqn in names:
        graph = build_workflow(fqn)
        click.echo(f"  - {fqn} ({len(graph)} tasks)")
    return 0


def resolve_graph(config_path: str | None, workflow: str | None) -> TaskGraph:
    """Build the graph named on the command line.

    Raises:
        click.UsageError: If neither or both sources are given
        click.ClickException: If the source cannot be loaded
    """
    if (config_path is None) == (workflow is None):
        raise click.UsageError("Provide exactly one of --config or --workflow.")

    try:
        if config_path is not None:
            return load_graph(config_path)
        return build_workflow(workflow)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def import_app(app_path: str) -> None:
    """Import an app's workflow module and register its catalogs.

    The module's ``register()`` is called on every import so workflows come
    back after ``clear_registry()`` even when the module is already cached.
    """
    path = Path(app_path)
    if path.exists() and str(path.resolve()) not in sys.path:
        sys.path.insert(0, str(path.resolve()))

    module_name = f"{resolve_app_module(app_path)}.workflow"
    try:
        module = import_module(module_name)
    except ImportError as e:
        raise click.ClickException(
            f"Failed to import {module_name}: {e}\n"
            f"  Ensure {app_path} provides {module_name.replace('.', '/')}.py"
        ) from e

    register = getattr(module, "register", None)
    if callable(register):
        register()
    logger.debug("imported workflows from %s", module_name)


def resolve_app_module(app_path: str) -> str:
    """Convert app path to module name.

    Examples:
        apps/algo-trade -> algo_trade_dag
    """
    path = Path(app_path)
    app_name = path.name.replace("-", "_")
    return f"{app_name}_dag"


__all__ = [
    "critical_path_command",
    "import_app",
    "order_command",
    "resolve_app_module",
    "resolve_graph",
    "validate_command",
    "workflows_command",
]
