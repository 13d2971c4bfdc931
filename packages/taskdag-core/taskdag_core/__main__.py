"""taskdag CLI entry point.

Usage:
    python -m taskdag_core order --config apps/algo-trade/configs/trading_workflow.yaml
    python -m taskdag_core --app apps/algo-trade critical-path \
        --workflow algo_trade_dag.workflow.trading_workflow --mode finish
    python -m taskdag_core validate apps/algo-trade/configs/trading_workflow.yaml
    python -m taskdag_core --app apps/algo-trade workflows
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence

import click

from .cli import (
    critical_path_command,
    import_app,
    order_command,
    resolve_graph,
    validate_command,
    workflows_command,
)
from .models import ScheduleMode, TieBreak

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_source_options = [
    click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        help="Task graph definition (YAML)",
    ),
    click.option("--workflow", help="Registered workflow FQN"),
    click.option(
        "--tie-break",
        type=click.Choice([t.value for t in TieBreak], case_sensitive=False),
        default=TieBreak.INSERTION.value,
        show_default=True,
        help="Order of tasks that become ready together",
    ),
    click.option(
        "--format",
        "output_format",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        show_default=True,
    ),
]


def _with_source_options(func):
    for option in reversed(_source_options):
        func = option(func)
    return func


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--app",
    "apps",
    multiple=True,
    help="App directory whose workflows to register (e.g. apps/algo-trade)",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(apps: tuple[str, ...], verbose: bool) -> None:
    """Order task graphs and compute their critical path."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
    )
    for app_path in apps:
        import_app(app_path)


@cli.command()
@_with_source_options
@click.pass_context
def order(
    ctx: click.Context,
    config_path: str | None,
    workflow: str | None,
    tie_break: str,
    output_format: str,
) -> None:
    """Print the execution order."""
    graph = resolve_graph(config_path, workflow)
    ctx.exit(order_command(graph, TieBreak(tie_break.lower()), output_format.lower()))


@cli.command("critical-path")
@_with_source_options
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ScheduleMode], case_sensitive=False),
    default=ScheduleMode.EARLIEST_START.value,
    show_default=True,
    help="'start' uses dependency start times, 'finish' adds durations",
)
@click.pass_context
def critical_path(
    ctx: click.Context,
    config_path: str | None,
    workflow: str | None,
    tie_break: str,
    output_format: str,
    mode: str,
) -> None:
    """Print the critical path and its total."""
    graph = resolve_graph(config_path, workflow)
    ctx.exit(
        critical_path_command(
            graph,
            ScheduleMode(mode.lower()),
            TieBreak(tie_break.lower()),
            output_format.lower(),
        )
    )


@cli.command()
@click.argument("config", type=click.Path(dir_okay=False))
@click.pass_context
def validate(ctx: click.Context, config: str) -> None:
    """Validate a task graph definition."""
    ctx.exit(validate_command(config))


@cli.command()
@click.pass_context
def workflows(ctx: click.Context) -> None:
    """List registered workflows."""
    ctx.exit(workflows_command())


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, standalone_mode=False)
    except click.ClickException as exc:
        exc.show(file=sys.stderr)
        return exc.exit_code
    except SystemExit as exc:  # pragma: no cover - click 内部からの SystemExit
        return int(exc.code or 0)
    if result is None:
        return 0
    return int(result)


if __name__ == "__main__":
    sys.exit(main())
