"""Algo-trade workflow task graph definitions."""

from __future__ import annotations

from taskdag_core import (
    CriticalPath,
    CycleError,
    ScheduleMode,
    Task,
    TaskGraph,
    TieBreak,
    list_workflows,
    register_workflow,
)

TRADING_WORKFLOW_FQN = "algo_trade_dag.workflow.trading_workflow"

# (id, name, duration, predecessor)
_TRADING_STEPS: tuple[tuple[str, str, int, str | None], ...] = (
    ("fetch_data", "Fetch Market Data", 2, None),
    ("calculate_indicators", "Calculate Technical Indicators", 3, "fetch_data"),
    ("generate_signals", "Generate Trading Signals", 2, "calculate_indicators"),
    ("risk_check", "Risk Management Check", 1, "generate_signals"),
    ("execute_trades", "Execute Trades", 2, "risk_check"),
)


def build_trading_workflow() -> TaskGraph:
    """Build the five-step trading pipeline, one predecessor per step."""
    graph = TaskGraph()
    for task_id, name, duration, predecessor in _TRADING_STEPS:
        graph.add_task(
            Task(
                id=task_id,
                name=name,
                duration=duration,
                dependencies=(predecessor,) if predecessor else (),
            )
        )
    return graph


class TradingWorkflow:
    """Trading pipeline orchestration over a task graph."""

    def __init__(self, graph: TaskGraph | None = None):
        self.graph = graph if graph is not None else build_trading_workflow()

    def get_execution_order(
        self, tie_break: TieBreak = TieBreak.INSERTION
    ) -> list[str]:
        """Return task ids in execution order.

        Raises:
            CycleError: If the workflow graph has no valid order
        """
        return self.graph.topological_sort(tie_break)

    def try_execution_order(self) -> list[str]:
        """Execution order, or an empty list when the graph is cyclic."""
        try:
            return self.get_execution_order()
        except CycleError:
            return []

    def critical_path(
        self, mode: ScheduleMode = ScheduleMode.EARLIEST_START
    ) -> CriticalPath:
        return self.graph.critical_path(mode)

    def display(self) -> str:
        return self.graph.display()


def register() -> None:
    """Register the trading workflow unless it is already in the catalog."""
    if TRADING_WORKFLOW_FQN not in list_workflows():
        register_workflow(TRADING_WORKFLOW_FQN, build_trading_workflow)


# Register for dynamic lookup
register()


__all__ = [
    "TRADING_WORKFLOW_FQN",
    "TradingWorkflow",
    "build_trading_workflow",
    "register",
]
