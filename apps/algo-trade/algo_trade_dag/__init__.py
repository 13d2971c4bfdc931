"""Algo Trade DAG Package (workflow orchestration).

Builds the trading workflow as a task graph and hands it to taskdag-core for
ordering and critical path analysis.

Dependencies:
    - taskdag-core (task graph engine)

Architecture:
    fetch_data → calculate_indicators → generate_signals → risk_check → execute_trades
"""

from .workflow import TRADING_WORKFLOW_FQN, TradingWorkflow, build_trading_workflow

__version__ = "0.1.0"

__all__ = [
    "TRADING_WORKFLOW_FQN",
    "TradingWorkflow",
    "__version__",
    "build_trading_workflow",
]
