"""taskdag-core: task dependency graph ordering and critical path analysis."""

from .catalog import (
    build_workflow,
    clear_registry,
    get_workflow,
    list_workflows,
    register_workflow,
)
from .config import GraphConfig, dump_graph, load_graph
from .exceptions import CycleError
from .graph import TaskGraph
from .models import CriticalPath, ScheduleMode, Task, TieBreak
from .report import render_execution_order, render_json, render_text, schedule_frame
from .validator import GraphConfigValidator, ValidationError, ValidationResult

__all__ = [
    "CriticalPath",
    "CycleError",
    "GraphConfig",
    "GraphConfigValidator",
    "ScheduleMode",
    "Task",
    "TaskGraph",
    "TieBreak",
    "ValidationError",
    "ValidationResult",
    "build_workflow",
    "clear_registry",
    "dump_graph",
    "get_workflow",
    "list_workflows",
    "load_graph",
    "register_workflow",
    "render_execution_order",
    "render_json",
    "render_text",
    "schedule_frame",
]
