"""Formatting of execution orders and critical path results."""

from __future__ import annotations

import json
from typing import Dict

import pandas as pd

from .checks import SCHEDULE_COLUMNS, check_schedule_frame
from .exceptions import CycleError
from .graph import TaskGraph
from .models import ScheduleMode, TieBreak


def render_execution_order(
    graph: TaskGraph, tie_break: TieBreak = TieBreak.INSERTION
) -> str:
    """Number the execution order from 1; a cyclic graph renders as ``""``."""
    try:
        order = graph.topological_sort(tie_break)
    except CycleError:
        return ""
    return "\n".join(f"  {i}. {task_id}" for i, task_id in enumerate(order, start=1))


def render_text(
    graph: TaskGraph,
    mode: ScheduleMode = ScheduleMode.EARLIEST_START,
    tie_break: TieBreak = TieBreak.INSERTION,
) -> str:
    lines = [graph.display()]
    try:
        order = graph.topological_sort(tie_break)
        result = graph.critical_path(mode, tie_break)
    except CycleError as exc:
        lines.append(f"✗ {exc}")
        return "\n".join(lines)

    lines.append("Execution order:")
    lines.extend(f"  {i}. {task_id}" for i, task_id in enumerate(order, start=1))
    lines.append(f"Critical path ({result.mode.value}): {', '.join(result.task_ids)}")
    lines.append(f"Total: {result.total}")
    return "\n".join(lines)


def render_json(
    graph: TaskGraph,
    mode: ScheduleMode = ScheduleMode.EARLIEST_START,
    tie_break: TieBreak = TieBreak.INSERTION,
) -> str:
    payload: Dict[str, object] = {"tasks": len(graph)}
    try:
        order = graph.topological_sort(tie_break)
        result = graph.critical_path(mode, tie_break)
    except CycleError as exc:
        payload["error"] = exc.message
        payload["blocked"] = list(exc.blocked)
        return json.dumps(payload, indent=2, ensure_ascii=False)

    payload.update(
        {
            "order": order,
            "critical_path": {
                "mode": result.mode.value,
                "task_ids": list(result.task_ids),
                "total": result.total,
                "earliest_start": dict(result.earliest_start),
            },
        }
    )
    return json.dumps(payload, indent=2, ensure_ascii=False)


def schedule_frame(
    graph: TaskGraph,
    mode: ScheduleMode = ScheduleMode.EARLIEST_START,
    tie_break: TieBreak = TieBreak.INSERTION,
) -> pd.DataFrame:
    """Tabulate the schedule in topological order.

    Raises:
        CycleError: If the graph has no valid order
    """
    result = graph.critical_path(mode, tie_break)
    critical = result.critical_set
    rows = [
        {
            "id": task_id,
            "name": graph.get(task_id).name,
            "duration": graph.get(task_id).duration,
            "earliest_start": result.earliest_start[task_id],
            "critical": task_id in critical,
        }
        for task_id in result.earliest_start
    ]
    frame = pd.DataFrame(rows, columns=list(SCHEDULE_COLUMNS))
    check_schedule_frame(frame)
    return frame


__all__ = [
    "render_execution_order",
    "render_json",
    "render_text",
    "schedule_frame",
]
