"""Task dependency graph with Kahn ordering and critical path analysis."""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterable, Iterator, List

from .exceptions import CycleError
from .models import CriticalPath, ScheduleMode, Task, TieBreak


logger = logging.getLogger(__name__)


class TaskGraph:
    """Mutable collection of tasks keyed by id.

    Dependencies may name ids that are not (yet) in the graph. Queries never
    cache anything, so they can be repeated or interleaved with ``add_task``.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: Dict[str, Task] = {}
        for task in tasks:
            self.add_task(task)

    def add_task(self, task: Task) -> None:
        """Insert ``task``, replacing any task with the same id."""
        self._tasks[task.id] = task

    def get(self, task_id: str) -> Task:
        """Retrieve a task by id.

        Raises:
            KeyError: If no task with the given id exists
        """
        try:
            return self._tasks[task_id]
        except KeyError:
            msg = f"unknown task: {task_id}"
            raise KeyError(msg) from None

    def task_ids(self) -> tuple[str, ...]:
        return tuple(self._tasks)

    def missing_dependencies(self) -> dict[str, tuple[str, ...]]:
        """Map each task to the dependency ids that do not resolve."""
        missing: dict[str, tuple[str, ...]] = {}
        for task in self._tasks.values():
            unknown = tuple(dep for dep in task.dependencies if dep not in self._tasks)
            if unknown:
                missing[task.id] = unknown
        return missing

    def topological_sort(self, tie_break: TieBreak = TieBreak.INSERTION) -> List[str]:
        """Order task ids so every task follows its dependencies.

        In-degree is the length of each task's dependency list, including ids
        that are not in the graph. Such a slot is never released, so the task
        and everything after it stay blocked and the graph is reported as
        cyclic.

        Raises:
            CycleError: If not every task could be ordered
        """
        tie_break = TieBreak(tie_break)
        in_degree: Dict[str, int] = {}
        successors: Dict[str, List[str]] = {}

        for task_id, task in self._tasks.items():
            in_degree[task_id] = len(task.dependencies)
            for dep in task.dependencies:
                successors.setdefault(dep, []).append(task_id)

        ready = [task_id for task_id, degree in in_degree.items() if degree == 0]
        if tie_break is TieBreak.LEXICOGRAPHIC:
            ready.sort()
        queue = deque(ready)

        order: List[str] = []
        while queue:
            task_id = queue.popleft()
            order.append(task_id)

            released: List[str] = []
            for successor in successors.get(task_id, ()):
                in_degree[successor] -= 1
                if in_degree[successor] == 0:
                    released.append(successor)
            if tie_break is TieBreak.LEXICOGRAPHIC:
                released.sort()
            queue.extend(released)

        if len(order) != len(self._tasks):
            blocked = tuple(
                sorted(task_id for task_id, degree in in_degree.items() if degree > 0)
            )
            logger.debug("cycle detected, %d task(s) blocked: %s", len(blocked), blocked)
            raise CycleError(blocked=blocked)

        logger.debug("sorted %d task(s) using %s tie-break", len(order), tie_break.value)
        return order

    def is_acyclic(self) -> bool:
        try:
            self.topological_sort()
        except CycleError:
            return False
        return True

    def critical_path(
        self,
        mode: ScheduleMode = ScheduleMode.EARLIEST_START,
        tie_break: TieBreak = TieBreak.INSERTION,
    ) -> CriticalPath:
        """Compute the critical task set and its total.

        With ``ScheduleMode.EARLIEST_START`` a task starts at the largest
        earliest start among its dependencies, durations are not added. Every
        acyclic graph therefore has a total of 0 with all tasks critical.
        ``ScheduleMode.EARLIEST_FINISH`` applies the conventional forward and
        backward passes and reports zero-slack tasks.

        Raises:
            CycleError: Propagated from ``topological_sort``
        """
        mode = ScheduleMode(mode)
        order = self.topological_sort(tie_break)

        if mode is ScheduleMode.EARLIEST_FINISH:
            return self._finish_time_path(order)

        earliest_start: Dict[str, int] = {}
        for task_id in order:
            task = self._tasks[task_id]
            earliest_start[task_id] = max(
                (earliest_start[dep] for dep in task.dependencies if dep in earliest_start),
                default=0,
            )

        total = max(earliest_start.values(), default=0)
        critical = tuple(task_id for task_id in order if earliest_start[task_id] == total)
        return CriticalPath(
            task_ids=critical,
            total=total,
            earliest_start=earliest_start,
            mode=mode,
        )

    def _finish_time_path(self, order: List[str]) -> CriticalPath:
        earliest_start: Dict[str, int] = {}
        for task_id in order:
            task = self._tasks[task_id]
            earliest_start[task_id] = max(
                (
                    earliest_start[dep] + self._tasks[dep].duration
                    for dep in task.dependencies
                    if dep in earliest_start
                ),
                default=0,
            )

        total = max(
            (earliest_start[task_id] + self._tasks[task_id].duration for task_id in order),
            default=0,
        )

        # backward pass: a task must finish before any successor's latest start
        latest_start: Dict[str, int] = {
            task_id: total - self._tasks[task_id].duration for task_id in order
        }
        for task_id in reversed(order):
            task = self._tasks[task_id]
            for dep in task.dependencies:
                bound = latest_start[task_id] - self._tasks[dep].duration
                if bound < latest_start[dep]:
                    latest_start[dep] = bound

        critical = tuple(
            task_id for task_id in order if latest_start[task_id] == earliest_start[task_id]
        )
        return CriticalPath(
            task_ids=critical,
            total=total,
            earliest_start=earliest_start,
            mode=ScheduleMode.EARLIEST_FINISH,
        )

    def display(self) -> str:
        return f"TaskGraph: {len(self._tasks)} tasks"

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        """Iterate over tasks in insertion order."""
        return iter(self._tasks.values())

    def __repr__(self) -> str:
        return f"TaskGraph(tasks={list(self._tasks)!r})"


__all__ = ["TaskGraph"]
