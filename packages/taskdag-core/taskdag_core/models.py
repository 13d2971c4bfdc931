"""Data models for the task graph engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Mapping


class TieBreak(str, Enum):
    """Order in which simultaneously ready tasks leave the queue."""

    INSERTION = "insertion"
    LEXICOGRAPHIC = "lexicographic"


class ScheduleMode(str, Enum):
    """Recurrence used to derive earliest start times.

    ``EARLIEST_START`` takes the maximum earliest start of the dependencies and
    ignores durations. ``EARLIEST_FINISH`` is the conventional critical path
    method, where a task starts once every dependency has finished.
    """

    EARLIEST_START = "start"
    EARLIEST_FINISH = "finish"


@dataclass(slots=True, frozen=True)
class Task:
    """Single node in the task graph."""

    id: str
    name: str = ""
    duration: int = 0
    dependencies: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise ValueError(
                f"task '{self.id}': duration must be an integer, "
                f"got {type(self.duration).__name__}"
            )
        if self.duration < 0:
            raise ValueError(
                f"task '{self.id}': duration must be non-negative, got {self.duration}"
            )
        # set semantics, first occurrence keeps its position
        object.__setattr__(
            self, "dependencies", tuple(dict.fromkeys(_as_ids(self.dependencies)))
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "duration": self.duration,
            "depends_on": list(self.dependencies),
        }


def _as_ids(dependencies: Iterable[str]) -> Iterator[str]:
    if isinstance(dependencies, str):
        raise TypeError("dependencies must be an iterable of task ids, not a string")
    for dep in dependencies:
        if not isinstance(dep, str):
            raise TypeError(f"dependency ids must be strings, got {dep!r}")
        yield dep


@dataclass(slots=True, frozen=True)
class CriticalPath:
    """Result of a critical path query.

    Attributes:
        task_ids: Critical task ids in topological order
        total: Maximum value reached by the schedule recurrence
        earliest_start: Earliest start of every task in the graph
        mode: Recurrence the values were computed with
    """

    task_ids: tuple[str, ...]
    total: int
    earliest_start: Mapping[str, int] = field(default_factory=dict)
    mode: ScheduleMode = ScheduleMode.EARLIEST_START

    @property
    def critical_set(self) -> frozenset[str]:
        return frozenset(self.task_ids)

    def __iter__(self) -> Iterator[object]:
        """Unpack as ``(task_ids, total)``."""
        yield self.task_ids
        yield self.total


__all__ = [
    "CriticalPath",
    "ScheduleMode",
    "Task",
    "TieBreak",
]
