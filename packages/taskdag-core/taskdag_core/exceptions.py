"""Error types raised by the task graph engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class CycleError(ValueError):
    """No valid topological order exists for the graph.

    ``blocked`` lists the task ids that never reached zero in-degree. It
    covers tasks on a real cycle, tasks waiting on an id that is not in the
    graph, and everything downstream of either.
    """

    message: str = "Cycle detected in DAG"
    blocked: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.args = (self.__str__(),)

    def __reduce__(self):
        # args holds the formatted text, rebuild from the fields instead
        return (self.__class__, (self.message, self.blocked))

    def __str__(self) -> str:
        if self.blocked:
            return f"{self.message} (blocked: {', '.join(self.blocked)})"
        return self.message


__all__ = ["CycleError"]
