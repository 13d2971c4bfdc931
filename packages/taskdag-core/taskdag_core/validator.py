"""Task graph definition validator - fail-fast checks before a graph is built."""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any


@dataclass(slots=True, frozen=True)
class ValidationError:
    """Single validation finding."""

    section: str
    task: str
    error_type: str
    message: str
    suggestion: str | None = None


@dataclass(slots=True, frozen=True)
class ValidationResult:
    """Result of task graph definition validation."""

    is_valid: bool
    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationError, ...]

    def __str__(self) -> str:
        """Format validation result for display."""
        if self.is_valid and not self.warnings:
            return "✓ Task graph definition is valid"

        lines = (
            ["✓ Task graph definition is valid with warnings:\n"]
            if self.is_valid
            else ["✗ Task graph definition validation failed:\n"]
        )

        for err in self.errors:
            lines.append(f"  [ERROR] {err.section}.{err.task}: {err.error_type}")
            lines.append(f"    {err.message}")
            if err.suggestion:
                lines.append(f"    Suggestion: {err.suggestion}")
            lines.append("")

        for warn in self.warnings:
            lines.append(f"  [WARNING] {warn.section}.{warn.task}: {warn.error_type}")
            lines.append(f"    {warn.message}")
            if warn.suggestion:
                lines.append(f"    Suggestion: {warn.suggestion}")
            lines.append("")

        return "\n".join(lines)


class GraphConfigValidator:
    """Validate a raw task graph definition (as loaded from YAML).

    Checks performed:
    1. ``tasks`` is present and is a list
    2. Every entry is a mapping with a string ``id``
    3. ``duration`` is a non-negative integer
    4. ``depends_on`` is a list of strings
    5. The optional ``graph`` section and task ``name`` fields
    6. Duplicate ids, unknown and self dependencies (warnings only)
    """

    def __init__(self, section: str = "tasks"):
        self.section = section

    def validate(self, config: dict[str, Any]) -> ValidationResult:
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []

        if isinstance(config, dict):
            errors.extend(self._validate_graph_section(config.get("graph")))

        entries = config.get("tasks") if isinstance(config, dict) else None
        if not isinstance(entries, list):
            errors.append(
                ValidationError(
                    section=self.section,
                    task="<root>",
                    error_type="MISSING_TASKS",
                    message="Definition must contain a 'tasks' list",
                    suggestion="Add a top-level 'tasks:' list of task mappings",
                )
            )
            return ValidationResult(is_valid=False, errors=tuple(errors), warnings=())

        seen: dict[str, int] = {}
        declared: list[tuple[str, list[str]]] = []

        for index, entry in enumerate(entries):
            label = f"[{index}]"
            if not isinstance(entry, dict):
                errors.append(
                    ValidationError(
                        section=self.section,
                        task=label,
                        error_type="INVALID_TASK",
                        message=f"Task entry must be a mapping, got {type(entry).__name__}",
                    )
                )
                continue

            task_id = entry.get("id")
            if not isinstance(task_id, str):
                errors.append(
                    ValidationError(
                        section=self.section,
                        task=label,
                        error_type="MISSING_ID",
                        message="Task entry requires a string 'id'",
                        suggestion="Quote numeric ids, e.g. id: \"42\"",
                    )
                )
                continue

            if "name" in entry and not isinstance(entry["name"], str):
                errors.append(
                    ValidationError(
                        section=self.section,
                        task=task_id,
                        error_type="INVALID_NAME",
                        message=(
                            f"Name must be a string, got {type(entry['name']).__name__}"
                        ),
                        suggestion="Quote the name or omit it to default to the id",
                    )
                )

            errors.extend(self._validate_duration(task_id, entry.get("duration", 0)))

            dependencies = entry.get("depends_on", [])
            dep_error = self._validate_dependencies(task_id, dependencies)
            if dep_error is not None:
                errors.append(dep_error)
                dependencies = []

            if task_id in seen:
                warnings.append(
                    ValidationError(
                        section=self.section,
                        task=task_id,
                        error_type="DUPLICATE_TASK",
                        message=(
                            f"Task '{task_id}' defined at {label} overrides "
                            f"the definition at [{seen[task_id]}]"
                        ),
                        suggestion="Remove one of the definitions",
                    )
                )
            seen[task_id] = index
            declared.append((task_id, dependencies))

        warnings.extend(self._check_references(declared, set(seen)))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=tuple(errors),
            warnings=tuple(warnings),
        )

    def _validate_graph_section(self, graph_section: object) -> list[ValidationError]:
        if graph_section is None:
            return []
        if not isinstance(graph_section, dict):
            message = (
                f"'graph' must be a mapping, got {type(graph_section).__name__}"
            )
        elif not isinstance(graph_section.get("name", ""), str):
            message = "'graph.name' must be a string"
        else:
            return []
        return [
            ValidationError(
                section="graph",
                task="<root>",
                error_type="INVALID_GRAPH",
                message=message,
                suggestion="Write graph: {name: my_workflow}",
            )
        ]

    def _validate_duration(self, task_id: str, duration: object) -> list[ValidationError]:
        if isinstance(duration, bool) or not isinstance(duration, int):
            return [
                ValidationError(
                    section=self.section,
                    task=task_id,
                    error_type="INVALID_DURATION",
                    message=(
                        f"Duration must be an integer, got {type(duration).__name__}"
                    ),
                    suggestion="Use a whole number of time units",
                )
            ]
        if duration < 0:
            return [
                ValidationError(
                    section=self.section,
                    task=task_id,
                    error_type="INVALID_DURATION",
                    message=f"Duration must be non-negative, got {duration}",
                )
            ]
        return []

    def _validate_dependencies(
        self, task_id: str, dependencies: object
    ) -> ValidationError | None:
        if isinstance(dependencies, list) and all(
            isinstance(dep, str) for dep in dependencies
        ):
            return None
        return ValidationError(
            section=self.section,
            task=task_id,
            error_type="INVALID_DEPENDENCIES",
            message="'depends_on' must be a list of task ids",
            suggestion="Write depends_on: [task_a, task_b]",
        )

    def _check_references(
        self, declared: list[tuple[str, list[str]]], known: set[str]
    ) -> list[ValidationError]:
        warnings: list[ValidationError] = []
        for task_id, dependencies in declared:
            for dep in dependencies:
                if dep == task_id:
                    warnings.append(
                        ValidationError(
                            section=self.section,
                            task=task_id,
                            error_type="SELF_DEPENDENCY",
                            message=f"Task '{task_id}' depends on itself",
                            suggestion="Remove the self reference",
                        )
                    )
                elif dep not in known:
                    warnings.append(
                        ValidationError(
                            section=self.section,
                            task=task_id,
                            error_type="UNKNOWN_DEPENDENCY",
                            message=(
                                f"Dependency '{dep}' is not defined; "
                                f"'{task_id}' can never be scheduled"
                            ),
                            suggestion=self._suggest_task(dep, known),
                        )
                    )
        return warnings

    def _suggest_task(self, dep: str, known: set[str]) -> str | None:
        matches = get_close_matches(dep, sorted(known), n=3)
        if not matches:
            return None
        return f"Did you mean: {', '.join(matches)}?"


__all__ = [
    "ValidationError",
    "ValidationResult",
    "GraphConfigValidator",
]
