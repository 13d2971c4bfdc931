"""Tests for GraphConfigValidator."""

from __future__ import annotations

import pytest

from taskdag_core import GraphConfigValidator, ValidationError, ValidationResult


@pytest.fixture
def validator() -> GraphConfigValidator:
    return GraphConfigValidator()


def _types(findings: tuple[ValidationError, ...]) -> list[str]:
    return [finding.error_type for finding in findings]


def test_valid_definition(validator: GraphConfigValidator, diamond_config: dict) -> None:
    result = validator.validate(diamond_config)

    assert result.is_valid
    assert result.errors == ()
    assert result.warnings == ()
    assert str(result) == "✓ Task graph definition is valid"


@pytest.mark.parametrize("config", [{}, {"tasks": None}, {"tasks": {"A": {}}}, ["A"]])
def test_missing_tasks_list(validator: GraphConfigValidator, config: object) -> None:
    result = validator.validate(config)  # type: ignore[arg-type]

    assert not result.is_valid
    assert _types(result.errors) == ["MISSING_TASKS"]


def test_entry_errors(validator: GraphConfigValidator) -> None:
    result = validator.validate(
        {
            "tasks": [
                "not-a-mapping",
                {"id": 42},
                {"id": "neg", "duration": -1},
                {"id": "float", "duration": 1.5},
                {"id": "flag", "duration": True},
                {"id": "deps", "depends_on": "A"},
                {"id": "deps2", "depends_on": [1, 2]},
            ]
        }
    )

    assert not result.is_valid
    assert _types(result.errors) == [
        "INVALID_TASK",
        "MISSING_ID",
        "INVALID_DURATION",
        "INVALID_DURATION",
        "INVALID_DURATION",
        "INVALID_DEPENDENCIES",
        "INVALID_DEPENDENCIES",
    ]
    assert result.errors[0].task == "[0]"
    assert result.errors[2].task == "neg"


def test_reference_warnings(validator: GraphConfigValidator) -> None:
    result = validator.validate(
        {
            "tasks": [
                {"id": "fetch_data"},
                {"id": "loop", "depends_on": ["loop"]},
                {"id": "signals", "depends_on": ["fetch_dat"]},
            ]
        }
    )

    assert result.is_valid
    assert _types(result.warnings) == ["SELF_DEPENDENCY", "UNKNOWN_DEPENDENCY"]
    unknown = result.warnings[1]
    assert unknown.task == "signals"
    assert unknown.suggestion == "Did you mean: fetch_data?"


def test_unknown_dependency_without_close_match(validator: GraphConfigValidator) -> None:
    result = validator.validate({"tasks": [{"id": "A", "depends_on": ["zzzz"]}]})

    assert result.warnings[0].suggestion is None


def test_dependency_defined_later_is_not_unknown(validator: GraphConfigValidator) -> None:
    result = validator.validate(
        {"tasks": [{"id": "B", "depends_on": ["A"]}, {"id": "A"}]}
    )

    assert result.is_valid
    assert result.warnings == ()


def test_result_formatting_lists_errors_and_warnings() -> None:
    result = ValidationResult(
        is_valid=False,
        errors=(
            ValidationError(
                section="tasks",
                task="A",
                error_type="INVALID_DURATION",
                message="Duration must be non-negative, got -1",
                suggestion="Use a whole number of time units",
            ),
        ),
        warnings=(
            ValidationError(
                section="tasks",
                task="B",
                error_type="UNKNOWN_DEPENDENCY",
                message="Dependency 'x' is not defined",
            ),
        ),
    )

    text = str(result)

    assert text.startswith("✗ Task graph definition validation failed")
    assert "[ERROR] tasks.A: INVALID_DURATION" in text
    assert "Suggestion: Use a whole number of time units" in text
    assert "[WARNING] tasks.B: UNKNOWN_DEPENDENCY" in text


def test_valid_result_with_warnings_formatting() -> None:
    result = ValidationResult(
        is_valid=True,
        errors=(),
        warnings=(
            ValidationError(
                section="tasks",
                task="A",
                error_type="DUPLICATE_TASK",
                message="Task 'A' defined at [1] overrides the definition at [0]",
            ),
        ),
    )

    assert str(result).startswith("✓ Task graph definition is valid with warnings")


@pytest.mark.parametrize(
    "graph_section",
    ["trading", ["trading"], {"name": 5}, {"name": None}],
)
def test_graph_section_errors(validator: GraphConfigValidator, graph_section: object) -> None:
    result = validator.validate({"graph": graph_section, "tasks": [{"id": "A"}]})

    assert not result.is_valid
    assert _types(result.errors) == ["INVALID_GRAPH"]
    assert result.errors[0].section == "graph"


def test_graph_section_error_reported_alongside_missing_tasks(
    validator: GraphConfigValidator,
) -> None:
    result = validator.validate({"graph": "trading"})

    assert _types(result.errors) == ["INVALID_GRAPH", "MISSING_TASKS"]


def test_task_name_must_be_string(validator: GraphConfigValidator) -> None:
    result = validator.validate(
        {"tasks": [{"id": "A", "name": 5}, {"id": "B", "name": "Build"}, {"id": "C"}]}
    )

    assert _types(result.errors) == ["INVALID_NAME"]
    assert result.errors[0].task == "A"
    assert "got int" in result.errors[0].message
