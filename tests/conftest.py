"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from vscode_problems_filtering.sources import InMemorySource

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


def problem_dict(resource: str, line: int, message: str, **extra: Any) -> dict[str, Any]:
    return {"resource": resource, "startLineNumber": line, "message": message, **extra}


@pytest.fixture
def sample_problems() -> list[dict[str, Any]]:
    """A small Problems panel export with the usual extra VS Code fields."""
    return [
        problem_dict(
            "/home/dev/project/src/main/java/com/acme/Legacy.java",
            10,
            "The type ActionError is deprecated",
            owner="_generated_diagnostic_collection_name_#1",
            severity=4,
            startColumn=5,
            endLineNumber=10,
            endColumn=16,
        ),
        problem_dict(
            "/home/dev/project/src/main/java/com/acme/Service.java",
            42,
            "The value of the local variable count is not used",
            severity=4,
        ),
        problem_dict("README.md", 3, "Unknown word: Deprecated", severity=2),
    ]


@pytest.fixture
def sample_json(sample_problems: list[dict[str, Any]]) -> str:
    return json.dumps(sample_problems)


@pytest.fixture
def in_memory_source(sample_json: str) -> InMemorySource:
    return InMemorySource({"problems.json": sample_json})
