"""Selenium IDE `.side` project loading."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any

from codecept_export.command import Command
from codecept_export.errors import ProjectError


@dataclass(frozen=True)
class RecordedTest:
    """One recorded test: a name and its ordered commands."""

    name: str
    commands: tuple[Command, ...]
    id: str = ""


@dataclass(frozen=True)
class Project:
    """A recorded project holding one or more tests."""

    name: str
    url: str = ""
    tests: tuple[RecordedTest, ...] = field(default_factory=tuple)

    def find_test(self, name: str) -> RecordedTest:
        for test in self.tests:
            if test.name == name:
                return test
        raise ProjectError(
            code="PRJ004",
            message=f"Project '{self.name}' has no test named '{name}'.",
            hint=f"Available tests: {', '.join(test.name for test in self.tests)}",
        )


def project_from_dict(data: dict[str, Any]) -> Project:
    """Build a project from decoded `.side` JSON."""
    if not isinstance(data, dict):
        raise ProjectError(code="PRJ002", message="Project payload must be a JSON object.")
    raw_tests = data.get("tests", [])
    if not isinstance(raw_tests, list):
        raise ProjectError(code="PRJ003", message="Project 'tests' must be a list.")

    tests: list[RecordedTest] = []
    for index, raw_test in enumerate(raw_tests):
        if not isinstance(raw_test, dict):
            raise ProjectError(code="PRJ005", message=f"Test #{index} must be a JSON object.")
        raw_commands = raw_test.get("commands", [])
        if not isinstance(raw_commands, list):
            raise ProjectError(code="PRJ005", message=f"Commands of test #{index} must be a list.")
        commands = tuple(_command_from_dict(item, index, position) for position, item in enumerate(raw_commands))
        tests.append(
            RecordedTest(
                name=str(raw_test.get("name", "untitled")),
                commands=commands,
                id=str(raw_test.get("id") or ""),
            )
        )
    return Project(name=str(data.get("name", "project")), url=str(data.get("url") or ""), tests=tuple(tests))


def _command_from_dict(payload: Any, test_index: int, position: int) -> Command:
    if not isinstance(payload, dict):
        raise ProjectError(
            code="PRJ006",
            message=f"Command #{position} of test #{test_index} must be a JSON object.",
        )
    try:
        return Command.from_dict(payload)
    except (TypeError, ValueError) as exc:
        raise ProjectError(
            code="PRJ006",
            message=f"Command #{position} of test #{test_index} is malformed: {exc}",
            command=str(payload.get("command") or "") or None,
            hint="windowTimeout must be a number of milliseconds.",
        ) from exc


def load_project(path: str | Path) -> Project:
    """Read and decode a `.side` project file."""
    source = Path(path)
    try:
        payload = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ProjectError(
            code="PRJ001",
            message=f"Project file not found: {source}",
            hint="Check the input path.",
        ) from exc
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ProjectError(
            code="PRJ002",
            message=f"Project file is not valid JSON: {exc}",
            hint="Export the project from Selenium IDE as a .side file.",
        ) from exc
    return project_from_dict(data)
