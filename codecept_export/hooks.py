"""Boilerplate hooks wrapping emitted commands into a Codeception Cest class."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from codecept_export.emission import LeveledStatement
from codecept_export.errors import ExportError


@dataclass(frozen=True)
class HookSpec:
    """Starting/ending syntax of one hook.

    `registration_level` is the level at which the hook is placed inside the
    class body; None lets the assembler pick its default.
    """

    starting_syntax: tuple[LeveledStatement, ...] = field(default_factory=tuple)
    ending_syntax: tuple[LeveledStatement, ...] = field(default_factory=tuple)
    registration_level: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.starting_syntax and not self.ending_syntax


def _lines(*pairs: tuple[int, str]) -> tuple[LeveledStatement, ...]:
    return tuple(LeveledStatement(level, statement) for level, statement in pairs)


def empty() -> HookSpec:
    return HookSpec()


def after_each() -> HookSpec:
    return HookSpec(
        starting_syntax=_lines((0, "public function _after(AcceptanceTester $I)"), (0, "{")),
        ending_syntax=_lines((0, "}")),
        registration_level=1,
    )


def before_each() -> HookSpec:
    return HookSpec(
        starting_syntax=_lines((0, "public function _before(AcceptanceTester $I)"), (0, "{")),
        ending_syntax=_lines((0, "}")),
        registration_level=1,
    )


def declare_dependencies() -> HookSpec:
    return HookSpec(starting_syntax=_lines((0, "use Faker\\Factory;"), (0, "")))


def in_each_begin() -> HookSpec:
    return HookSpec(starting_syntax=_lines((0, "<?php")))


def in_each_end() -> HookSpec:
    return HookSpec(starting_syntax=_lines((1, "}")))


HOOKS: dict[str, Callable[[], HookSpec]] = {
    "afterAll": empty,
    "afterEach": after_each,
    "beforeAll": empty,
    "beforeEach": before_each,
    "declareDependencies": declare_dependencies,
    "declareMethods": empty,
    "declareVariables": empty,
    "inEachBegin": in_each_begin,
    "inEachEnd": in_each_end,
}


def generate(hook_name: str) -> HookSpec:
    """Build the hook template registered under `hook_name`."""
    factory = HOOKS.get(hook_name)
    if factory is None:
        raise ExportError(
            code="HOOK001",
            message=f"Unknown hook '{hook_name}'.",
            hint=f"Available hooks: {', '.join(sorted(HOOKS))}",
        )
    return factory()


def generate_hooks() -> dict[str, HookSpec]:
    """Build every registered hook keyed by name."""
    return {hook_name: generate(hook_name) for hook_name in HOOKS}
