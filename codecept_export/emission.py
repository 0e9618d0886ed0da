"""Emission Result data model shared by emitters and the level tracker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DRIVER_CALLBACK_OPEN = (
    "$I->executeInSelenium(function (\\Facebook\\WebDriver\\Remote\\RemoteWebDriver $webdriver) {"
)
DRIVER_CALLBACK_CLOSE = "});"


@dataclass(frozen=True)
class LeveledStatement:
    """One target statement with a level relative to the current base."""

    level: int
    statement: str


@dataclass(frozen=True)
class Emission:
    """Structured emitter output: statements plus level adjustments."""

    commands: tuple[LeveledStatement, ...]
    starting_level_adjustment: int = 0
    ending_level_adjustment: int = 0

    @classmethod
    def of(
        cls,
        *lines: tuple[int, str],
        starting: int = 0,
        ending: int = 0,
    ) -> Emission:
        """Build an emission from `(level, statement)` pairs."""
        return cls(
            commands=tuple(LeveledStatement(level, statement) for level, statement in lines),
            starting_level_adjustment=starting,
            ending_level_adjustment=ending,
        )


@dataclass(frozen=True)
class DriverCallback:
    """Raw driver calls wrapped in an `executeInSelenium` closure.

    Used only where Codeception has no high-level primitive. When
    `assign_to` is set the closure result is stored in that variable and the
    last raw statement is returned from the closure.
    """

    statements: tuple[str, ...]
    assign_to: str | None = field(default=None)

    def to_emission(self) -> Emission:
        """Lower the callback into leveled statements."""
        opener = DRIVER_CALLBACK_OPEN
        body = list(self.statements)
        if self.assign_to:
            opener = f"{self.assign_to} = {opener}"
            if body:
                body[-1] = f"return {body[-1]}"
        lines = [(0, opener)]
        lines.extend((1, statement) for statement in body)
        lines.append((0, DRIVER_CALLBACK_CLOSE))
        return Emission.of(*lines)


EmissionResult = Union[str, Emission, DriverCallback, None]


def normalize(result: EmissionResult) -> Emission | None:
    """Coerce any emitter result into an `Emission` (or None for no-ops)."""
    if result is None:
        return None
    if isinstance(result, Emission):
        return result
    if isinstance(result, DriverCallback):
        return result.to_emission()
    if isinstance(result, str):
        return Emission.of((0, result))
    raise TypeError(f"Unsupported emission result type '{type(result).__name__}'.")
