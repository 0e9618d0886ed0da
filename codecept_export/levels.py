"""Running indentation level applied to emission results in stream order."""

from __future__ import annotations

from dataclasses import dataclass, field

from codecept_export.emission import EmissionResult, LeveledStatement, normalize
from codecept_export.errors import NestingError

INDENT_UNIT = "    "


@dataclass
class LevelTracker:
    """Places emitted statements at absolute levels.

    `base` is the level of the enclosing method body. With `strict=True` the
    tracker raises when the running level drops below `base` or when
    `finish()` finds an unclosed block; otherwise malformed control flow is
    rendered as-is.
    """

    base: int = 0
    strict: bool = False
    level: int = field(init=False)

    def __post_init__(self) -> None:
        self.level = self.base

    def place(self, result: EmissionResult, command: str | None = None) -> list[LeveledStatement]:
        """Apply one result's adjustments and return its absolute statements."""
        emission = normalize(result)
        if emission is None:
            return []
        self._adjust(emission.starting_level_adjustment, command)
        placed = [
            LeveledStatement(level=self.level + item.level, statement=item.statement)
            for item in emission.commands
        ]
        self._adjust(emission.ending_level_adjustment, command)
        return placed

    def finish(self) -> None:
        """Check that every opened block was closed."""
        if self.strict and self.level != self.base:
            raise NestingError(
                code="LVL002",
                message=f"{self.level - self.base} control-flow block(s) left open.",
                hint="Close each do/if/while/forEach/times with repeatIf or end.",
            )

    def _adjust(self, delta: int, command: str | None) -> None:
        self.level += delta
        if self.strict and self.level < self.base:
            raise NestingError(
                code="LVL001",
                message="Control-flow command closes a block that was never opened.",
                command=command,
                hint="Check for a stray end/else/elseIf/repeatIf.",
            )


def render(statements: list[LeveledStatement], unit: str = INDENT_UNIT) -> list[str]:
    """Render absolute statements into indented source lines.

    Only `\\n` separates lines; a statement spanning several lines is
    re-indented line by line at its level.
    """
    lines: list[str] = []
    for item in statements:
        for line in item.statement.split("\n"):
            lines.append((unit * item.level + line) if line.strip() else "")
    return lines


def render_results(results: list[EmissionResult], *, base: int = 0, unit: str = INDENT_UNIT, strict: bool = False) -> str:
    """Place a sequence of results with a fresh tracker and join the lines."""
    tracker = LevelTracker(base=base, strict=strict)
    statements: list[LeveledStatement] = []
    for result in results:
        statements.extend(tracker.place(result))
    tracker.finish()
    return "\n".join(render(statements, unit))
