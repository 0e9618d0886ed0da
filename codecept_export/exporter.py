"""Cest file assembly: drives the command table, level tracker and hooks."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from codecept_export.command import COMMENT_PREFIX, Command
from codecept_export.emission import EmissionResult, LeveledStatement
from codecept_export.emitters.builtin import build_command_table
from codecept_export.emitters.compound import WAIT_FOR_WINDOW, MethodDeclaration, emit_wait_for_window
from codecept_export.errors import ExportError, UnsupportedCommandError
from codecept_export.formatting import class_name, sanitize_name, unique_name
from codecept_export.hooks import HookSpec, generate_hooks
from codecept_export.levels import INDENT_UNIT, LevelTracker, render
from codecept_export.plugin import load_plugins
from codecept_export.project import Project, RecordedTest, load_project
from codecept_export.table import CommandTable

logger = logging.getLogger(__name__)

CLASS_LEVEL = 1
BODY_LEVEL = 2
WRAPPING_HOOKS = ("beforeAll", "beforeEach", "afterEach", "afterAll")


@dataclass
class ExportOptions:
    """Rendering options for assembled Cest files."""

    indent: str = INDENT_UNIT
    strict_nesting: bool = False
    class_suffix: str = "Cest"


@dataclass(frozen=True)
class OutputBundle:
    """One rendered Cest file and its file name."""

    path: str
    code: str


def emit_commands(
    commands: tuple[Command, ...] | list[Command],
    table: CommandTable,
    *,
    base: int = BODY_LEVEL,
    strict: bool = False,
) -> list[LeveledStatement]:
    """Translate commands in stream order into absolute statements."""
    tracker = LevelTracker(base=base, strict=strict)
    statements: list[LeveledStatement] = []
    for command in commands:
        if command.comment:
            statements.append(LeveledStatement(tracker.level, f"// {command.comment}"))
        if command.is_disabled:
            statements.append(LeveledStatement(tracker.level, _disabled_comment(command)))
            continue
        if not table.can_emit(command.name):
            raise UnsupportedCommandError(
                code="EXP001",
                message=f"Unsupported command '{command.name}'.",
                command=command.name,
                hint="Register an emitter for it with a plugin.",
            )
        statements.extend(tracker.place(emit_command(table, command), command.name))
    tracker.finish()
    return statements


def export_test(
    test: RecordedTest,
    table: CommandTable | None = None,
    hooks: dict[str, HookSpec] | None = None,
    options: ExportOptions | None = None,
) -> str:
    """Render one recorded test as a public Cest method."""
    table = table or build_command_table()
    hooks = hooks or generate_hooks()
    options = options or ExportOptions()
    lines = _test_method(test, sanitize_name(test.name), table, hooks, options)
    return "\n".join(render(lines, options.indent))


def export_project(
    project: Project,
    table: CommandTable | None = None,
    hooks: dict[str, HookSpec] | None = None,
    options: ExportOptions | None = None,
) -> OutputBundle:
    """Render a whole project as one Cest class file."""
    table = table or build_command_table()
    hooks = hooks or generate_hooks()
    options = options or ExportOptions()
    name = f"{class_name(project.name)}{options.class_suffix}"
    logger.info("Exporting project '%s' (%d tests) as %s", project.name, len(project.tests), name)

    lines: list[LeveledStatement] = []
    lines.extend(hooks["inEachBegin"].starting_syntax)
    lines.extend(hooks["declareDependencies"].starting_syntax)
    lines.extend(hooks["declareVariables"].starting_syntax)
    lines.append(LeveledStatement(0, f"class {name}"))
    lines.append(LeveledStatement(0, "{"))

    for hook_name in WRAPPING_HOOKS:
        hook = hooks[hook_name]
        if hook.is_empty:
            continue
        level = hook.registration_level if hook.registration_level is not None else CLASS_LEVEL
        lines.extend(_shift(hook.starting_syntax, level))
        lines.extend(_shift(hook.ending_syntax, level))
        lines.append(LeveledStatement(0, ""))

    taken = {"_before", "_after", WAIT_FOR_WINDOW}
    for test in project.tests:
        method = unique_name(sanitize_name(test.name), taken)
        lines.extend(_test_method(test, method, table, hooks, options))
        lines.append(LeveledStatement(0, ""))

    lines.extend(_shift(hooks["declareMethods"].starting_syntax, CLASS_LEVEL))
    if any(command.opens_window for test in project.tests for command in test.commands):
        lines.extend(_helper_method(emit_wait_for_window()))
        lines.append(LeveledStatement(0, ""))

    if lines[-1].statement == "":
        lines.pop()
    lines.append(LeveledStatement(0, "}"))

    code = "\n".join(render(lines, options.indent)) + "\n"
    return OutputBundle(path=f"{name}.php", code=code)


def write_bundle(bundle: OutputBundle, output_path: str | Path | None = None) -> str:
    """Write a bundle to a file, or into a directory under its own name."""
    if output_path is not None:
        output = Path(output_path)
        if not output.suffix:
            output.mkdir(parents=True, exist_ok=True)
            output = output / bundle.path
        output.write_text(bundle.code, encoding="utf-8")
    return bundle.code


def build_table(plugin_specs: list[str] | None = None) -> CommandTable:
    """Create the built-in command table with optional plugins applied."""
    table = build_command_table()
    if plugin_specs:
        load_plugins(table, plugin_specs)
    return table


def export_file(
    input_path: str | Path,
    *,
    output_path: str | Path | None = None,
    plugin_specs: list[str] | None = None,
    options: ExportOptions | None = None,
) -> OutputBundle:
    """Load a `.side` file, export it and optionally write the result."""
    project = load_project(input_path)
    bundle = export_project(project, table=build_table(plugin_specs), options=options)
    write_bundle(bundle, output_path)
    return bundle


def emit_command(table: CommandTable, command: Command) -> EmissionResult:
    """Emit one command, attributing any failure to that command."""
    try:
        return table.emit(command)
    except ExportError as err:
        if err.command is None:
            err.command = command.name
        raise
    except (TypeError, ValueError, IndexError, AttributeError) as exc:
        raise ExportError(
            code="EXP002",
            message=f"Failed to emit command with target {command.target!r} and value {command.value!r}: {exc}",
            command=command.name,
            hint="Check the recorded parameters of this command.",
        ) from exc


def _test_method(
    test: RecordedTest,
    method: str,
    table: CommandTable,
    hooks: dict[str, HookSpec],
    options: ExportOptions,
) -> list[LeveledStatement]:
    logger.debug("Emitting test '%s' (%d commands)", test.name, len(test.commands))
    lines = [
        LeveledStatement(CLASS_LEVEL, f"public function {method}(AcceptanceTester $I)"),
        LeveledStatement(CLASS_LEVEL, "{"),
    ]
    lines.extend(emit_commands(test.commands, table, base=BODY_LEVEL, strict=options.strict_nesting))
    lines.extend(hooks["inEachEnd"].starting_syntax)
    return lines


def _helper_method(method: MethodDeclaration) -> list[LeveledStatement]:
    lines = [
        LeveledStatement(CLASS_LEVEL, method.declaration),
        LeveledStatement(CLASS_LEVEL, "{"),
    ]
    lines.extend(_shift(method.body, BODY_LEVEL))
    lines.append(LeveledStatement(CLASS_LEVEL, "}"))
    return lines


def _shift(statements: tuple[LeveledStatement, ...], level: int) -> list[LeveledStatement]:
    return [LeveledStatement(level + item.level, item.statement) for item in statements]


def _disabled_comment(command: Command) -> str:
    parts = [command.name[len(COMMENT_PREFIX):].strip()]
    parts.extend(part for part in (command.target, command.value) if part)
    return f"// {' '.join(parts)}"
