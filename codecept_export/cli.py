"""Command-line interface for the Codeception exporter."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from codecept_export.command import Command
from codecept_export.errors import Diagnostic, ExportError, format_diagnostic
from codecept_export.exporter import ExportOptions, build_table, emit_command, export_file
from codecept_export.levels import render_results

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build argparse command tree for the exporter CLI."""
    parser = argparse.ArgumentParser(
        prog="codecept-export",
        description="Export Selenium IDE recordings as Codeception Cest files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export a .side project to a Cest file")
    export_parser.add_argument("input", help="Input .side project file")
    export_parser.add_argument("-o", "--output", help="Output file or directory path")
    export_parser.add_argument(
        "--plugin",
        action="append",
        default=[],
        help="Plugin spec in module[:symbol] format; can be repeated.",
    )
    export_parser.add_argument("--strict", action="store_true", help="Reject unbalanced control flow")

    emit_parser = subparsers.add_parser("emit", help="Emit the Codeception code for a single command")
    emit_parser.add_argument("--command", dest="name", required=True, help="Recorded command name")
    emit_parser.add_argument("--target", help="Command target")
    emit_parser.add_argument("--value", help="Command value")
    emit_parser.add_argument(
        "--plugin",
        action="append",
        default=[],
        help="Plugin spec in module[:symbol] format; can be repeated.",
    )

    commands_parser = subparsers.add_parser("commands", help="List supported command names")
    commands_parser.add_argument("--json", action="store_true", help="Print the list as JSON")

    return parser


def run(argv: list[str] | None = None) -> int:
    """Run CLI and return shell exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "export":
            bundle = export_file(
                args.input,
                output_path=args.output,
                plugin_specs=args.plugin,
                options=ExportOptions(strict_nesting=args.strict),
            )
            if args.output:
                logger.info("Wrote %s", args.output)
            else:
                sys.stdout.write(bundle.code)
            return 0

        if args.command == "emit":
            table = build_table(args.plugin)
            command = Command(name=args.name, target=args.target, value=args.value)
            if not table.can_emit(command.name):
                raise argparse.ArgumentTypeError(f"Unsupported command '{command.name}'.")
            print(render_results([emit_command(table, command)]))
            return 0

        if args.command == "commands":
            names = build_table().names()
            if args.json:
                print(json.dumps(names, indent=2))
            else:
                print("\n".join(names))
            return 0

        raise argparse.ArgumentTypeError(f"Unsupported command '{args.command}'.")

    except ExportError as err:
        diag = err.to_diagnostic()
        print(format_diagnostic(diag), file=sys.stderr)
        return 1
    except argparse.ArgumentTypeError as err:
        diag = Diagnostic(code="CLI001", message=str(err), hint="Run codecept-export commands for the list.")
        print(format_diagnostic(diag), file=sys.stderr)
        return 2
    except Exception as err:  # pragma: no cover
        diag = Diagnostic(code="CLI999", message=f"Internal error: {err}", hint="Run with --verbose")
        print(format_diagnostic(diag), file=sys.stderr)
        return 3


if __name__ == "__main__":
    raise SystemExit(run())
