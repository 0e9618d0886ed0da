"""Selenium IDE to Codeception exporter package."""

from __future__ import annotations

from typing import Any


__all__ = [
    "CommandTable",
    "ExportOptions",
    "OutputBundle",
    "build_command_table",
    "export_file",
    "export_project",
    "export_test",
    "load_project",
]


def build_command_table(*args: Any, **kwargs: Any):
    from codecept_export.emitters.builtin import build_command_table as _build_command_table

    return _build_command_table(*args, **kwargs)


def export_file(*args: Any, **kwargs: Any):
    from codecept_export.exporter import export_file as _export_file

    return _export_file(*args, **kwargs)


def export_project(*args: Any, **kwargs: Any):
    from codecept_export.exporter import export_project as _export_project

    return _export_project(*args, **kwargs)


def export_test(*args: Any, **kwargs: Any):
    from codecept_export.exporter import export_test as _export_test

    return _export_test(*args, **kwargs)


def load_project(*args: Any, **kwargs: Any):
    from codecept_export.project import load_project as _load_project

    return _load_project(*args, **kwargs)


def __getattr__(name: str):
    if name == "CommandTable":
        from codecept_export.table import CommandTable

        return CommandTable
    if name in ("ExportOptions", "OutputBundle"):
        from codecept_export import exporter

        return getattr(exporter, name)
    raise AttributeError(name)
