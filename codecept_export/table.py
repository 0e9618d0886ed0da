"""Command table: dispatch from recorded command names to emitters."""

from __future__ import annotations

import logging

from codecept_export import preprocess
from codecept_export.command import Command
from codecept_export.emission import EmissionResult
from codecept_export.emitters.base import Emitter
from codecept_export.emitters.compound import emit_new_window_handling
from codecept_export.errors import UnsupportedCommandError
from codecept_export.preprocess import Preprocessor

logger = logging.getLogger(__name__)


class CommandTable:
    """Registry of emitters keyed by exact command name."""

    def __init__(self) -> None:
        self._emitters: dict[str, Emitter] = {}
        self._target_preprocessors: dict[str, Preprocessor] = {}
        self._value_preprocessors: dict[str, Preprocessor] = {}

    def register(
        self,
        name: str,
        emitter: Emitter,
        *,
        target_preprocessor: Preprocessor | None = None,
        value_preprocessor: Preprocessor | None = None,
    ) -> None:
        """Insert or overwrite the emitter for a command name.

        Preprocessors default to variable interpolation. An override keeps the
        preprocessors of the entry it replaces unless new ones are given.
        """
        if name in self._emitters:
            logger.debug("Overriding emitter for command '%s'", name)
        self._emitters[name] = emitter
        if target_preprocessor is not None:
            self._target_preprocessors[name] = target_preprocessor
        if value_preprocessor is not None:
            self._value_preprocessors[name] = value_preprocessor

    def can_emit(self, name: str) -> bool:
        """Report whether an emitter is registered for a command name."""
        return name in self._emitters

    def names(self) -> list[str]:
        """List registered command names."""
        return sorted(self._emitters.keys())

    def get(self, name: str) -> Emitter:
        """Resolve the emitter for a command name."""
        emitter = self._emitters.get(name)
        if emitter is None:
            raise UnsupportedCommandError(
                code="EXP001",
                message=f"No emitter registered for command '{name}'.",
                command=name,
                hint="Check can_emit() first or register an emitter for this command.",
            )
        return emitter

    def emit(self, command: Command) -> EmissionResult:
        """Translate one command into its emission result."""
        emitter = self.get(command.name)
        target = self._target_preprocessors.get(command.name, preprocess.interpolate)(command.target)
        value = self._value_preprocessors.get(command.name, preprocess.interpolate)(command.value)
        result = emitter(target, value)
        if command.opens_window:
            result = emit_new_window_handling(command, result)
        return result

    def copy(self) -> CommandTable:
        """Return an independent table with the same registrations."""
        clone = CommandTable()
        clone._emitters = dict(self._emitters)
        clone._target_preprocessors = dict(self._target_preprocessors)
        clone._value_preprocessors = dict(self._value_preprocessors)
        return clone
