"""Plugin interfaces and loader for registering extra command emitters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
import importlib
import inspect
import logging
from types import ModuleType
from typing import Any

from codecept_export.emission import EmissionResult
from codecept_export.errors import PluginError
from codecept_export.preprocess import Preprocessor
from codecept_export.table import CommandTable

logger = logging.getLogger(__name__)


class EmitterPlugin(ABC):
    """Plugin object providing the emitter for one command name."""

    target_preprocessor: Preprocessor | None = None
    value_preprocessor: Preprocessor | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Recorded command name this plugin handles."""

    @abstractmethod
    def emit(self, target: Any, value: Any) -> EmissionResult:
        """Translate preprocessed parameters into an emission result."""

    def register(self, table: CommandTable) -> None:
        table.register(
            self.name,
            self.emit,
            target_preprocessor=self.target_preprocessor,
            value_preprocessor=self.value_preprocessor,
        )


def load_plugin_spec(table: CommandTable, spec: str) -> None:
    """Load and apply a plugin spec in `module[:symbol]` format.

    Behavior:
    - `module` implies symbol `register`
    - symbol may be a callable, an `EmitterPlugin`, a mapping of command name
      to emitter, or an iterable of these
    - callable may accept either no args or one `CommandTable` arg; a
      returned value is applied like an export
    """
    module_name, symbol_name = _split_plugin_spec(spec)
    module = _import_plugin_module(module_name, spec)

    if symbol_name is None:
        target: Any = module
    else:
        if not hasattr(module, symbol_name):
            raise PluginError(
                code="PLG003",
                message=f"Plugin symbol '{symbol_name}' not found in module '{module_name}'.",
                hint="Use module[:symbol] with an exported callable/object.",
            )
        target = getattr(module, symbol_name)

    logger.debug("Applying plugin '%s'", spec)
    _apply_loaded_object(table, target, spec)


def load_plugins(table: CommandTable, specs: list[str]) -> None:
    """Load a list of plugin specs into a table."""
    for spec in specs:
        load_plugin_spec(table, spec)


def _split_plugin_spec(spec: str) -> tuple[str, str | None]:
    if not spec.strip():
        raise PluginError(
            code="PLG004",
            message="Plugin spec cannot be empty.",
            hint="Use --plugin module:register",
        )

    if ":" not in spec:
        return spec.strip(), "register"

    module_name, symbol_name = spec.split(":", 1)
    symbol = symbol_name.strip() or None
    return module_name.strip(), symbol


def _import_plugin_module(module_name: str, spec: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        raise PluginError(
            code="PLG005",
            message=f"Failed to import plugin module '{module_name}' from spec '{spec}': {exc}",
            hint="Ensure module is on PYTHONPATH and importable.",
        ) from exc


def _apply_loaded_object(table: CommandTable, obj: Any, spec: str) -> None:
    if isinstance(obj, EmitterPlugin):
        obj.register(table)
        return

    if isinstance(obj, Mapping):
        for name, emitter in obj.items():
            if not callable(emitter):
                raise PluginError(
                    code="PLG009",
                    message=f"Emitter for command '{name}' in spec '{spec}' is not callable.",
                    command=str(name),
                    hint="Map each command name to an emitter(target, value) function.",
                )
            table.register(str(name), emitter)
        return

    if isinstance(obj, (list, tuple, set)):
        for item in obj:
            _apply_loaded_object(table, item, spec)
        return

    if isinstance(obj, ModuleType):
        if hasattr(obj, "register"):
            _apply_callable(table, getattr(obj, "register"), spec)
            return

    elif callable(obj):
        _apply_callable(table, obj, spec)
        return

    raise PluginError(
        code="PLG006",
        message=f"Unsupported plugin export type '{type(obj).__name__}' for spec '{spec}'.",
        hint="Export a register function, EmitterPlugin instance, mapping of emitters, or iterable.",
    )


def _apply_callable(table: CommandTable, fn: Any, spec: str) -> None:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        sig = None

    result: Any
    try:
        if sig is None:
            result = fn(table)
        else:
            positional = [
                p
                for p in sig.parameters.values()
                if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
            ]
            if len(positional) == 0:
                result = fn()
            elif len(positional) == 1:
                result = fn(table)
            else:
                raise PluginError(
                    code="PLG007",
                    message=f"Plugin callable in spec '{spec}' has unsupported signature '{sig}'.",
                    hint="Use zero-arg factory or one-arg register(table) callable.",
                )
    except PluginError:
        raise
    except Exception as exc:
        raise PluginError(
            code="PLG008",
            message=f"Plugin callable execution failed for spec '{spec}': {exc}",
            hint="Inspect plugin code and callable signature.",
        ) from exc

    if result is None:
        return

    _apply_loaded_object(table, result, spec)
