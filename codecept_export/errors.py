"""Structured export diagnostics and exception hierarchy."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """Diagnostic emitted by export phases and printed by the CLI."""

    code: str
    message: str
    command: str | None = None
    hint: str = ""


class ExportError(Exception):
    """Base export error carrying a code and the offending command name."""

    def __init__(self, code: str, message: str, command: str | None = None, hint: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.command = command
        self.hint = hint

    def to_diagnostic(self) -> Diagnostic:
        """Convert exception into serializable diagnostic."""
        return Diagnostic(code=self.code, message=self.message, command=self.command, hint=self.hint)

    def __str__(self) -> str:
        if self.command is None:
            return f"[{self.code}] {self.message}"
        return f"[{self.code}] {self.message} (command '{self.command}')"


class UnsupportedCommandError(ExportError):
    """Raised when no emitter is registered for a command name."""


class UnsupportedFeatureError(ExportError):
    """Raised when a known command uses a variant the target cannot express."""


class LocatorError(ExportError):
    """Raised by locator resolution failures."""


class NestingError(ExportError):
    """Raised by strict level tracking on unbalanced control flow."""


class ProjectError(ExportError):
    """Raised when a recorded project cannot be loaded."""


class PluginError(ExportError):
    """Raised by plugin loading failures."""


class CLIError(ExportError):
    """Raised by CLI usage or orchestration failures."""


def format_diagnostic(diag: Diagnostic) -> str:
    """Format diagnostic into a stable human-readable line."""
    suffix = f" [{diag.command}]" if diag.command else ""
    hint = f" Hint: {diag.hint}" if diag.hint else ""
    return f"{diag.code}{suffix}: {diag.message}{hint}"
