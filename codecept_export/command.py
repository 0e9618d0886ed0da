"""Recorded command record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

COMMENT_PREFIX = "//"


@dataclass(frozen=True)
class Command:
    """One recorded automation step."""

    name: str
    target: str | None = None
    value: str | None = None
    comment: str = ""
    opens_window: bool = False
    window_handle_name: str = ""
    window_timeout: int | None = None
    id: str = ""

    @property
    def is_disabled(self) -> bool:
        """Commands commented out in the recorder (`//click`)."""
        return self.name.startswith(COMMENT_PREFIX)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Command:
        """Build a command from a Selenium IDE JSON command object."""
        timeout = payload.get("windowTimeout")
        return cls(
            name=str(payload.get("command", "")),
            target=_optional_text(payload.get("target")),
            value=_optional_text(payload.get("value")),
            comment=str(payload.get("comment") or ""),
            opens_window=bool(payload.get("opensWindow", False)),
            window_handle_name=str(payload.get("windowHandleName") or ""),
            window_timeout=int(timeout) if timeout is not None else None,
            id=str(payload.get("id") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "command": self.name,
            "target": self.target or "",
            "value": self.value or "",
        }
        if self.comment:
            payload["comment"] = self.comment
        if self.opens_window:
            payload["opensWindow"] = True
            payload["windowHandleName"] = self.window_handle_name
            payload["windowTimeout"] = self.window_timeout
        if self.id:
            payload["id"] = self.id
        return payload


def _optional_text(value: Any) -> str | None:
    # The recorder stores absent parameters as empty strings.
    if value is None or value == "":
        return None
    return str(value)
