"""Parameter preprocessors applied to command targets and values before emission."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable, Union

VARIABLE_PATTERN = re.compile(r"\$\{(\w+)\}")
KEY_PREFIX = "KEY_"

Preprocessor = Callable[[Union[str, None]], object]


@dataclass(frozen=True)
class Script:
    """Script text with `${var}` references lifted into call arguments."""

    script: str
    argv: tuple[str, ...] = ()


def interpolate(text: str | None) -> str | None:
    """Replace `${name}` references with PHP variables (`$name`)."""
    if text is None:
        return None
    return VARIABLE_PATTERN.sub(lambda match: f"${match.group(1)}", text)


def raw(text: str | None) -> str | None:
    return text


def script(text: str | None) -> Script:
    """Lift `${name}` references into `arguments[i]` and collect argv in order."""
    argv: list[str] = []

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in argv:
            argv.append(name)
        return f"arguments[{argv.index(name)}]"

    body = VARIABLE_PATTERN.sub(_replace, text or "")
    return Script(script=body, argv=tuple(argv))


def keys(text: str | None) -> list[str]:
    """Split a sendKeys value into literal runs, `Key['X']` markers and `$vars`."""
    parts: list[str] = []
    position = 0
    source = text or ""
    for match in VARIABLE_PATTERN.finditer(source):
        if match.start() > position:
            parts.append(source[position:match.start()])
        name = match.group(1)
        if name.startswith(KEY_PREFIX):
            parts.append(f"Key['{name[len(KEY_PREFIX):]}']")
        else:
            parts.append(f"${name}")
        position = match.end()
    if position < len(source) or not parts:
        parts.append(source[position:])
    return parts
