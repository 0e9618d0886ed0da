"""PHP literal and expression snippets used by emitters."""

from __future__ import annotations

import math
import re

from codecept_export.preprocess import Script

_WORD_BOUNDARY = re.compile(r"[^A-Za-z0-9]+")


def quote(value: str) -> str:
    """Quote text as a PHP double-quoted string, keeping `$var` interpolation."""
    return f'"{_escape(value)}"'


def escape_script(script: str) -> str:
    """Escape script text for embedding in a PHP double-quoted string."""
    return _escape(script).replace("$", "\\$")


def _escape(text: str) -> str:
    # Line breaks become escape sequences so a literal never spans rendered lines.
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r")


def variable_lookup(name: str) -> str:
    return f"${name}"


def variable_setter(name: str | None, expression: str) -> str:
    """Assign an expression to a variable, or emit it bare without a name."""
    if name:
        return f"{variable_lookup(name)} = {expression};"
    return f"{expression};"


def looks_like_variable(value: str) -> bool:
    return value.startswith("$")


def script_arguments(script: Script) -> str:
    """Render declared script arguments as `, $a,$b` (empty without argv)."""
    if not script.argv:
        return ""
    return ", " + ",".join(variable_lookup(name) for name in script.argv)


def expression_script(script: Script) -> str:
    """Render a condition: run the script and return its value."""
    return f'$I->executeJS("return {escape_script(script.script)}"{script_arguments(script)})'


def seconds(milliseconds: str | int | float) -> int:
    """Floor a recorded millisecond timeout to whole seconds."""
    return math.floor(float(milliseconds) / 1000)


def duration(milliseconds: str | int | float) -> str:
    """Render a recorded millisecond duration as a PHP seconds literal."""
    value = float(milliseconds) / 1000
    if value.is_integer():
        return str(int(value))
    return repr(value)


def sanitize_name(name: str) -> str:
    """Turn a recorded test name into a PHP method name (camelCase)."""
    words = [word for word in _WORD_BOUNDARY.split(name) if word]
    if not words:
        return "test"
    head, *tail = words
    sanitized = head[0].lower() + head[1:] + "".join(word[0].upper() + word[1:] for word in tail)
    if sanitized[0].isdigit():
        sanitized = f"test{sanitized}"
    return sanitized


def class_name(name: str) -> str:
    """Turn a recorded project name into a PHP class name (PascalCase)."""
    method = sanitize_name(name)
    return method[0].upper() + method[1:]


def unique_name(name: str, taken: set[str]) -> str:
    """Suffix `name` with a counter until it is not in `taken`, then claim it."""
    candidate = name
    counter = 2
    while candidate in taken:
        candidate = f"{name}{counter}"
        counter += 1
    taken.add(candidate)
    return candidate
