"""Control-flow emitters rebuilding block structure from begin/else/end markers.

Each kind carries a fixed `(starting, ending)` level adjustment pair. The
starting adjustment is applied to the running level before the kind's lines
are placed (closing and re-opening lines outdent to their opener); the ending
adjustment is applied after (subsequent siblings land inside the new block).
Over a balanced region the adjustments sum to zero.
"""

from __future__ import annotations

from enum import Enum

from codecept_export.emission import Emission
from codecept_export.formatting import expression_script, variable_lookup
from codecept_export.preprocess import Script


class ControlFlow(str, Enum):
    DO = "do"
    IF = "if"
    ELSE_IF = "elseIf"
    ELSE = "else"
    END = "end"
    WHILE = "while"
    REPEAT_IF = "repeatIf"
    FOR_EACH = "forEach"
    TIMES = "times"


CONTROL_FLOW_ADJUSTMENTS: dict[ControlFlow, tuple[int, int]] = {
    ControlFlow.DO: (0, 1),
    ControlFlow.IF: (0, 1),
    ControlFlow.ELSE_IF: (-1, 1),
    ControlFlow.ELSE: (-1, 1),
    ControlFlow.END: (-1, 0),
    ControlFlow.WHILE: (0, 1),
    ControlFlow.REPEAT_IF: (-1, 0),
    ControlFlow.FOR_EACH: (0, 1),
    ControlFlow.TIMES: (0, 1),
}


def _block(kind: ControlFlow, *lines: tuple[int, str]) -> Emission:
    starting, ending = CONTROL_FLOW_ADJUSTMENTS[kind]
    return Emission.of(*lines, starting=starting, ending=ending)


def emit_control_flow_do(_target=None, _value=None) -> Emission:
    return _block(ControlFlow.DO, (0, "do {"))


def emit_control_flow_if(script: Script, _value=None) -> Emission:
    return _block(ControlFlow.IF, (0, f"if ({expression_script(script)}) {{"))


def emit_control_flow_else_if(script: Script, _value=None) -> Emission:
    return _block(ControlFlow.ELSE_IF, (0, f"}} else if ({expression_script(script)}) {{"))


def emit_control_flow_else(_target=None, _value=None) -> Emission:
    return _block(ControlFlow.ELSE, (0, "} else {"))


def emit_control_flow_end(_target=None, _value=None) -> Emission:
    return _block(ControlFlow.END, (0, "}"))


def emit_control_flow_while(script: Script, _value=None) -> Emission:
    return _block(ControlFlow.WHILE, (0, f"while ({expression_script(script)}) {{"))


def emit_control_flow_repeat_if(script: Script, _value=None) -> Emission:
    return _block(ControlFlow.REPEAT_IF, (0, f"}} while ({expression_script(script)});"))


def emit_control_flow_for_each(collection_var_name: str, iterator_var_name: str) -> Emission:
    return _block(
        ControlFlow.FOR_EACH,
        (0, f"$collection = {variable_lookup(collection_var_name)};"),
        (0, "for ($i = 0; $i < sizeof($collection); $i++) {"),
        (1, f"{variable_lookup(iterator_var_name)} = $collection[$i];"),
    )


def emit_control_flow_times(target: str, _value=None) -> Emission:
    return _block(
        ControlFlow.TIMES,
        (0, f"$times = {target};"),
        (0, "for ($i = 0; $i < $times; $i++) {"),
    )


CONTROL_FLOW_EMITTERS = {
    ControlFlow.DO: emit_control_flow_do,
    ControlFlow.IF: emit_control_flow_if,
    ControlFlow.ELSE_IF: emit_control_flow_else_if,
    ControlFlow.ELSE: emit_control_flow_else,
    ControlFlow.END: emit_control_flow_end,
    ControlFlow.WHILE: emit_control_flow_while,
    ControlFlow.REPEAT_IF: emit_control_flow_repeat_if,
    ControlFlow.FOR_EACH: emit_control_flow_for_each,
    ControlFlow.TIMES: emit_control_flow_times,
}
