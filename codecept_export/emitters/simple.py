"""Single-statement emitters mapping one command to one Codeception call."""

from __future__ import annotations

import re

from codecept_export import location
from codecept_export.emission import Emission
from codecept_export.emitters.base import call, codeception, codeception_expression
from codecept_export.errors import UnsupportedFeatureError
from codecept_export.formatting import (
    duration,
    escape_script,
    looks_like_variable,
    quote,
    sanitize_name,
    script_arguments,
    seconds,
    variable_lookup,
    variable_setter,
)
from codecept_export.preprocess import Script

URL_PATTERN = re.compile(r"^(file|http|https)://")
KEY_PATTERN = re.compile(r"\['(.*)'\]")
WEBDRIVER_KEYS = "\\Facebook\\WebDriver\\WebDriverKeys"
NUMBER_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")
LITERAL_KEYWORDS = {"true", "false", "null"}
WAIT_FOR_TEXT_TIMEOUT = 30000


def skip(_target=None, _value=None) -> None:
    return None


def emit_assert(var_name: str | None, value: str | None) -> str:
    if not var_name:
        raise UnsupportedFeatureError(
            code="EXP102",
            message="Cannot emit `assert` without a variable name to compare.",
            hint="Record the variable name as the command target.",
        )
    return f"$I->assertEquals({variable_lookup(var_name)}, {_expected(value)});"


def _expected(value: str | None) -> str:
    if value is None:
        return "null"
    if looks_like_variable(value) or value in LITERAL_KEYWORDS or NUMBER_PATTERN.match(value):
        return value
    return quote(value)


def emit_assert_alert(alert_text: str, _value=None) -> str:
    return codeception("assertAlert", None, quote(alert_text))


def emit_answer_on_next_prompt(text_to_send: str, _value=None) -> Emission:
    return Emission.of(
        (0, codeception("answerOnNextPrompt", None, quote(text_to_send))),
        (0, codeception("acceptPopup")),
    )


def emit_choose_ok_on_next_confirmation(_target=None, _value=None) -> str:
    return codeception("acceptPopup")


def emit_choose_cancel_on_next_confirmation(_target=None, _value=None) -> str:
    return codeception("cancelPopup")


def emit_check(locator: str, _value=None) -> str:
    return codeception("check", locator)


def emit_uncheck(locator: str, _value=None) -> str:
    return codeception("uncheck", locator)


def emit_click(locator: str, _value=None) -> str:
    return codeception("click", locator)


def emit_double_click(locator: str, _value=None) -> str:
    return codeception("doubleClick", locator)


def emit_drag_and_drop(dragged: str, dropped: str) -> str:
    return call("dragAndDrop", location.emit(dragged), location.emit(dropped)) + ";"


def emit_echo(message: str, _value=None) -> str:
    text = message if looks_like_variable(message) else quote(message)
    return f"print({text});"


def emit_execute_script(script: Script, var_name: str | None) -> str:
    body = escape_script(script.script).replace("`", "\\`")
    return variable_setter(
        var_name,
        codeception_expression("runScript", None, f'"{body}"{script_arguments(script)}'),
    )


def emit_execute_async_script(script: Script, var_name: str | None) -> str:
    body = (
        "var callback = arguments[arguments.length - 1];"
        f"{escape_script(script.script)}.then(callback).catch(callback);"
    )
    return variable_setter(
        var_name,
        codeception_expression("executeAsyncScript", None, f'"{body}"{script_arguments(script)}'),
    )


def emit_run_script(script: Script, _value=None) -> str:
    return codeception("runScript", None, f'"{escape_script(script.script)}"{script_arguments(script)}')


def emit_mouse_move(locator: str, _value=None) -> str:
    return codeception("mouseMove", locator)


def emit_mouse_move_at(locator: str, coordinates: str | None) -> str:
    if not coordinates:
        return codeception("mouseMove", locator)
    x, y = (part.strip() for part in coordinates.split(","))
    return call("mouseMove", location.emit(locator), x, y) + ";"


def emit_mouse_out(_target=None, _value=None) -> str:
    return call("mouseMove", location.emit("css=body"), "0", "0") + ";"


def emit_open(target: str, _value=None) -> str:
    if URL_PATTERN.match(target):
        return codeception("openUrl", None, quote(target))
    return codeception("openPage", None, quote(target))


def emit_pause(time: str, _value=None) -> str:
    return codeception("pause", None, duration(time))


def emit_run(test_name: str, _value=None) -> str:
    return f"$this->{sanitize_name(test_name)}($I);"


def emit_set_speed(_target=None, _value=None) -> str:
    return 'print("`set speed` is a no-op in code export, use `pause` instead");'


def emit_set_window_size(size: str, _value=None) -> str:
    width, height = size.split("x")
    return call("resizeWindow", width.strip(), height.strip()) + ";"


def emit_select(select_element: str, option: str) -> str:
    return codeception("select", select_element, quote(option.split("=")[1]))


def emit_remove_selection(select_element: str, option: str) -> str:
    return codeception("removeSelection", select_element, quote(option.split("=")[1]))


def generate_send_keys_input(value: str | list[str]) -> str:
    """Render sendKeys input: variables bare, `Key['X']` as constants, text quoted."""
    if isinstance(value, str):
        return value if looks_like_variable(value) else quote(value)
    rendered: list[str] = []
    for part in value:
        if looks_like_variable(part):
            rendered.append(part)
        elif part.startswith("Key["):
            match = KEY_PATTERN.search(part)
            rendered.append(f"{WEBDRIVER_KEYS}::{match.group(1) if match else part}")
        else:
            rendered.append(quote(part))
    return ", ".join(rendered)


def emit_send_keys(locator: str, value: str | list[str]) -> str:
    return codeception("sendKeys", locator, generate_send_keys_input(value))


def emit_store(value: str, var_name: str | None) -> str:
    return variable_setter(var_name, quote(value or ""))


def emit_store_json(json_text: str, var_name: str | None) -> str:
    return variable_setter(var_name, f"json_decode('{json_text}')")


def emit_store_text(locator: str, var_name: str | None) -> str:
    return variable_setter(var_name, codeception_expression("storeText", locator))


def emit_store_title(_target, var_name: str | None) -> str:
    return variable_setter(var_name, codeception_expression("storeText", "xpath=//title"))


def emit_store_value(locator: str, var_name: str | None) -> str:
    return variable_setter(var_name, codeception_expression("storeValue", locator))


def emit_store_xpath_count(locator: str, var_name: str | None) -> str:
    return variable_setter(var_name, f"count({codeception_expression('storeXpathCount', locator)})")


def emit_type(locator: str, value: str | None) -> str:
    return codeception("type", locator, quote(value or ""))


def emit_verify_checked(locator: str, _value=None) -> str:
    return codeception("verifyChecked", locator)


def emit_verify_not_checked(locator: str, _value=None) -> str:
    return codeception("verifyNotChecked", locator)


def emit_verify_element_present(locator: str, _value=None) -> str:
    return codeception("verifyElementPresent", locator)


def emit_verify_element_not_present(locator: str, _value=None) -> str:
    return codeception("verifyElementNotPresent", locator)


def emit_verify_not_selected_value(locator: str, expected_value: str) -> str:
    return codeception("verifyNotSelectedValue", locator, quote(expected_value))


def emit_verify_selected_label(locator: str, label_value: str) -> str:
    return codeception("verifySelectedLabel", locator, quote(label_value))


def emit_verify_text(locator: str, text: str) -> str:
    return codeception("verifyText", locator, text, flip_location_and_value=True)


def emit_verify_not_text(locator: str, text: str) -> str:
    return codeception("verifyNotText", locator, text, flip_location_and_value=True)


def emit_verify_value(locator: str, value: str | None) -> str:
    return codeception("verifyValue", locator, quote(value or ""))


def emit_verify_title(title: str, _value=None) -> str:
    return codeception("verifyTitle", None, quote(title))


def emit_wait_for_element_present(locator: str, timeout: str) -> str:
    return codeception("waitForElementPresent", locator, str(seconds(timeout)))


def emit_wait_for_element_visible(locator: str, timeout: str) -> str:
    return codeception("waitForElementVisible", locator, str(seconds(timeout)))


def emit_wait_for_element_not_visible(locator: str, timeout: str) -> str:
    return codeception("waitForElementNotVisible", locator, str(seconds(timeout)))


def emit_wait_for_element_editable(locator: str, timeout: str) -> str:
    return codeception("waitForElementClickable", locator, str(seconds(timeout)))


def emit_wait_for_text(locator: str, text: str) -> str:
    return call(
        "waitForText",
        quote(text or ""),
        str(seconds(WAIT_FOR_TEXT_TIMEOUT)),
        location.emit(locator),
    ) + ";"
