"""Built-in Codeception command table."""

from __future__ import annotations

from codecept_export import preprocess
from codecept_export.emitters import compound, simple
from codecept_export.emitters.base import Emitter
from codecept_export.emitters.control_flow import CONTROL_FLOW_EMITTERS
from codecept_export.table import CommandTable

EMITTERS: dict[str, Emitter] = {
    "addSelection": simple.emit_select,
    "answerOnNextPrompt": simple.skip,
    "assert": simple.emit_assert,
    "assertAlert": simple.emit_assert_alert,
    "assertChecked": simple.emit_verify_checked,
    "assertConfirmation": simple.emit_assert_alert,
    "assertEditable": compound.emit_verify_editable,
    "assertElementPresent": simple.emit_verify_element_present,
    "assertElementNotPresent": simple.emit_verify_element_not_present,
    "assertNotChecked": simple.emit_verify_not_checked,
    "assertNotEditable": compound.emit_verify_not_editable,
    "assertNotSelectedValue": simple.emit_verify_not_selected_value,
    "assertNotText": simple.emit_verify_not_text,
    "assertPrompt": simple.emit_assert_alert,
    "assertSelectedLabel": simple.emit_verify_selected_label,
    "assertSelectedValue": simple.emit_verify_value,
    "assertValue": simple.emit_verify_value,
    "assertText": simple.emit_verify_text,
    "assertTitle": simple.emit_verify_title,
    "check": simple.emit_check,
    "chooseCancelOnNextConfirmation": simple.skip,
    "chooseCancelOnNextPrompt": simple.skip,
    "chooseOkOnNextConfirmation": simple.skip,
    "click": simple.emit_click,
    "clickAt": simple.emit_click,
    "close": compound.emit_close,
    "debugger": simple.skip,
    "doubleClick": simple.emit_double_click,
    "doubleClickAt": simple.emit_double_click,
    "dragAndDropToObject": simple.emit_drag_and_drop,
    "echo": simple.emit_echo,
    "editContent": compound.emit_edit_content,
    "executeScript": simple.emit_execute_script,
    "executeAsyncScript": simple.emit_execute_async_script,
    "mouseDown": compound.emit_mouse_down,
    "mouseDownAt": compound.emit_mouse_down,
    "mouseMove": simple.emit_mouse_move,
    "mouseMoveAt": simple.emit_mouse_move_at,
    "mouseOver": simple.emit_mouse_move,
    "mouseOut": simple.emit_mouse_out,
    "mouseUp": compound.emit_mouse_up,
    "mouseUpAt": compound.emit_mouse_up,
    "open": simple.emit_open,
    "pause": simple.emit_pause,
    "run": simple.emit_run,
    "runScript": simple.emit_run_script,
    "select": simple.emit_select,
    "removeSelection": simple.emit_remove_selection,
    "selectFrame": compound.emit_select_frame,
    "selectWindow": compound.emit_select_window,
    "sendKeys": simple.emit_send_keys,
    "setSpeed": simple.emit_set_speed,
    "setWindowSize": simple.emit_set_window_size,
    "store": simple.emit_store,
    "storeAttribute": compound.emit_store_attribute,
    "storeJson": simple.emit_store_json,
    "storeText": simple.emit_store_text,
    "storeTitle": simple.emit_store_title,
    "storeValue": simple.emit_store_value,
    "storeWindowHandle": compound.emit_store_window_handle,
    "storeXpathCount": simple.emit_store_xpath_count,
    "submit": simple.emit_click,
    "type": simple.emit_type,
    "uncheck": simple.emit_uncheck,
    "verify": simple.emit_assert,
    "verifyChecked": simple.emit_verify_checked,
    "verifyEditable": compound.emit_verify_editable,
    "verifyElementPresent": simple.emit_verify_element_present,
    "verifyElementNotPresent": simple.emit_verify_element_not_present,
    "verifyNotChecked": simple.emit_verify_not_checked,
    "verifyNotEditable": compound.emit_verify_not_editable,
    "verifyNotSelectedValue": simple.emit_verify_not_selected_value,
    "verifyNotText": simple.emit_verify_not_text,
    "verifySelectedLabel": simple.emit_verify_selected_label,
    "verifySelectedValue": simple.emit_verify_value,
    "verifyText": simple.emit_verify_text,
    "verifyTitle": simple.emit_verify_title,
    "verifyValue": simple.emit_verify_value,
    "waitForElementEditable": simple.emit_wait_for_element_editable,
    "waitForElementPresent": simple.emit_wait_for_element_present,
    "waitForElementVisible": simple.emit_wait_for_element_visible,
    "waitForElementNotEditable": compound.emit_wait_for_element_not_editable,
    "waitForElementNotPresent": compound.emit_wait_for_element_not_present,
    "waitForElementNotVisible": simple.emit_wait_for_element_not_visible,
    "waitForText": simple.emit_wait_for_text,
    "webdriverAnswerOnVisiblePrompt": simple.emit_answer_on_next_prompt,
    "webdriverChooseCancelOnVisibleConfirmation": simple.emit_choose_cancel_on_next_confirmation,
    "webdriverChooseCancelOnVisiblePrompt": simple.emit_choose_cancel_on_next_confirmation,
    "webdriverChooseOkOnVisibleConfirmation": simple.emit_choose_ok_on_next_confirmation,
}
EMITTERS.update({kind.value: emitter for kind, emitter in CONTROL_FLOW_EMITTERS.items()})

# Commands whose target is a script with `${var}` references lifted into arguments.
SCRIPT_TARGETS = (
    "executeScript",
    "executeAsyncScript",
    "runScript",
    "if",
    "elseIf",
    "while",
    "repeatIf",
)


def build_command_table() -> CommandTable:
    """Create a command table with every built-in Codeception emitter."""
    table = CommandTable()
    for name, emitter in EMITTERS.items():
        target_preprocessor = preprocess.script if name in SCRIPT_TARGETS else None
        value_preprocessor = None
        if name == "sendKeys":
            value_preprocessor = preprocess.keys
        elif name == "storeJson":
            target_preprocessor = preprocess.raw
        table.register(
            name,
            emitter,
            target_preprocessor=target_preprocessor,
            value_preprocessor=value_preprocessor,
        )
    return table
