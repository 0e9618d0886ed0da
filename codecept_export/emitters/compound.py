"""Multi-statement emitters and the raw-driver escape hatch.

Commands that Codeception's WebDriver module has no primitive for are
written as php-webdriver calls inside `$I->executeInSelenium(...)`.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import re

from codecept_export import location
from codecept_export.command import Command
from codecept_export.emission import DriverCallback, Emission, EmissionResult, LeveledStatement, normalize
from codecept_export.emitters.base import call, codeception_expression, selenium
from codecept_export.errors import UnsupportedFeatureError
from codecept_export.formatting import escape_script, quote, seconds, variable_lookup, variable_setter

WAIT_FOR_WINDOW = "waitForWindow"
WINDOW_HANDLES = "$windowHandles"
WINDOW_SERIAL_PREFIX = "win_ser_"
ASSERT = "\\PHPUnit\\Framework\\Assert"
EXPECTED_CONDITION = "\\Facebook\\WebDriver\\WebDriverExpectedCondition"
INDEX_PATTERN = re.compile(r"^index=")


def emit_store_attribute(locator: str, var_name: str | None) -> Emission:
    attribute_pos = locator.rfind("@")
    element_locator = locator[:attribute_pos]
    attribute_name = locator[attribute_pos + 1:]
    grab = codeception_expression("storeAttribute", element_locator, quote(attribute_name))
    return Emission.of(
        (0, "{"),
        (1, f"$attribute = {grab};"),
        (1, variable_setter(var_name, "$attribute")),
        (0, "}"),
    )


def emit_edit_content(locator: str, content: str | None) -> DriverCallback:
    return selenium(
        f"$element = $webdriver->findElement({location.emit_by(locator)});",
        "$webdriver->executeScript(\"if(arguments[0].contentEditable === 'true') "
        f"{{arguments[0].innerText = '{escape_script(content or '')}'}}\", [$element]);",
    )


def emit_mouse_down(locator: str, _value=None) -> DriverCallback:
    return selenium(
        f"$coordinates = $webdriver->findElement({location.emit_by(locator)})->getCoordinates();",
        "$webdriver->getMouse()->mouseDown($coordinates);",
    )


def emit_mouse_up(locator: str, _value=None) -> DriverCallback:
    return selenium(
        f"$coordinates = $webdriver->findElement({location.emit_by(locator)})->getCoordinates();",
        "$webdriver->getMouse()->mouseUp($coordinates);",
    )


def emit_close(_target=None, _value=None) -> DriverCallback:
    return selenium("$webdriver->close();")


def emit_select_frame(frame_location: str, _value=None) -> DriverCallback:
    if frame_location in ("relative=top", "relative=parent"):
        return selenium("$webdriver->switchTo()->defaultContent();")
    if INDEX_PATTERN.match(frame_location):
        frame = math.floor(float(frame_location.split("index=")[1]))
        return selenium(f"$webdriver->switchTo()->frame({frame});")
    return selenium(
        f"$element = $webdriver->findElement({location.emit_by(frame_location)});",
        "$webdriver->switchTo()->frame($element);",
    )


def emit_select_window(window_location: str, _value=None) -> str | DriverCallback:
    if window_location.startswith("handle="):
        return call("switchToWindow", window_location.split("handle=")[1]) + ";"
    if window_location.startswith("name="):
        return call("switchToWindow", quote(window_location.split("name=")[1])) + ";"
    if window_location.startswith(WINDOW_SERIAL_PREFIX):
        if window_location == "win_ser_local":
            return call("switchToWindow") + ";"
        index = int(window_location[len(WINDOW_SERIAL_PREFIX):])
        return selenium(f"$webdriver->switchTo()->window($webdriver->getWindowHandles()[{index}]);")
    raise UnsupportedFeatureError(
        code="EXP101",
        message=f"Can only emit `select window` using handles, names or win_ser_ indices, got '{window_location}'.",
        command="selectWindow",
        hint="Record the window selection with handle=, name= or win_ser_N.",
    )


def emit_store_window_handle(var_name: str | None, _value=None) -> DriverCallback:
    return selenium(
        "$webdriver->getWindowHandle();",
        assign_to=variable_lookup(var_name) if var_name else None,
    )


def emit_verify_editable(locator: str, _value=None) -> DriverCallback:
    return selenium(f"{ASSERT}::assertTrue($webdriver->findElement({location.emit_by(locator)})->isEnabled());")


def emit_verify_not_editable(locator: str, _value=None) -> DriverCallback:
    return selenium(f"{ASSERT}::assertFalse($webdriver->findElement({location.emit_by(locator)})->isEnabled());")


def emit_wait_for_element_not_present(locator: str, timeout: str) -> DriverCallback:
    return selenium(
        f"$webdriver->wait({seconds(timeout)})->until("
        f"{EXPECTED_CONDITION}::stalenessOf($webdriver->findElement({location.emit_by(locator)})));"
    )


def emit_wait_for_element_not_editable(locator: str, timeout: str) -> DriverCallback:
    return selenium(
        f"$webdriver->wait({seconds(timeout)})->until({EXPECTED_CONDITION}::not("
        f"{EXPECTED_CONDITION}::elementToBeClickable({location.emit_by(locator)})));"
    )


@dataclass(frozen=True)
class MethodDeclaration:
    """Helper method the assembled class needs, rendered at class-body level."""

    name: str
    declaration: str
    body: tuple[LeveledStatement, ...]


def emit_wait_for_window() -> MethodDeclaration:
    """Declare `waitForWindow`, polling for a handle absent from a snapshot."""
    body = Emission.of(
        (0, "$I->wait($timeout);"),
        (0, "$handlesNow = $I->executeInSelenium(function (\\Facebook\\WebDriver\\Remote\\RemoteWebDriver $webdriver) {"),
        (1, "return $webdriver->getWindowHandles();"),
        (0, "});"),
        (0, "$newHandles = array_values(array_diff($handlesNow, $handlesThen));"),
        (0, "if (count($newHandles) > 0) {"),
        (1, "return $newHandles[0];"),
        (0, "}"),
        (0, "throw new \\RuntimeException(\"New window did not appear before timeout\");"),
    )
    return MethodDeclaration(
        name=WAIT_FOR_WINDOW,
        declaration=f"private function {WAIT_FOR_WINDOW}(AcceptanceTester $I, array $handlesThen, $timeout = 2)",
        body=body.commands,
    )


def emit_new_window_handling(command: Command, emitted: EmissionResult) -> Emission:
    """Snapshot window handles around a command that opens a new window."""
    snapshot = selenium("$webdriver->getWindowHandles();", assign_to=WINDOW_HANDLES).to_emission()
    inner = normalize(emitted)
    timeout = seconds(command.window_timeout) if command.window_timeout is not None else 2
    wait = variable_setter(
        command.window_handle_name,
        f"$this->{WAIT_FOR_WINDOW}($I, {WINDOW_HANDLES}, {timeout})",
    )
    lines = [(item.level, item.statement) for item in snapshot.commands]
    if inner is not None:
        lines.extend((item.level, item.statement) for item in inner.commands)
    lines.append((0, wait))
    return Emission.of(
        *lines,
        starting=inner.starting_level_adjustment if inner else 0,
        ending=inner.ending_level_adjustment if inner else 0,
    )
