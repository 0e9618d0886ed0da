"""Shared call-assembly helpers for Codeception command emitters."""

from __future__ import annotations

from typing import Any, Callable

from codecept_export import location
from codecept_export.emission import DriverCallback, EmissionResult
from codecept_export.formatting import quote

Emitter = Callable[[Any, Any], EmissionResult]

ACTOR = "$I"

# Recorded command -> Codeception WebDriver method.
CODECEPTION_METHODS: dict[str, str] = {
    "acceptPopup": "acceptPopup",
    "answerOnNextPrompt": "typeInPopup",
    "assertAlert": "seeInPopup",
    "cancelPopup": "cancelPopup",
    "check": "checkOption",
    "click": "click",
    "doubleClick": "doubleClick",
    "dragAndDrop": "dragAndDrop",
    "executeAsyncScript": "executeAsyncJS",
    "mouseMove": "moveMouseOver",
    "openPage": "amOnPage",
    "openUrl": "amOnUrl",
    "pause": "wait",
    "removeSelection": "unselectOption",
    "resizeWindow": "resizeWindow",
    "runScript": "executeJS",
    "select": "selectOption",
    "sendKeys": "pressKey",
    "storeAttribute": "grabAttributeFrom",
    "storeText": "grabTextFrom",
    "storeValue": "grabValueFrom",
    "storeXpathCount": "grabMultiple",
    "switchToWindow": "switchToWindow",
    "type": "fillField",
    "uncheck": "uncheckOption",
    "verifyChecked": "seeCheckboxIsChecked",
    "verifyElementNotPresent": "dontSeeElementInDOM",
    "verifyElementPresent": "seeElementInDOM",
    "verifyNotChecked": "dontSeeCheckboxIsChecked",
    "verifyNotSelectedValue": "dontSeeInField",
    "verifyNotText": "dontSee",
    "verifySelectedLabel": "seeOptionIsSelected",
    "verifyText": "see",
    "verifyTitle": "seeInTitle",
    "verifyValue": "seeInField",
    "waitForElementClickable": "waitForElementClickable",
    "waitForElementNotVisible": "waitForElementNotVisible",
    "waitForElementPresent": "waitForElement",
    "waitForElementVisible": "waitForElementVisible",
    "waitForText": "waitForText",
}


def call(command: str, *args: str) -> str:
    """Render `$I->method(args)` without a statement terminator."""
    return f"{ACTOR}->{CODECEPTION_METHODS[command]}({', '.join(args)})"


def codeception_expression(
    command: str,
    locator: str | None = None,
    value: str | None = None,
    flip_location_and_value: bool = False,
) -> str:
    """Assemble a Codeception call from a command, a locator and a value.

    The locator is resolved through the locator resolver. `value` is passed
    through as an already-formatted PHP expression, except when flipped: then
    it is quoted and placed before the locator, matching methods such as
    `see($text, $selector)`.
    """
    if not locator:
        return call(command, value) if value else call(command)
    loc = location.emit(locator)
    if not value:
        return call(command, loc)
    if flip_location_and_value:
        return call(command, quote(value), loc)
    return call(command, loc, value)


def codeception(
    command: str,
    locator: str | None = None,
    value: str | None = None,
    flip_location_and_value: bool = False,
) -> str:
    """Same as `codeception_expression` but as a terminated statement."""
    return codeception_expression(command, locator, value, flip_location_and_value) + ";"


def selenium(*statements: str, assign_to: str | None = None) -> DriverCallback:
    """Wrap raw php-webdriver statements in the `executeInSelenium` escape hatch."""
    return DriverCallback(statements=tuple(statements), assign_to=assign_to)
