"""Locator resolution into Codeception and php-webdriver expressions."""

from __future__ import annotations

from codecept_export.errors import LocatorError
from codecept_export.formatting import quote

# Codeception strict locator keys.
STRICT_KEYS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "css": "css",
    "xpath": "xpath",
    "link": "link",
    "linkText": "link",
}

# WebDriverBy factory methods.
BY_METHODS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "css": "cssSelector",
    "xpath": "xpath",
    "link": "linkText",
    "linkText": "linkText",
    "partialLinkText": "partialLinkText",
}

WEBDRIVER_BY = "\\Facebook\\WebDriver\\WebDriverBy"


def split_locator(locator: str) -> tuple[str, str]:
    """Split `strategy=selector` into its two parts."""
    if locator.startswith("//") or locator.startswith("("):
        return "xpath", locator
    strategy, sep, selector = locator.partition("=")
    if not sep:
        raise LocatorError(
            code="LOC001",
            message=f"Locator '{locator}' has no strategy.",
            hint="Use strategy=selector, e.g. css=#submit.",
        )
    if strategy not in BY_METHODS:
        raise LocatorError(
            code="LOC002",
            message=f"Unknown locator strategy '{strategy}'.",
            hint=f"Supported strategies: {', '.join(sorted(BY_METHODS))}",
        )
    return strategy, selector


def emit(locator: str) -> str:
    """Render a Codeception strict locator, e.g. `['css' => "#submit"]`."""
    strategy, selector = split_locator(locator)
    if strategy == "partialLinkText":
        return f"['xpath' => {quote(_partial_link_xpath(selector))}]"
    return f"['{STRICT_KEYS[strategy]}' => {quote(selector)}]"


def emit_by(locator: str) -> str:
    """Render a php-webdriver `WebDriverBy` expression for raw driver calls."""
    strategy, selector = split_locator(locator)
    return f"{WEBDRIVER_BY}::{BY_METHODS[strategy]}({quote(selector)})"


def _partial_link_xpath(text: str) -> str:
    return f"//a[contains(text(), '{text}')]"
