from __future__ import annotations

import unittest

from codecept_export import location
from codecept_export.errors import LocatorError


class LocationTests(unittest.TestCase):
    def test_css_renders_strict_locator(self) -> None:
        self.assertEqual(location.emit('css=#submit'), '[\'css\' => "#submit"]')

    def test_bare_xpath_is_detected(self) -> None:
        self.assertEqual(location.emit('//div[@id="a"]'), '[\'xpath\' => "//div[@id=\\"a\\"]"]')
        self.assertEqual(location.emit('(//li)[2]'), '[\'xpath\' => "(//li)[2]"]')

    def test_link_text_maps_to_link_key(self) -> None:
        self.assertEqual(location.emit('linkText=Home'), '[\'link\' => "Home"]')
        self.assertEqual(location.emit('link=Home'), '[\'link\' => "Home"]')

    def test_partial_link_text_becomes_xpath(self) -> None:
        self.assertEqual(
            location.emit('partialLinkText=Hom'),
            '[\'xpath\' => "//a[contains(text(), \'Hom\')]"]',
        )

    def test_selector_may_contain_equals(self) -> None:
        self.assertEqual(location.emit('css=a[href=x]'), '[\'css\' => "a[href=x]"]')

    def test_emit_by_renders_webdriver_by(self) -> None:
        self.assertEqual(
            location.emit_by('css=#submit'),
            '\\Facebook\\WebDriver\\WebDriverBy::cssSelector("#submit")',
        )
        self.assertEqual(location.emit_by('id=q'), '\\Facebook\\WebDriver\\WebDriverBy::id("q")')

    def test_missing_strategy_is_rejected(self) -> None:
        with self.assertRaises(LocatorError) as ctx:
            location.emit('submit')
        self.assertEqual(ctx.exception.code, 'LOC001')

    def test_unknown_strategy_is_rejected(self) -> None:
        with self.assertRaises(LocatorError) as ctx:
            location.emit('dom=document.forms[0]')
        self.assertEqual(ctx.exception.code, 'LOC002')


if __name__ == '__main__':
    unittest.main()
