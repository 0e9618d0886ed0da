from __future__ import annotations

import sys
import types
import unittest

from codecept_export.command import Command
from codecept_export.emitters.builtin import build_command_table
from codecept_export.errors import PluginError
from codecept_export.plugin import EmitterPlugin, load_plugin_spec, load_plugins
from codecept_export.preprocess import raw


MODULE_NAME = 'codecept_export_test_plugins'


class ScreenshotPlugin(EmitterPlugin):
    value_preprocessor = raw

    @property
    def name(self) -> str:
        return 'captureEntirePageScreenshot'

    def emit(self, target, value):
        return f'$I->makeScreenshot("{target}");'


def register(table) -> None:
    table.register('click', lambda target, _value: '$I->clickWithLeftButton();')


def emitters():
    return {'teleport': lambda target, _value: f'$I->amOnUrl("{target}");'}


def two_args(table, extra):
    return None


def failing():
    raise RuntimeError('boom')


class PluginTests(unittest.TestCase):
    def setUp(self) -> None:
        module = types.ModuleType(MODULE_NAME)
        module.register = register
        module.emitters = emitters
        module.MAPPING = {'hover': lambda target, _value: '$I->moveMouseOver();'}
        module.ScreenshotPlugin = ScreenshotPlugin
        module.PLUGINS = [ScreenshotPlugin(), {'noop': lambda target, value: None}]
        module.two_args = two_args
        module.failing = failing
        module.NOT_A_PLUGIN = 42
        module.BAD_MAPPING = {'oops': 'not callable'}
        sys.modules[MODULE_NAME] = module
        self.table = build_command_table()

    def tearDown(self) -> None:
        sys.modules.pop(MODULE_NAME, None)

    def test_module_spec_uses_register(self) -> None:
        load_plugin_spec(self.table, MODULE_NAME)
        self.assertEqual(self.table.emit(Command(name='click', target='css=#a')), '$I->clickWithLeftButton();')

    def test_factory_returning_mapping(self) -> None:
        load_plugin_spec(self.table, f'{MODULE_NAME}:emitters')
        self.assertEqual(
            self.table.emit(Command(name='teleport', target='https://mars.test')),
            '$I->amOnUrl("https://mars.test");',
        )

    def test_mapping_export(self) -> None:
        load_plugin_spec(self.table, f'{MODULE_NAME}:MAPPING')
        self.assertTrue(self.table.can_emit('hover'))

    def test_plugin_class_and_iterable(self) -> None:
        load_plugin_spec(self.table, f'{MODULE_NAME}:ScreenshotPlugin')
        self.assertEqual(
            self.table.emit(Command(name='captureEntirePageScreenshot', target='home')),
            '$I->makeScreenshot("home");',
        )
        load_plugins(self.table, [f'{MODULE_NAME}:PLUGINS'])
        self.assertTrue(self.table.can_emit('noop'))

    def test_plugin_errors(self) -> None:
        cases = {
            '': 'PLG004',
            f'{MODULE_NAME}:missing': 'PLG003',
            'codecept_export_no_such_module': 'PLG005',
            f'{MODULE_NAME}:NOT_A_PLUGIN': 'PLG006',
            f'{MODULE_NAME}:two_args': 'PLG007',
            f'{MODULE_NAME}:failing': 'PLG008',
            f'{MODULE_NAME}:BAD_MAPPING': 'PLG009',
        }
        for spec, code in cases.items():
            with self.subTest(spec=spec):
                with self.assertRaises(PluginError) as ctx:
                    load_plugin_spec(self.table, spec)
                self.assertEqual(ctx.exception.code, code)


if __name__ == '__main__':
    unittest.main()
