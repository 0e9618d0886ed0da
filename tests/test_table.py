from __future__ import annotations

import unittest

from codecept_export.command import Command
from codecept_export.emission import DriverCallback, Emission, normalize
from codecept_export.emitters.builtin import build_command_table
from codecept_export.errors import UnsupportedCommandError
from codecept_export.preprocess import Script
from codecept_export.table import CommandTable


class CommandTableTests(unittest.TestCase):
    def test_get_unknown_command_raises(self) -> None:
        with self.assertRaises(UnsupportedCommandError) as ctx:
            CommandTable().get('click')
        self.assertEqual(ctx.exception.code, 'EXP001')
        self.assertEqual(ctx.exception.command, 'click')

    def test_register_overrides_builtin(self) -> None:
        table = build_command_table()
        table.register('click', lambda target, _value: f'$I->clickWithLeftButton({target!r});')
        self.assertEqual(
            table.emit(Command(name='click', target='css=#a')),
            "$I->clickWithLeftButton('css=#a');",
        )

    def test_override_keeps_preprocessors(self) -> None:
        table = build_command_table()
        seen: list[object] = []

        def capture(target, value):
            seen.append(target)
            return None

        table.register('executeScript', capture)
        table.emit(Command(name='executeScript', target='return ${a}'))
        self.assertEqual(seen, [Script('return arguments[0]', ('a',))])

    def test_default_preprocessor_interpolates(self) -> None:
        table = CommandTable()
        table.register('echoRaw', lambda target, value: f'{target}|{value}')
        self.assertEqual(table.emit(Command(name='echoRaw', target='${a}', value='b${c}')), '$a|b$c')

    def test_copy_is_independent(self) -> None:
        table = build_command_table()
        clone = table.copy()
        clone.register('teleport', lambda target, value: 'teleport();')
        self.assertTrue(clone.can_emit('teleport'))
        self.assertFalse(table.can_emit('teleport'))

    def test_names_are_sorted(self) -> None:
        names = build_command_table().names()
        self.assertEqual(names, sorted(names))
        self.assertIn('click', names)


class EmissionTests(unittest.TestCase):
    def test_normalize_variants(self) -> None:
        self.assertIsNone(normalize(None))
        text = normalize('$I->click("a");')
        self.assertEqual(text.commands[0].statement, '$I->click("a");')
        emission = Emission.of((0, 'a'), (1, 'b'), starting=-1, ending=1)
        self.assertIs(normalize(emission), emission)
        self.assertEqual(len(normalize(DriverCallback(('$webdriver->close();',))).commands), 3)

    def test_normalize_rejects_other_types(self) -> None:
        with self.assertRaises(TypeError):
            normalize(42)


if __name__ == '__main__':
    unittest.main()
