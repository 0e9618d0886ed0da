from __future__ import annotations

import unittest

from codecept_export.errors import ExportError
from codecept_export.hooks import HOOKS, generate, generate_hooks


class HookTests(unittest.TestCase):
    def test_all_hooks_generated(self) -> None:
        hooks = generate_hooks()
        self.assertEqual(set(hooks), set(HOOKS))
        self.assertEqual(len(hooks), 9)

    def test_empty_hooks(self) -> None:
        hooks = generate_hooks()
        for name in ('afterAll', 'beforeAll', 'declareMethods', 'declareVariables'):
            with self.subTest(hook=name):
                self.assertTrue(hooks[name].is_empty)

    def test_before_and_after_each_are_methods(self) -> None:
        before = generate('beforeEach')
        after = generate('afterEach')
        self.assertEqual(before.starting_syntax[0].statement, 'public function _before(AcceptanceTester $I)')
        self.assertEqual(after.starting_syntax[0].statement, 'public function _after(AcceptanceTester $I)')
        self.assertEqual(before.registration_level, 1)
        self.assertEqual([item.statement for item in before.ending_syntax], ['}'])

    def test_file_level_hooks(self) -> None:
        self.assertEqual(generate('inEachBegin').starting_syntax[0].statement, '<?php')
        self.assertEqual(generate('declareDependencies').starting_syntax[0].statement, 'use Faker\\Factory;')
        end = generate('inEachEnd').starting_syntax
        self.assertEqual((end[0].level, end[0].statement), (1, '}'))

    def test_unknown_hook(self) -> None:
        with self.assertRaises(ExportError) as ctx:
            generate('beforeEverything')
        self.assertEqual(ctx.exception.code, 'HOOK001')


if __name__ == '__main__':
    unittest.main()
