from __future__ import annotations

import json
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]

SIDE = {
    'name': 'demo',
    'url': 'https://example.test',
    'tests': [
        {
            'name': 'Login',
            'commands': [
                {'command': 'open', 'target': '/login', 'value': ''},
                {'command': 'type', 'target': 'id=user', 'value': 'admin'},
                {'command': 'click', 'target': 'css=#submit', 'value': ''},
            ],
        }
    ],
}


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, '-m', 'codecept_export.cli', *args],
        cwd=PROJECT_ROOT,
        text=True,
        capture_output=True,
        check=False,
    )


class CLITests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write_side(self, payload: dict) -> Path:
        path = self.tmp / 'demo.side'
        path.write_text(json.dumps(payload), encoding='utf-8')
        return path

    def test_export_to_stdout(self) -> None:
        result = run_cli('export', str(self.write_side(SIDE)))
        self.assertEqual(result.returncode, 0)
        self.assertIn('class DemoCest', result.stdout)
        self.assertIn('$I->fillField([\'id\' => "user"], "admin");', result.stdout)

    def test_export_to_file(self) -> None:
        output = self.tmp / 'DemoCest.php'
        result = run_cli('export', str(self.write_side(SIDE)), '-o', str(output))
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout, '')
        self.assertIn('public function login(AcceptanceTester $I)', output.read_text(encoding='utf-8'))

    def test_export_error_exit_code(self) -> None:
        payload = {
            'name': 'demo',
            'tests': [{'name': 't', 'commands': [{'command': 'selectWindow', 'target': 'title=x'}]}],
        }
        result = run_cli('export', str(self.write_side(payload)))
        self.assertEqual(result.returncode, 1)
        self.assertIn('EXP101', result.stderr)

    def test_missing_input(self) -> None:
        result = run_cli('export', str(self.tmp / 'missing.side'))
        self.assertEqual(result.returncode, 1)
        self.assertIn('PRJ001', result.stderr)

    def test_strict_flag(self) -> None:
        payload = {'name': 'demo', 'tests': [{'name': 't', 'commands': [{'command': 'end'}]}]}
        self.assertEqual(run_cli('export', str(self.write_side(payload))).returncode, 0)
        result = run_cli('export', str(self.write_side(payload)), '--strict')
        self.assertEqual(result.returncode, 1)
        self.assertIn('LVL001', result.stderr)

    def test_emit_single_command(self) -> None:
        result = run_cli('emit', '--command', 'click', '--target', 'css=#submit')
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.strip(), '$I->click([\'css\' => "#submit"]);')

    def test_emit_malformed_parameters(self) -> None:
        result = run_cli('emit', '--command', 'setWindowSize', '--target', 'wide')
        self.assertEqual(result.returncode, 1)
        self.assertIn('EXP002', result.stderr)

    def test_export_malformed_project(self) -> None:
        payload = {'name': 'demo', 'tests': [{'name': 't', 'commands': [{'command': 'click', 'windowTimeout': 'x'}]}]}
        result = run_cli('export', str(self.write_side(payload)))
        self.assertEqual(result.returncode, 1)
        self.assertIn('PRJ006', result.stderr)

    def test_emit_unknown_command(self) -> None:
        result = run_cli('emit', '--command', 'teleport')
        self.assertEqual(result.returncode, 2)
        self.assertIn('CLI001', result.stderr)

    def test_emit_bad_plugin(self) -> None:
        result = run_cli('emit', '--command', 'click', '--target', 'css=#a', '--plugin', 'codecept_export_missing')
        self.assertEqual(result.returncode, 1)
        self.assertIn('PLG005', result.stderr)

    def test_commands_json(self) -> None:
        result = run_cli('commands', '--json')
        self.assertEqual(result.returncode, 0)
        names = json.loads(result.stdout)
        self.assertIn('click', names)
        self.assertIn('executeScript', names)

    def test_verbose_logs_to_stderr(self) -> None:
        result = run_cli('-v', 'export', str(self.write_side(SIDE)))
        self.assertEqual(result.returncode, 0)
        self.assertIn('Exporting project', result.stderr)


if __name__ == '__main__':
    unittest.main()
