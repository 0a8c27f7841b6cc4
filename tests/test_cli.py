import unittest
import json
import shutil
import sys
import os
import tempfile

# Ensure src is in path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from click.testing import CliRunner

from pykv.cli import cli

class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, text, name='event.txt'):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as fp:
            fp.write(text)
        return path

    def test_sample(self):
        path = self._write('one:"0x154"\ntwo:"0x150"\nthree:"0x14A"\nfour:"0x144"\n')
        result = self.runner.invoke(cli, [path])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), {
            "five": "0x13c",
            "four": "0x144",
            "one": "0x154",
            "three": "0x14A",
            "two": "0x150",
        })
        # Keys are sorted and pretty-printed
        self.assertTrue(result.stdout.startswith('{\n  "five": "0x13c",\n'))
        self.assertIn("one   0x154 0b101010100 masked:0b101011 43 '+'\n", result.stderr)
        self.assertNotIn('Logging error', result.stderr)

    def test_without_puzzle_keys(self):
        path = self._write('b:"say \\"hi\\"" a:"1"')
        result = self.runner.invoke(cli, [path])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), {"a": "1", "b": 'say "hi"'})

    def test_empty_file(self):
        result = self.runner.invoke(cli, [self._write('')])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), {})

    def test_parse_error(self):
        result = self.runner.invoke(cli, [self._write('one:"0x154" two')])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Invalid key', result.stderr)
        self.assertEqual(result.stdout, '')

    def test_puzzle_error(self):
        path = self._write('one:"x" two:"0x150" three:"0x14A" four:"0x144"')
        result = self.runner.invoke(cli, [path])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Error', result.stderr)

    def test_missing_file(self):
        result = self.runner.invoke(cli, [os.path.join(self.tmpdir, 'nope.txt')])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Error', result.stderr)

    def test_argument_count(self):
        self.assertEqual(self.runner.invoke(cli, []).exit_code, 2)
        path = self._write('a:"1"')
        self.assertEqual(self.runner.invoke(cli, [path, path]).exit_code, 2)

if __name__ == '__main__':
    unittest.main()
