"""
Tests for the showexpr command line.

Author: xwest
"""

import io
import json
import unittest
import tempfile
import contextlib
from unittest import mock
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from showexpr.cli import main
from showexpr.config import MAX_DEPTH_ENV


class TestCLI(unittest.TestCase):

    def setUp(self):
        self._files = []
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(MAX_DEPTH_ENV, None)

    def tearDown(self):
        for path in self._files:
            os.remove(path)

    def _write(self, text: str) -> str:
        with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8") as f:
            f.write(text)
        self._files.append(f.name)
        return f.name

    def _run(self, argv, stdin: str = ""):
        out, err = io.StringIO(), io.StringIO()
        with mock.patch.object(sys, "stdin", io.StringIO(stdin)), \
                contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_repr_output(self):
        code, out, _ = self._run([self._write("Just 1")])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["Other(text='Just ')", "NumberLit(text='1')"])

    def test_json_output(self):
        code, out, _ = self._run([self._write("[a, 'b']"), "--format", "json"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), [{
            "kind": "Brackets",
            "groups": [
                [{"kind": "Other", "text": "a"}],
                [{"kind": "Other", "text": " "}, {"kind": "CharLit", "text": "b"}],
            ],
        }])

    def test_source_output_from_stdin(self):
        code, out, _ = self._run(["--format", "source"], stdin="Foo (1, 2)")
        self.assertEqual(code, 0)
        self.assertEqual(out, "Foo (1, 2)\n")

    def test_warnings_go_to_stderr(self):
        code, out, err = self._run([self._write("(a]"), "--warnings"])
        self.assertEqual(code, 0)
        self.assertIn("W004", err)
        self.assertIn("W005", err)

    def test_warnings_hidden_by_default(self):
        _, _, err = self._run([self._write("(a]")])
        self.assertNotIn("W004", err)

    def test_max_depth(self):
        code, out, err = self._run([self._write("[[[x]]]"), "--max-depth", "2"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("E001", err)

    def test_max_depth_from_environment(self):
        os.environ[MAX_DEPTH_ENV] = "1"
        code, _, err = self._run([self._write("((x))")])
        self.assertEqual(code, 1)
        self.assertIn("E001", err)

    def test_default_depth_limit_applies(self):
        code, _, err = self._run(["--format", "json"], stdin="(" * 250)
        self.assertEqual(code, 1)
        self.assertIn("E001", err)

    def test_invalid_environment(self):
        os.environ[MAX_DEPTH_ENV] = "lots"
        code, _, err = self._run([self._write("x")])
        self.assertEqual(code, 1)
        self.assertIn(MAX_DEPTH_ENV, err)

    def test_undecodable_file(self):
        with tempfile.NamedTemporaryFile("wb", suffix=".txt", delete=False) as f:
            f.write(b"Just \xff[1]")
        self._files.append(f.name)

        with self.assertLogs("showexpr.cli", level="ERROR") as logs:
            code, out, _ = self._run([f.name])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("not valid UTF-8", logs.output[0])

    def test_missing_file(self):
        code, out, _ = self._run([os.path.join(tempfile.gettempdir(), "no-such-showexpr-input.txt")])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
