"""
Tests for the lexan command-line front end and file loading.

Author: xwest
"""

import unittest
import json
import io
import os
import sys
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lexan.cli import main, render_text, EXIT_OK, EXIT_DIAGNOSTICS, EXIT_IO_ERROR
from lexan.lexer.lexer import scan, read_source, tokenize_file, normalize_lines


class TestFileLoading(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name: str, data: bytes) -> str:
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'wb') as f:
            f.write(data)
        return path

    def test_last_line_gets_newline(self):
        path = self._write("a.c", b"int x;")
        self.assertEqual(read_source(path), "int x;\n")

    def test_crlf_is_normalized(self):
        path = self._write("b.c", b"a\r\nb\rc")
        self.assertEqual(read_source(path), "a\nb\nc\n")

    def test_normalize_lines(self):
        self.assertEqual(normalize_lines(""), "")
        self.assertEqual(normalize_lines("a"), "a\n")
        self.assertEqual(normalize_lines("a\r\nb\rc\n"), "a\nb\nc\n")
        self.assertEqual(normalize_lines("\n\n"), "\n\n")

    def test_tokenize_file(self):
        path = self._write("c.c", b"int main() { return 0; }\n")
        result = tokenize_file(path)
        self.assertEqual(result.filename, path)
        self.assertEqual(result.lexemes, ["int", "main", "(", ")", "{", "return", ";", "}"])
        self.assertEqual(len(result.diagnostics), 1)

    def test_missing_file_raises(self):
        with self.assertRaises(OSError):
            tokenize_file(os.path.join(self.tmpdir.name, "missing.c"))


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _run(self, argv, stdin_text=""):
        stdout, stderr = io.StringIO(), io.StringIO()
        code = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout, stderr=stderr)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_render_text_layout(self):
        text = render_text(scan("x @"))
        self.assertEqual(text, (
            "Lexical error: Unexpected character '@' at position 2\n"
            "Tokens:\n"
            "x\n"
            "\n"
            "Lexical analysis completed.\n"
        ))

    def test_stdin(self):
        code, out, err = self._run([], "int x;")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "Tokens:\nint\nx\n;\n\nLexical analysis completed.\n")
        self.assertEqual(err, "")

    def test_stdin_and_file_see_the_same_text(self):
        path = os.path.join(self.tmpdir.name, "crlf.c")
        with open(path, 'wb') as f:
            f.write(b"int x;\r\n@")
        _, from_file, _ = self._run(["--json", path])
        _, from_stdin, _ = self._run(["--json", "-"], "int x;\r\n@")
        file_data, stdin_data = json.loads(from_file)[0], json.loads(from_stdin)[0]
        self.assertEqual(file_data["tokens"], stdin_data["tokens"])
        self.assertEqual(file_data["diagnostics"], stdin_data["diagnostics"])
        self.assertEqual(stdin_data["diagnostics"][0]["position"], 7)

    def test_file_argument(self):
        path = os.path.join(self.tmpdir.name, "prog.c")
        with open(path, 'w', encoding='utf-8') as f:
            f.write("return x; // done\n")
        code, out, _ = self._run([path])
        self.assertEqual(code, EXIT_OK)
        self.assertIn("Tokens:\nreturn\nx\n;\n", out)

    def test_no_diagnostics(self):
        code, out, _ = self._run(["--no-diagnostics", "-"], "a @ b")
        self.assertEqual(code, EXIT_OK)
        self.assertNotIn("Lexical error", out)
        self.assertIn("a\nb\n", out)

    def test_strict_exit_code(self):
        code, _, _ = self._run(["--strict"], "a @ b")
        self.assertEqual(code, EXIT_DIAGNOSTICS)
        code, _, _ = self._run(["--strict"], "a b")
        self.assertEqual(code, EXIT_OK)

    def test_json_output(self):
        code, out, _ = self._run(["--json"], "x = 5;")
        self.assertEqual(code, EXIT_OK)
        data = json.loads(out)
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["filename"], "<stdin>")
        self.assertEqual(data[0]["tokens"], ["x", "=", ";"])
        self.assertEqual(data[0]["diagnostics"][0]["position"], 4)

    def test_json_without_diagnostics(self):
        _, out, _ = self._run(["--json", "--no-diagnostics"], "x @")
        self.assertNotIn("diagnostics", json.loads(out)[0])

    def test_unreadable_file(self):
        missing = os.path.join(self.tmpdir.name, "missing.c")
        code, out, err = self._run([missing, "-"], "y")
        self.assertEqual(code, EXIT_IO_ERROR)
        self.assertTrue(err.startswith("Error reading the file:"))
        self.assertIn("Tokens:\ny\n", out)


if __name__ == '__main__':
    unittest.main()
