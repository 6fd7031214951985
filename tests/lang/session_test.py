import io
import os
import re
import tempfile
import unittest

from zipette.lang.error import ErrorHandler, ExecuteError, ParseError, ZipetteError
from zipette.lang.session import Session

ANSI = re.compile(r"\x1b\[[0-9;]*m")


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

        self.out = io.StringIO()
        self.stream = io.StringIO()
        self.error_handler = ErrorHandler(stream=self.stream)

    def write(self, name, source):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as file:
            file.write(source)
        return path

    def session(self, path, **kwargs):
        return Session(self.error_handler, path, out=self.out, **kwargs)

    def test_run_file(self):
        path = self.write("prog.zipette", "vicer x 2;\nzipette x ^ 3;\nzipettecouleur red x + 1;\n")
        sess = self.session(path, seed=1)
        self.assertEqual(3, len(sess.to_exec))
        self.assertEqual("", self.out.getvalue())  # parsed, not yet run

        sess.run()
        self.assertEqual([8.0, 3.0], sess.results)
        self.assertEqual([], sess.to_exec)
        self.assertEqual(3.0, sess.pop())
        self.assertEqual(2.0, sess.environment.lookup("x"))

    def test_bad_paths(self):
        txt = self.write("prog.txt", "zipette 1;")
        missing = os.path.join(self.tmp.name, "missing.zipette")
        cases = {
            txt: f"'{txt}' is not a .zipette file",
            missing: f"'{missing}' could not be opened",
            Session.SH_FILE: "'<in>' is a reserved filename",
        }
        for path, msg in cases.items():
            with self.assertRaises(ZipetteError, msg=path) as context:
                self.session(path)
            self.assertEqual(msg, context.exception.msg, path)

    def test_undecodable_file(self):
        path = os.path.join(self.tmp.name, "binary.zipette")
        with open(path, "wb") as file:
            file.write(b"\xff\xfe\xfa")

        with self.assertRaises(ZipetteError) as context:
            self.session(path)
        self.assertEqual(f"'{path}' could not be opened", context.exception.msg)

    def test_parse_error_registers_line(self):
        path = self.write("prog.zipette", "zipette 1;\nfoo;\n")
        with self.assertRaises(ParseError):
            self.session(path)

        self.assertEqual(("foo;", 2), self.error_handler.traceback[path])
        self.assertEqual("", self.out.getvalue())  # nothing runs if parsing fails

    def test_execute_error_registers_line(self):
        path = self.write("prog.zipette", "zipette 1;\n  zipette y;\nzipette 2;\n")
        sess = self.session(path)
        self.assertRaises(ExecuteError, sess.run)

        self.assertEqual(("  zipette y;", 2), self.error_handler.traceback[path])
        self.assertEqual("1\n", self.out.getvalue())
        self.assertEqual([1.0], sess.results)

    def test_cmd_line(self):
        sess = self.session(Session.SH_FILE, cmd_line=True)
        self.assertFalse(self.error_handler.fatal)

        sess.add("vicer x 2;", 1)
        sess.run()
        sess.add("zipette x * 3;\nzipette x;", 2)
        sess.run()

        self.assertEqual("6\n2\n", self.out.getvalue())
        self.assertEqual({1: "vicer x 2;", 2: "zipette x * 3;", 3: "zipette x;"}, sess.lines)

    def test_warning(self):
        sess = self.session(Session.SH_FILE, cmd_line=True)
        sess.add("zipette 1 / 0;", 1)
        sess.run()

        expected = ("<in>:1:11: warning: '(1 / 0)' divides by zero\n"
                    "  zipette 1 / 0;\n"
                    "            ^\n")
        self.assertEqual("inf\n", self.out.getvalue())
        self.assertEqual(expected, ANSI.sub("", self.stream.getvalue()))
        self.assertEqual((None, None), self.error_handler.traceback[Session.SH_FILE])


if __name__ == '__main__':
    unittest.main()
