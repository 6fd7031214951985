"""Handles interactive/command-line mode for zipette interpreter. Uses cmd as backend."""

import cmd

from zipette.lang.lexical import ASSIGN, PRINT, PRINT_COLORED


class Shell(cmd.Cmd):
    """Zipette interpreter shell."""
    intro = "Zipette interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # shown while a statement spans several lines
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_lines = []
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary zipette statements. Statements are only run once the input ends with ';'."""
        with self.sess.error_handler:  # cmd.Cmd would otherwise leave the loop on the first error
            self.line_num += 1
            self._tmp_lines.append(line)

            if not line.rstrip().endswith(";"):
                self.prompt = self.secondary_prompt
                return

            source = "\n".join(self._tmp_lines)
            first_line = self.line_num - len(self._tmp_lines) + 1

            self._tmp_lines = []
            self.prompt = self._tmp_prompt

            self.sess.add(source, first_line)
            self.sess.run()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the zipette interpreter!\n\n"
              "Every value is a number. Statements end with ';' and are run as soon as they are \n"
              "complete:\n\n"
              f"  {ASSIGN} x 2 ^ 10;           binds 1024 to 'x'\n"
              f"  {PRINT} x / 4;            prints 256\n"
              f"  {PRINT_COLORED} red x;     prints 1024 in red ('multicolor' for a surprise)\n\n"
              "Operators: + - * / ^ (or **) << >>. Variables are kept until you exit.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
