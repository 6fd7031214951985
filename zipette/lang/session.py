"""Session control for zipette language. Loads .zipette files (or lines typed in command-line mode), parses them and
runs them, keeping variables alive between runs.
"""

import os

from zipette.lang.color import ColorRenderer
from zipette.lang.error import ZipetteError
from zipette.lang.evaluator import Environment, Evaluator
from zipette.lang.parser import Parser
from zipette.lang.scanner import Scanner


class Session:
    """Governs a zipette session, with control over the environment shared by its statements."""
    SH_FILE = "<in>"                # command-line interpreter filename
    EXTENSION = ".zipette"
    DEFAULT_FILE = "quartier" + EXTENSION

    def __init__(self, error_handler, path, cmd_line=False, seed=None, out=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.cmd_line = cmd_line    # whether or not in command-line mode
        self.out = out

        self.environment = Environment(self.warn)
        self.renderer = ColorRenderer(seed)

        self.lines = {}    # dict of line num: source line, used for error messages
        self.to_exec = []  # statements to execute
        self.results = []  # values printed so far

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            if os.path.splitext(path)[1] != Session.EXTENSION:
                raise ZipetteError("'{}' is not a {} file", (path, Session.EXTENSION), diagnosis=False)

            try:
                with open(path, "r", encoding="utf-8") as file:
                    source = file.read()
            except (OSError, UnicodeDecodeError):
                raise ZipetteError("'{}' could not be opened", path, diagnosis=False)

            self.add(source)

        elif not cmd_line:
            raise ZipetteError("'{}' is a reserved filename", Session.SH_FILE)

    def add(self, source, line_num=1):
        """Parses source and queues its statements. Nothing is run until run is called."""
        for offset, line in enumerate(source.split("\n")):
            self.lines[line_num + offset] = line

        program = self._checked(lambda: Parser(Scanner(source, line=line_num)).parse())
        self.to_exec.extend(program)
        return program

    def run(self):
        """Runs this session's queued statements. Will raise any errors that are encountered; statements run before
        the error keep their effects.
        """
        to_exec, self.to_exec = self.to_exec, []
        evaluator = Evaluator(to_exec, self.environment, self.out, self.renderer)
        try:
            self._checked(evaluator.run)
        finally:
            self.results.extend(evaluator.results)

    def pop(self):
        """Removes and returns last printed value."""
        return self.results.pop()

    def warn(self, msg, exprs=None, loc=None):
        """Prints a runtime warning through the error handler, with the offending source line if known."""
        if loc is not None and loc.line in self.lines:
            self.error_handler.register_line(self.path, self.lines[loc.line], loc.line)
        self.error_handler.warn(msg, exprs, loc=loc)
        self.error_handler.remove_line(self.path)

    def _checked(self, func):
        """Calls func, registering the offending source line with the error handler if a ZipetteError is raised."""
        try:
            return func()
        except ZipetteError as error:
            if error.loc is not None and error.loc.line in self.lines:
                self.error_handler.register_line(self.path, self.lines[error.loc.line], error.loc.line)
            raise
