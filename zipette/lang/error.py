"""Error handling for zipette language. Only ZipetteErrors should be encountered during running: if another type of
error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class ZipetteError(Exception):
    """Templates an error/warning message so that it can be used to throw a zipette error/warning. exprs are the
    snippets substituted into msg (bolded when displayed by ErrorHandler), loc is the Location of the offending source.
    """

    def __init__(self, msg, exprs=None, loc=None, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ()
        if isinstance(exprs, str):
            exprs = (exprs,)

        self.template = msg
        self.exprs = tuple(str(expr) for expr in exprs)
        self.msg = msg.format(*self.exprs)

        self.loc = loc
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    def highlighted(self):
        """Returns self.msg with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))


class LexError(ZipetteError):
    """Malformed source text. Carried inline by INVALID tokens rather than raised by the scanner."""


class ParseError(ZipetteError):
    """Token stream does not follow zipette grammar."""


class ExecuteError(ZipetteError):
    """Raised while running a program, e.g. on reference to an unbound variable."""


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom zipette errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called when a line of path fails to parse or run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(line, loc, warning=False):
        """Returns line with the span of loc highlighted and bolded, underlined by a caret."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        start = min(loc.start, len(line))
        end = max(loc.end, start + 1)

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], color, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _origin(self, loc):
        """Returns (header, offending line) for an error at loc using the innermost registered file."""
        if not self.traceback:
            return "", None

        file, (line, line_num) = list(self.traceback.items())[-1]
        if loc is None:
            return f"{file}: ", None
        if line is None:
            return f"{file}:{loc.line}:{loc.start + 1}: ", None
        return f"{file}:{line_num}:{loc.start + 1}: ", line

    def _print(self, msg):
        print(msg, file=self.stream if self.stream is not None else sys.stderr)

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = ZipetteError(*args, **kwargs)

        header, line = self._origin(error.loc)
        error_msg = colored(header, attrs=["bold"])
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.highlighted()
        self._print(error_msg)

        if not error.internal and line is not None and error.diagnosis:
            self._print(ErrorHandler.diagnose(line, error.loc, warning=True))

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a ZipetteError, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        header, line = self._origin(error.loc)

        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored(header, attrs=["bold"])
        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.highlighted()
        self._print(error_msg)

        if not error.internal and line is not None and error.diagnosis:
            self._print(ErrorHandler.diagnose(line, error.loc))

        if self.fatal:
            sys.exit(1)
        for path in self.traceback:  # if error occurred, reset traceback (no need if error is fatal)
            self.remove_line(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(ZipetteError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is not None and issubclass(exc_type, ZipetteError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(ZipetteError("unknown error: '{}: {}'", (exc_type.__name__, exc_val), internal=True))
            do_exit = True

        return not do_exit
