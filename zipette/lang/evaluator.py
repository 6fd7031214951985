"""Tree-walking evaluator for zipette language. Runs the statements of a Program in order against an Environment; the
first error aborts the rest of the run. Output that was already written is not rolled back.
"""

import sys

from zipette.lang.color import ColorRenderer
from zipette.lang.error import ExecuteError
from zipette.lang.numerical import number


class Environment:
    """Variables of a run: name -> float. on_warning, if given, is called with the arguments of runtime warnings."""

    def __init__(self, on_warning=None):
        self._vars = {}
        self.on_warning = on_warning

    def define(self, name, value):
        """Binds (or rebinds) name to value."""
        self._vars[name] = value
        return value

    def lookup(self, name, loc=None):
        if name not in self._vars:
            raise ExecuteError("undefined variable '{}'", name, loc=loc)
        return self._vars[name]

    def warn(self, msg, exprs=None, loc=None):
        if self.on_warning is not None:
            self.on_warning(msg, exprs, loc=loc)

    def __contains__(self, name):
        return name in self._vars

    def __len__(self):
        return len(self._vars)

    def __repr__(self):
        return "[" + ", ".join(f"{name}={number(value)}" for name, value in self._vars.items()) + "]"


class Evaluator:
    """Runs a Program. Printed values are written to out (stdout by default) and also kept in results. Runtime warnings
    go to error_handler, unless environment already has its own warning sink.
    """

    def __init__(self, program, environment=None, out=None, renderer=None, error_handler=None):
        if environment is None:
            environment = Environment()
        if environment.on_warning is None and error_handler is not None:
            environment.on_warning = error_handler.warn

        self.program = program
        self.environment = environment
        self.out = out
        self.renderer = renderer if renderer is not None else ColorRenderer()
        self.results = []

    def run(self):
        """Executes every statement in order. Raises ExecuteError on the first failing statement."""
        for stmt in self.program:
            stmt.execute(self)

    def evaluate(self, expression):
        """Returns the value of expression in the current environment."""
        try:
            return expression.evaluate(self.environment)
        except RecursionError:
            raise ExecuteError("expression is nested too deeply to evaluate", loc=expression.loc) from None

    def write(self, value, color=None):
        """Prints value, in color if given."""
        text = number(value)
        if color is not None:
            text = self.renderer.render(text, color)

        print(text, file=self.out if self.out is not None else sys.stdout)
        self.results.append(value)
