"""Statements of zipette language, a shallow wrapper around pure arithmetic expressions. Note that this module does not
parse anything: statements are built by zipette.lang.parser and run by zipette.lang.evaluator.

All grammar can be loosely defined as follows:

```
<print_stmt>   ::= "zipette" <expr> ";"                   ; prints value of <expr>
<colored_stmt> ::= "zipettecouleur" <color> <expr> ";"    ; prints value of <expr> in <color>
<assign_stmt>  ::= "vicer" <name> <expr> ";"              ; binds value of <expr> to <name>
<expr_stmt>    ::= <expr> ";"                             ; evaluated, result is discarded

<color>        ::= "red" | "blue" | "green" | "yellow" | "purple" | "cyan" | "orange" | "white" | "brown" | "pink"
                 | "multicolor"                           ; one random color per printed character
```
"""

from abc import ABC, abstractmethod

PRINT = "zipette"
PRINT_COLORED = "zipettecouleur"
ASSIGN = "vicer"


class Statement(ABC):
    """Superclass representing any statement in zipette language."""

    def __init__(self, expression, loc=None):
        self.expression = expression
        self.loc = loc  # Location of the first token of this statement
        self._cls = type(self).__name__

    @abstractmethod
    def execute(self, evaluator):
        """This method should run this statement's side effects using evaluator."""

    @property
    def header(self):
        """Source form of everything before the expression."""
        return ""

    def display(self, indents=0):
        """Displays statement and its expression tree."""
        result = f"{'    ' * indents}{self._cls}("
        if self.header:
            result += f"'{self.header}',"
        return result + "\n" + self.expression.display(indents + 1) + f"\n{'    ' * indents})"

    def __repr__(self):
        return f"{self._cls}('{self}')"

    def __str__(self):
        return f"{self.header} {self.expression.expr};".lstrip()

    def __eq__(self, other):
        return isinstance(other, type(self)) and str(other) == str(self) and other.expression == self.expression


class ExpressionStmt(Statement):
    """Bare expression, evaluated only for its errors."""

    def execute(self, evaluator):
        evaluator.evaluate(self.expression)


class PrintStmt(Statement):
    """Prints the value of its expression."""

    def execute(self, evaluator):
        evaluator.write(evaluator.evaluate(self.expression))

    @property
    def header(self):
        return PRINT


class PrintColoredStmt(Statement):
    """Prints the value of its expression in a Color."""

    def __init__(self, color, expression, loc=None):
        super().__init__(expression, loc)
        self.color = color

    def execute(self, evaluator):
        evaluator.write(evaluator.evaluate(self.expression), self.color)

    @property
    def header(self):
        return f"{PRINT_COLORED} {self.color.value}"


class AssignStmt(Statement):
    """Binds the value of its expression to a name."""

    def __init__(self, name, expression, loc=None):
        super().__init__(expression, loc)
        self.name = name

    def execute(self, evaluator):
        evaluator.environment.define(self.name, evaluator.evaluate(self.expression))

    @property
    def header(self):
        return f"{ASSIGN} {self.name}"


class Program:
    """Ordered sequence of statements; order is execution order."""

    def __init__(self, statements=None):
        self.statements = list(statements) if statements else []

    def display(self):
        """Displays every statement tree, one after the other."""
        if not self:
            return "Program([])"
        return "Program([\n" + ",\n".join(stmt.display(1) for stmt in self.statements) + "\n])"

    def __iter__(self):
        return iter(self.statements)

    def __len__(self):
        return len(self.statements)

    def __getitem__(self, idx):
        return self.statements[idx]

    def __repr__(self):
        return f"Program({self.statements!r})"

    def __eq__(self, other):
        return isinstance(other, Program) and self.statements == other.statements
