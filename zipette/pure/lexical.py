"""Pure arithmetic expression tree for zipette.

The `pure` directory contains the arithmetic expressions only, which is all the single-expression variant of the
language needs. Statements (print, assignment) live in zipette.lang.lexical.

Formally, an expression can be defined as

```
<expr> ::= <number>                 ; "literal"
         | <name>                   ; "variable", bound by an assignment statement
         | <expr> <operator> <expr> ; "binary operation", see zipette.lang.parser for precedence
```

Every node owns its children exclusively, so a tree is always finite and acyclic.
"""

from abc import ABC, abstractmethod
from enum import Enum

from zipette.lang import numerical


class Operator(Enum):
    """Binary operators, valued by their source spelling."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"

    def apply(self, left, right):
        """Combines two already-evaluated operands."""
        return _OPERATIONS[self](left, right)


_OPERATIONS = {
    Operator.ADD: lambda left, right: left + right,
    Operator.SUBTRACT: lambda left, right: left - right,
    Operator.MULTIPLY: lambda left, right: left * right,
    Operator.DIVIDE: numerical.divide,
    Operator.POWER: numerical.power,
    Operator.SHIFT_LEFT: numerical.shift_left,
    Operator.SHIFT_RIGHT: numerical.shift_right,
}


class Expression(ABC):
    """Superclass of every node in an expression tree."""

    def __init__(self, loc=None):
        self.loc = loc  # Location of the source this node was parsed from, used for error messages
        self._cls = type(self).__name__

    @abstractmethod
    def evaluate(self, environment):
        """This method should return the float value of this node, looking variables up in environment."""

    @property
    @abstractmethod
    def nodes(self):
        """Child nodes, left to right."""

    @property
    @abstractmethod
    def expr(self):
        """Fully parenthesized source form of this node."""

    def display(self, indents=0):
        """Recursively displays Expression tree with readable format.

        Format:
        <Expression>(expr='<expr>', nodes=[
            <Expression>(expr='<expr>')  # <-- if nodes is empty
        ])
        """
        result = f"{'    ' * indents}{self._cls}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.expr


class Literal(Expression):
    """Number literal."""

    def __init__(self, value, loc=None):
        super().__init__(loc)
        self.value = float(value)

    def evaluate(self, environment):
        return self.value

    @property
    def nodes(self):
        return []

    @property
    def expr(self):
        return numerical.number(self.value)

    def __eq__(self, other):
        if not isinstance(other, Literal):
            return False
        return self.value == other.value or (self.value != self.value and other.value != other.value)  # nan


class Variable(Expression):
    """Reference to a name bound in the environment."""

    def __init__(self, name, loc=None):
        super().__init__(loc)
        self.name = name

    def evaluate(self, environment):
        return environment.lookup(self.name, self.loc)

    @property
    def nodes(self):
        return []

    @property
    def expr(self):
        return self.name

    def __eq__(self, other):
        return isinstance(other, Variable) and self.name == other.name


class BinaryOp(Expression):
    """Binary operation. The left operand is always fully evaluated before the right one."""

    def __init__(self, operator, left, right, loc=None):
        super().__init__(loc)
        self.operator = operator
        self.left = left
        self.right = right

    def evaluate(self, environment):
        left = self.left.evaluate(environment)
        right = self.right.evaluate(environment)

        # warnings only: the result still follows float/saturating semantics
        if self.operator is Operator.DIVIDE and right == 0:
            environment.warn("'{}' divides by zero", self.expr, self.loc)
        elif self.operator in (Operator.SHIFT_LEFT, Operator.SHIFT_RIGHT) and numerical.to_u64(right) >= 64:
            environment.warn("'{}' shifts by 64 bits or more", self.expr, self.loc)

        return self.operator.apply(left, right)

    @property
    def nodes(self):
        return [self.left, self.right]

    @property
    def expr(self):
        return f"({self.left.expr} {self.operator.value} {self.right.expr})"

    def __eq__(self, other):
        if not isinstance(other, BinaryOp):
            return False
        return (self.operator, self.left, self.right) == (other.operator, other.left, other.right)
