"""Recursive-descent parser for zipette language. Pulls tokens from a Scanner one at a time (one token of lookahead,
held as `current`) and builds a Program. Every malformed input raises a ParseError.

Expression precedence, from lowest to highest:

```
<term>     ::= <factor> (("+" | "-") <factor>)*                 ; left associative
<factor>   ::= <exponent> (("*" | "/" | "<<" | ">>") <exponent>)* ; left associative, one shared level
<exponent> ::= <primary> [("^" | "**") <exponent>]             ; right associative: 2^3^2 = 2^(3^2)
<primary>  ::= <number> | <name> | "(" <term> ")"
```

See zipette.lang.lexical for statement grammar.
"""

from zipette.lang import lexical
from zipette.lang.color import Color
from zipette.lang.error import ParseError
from zipette.lang.lexical import AssignStmt, ExpressionStmt, PrintColoredStmt, PrintStmt, Program
from zipette.lang.scanner import Location, TokenKind
from zipette.pure.lexical import BinaryOp, Literal, Operator, Variable


class Parser:
    """Builds a Program from an iterator of Tokens."""
    PRINT = lexical.PRINT
    PRINT_COLORED = lexical.PRINT_COLORED
    ASSIGN = lexical.ASSIGN

    TERMS = {TokenKind.PLUS: Operator.ADD, TokenKind.MINUS: Operator.SUBTRACT}
    FACTORS = {
        TokenKind.PRODUCT: Operator.MULTIPLY,
        TokenKind.DIVISION: Operator.DIVIDE,
        TokenKind.SHIFT_LEFT: Operator.SHIFT_LEFT,
        TokenKind.SHIFT_RIGHT: Operator.SHIFT_RIGHT,
    }

    def __init__(self, tokens):
        self.tokens = iter(tokens)
        self.current = next(self.tokens, None)
        self.previous = None  # last consumed token, used to locate errors at end of input

    def advance(self):
        """Pulls the next token, discarding current. Returns the discarded token."""
        self.previous, self.current = self.current, next(self.tokens, None)
        return self.previous

    def parse(self):
        """Parses every statement until tokens are exhausted. Returns a Program."""
        statements = []
        try:
            while self.current is not None:
                stmt = self.parse_statement()
                if self.current is None or self.current.kind is not TokenKind.END_OF_STATEMENT:
                    raise ParseError("statement terminator ';' required after '{}'", str(stmt)[:-1], loc=self._loc())
                self.advance()
                statements.append(stmt)
        except RecursionError:
            raise ParseError("expression is nested too deeply", loc=self._loc()) from None
        return Program(statements)

    def parse_statement(self):
        """Parses a single statement, without its terminator."""
        token = self.current
        if token.kind is not TokenKind.IDENTIFIER:
            return ExpressionStmt(self.parse_expression(), token.loc)

        if token.value == Parser.PRINT:
            self.advance()
            return PrintStmt(self.parse_expression(), token.loc)

        elif token.value == Parser.PRINT_COLORED:
            self.advance()
            color_token = self.current
            color = None
            if color_token is not None and color_token.kind is TokenKind.IDENTIFIER:
                color = Color.from_name(color_token.value)
            if color is None:
                found = color_token.text if color_token is not None else "end of input"
                raise ParseError("unknown color '{}'", found, loc=self._loc())
            self.advance()
            return PrintColoredStmt(color, self.parse_expression(), token.loc)

        elif token.value == Parser.ASSIGN:
            self.advance()
            name_token = self.current
            if name_token is None or name_token.kind is not TokenKind.IDENTIFIER:
                found = name_token.text if name_token is not None else "end of input"
                raise ParseError("expected variable name after '{}', got '{}'", (Parser.ASSIGN, found),
                                 loc=self._loc())
            self.advance()
            return AssignStmt(name_token.value, self.parse_expression(), token.loc)

        raise ParseError("unexpected identifier '{}'", token.value, loc=token.loc)

    def parse_expression(self):
        """Parses a single expression starting at current."""
        return self.term()

    def term(self):
        return self._binary(self.factor, Parser.TERMS)

    def factor(self):
        return self._binary(self.exponent, Parser.FACTORS)

    def _binary(self, operand, operators):
        """Left-associative chain of operand separated by any of operators."""
        left = operand()
        while self.current is not None and self.current.kind in operators:
            token = self.advance()
            left = BinaryOp(operators[token.kind], left, operand(), token.loc)
        return left

    def exponent(self):
        left = self.primary()
        if self.current is not None and self.current.kind is TokenKind.EXPONENT:
            token = self.advance()
            return BinaryOp(Operator.POWER, left, self.exponent(), token.loc)  # recurse for right associativity
        return left

    def primary(self):
        token = self.current
        if token is None:
            raise ParseError("expected a number, got end of input", loc=self._loc())

        if token.kind is TokenKind.NUMBER:
            self.advance()
            return Literal(token.value, token.loc)

        elif token.kind is TokenKind.IDENTIFIER:
            self.advance()
            return Variable(token.value, token.loc)

        elif token.kind is TokenKind.OPEN_PAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenKind.CLOSE_PAREN, "expected ')' to close '('")
            return expr

        elif token.kind is TokenKind.INVALID:
            raise ParseError(token.value.template, token.value.exprs, loc=token.loc) from token.value

        raise ParseError("expected a number, got '{}'", token.text, loc=token.loc)

    def expect(self, kind, msg, exprs=None):
        """Consumes current if it is of kind, raises ParseError with msg otherwise."""
        if self.current is None or self.current.kind is not kind:
            raise ParseError(msg, exprs, loc=self._loc())
        return self.advance()

    def _loc(self):
        """Location of current, or just past the last consumed token at end of input."""
        if self.current is not None:
            return self.current.loc
        if self.previous is not None and self.previous.loc is not None:
            loc = self.previous.loc
            return Location(loc.line, loc.end, loc.end + 1)
        return None
