"""Lexical scanner for zipette language. Converts source text into a lazy stream of Tokens, one character of lookahead
at a time. The scanner never fails: malformed numbers are yielded as INVALID tokens and unknown characters as
UNRECOGNIZED tokens, and it is up to the parser to reject them.

Token grammar:

```
<number>     ::= ["-"] <digit>+ [("." | ",") <digit>*]   ; "-" only folds into the number if a digit follows it
<identifier> ::= <ascii letter>+
<operator>   ::= "+" | "-" | "*" | "/" | "^" | "**" | "<<" | ">>"
<punctuator> ::= "(" | ")" | ";"
```
"""

from enum import Enum

from zipette.lang.error import LexError
from zipette.lang.numerical import number, to_float


class TokenKind(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    END_OF_STATEMENT = ";"
    MINUS = "-"
    PLUS = "+"
    PRODUCT = "*"
    DIVISION = "/"
    EXPONENT = "^"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    UNRECOGNIZED = "unrecognized"
    INVALID = "invalid"


class Location:
    """Position of a token: 1-based line and the 0-based [start, end) column span within that line."""

    def __init__(self, line, start, end):
        self.line = line
        self.start = start
        self.end = end

    def __repr__(self):
        return f"Location(line={self.line}, start={self.start}, end={self.end})"

    def __eq__(self, other):
        return isinstance(other, Location) and (self.line, self.start, self.end) == (other.line, other.start, other.end)


class Token:
    """A classified piece of source. value is the float of a NUMBER, the name of an IDENTIFIER, the character of an
    UNRECOGNIZED token, the LexError of an INVALID token, and None otherwise. loc is ignored in comparisons.
    """

    def __init__(self, kind, value=None, loc=None):
        self.kind = kind
        self.value = value
        self.loc = loc

    @property
    def text(self):
        """Source-like representation of this token, used in error messages."""
        if self.kind is TokenKind.NUMBER:
            return number(self.value)
        elif self.kind in (TokenKind.IDENTIFIER, TokenKind.UNRECOGNIZED):
            return self.value
        elif self.kind is TokenKind.INVALID:
            return self.value.exprs[0] if self.value.exprs else ""
        return self.kind.value

    def __repr__(self):
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Token) or self.kind is not other.kind:
            return False
        if self.kind is TokenKind.INVALID:
            return self.value.msg == other.value.msg
        return self.value == other.value


class Scanner:
    """Iterator over the Tokens of source. Consumes source once; not restartable."""
    SINGLES = {
        "+": TokenKind.PLUS,
        "^": TokenKind.EXPONENT,
        "(": TokenKind.OPEN_PAREN,
        ")": TokenKind.CLOSE_PAREN,
        ";": TokenKind.END_OF_STATEMENT,
        "/": TokenKind.DIVISION,
    }

    def __init__(self, source, line=1):
        self.source = source
        self.cursor = 0

        self.line = line        # current line number
        self.line_start = 0     # cursor position of the first character of the current line
        self._token_start = 0

    def next_token(self):
        """Returns the next Token, or None if source is exhausted."""
        self.skip_whitespace()
        char = self.peek_char()
        if char is None:
            return None

        self._token_start = self.cursor
        self.consume()

        if char == "-":
            if is_digit(self.peek_char()):
                return self.parse_number(negative=True)
            return self.make(TokenKind.MINUS)

        elif char == "*":
            if self.peek_char() == "*":
                self.consume()
                return self.make(TokenKind.EXPONENT)
            return self.make(TokenKind.PRODUCT)

        elif char in "<>":
            if self.peek_char() == char:
                self.consume()
                return self.make(TokenKind.SHIFT_LEFT if char == "<" else TokenKind.SHIFT_RIGHT)
            return self.make(TokenKind.UNRECOGNIZED, char)

        elif char in Scanner.SINGLES:
            return self.make(Scanner.SINGLES[char])

        elif is_digit(char):
            return self.parse_number()

        elif is_letter(char):
            return self.make(TokenKind.IDENTIFIER, char + self.consume_while(is_letter))

        return self.make(TokenKind.UNRECOGNIZED, char)

    def parse_number(self, negative=False):
        """Greedily consumes the rest of a numeric literal (first digit already consumed) and returns its Token."""
        self.consume_while(is_digit)
        if self.peek_char() in (".", ","):
            self.consume()
            self.consume_while(is_digit)

        num_str = self.source[self._token_start:self.cursor]
        try:
            return self.make(TokenKind.NUMBER, to_float(num_str))
        except ValueError:
            error = LexError("invalid number '{}'", num_str, loc=self.location())
            return self.make(TokenKind.INVALID, error)

    def skip_whitespace(self):
        self.consume_while(str.isspace)

    def location(self):
        """Location of the token currently being scanned."""
        return Location(self.line, self._token_start - self.line_start, self.cursor - self.line_start)

    def make(self, kind, value=None):
        return Token(kind, value, self.location())

    def consume(self):
        """Consumes and returns the next character, or None if source is exhausted."""
        char = self.peek_char()
        if char is not None:
            self.cursor += 1
            if char == "\n":
                self.line += 1
                self.line_start = self.cursor
        return char

    def peek_char(self):
        if self.cursor < len(self.source):
            return self.source[self.cursor]
        return None

    def consume_while(self, condition):
        """Consumes characters while condition holds, returns the consumed text."""
        start = self.cursor
        while self.peek_char() is not None and condition(self.peek_char()):
            self.consume()
        return self.source[start:self.cursor]

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def is_digit(char):
    return char is not None and char in "0123456789"


def is_letter(char):
    return char is not None and char.isascii() and char.isalpha()
