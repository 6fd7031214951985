"""Zipette interpreter.

For reference:
- "pure": arithmetic expressions only (zipette.pure), enough for the single-expression variant of the language
- "lang": pure expressions + the statements used in .zipette files (zipette.lang)

Basic program flow:
    1. Scanner: lazily turns source text into tokens, one character of lookahead (zipette.lang.scanner)
    2. Parser: pulls tokens one at a time and builds a Program by recursive descent (zipette.lang.parser)
    3. Evaluator: walks the Program's statements in order, printing and binding variables (zipette.lang.evaluator)

Every stage raises a ZipetteError subclass (LexError, ParseError, ExecuteError) rather than exiting; only the
ErrorHandler used by the command line decides to print and exit.
"""

from zipette.lang.color import ColorRenderer
from zipette.lang.error import ParseError
from zipette.lang.evaluator import Evaluator
from zipette.lang.lexical import Program
from zipette.lang.parser import Parser
from zipette.lang.scanner import Scanner, TokenKind


def run_source(source, out=None, seed=None):
    """Runs the zipette program source. Returns the list of printed values."""
    evaluator = Evaluator(Parser(Scanner(source)).parse(), out=out, renderer=ColorRenderer(seed))
    evaluator.run()
    return evaluator.results


def evaluate_source(source):
    """Returns the value of a single expression, optionally terminated by ';'. Variables are not available."""
    parser = Parser(Scanner(source))
    try:
        expr = parser.parse_expression()
    except RecursionError:
        raise ParseError("expression is nested too deeply") from None

    if parser.current is not None and parser.current.kind is TokenKind.END_OF_STATEMENT:
        parser.advance()
    if parser.current is not None:
        raise ParseError("unexpected '{}' after expression", parser.current.text, loc=parser.current.loc)

    return Evaluator(Program()).evaluate(expr)
