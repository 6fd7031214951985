"""Zipette: a small numeric scripting language. See zipette.interpreter for how the pieces fit together."""

from zipette.interpreter import evaluate_source, run_source
from zipette.lang.error import ExecuteError, LexError, ParseError, ZipetteError
from zipette.lang.evaluator import Environment, Evaluator
from zipette.lang.parser import Parser
from zipette.lang.scanner import Scanner, Token, TokenKind

__all__ = [
    "Environment",
    "Evaluator",
    "ExecuteError",
    "LexError",
    "ParseError",
    "Parser",
    "Scanner",
    "Token",
    "TokenKind",
    "ZipetteError",
    "evaluate_source",
    "run_source",
]
