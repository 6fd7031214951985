"""Runs .zipette files or the interactive shell, using the error handling context manager. Called from the zipette
console script.
"""

import argparse

from zipette.lang.error import ErrorHandler
from zipette.lang.lexical import Program
from zipette.lang.session import Session
from zipette.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="zipette", description="Interpreter for the zipette language.")
    parser.add_argument("file", nargs="?", default=Session.DEFAULT_FILE,
                        help=f"{Session.EXTENSION} file to interpret and run (default: {Session.DEFAULT_FILE})")
    parser.add_argument("-i", "--interactive", action="store_true", help="start the interactive shell instead")
    parser.add_argument("--seed", type=int, default=None, help="seed of the random colors used by 'multicolor'")
    parser.add_argument("--ast", action="store_true", help="print the parsed program instead of running it")
    return parser


def main(argv=None):
    """Runs zipette interpreter. Called from zipette console script."""
    with ErrorHandler() as error_handler:
        args = build_parser().parse_args(argv)

        if args.interactive:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, seed=args.seed)).cmdloop()
            return

        sess = Session(error_handler, args.file, seed=args.seed)
        if args.ast:
            print(Program(sess.to_exec).display())
        else:
            sess.run()
