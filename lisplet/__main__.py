"""Command-line entry point: run lisplet files or start a REPL."""

from __future__ import annotations

import argparse
import logging
import sys

from lisplet.config import Scoping
from lisplet.errors import LispletError
from lisplet.interpreter import Interpreter
from lisplet.repl import repl, run_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lisplet", description="A small Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to run, in order")
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="start a REPL after running the files",
    )
    parser.add_argument(
        "--lexical", action="store_true",
        help="give user functions lexical closures instead of call-site scoping",
    )
    parser.add_argument("--recursion-limit", type=int, default=None, help="host recursion limit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    interp = Interpreter(
        scoping=Scoping.LEXICAL if args.lexical else None,
        recursion_limit=args.recursion_limit,
    )
    for path in args.files:
        try:
            run_file(path, interp)
        except (LispletError, OSError) as err:
            print(f"{path}: error: {err}", file=sys.stderr)
            return 1

    if not args.files or args.interactive:
        repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
