"""Drivers for the interpreter: a file runner and an interactive REPL."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

from lisplet.errors import LispletError
from lisplet.interpreter import Interpreter
from lisplet.printer import to_string
from lisplet.reader.parser import parse_all, tokenize, PAREN_WEIGHTS

logger = logging.getLogger(__name__)

PROMPT = "lisplet> "
CONTINUATION_PROMPT = "...      "
QUIT_COMMANDS = ("quit", "exit")


def print_result(value, out: TextIO) -> None:
    """Print a value's textual form; values that print as nothing are skipped."""
    text = to_string(value)
    if not text:
        return
    out.write(text if text.endswith("\n") else text + "\n")


def run_file(path: str | Path, interp: Interpreter, out: TextIO | None = None) -> None:
    """Evaluate each top-level form of a file in order, printing the results.

    Errors propagate to the caller; forms after the failing one are not run.
    """
    out = out or sys.stdout
    source = Path(path).read_text()
    logger.debug("running %s", path)
    for expr in parse_all(source):
        print_result(interp.eval_expr(expr), out)


def paren_depth(text: str) -> int:
    return sum(PAREN_WEIGHTS.get(t, 0) for t in tokenize(text))


def read_form(input_fn: Callable[[str], str]) -> str | None:
    """Read lines until the accumulated text has balanced parentheses.

    Returns None on end of input.
    """
    lines: list[str] = []
    prompt = PROMPT
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            return None
        lines.append(line)
        text = "\n".join(lines)
        if paren_depth(text) <= 0:
            return text
        prompt = CONTINUATION_PROMPT


def repl(
    interp: Interpreter,
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> None:
    """Read-eval-print loop. Errors are reported and the loop continues."""
    out = out or sys.stdout
    while True:
        text = read_form(input_fn)
        if text is None:
            out.write("\n")
            break
        if text.strip().lower() in QUIT_COMMANDS:
            break
        if not text.strip():
            continue
        try:
            for expr in parse_all(text):
                print_result(interp.eval_expr(expr), out)
        except LispletError as err:
            logger.debug("error in %r", text, exc_info=True)
            out.write(f"error: {err}\n")
