"""
  lisplet Reader: tokenizer and parser

- Parentheses are always tokens of their own; everything else is split on
  whitespace. There are no strings, comments or quote characters.
- Emits Python primitives instead of Cons cells:

    - lists   -> Python list
    - integer -> int
    - decimal/exponent numbers -> float
    - anything else -> Symbol
"""

from __future__ import annotations

from typing import Iterator, Optional

from lisplet import SExpression
from lisplet.errors import LispletSyntaxError, LispletUnexpectedEOF, LispletMismatchedParens
from lisplet.types.symbol import Symbol


LPAREN = "("
RPAREN = ")"

PAREN_WEIGHTS: dict[str, int] = {LPAREN: 1, RPAREN: -1}


def tokenize(source: str) -> list[str]:
    """Split source text into tokens, keeping each parenthesis separate."""
    return source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ").split()


def parse_atom(token: str) -> int | float | Symbol:
    """Classify a token: integer first, then float, otherwise a symbol."""
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        return Symbol(token)


class TokenStream:
    """Cursor over a token list; tokens are consumed from the front of the
    caller's list, so whatever is left after a read is still visible to them.
    """

    def __init__(self, tokens: list[str]):
        self.tokens = tokens

    def peek(self) -> Optional[str]:
        return self.tokens[0] if self.tokens else None

    def advance(self) -> str:
        if not self.tokens:
            raise LispletUnexpectedEOF("Unexpected EOF while reading")
        return self.tokens.pop(0)

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token == LPAREN:
            items: list[SExpression] = []
            while self.peek() != RPAREN:
                if self.peek() is None:
                    raise LispletUnexpectedEOF("Unexpected EOF: unmatched '('")
                items.append(self.parse_expr())
            self.advance()  # drop ')'
            return items
        if token == RPAREN:
            raise LispletMismatchedParens("Unexpected ')'")
        return parse_atom(token)

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            yield self.parse_expr()


def read(tokens: list[str]) -> SExpression:
    """Read one expression, consuming its tokens from the front of `tokens`."""
    return TokenStream(tokens).parse_expr()


def parse(source: str) -> SExpression:
    """Read exactly one expression from source text."""
    tokens = tokenize(source)
    if not tokens:
        raise LispletUnexpectedEOF("Empty input")
    try:
        expr = read(tokens)
    except RecursionError:
        raise LispletSyntaxError("Expression nested too deeply to read") from None
    if tokens:
        if tokens[0] == RPAREN:
            raise LispletMismatchedParens("Unexpected ')' after expression")
        raise LispletSyntaxError(f"Unexpected input after expression: {' '.join(tokens)}")
    return expr


def parse_all(source: str) -> list[SExpression]:
    """Read every top-level expression in source text, in order."""
    stream = TokenStream(tokenize(source))
    try:
        return list(stream.parse_all())
    except RecursionError:
        raise LispletSyntaxError("Expression nested too deeply to read") from None


def are_parens_matched(source: str) -> bool:
    """Check that source is a single parenthesised form whose parens balance.

    Raises LispletSyntaxError for empty input or input that does not start
    with '(' and end with ')', and LispletMismatchedParens when the counts of
    '(' and ')' differ.
    """
    tokens = tokenize(source)
    if not tokens:
        raise LispletUnexpectedEOF("Empty input")
    if tokens[0] != LPAREN or tokens[-1] != RPAREN:
        raise LispletSyntaxError("Input must start with '(' and end with ')'")
    balance = sum(PAREN_WEIGHTS.get(t, 0) for t in tokens)
    if balance != 0:
        detail = f"{balance} unclosed '('" if balance > 0 else f"{-balance} unmatched ')'"
        raise LispletMismatchedParens(f"Mismatched parentheses: {detail}")
    return True
