"""Tokenizer and parser for a tiny expression language of sums and differences."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Union

_DIGITS = frozenset("0123456789")
_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_IDENT_REST = _LOWER | _DIGITS | {"_"}
_U32_MAX = 2**32 - 1


class Op(Enum):
    """An arithmetic operator."""

    ADD = "+"
    SUB = "-"


@dataclass(frozen=True)
class NumberToken:
    """A run of digits."""

    text: str


@dataclass(frozen=True)
class IdentifierToken:
    """A variable name."""

    name: str


@dataclass(frozen=True)
class OperatorToken:
    """An arithmetic operator."""

    op: Op


Token = Union[NumberToken, IdentifierToken, OperatorToken]


@dataclass(frozen=True)
class Var:
    """A reference to a variable."""

    name: str


@dataclass(frozen=True)
class Number:
    """A literal number."""

    value: int


@dataclass(frozen=True)
class Operation:
    """A binary operation."""

    left: Expression
    op: Op
    right: Expression


Expression = Union[Var, Number, Operation]


class TokenizerError(ValueError):
    """Raised on a character that starts no token."""

    def __init__(self, character: str) -> None:
        super().__init__(f"Unexpected character '{character}' in input")
        self.character = character


class ParserError(ValueError):
    """Raised when the input is not a valid expression."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of `text`, raising TokenizerError on an unexpected character."""
    position = 0
    while position < len(text):
        c = text[position]
        start = position
        position += 1
        if c in _DIGITS:
            while position < len(text) and text[position] in _DIGITS:
                position += 1
            yield NumberToken(text[start:position])
        elif c in _LOWER:
            while position < len(text) and text[position] in _IDENT_REST:
                position += 1
            yield IdentifierToken(text[start:position])
        elif c == "+":
            yield OperatorToken(Op.ADD)
        elif c == "-":
            yield OperatorToken(Op.SUB)
        else:
            raise TokenizerError(c)


def _next(tokens: Iterator[Token]) -> Token | None:
    try:
        return next(tokens, None)
    except TokenizerError as exc:
        raise ParserError(f"Tokenizer error: {exc}") from exc


def _operand(token: Token) -> Expression:
    if isinstance(token, NumberToken):
        value = int(token.text)
        if value > _U32_MAX:
            raise ParserError("Invalid number", token)
        return Number(value)
    if isinstance(token, IdentifierToken):
        return Var(token.name)
    raise ParserError(f"Unexpected token {token!r}", token)


def parse(text: str) -> Expression:
    """Parse `text` into an expression; operators group to the right."""
    tokens = tokenize(text)
    operands: list[Expression] = []
    ops: list[Op] = []
    while True:
        token = _next(tokens)
        if token is None:
            raise ParserError("Unexpected end of input")
        operands.append(_operand(token))
        following = _next(tokens)
        if following is None:
            break
        if not isinstance(following, OperatorToken):
            raise ParserError(f"Unexpected token {following!r}", following)
        ops.append(following.op)

    expression = operands.pop()
    for left, op in zip(reversed(operands), reversed(ops)):
        expression = Operation(left, op, expression)
    return expression


def main(argv: list[str] | None = None) -> int:
    """Parse a sample expression and print it."""
    argparse.ArgumentParser(
        prog="expression", description="Parse a sample expression"
    ).parse_args(argv)
    try:
        expression = parse("10+foo+20-30")
    except ParserError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(repr(expression))
    return 0


if __name__ == "__main__":
    sys.exit(main())