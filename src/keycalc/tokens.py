"""
Token types for keycalc expressions.

A token is one of four variants:
- Number: digits with at most one decimal point, kept as typed text
- Operator: one of ^ × ÷ + -
- OpenParen / CloseParen

Tokens are immutable and compare by value.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Union


class Operator(str, Enum):
    """Binary arithmetic operators, keyed by their keypad symbol."""
    POWER = "^"
    MULTIPLY = "×"
    DIVIDE = "÷"
    ADD = "+"
    SUBTRACT = "-"

    def __str__(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]


PRECEDENCE = MappingProxyType({
    Operator.POWER: 3,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
})

OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)

NUMBER_CHARS = frozenset(".0123456789")


@dataclass(frozen=True)
class Number:
    """A numeric literal, parsed to float only at evaluation time."""
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class OpenParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class CloseParen:
    def __str__(self) -> str:
        return ")"


Token = Union[Number, Operator, OpenParen, CloseParen]

OPEN_PAREN = OpenParen()
CLOSE_PAREN = CloseParen()


def render(tokens: Iterable[Token], sep: str = "") -> str:
    """Render tokens back into keypad text."""
    return sep.join(str(token) for token in tokens)
