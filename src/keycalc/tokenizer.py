"""
Keystroke tokenizer and validator.

Turns the raw keypad characters into an infix token sequence in a single
left-to-right pass. Implicit multiplication is materialized here, and a
`-` directly after `(` folds into the following number. Parenthesis
balance is left to the evaluator.
"""

from typing import Iterable

import structlog

from keycalc.errors import ExpressionSyntaxError
from keycalc.tokens import (
    CLOSE_PAREN,
    NUMBER_CHARS,
    OPEN_PAREN,
    OPERATOR_SYMBOLS,
    Number,
    OpenParen,
    Operator,
    Token,
)

logger = structlog.get_logger()

# Operators that cannot open a sub-expression
_NON_UNARY_SYMBOLS = frozenset("^×÷+")

# Characters after `)` that do not need an implicit ×
_AFTER_CLOSE_SYMBOLS = OPERATOR_SYMBOLS | {")"}


def _unexpected_operator(char: str, position: int) -> ExpressionSyntaxError:
    return ExpressionSyntaxError(
        f"Unexpected operator '{char}'", character=char, position=position
    )


def validate(raw: str | Iterable[str]) -> list[Token]:
    """
    Tokenize and validate a keystroke sequence.

    Returns the infix token list. Raises ExpressionSyntaxError naming the
    offending character on a second decimal point, adjacent operators,
    an operator that cannot follow `(`, or an unknown character.
    """
    chars = list(raw)
    infix: list[Token] = []
    i = 0

    while i < len(chars):
        char = chars[i]

        if char in NUMBER_CHARS:
            text = char
            i += 1
            while i < len(chars) and chars[i] in NUMBER_CHARS:
                text += chars[i]
                if text.count(".") > 1:
                    raise _unexpected_operator(chars[i], i)
                i += 1
            # Unary minus: "(" "-" <number>
            if infix[-2:] == [OPEN_PAREN, Operator.SUBTRACT]:
                infix.pop()
                text = "-" + text
            infix.append(Number(text))

        elif char in OPERATOR_SYMBOLS:
            if infix and isinstance(infix[-1], Operator):
                raise _unexpected_operator(char, i)
            infix.append(Operator(char))
            i += 1

        elif char == "(":
            if infix and not isinstance(infix[-1], (Operator, OpenParen)):
                infix.append(Operator.MULTIPLY)
            infix.append(OPEN_PAREN)
            i += 1
            if i < len(chars) and chars[i] in _NON_UNARY_SYMBOLS:
                raise _unexpected_operator(chars[i], i)

        elif char == ")":
            infix.append(CLOSE_PAREN)
            i += 1
            if i < len(chars) and chars[i] not in _AFTER_CLOSE_SYMBOLS:
                infix.append(Operator.MULTIPLY)

        else:
            raise ExpressionSyntaxError(
                f"Unexpected token '{char}'", character=char, position=i
            )

    logger.debug("Tokenized expression", characters=len(chars), tokens=len(infix))
    return infix
