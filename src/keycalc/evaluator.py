"""
Infix evaluator for keycalc.

Evaluation runs in two passes over a validated infix sequence:
1. Shunting-yard: reorder tokens into postfix using the precedence table.
   Parenthesis pairing is checked here.
2. Postfix execution: reduce the postfix tokens with an operand stack.

Arithmetic is plain IEEE-754 double precision. Exponentiation mirrors the
IEEE pow results (inf on overflow or 0 to a negative power, nan for a
negative base with a fractional exponent); whether such values are
returned or rejected is governed by NonFinitePolicy.
"""

import math
from typing import Iterable

import structlog

from keycalc.config import NonFinitePolicy, settings
from keycalc.errors import (
    DivisionByZeroError,
    MalformedExpressionError,
    MismatchedParenthesisError,
    NonFiniteResultError,
)
from keycalc.tokenizer import validate
from keycalc.tokens import CloseParen, Number, OpenParen, Operator, Token, render

logger = structlog.get_logger()


def to_postfix(infix: Iterable[Token]) -> list[Token]:
    """Convert infix tokens to postfix order (left-associative operators)."""
    operators: list[Token] = []
    postfix: list[Token] = []

    for token in infix:
        if isinstance(token, OpenParen):
            operators.append(token)
        elif isinstance(token, CloseParen):
            while operators and not isinstance(operators[-1], OpenParen):
                postfix.append(operators.pop())
            if not operators:
                raise MismatchedParenthesisError(f"Mismatched '{token}'")
            operators.pop()
        elif isinstance(token, Operator):
            while (
                operators
                and isinstance(operators[-1], Operator)
                and operators[-1].precedence >= token.precedence
            ):
                postfix.append(operators.pop())
            operators.append(token)
        else:
            postfix.append(token)

    while operators:
        top = operators.pop()
        if isinstance(top, (OpenParen, CloseParen)):
            raise MismatchedParenthesisError(f"Mismatched '{top}'")
        postfix.append(top)

    return postfix


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and math.fmod(value, 2.0) != 0.0


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power, or a negative base with a fractional exponent
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def apply_operator(operator: Operator, a: float, b: float) -> float:
    """Apply a binary operator to two operands."""
    if operator is Operator.POWER:
        return _power(a, b)
    if operator is Operator.MULTIPLY:
        return a * b
    if operator is Operator.DIVIDE:
        if b == 0:
            raise DivisionByZeroError("Can't divide by 0")
        return a / b
    if operator is Operator.ADD:
        return a + b
    if operator is Operator.SUBTRACT:
        return a - b
    raise ValueError(f"Unsupported operator: {operator!r}")


def execute_postfix(
    postfix: Iterable[Token],
    expression: str = "",
    non_finite_policy: NonFinitePolicy | None = None,
) -> float:
    """
    Reduce a postfix sequence to a single value.

    `expression` is the infix text quoted in MalformedExpressionError.
    """
    policy = non_finite_policy or settings.non_finite_policy
    stack: list[float] = []

    for token in postfix:
        if isinstance(token, Number):
            try:
                stack.append(float(token.text))
            except ValueError:
                raise MalformedExpressionError(f"Invalid '{expression}'") from None
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise MalformedExpressionError(f"Invalid '{expression}'")
            b = stack.pop()
            a = stack.pop()
            result = apply_operator(token, a, b)
            if policy is NonFinitePolicy.RAISE and not math.isfinite(result):
                raise NonFiniteResultError(f"Non-finite result in '{expression}'")
            stack.append(result)
        else:
            raise MalformedExpressionError(f"Invalid '{expression}'")

    if len(stack) != 1:
        raise MalformedExpressionError(f"Invalid '{expression}'")

    return stack[0]


def evaluate(
    infix: Iterable[Token],
    non_finite_policy: NonFinitePolicy | None = None,
) -> float:
    """Evaluate a validated infix token sequence."""
    infix = list(infix)
    expression = render(infix)

    postfix = to_postfix(infix)
    logger.debug("Converted to postfix", expression=expression, postfix=render(postfix, " "))

    result = execute_postfix(postfix, expression, non_finite_policy)
    logger.debug("Evaluated expression", expression=expression, result=result)
    return result


def calculate(expression: str, non_finite_policy: NonFinitePolicy | None = None) -> float:
    """Validate and evaluate a keypad expression in one step."""
    return evaluate(validate(expression), non_finite_policy)
