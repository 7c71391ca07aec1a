"""
Exception hierarchy for keycalc.

Syntax errors come from the tokenizer; evaluation errors come from the
shunting-yard and postfix passes and carry a machine-readable kind.
"""

from enum import Enum


class CalculatorError(Exception):
    """Base exception for calculator errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExpressionSyntaxError(CalculatorError):
    """Raised when the keystroke sequence cannot be tokenized."""

    def __init__(self, message: str, character: str | None = None, position: int | None = None):
        super().__init__(message)
        self.character = character
        self.position = position


class EvaluationErrorKind(str, Enum):
    """Kinds of evaluation failure."""
    MISMATCHED_PARENTHESIS = "MismatchedParenthesis"
    DIVIDE_BY_ZERO = "DivideByZero"
    MALFORMED_EXPRESSION = "MalformedExpression"
    NON_FINITE_RESULT = "NonFiniteResult"


class EvaluationError(CalculatorError):
    """Raised when a tokenized expression cannot be evaluated."""
    kind: EvaluationErrorKind


class MismatchedParenthesisError(EvaluationError):
    """Raised when a parenthesis has no partner."""
    kind = EvaluationErrorKind.MISMATCHED_PARENTHESIS


class DivisionByZeroError(EvaluationError):
    """Raised when attempting to divide by zero."""
    kind = EvaluationErrorKind.DIVIDE_BY_ZERO


class MalformedExpressionError(EvaluationError):
    """Raised when operands and operators do not reduce to one value."""
    kind = EvaluationErrorKind.MALFORMED_EXPRESSION


class NonFiniteResultError(EvaluationError):
    """Raised when an operation yields NaN or infinity."""
    kind = EvaluationErrorKind.NON_FINITE_RESULT
