"""
keycalc - Keypad Arithmetic Validator & Evaluator

Turns the keystrokes of a calculator keypad (digits, decimal point,
^ × ÷ + -, parentheses) into a number: the tokenizer validates the input
and inserts implicit multiplication, and the evaluator runs it through
shunting-yard and a postfix stack machine.
"""

__version__ = "1.0.0"
__author__ = "keycalc Team"

from keycalc.errors import (
    CalculatorError,
    DivisionByZeroError,
    EvaluationError,
    EvaluationErrorKind,
    ExpressionSyntaxError,
    MalformedExpressionError,
    MismatchedParenthesisError,
    NonFiniteResultError,
)
from keycalc.evaluator import calculate, evaluate, execute_postfix, to_postfix
from keycalc.session import KeypadSession, format_result
from keycalc.tokenizer import validate
from keycalc.tokens import CloseParen, Number, OpenParen, Operator, Token

__all__ = [
    "CalculatorError",
    "CloseParen",
    "DivisionByZeroError",
    "EvaluationError",
    "EvaluationErrorKind",
    "ExpressionSyntaxError",
    "KeypadSession",
    "MalformedExpressionError",
    "MismatchedParenthesisError",
    "NonFiniteResultError",
    "Number",
    "OpenParen",
    "Operator",
    "Token",
    "calculate",
    "evaluate",
    "execute_postfix",
    "format_result",
    "to_postfix",
    "validate",
]
