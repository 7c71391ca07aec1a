"""
Keypad session.

Holds the formula typed so far and the answer shown for it, and drives the
tokenizer and evaluator one keystroke at a time.
"""

import math
from decimal import Decimal

import structlog

from keycalc.config import NonFinitePolicy
from keycalc.errors import EvaluationError, ExpressionSyntaxError
from keycalc.evaluator import evaluate
from keycalc.tokenizer import validate

logger = structlog.get_logger()

CLEAR_KEY = "C"
BACKSPACE_KEY = "c"
EQUALS_KEY = "="


def format_result(value: float) -> str:
    """Render a result the way the keypad displays it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        # Positional notation from the shortest round-trip digits
        text = format(Decimal(text), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


class KeypadSession:
    """A keypad formula and its current answer."""

    def __init__(self, non_finite_policy: NonFinitePolicy | None = None):
        self.non_finite_policy = non_finite_policy
        self.formula = ""
        self.answer = ""
        self.result: float | None = None

    def press(self, key: str) -> str:
        """Handle one key and return the answer text."""
        if key == CLEAR_KEY:
            self.formula = ""
            self._set_answer("")
        elif key == BACKSPACE_KEY:
            self.formula = self.formula[:-1]
            self._set_answer("")
        elif key == EQUALS_KEY:
            self._commit()
        else:
            self._append(key)
        return self.answer

    def enter(self, text: str) -> str:
        """Press every character of `text` in order."""
        for key in text:
            self.press(key)
        return self.answer

    def _set_answer(self, answer: str, result: float | None = None) -> None:
        self.answer = answer
        self.result = result

    def _append(self, key: str) -> None:
        candidate = self.formula + key
        try:
            infix = validate(candidate)
        except ExpressionSyntaxError as e:
            logger.info("Keystroke rejected", key=key, formula=self.formula, error=e.message)
            self._set_answer(e.message)
            return

        self.formula = candidate
        try:
            value = evaluate(infix, self.non_finite_policy)
        except EvaluationError as e:
            self._set_answer(e.message)
            return
        self._set_answer(format_result(value), value)

    def _commit(self) -> None:
        if self.result is None or not math.isfinite(self.result):
            return

        text = self.answer
        if self.result < 0:
            # Leading minus is only accepted right after "("
            text = f"({text})"
        try:
            validate(text)
        except ExpressionSyntaxError:
            logger.info("Answer cannot be re-entered", answer=self.answer)
            return

        self.formula = text
        self._set_answer("")
