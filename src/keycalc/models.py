"""
Report models for keycalc.

Serializable view of one expression run through the pipeline, used for
machine-readable CLI output.
"""

from pydantic import BaseModel, ConfigDict

from keycalc.config import NonFinitePolicy
from keycalc.errors import CalculatorError, EvaluationError
from keycalc.evaluator import execute_postfix, to_postfix
from keycalc.session import format_result
from keycalc.tokenizer import validate
from keycalc.tokens import Token, render


class EvaluationReport(BaseModel):
    """Outcome of validating and evaluating one expression."""

    # NaN and infinity serialize as "NaN" / "Infinity" instead of null
    model_config = ConfigDict(ser_json_inf_nan="strings")

    expression: str
    tokens: list[str] = []
    postfix: list[str] = []
    result: float | None = None
    display: str | None = None
    error_kind: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_expression(
        cls,
        expression: str,
        non_finite_policy: NonFinitePolicy | None = None,
    ) -> "EvaluationReport":
        """Run the pipeline, capturing calculator errors instead of raising."""
        report = cls(expression=expression)
        infix: list[Token] = []
        try:
            infix = validate(expression)
            report.tokens = [str(token) for token in infix]
            postfix = to_postfix(infix)
            report.postfix = [str(token) for token in postfix]
            value = execute_postfix(postfix, render(infix), non_finite_policy)
        except EvaluationError as e:
            report.error_kind = e.kind.value
            report.error = e.message
            return report
        except CalculatorError as e:
            report.error_kind = "SyntaxError"
            report.error = e.message
            return report

        report.result = value
        report.display = format_result(value)
        return report
