"""
Tests for the command-line interface.
"""

import json

from typer.testing import CliRunner

from keycalc.cli import app, normalize_input

runner = CliRunner()


class TestEval:
    """Test the eval command."""

    def test_eval_prints_result(self):
        result = runner.invoke(app, ["eval", "(1+2)×3"])
        assert result.exit_code == 0
        assert result.output.strip() == "9"

    def test_eval_accepts_ascii_operators(self):
        result = runner.invoke(app, ["eval", "1 + 2 * 3 / 2"])
        assert result.exit_code == 0
        assert result.output.strip() == "4"

    def test_eval_error_exits_nonzero(self):
        result = runner.invoke(app, ["eval", "1/0"])
        assert result.exit_code == 1
        assert "Can't divide by 0" in result.output

    def test_eval_json_report(self):
        result = runner.invoke(app, ["eval", "2(3)", "--json"])
        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["result"] == 6.0
        assert report["display"] == "6"
        assert report["tokens"] == ["2", "×", "(", "3", ")"]
        assert report["postfix"] == ["2", "3", "×"]
        assert report["error"] is None

    def test_eval_json_syntax_error(self):
        result = runner.invoke(app, ["eval", "5..5", "--json"])
        assert result.exit_code == 1
        report = json.loads(result.output)
        assert report["error_kind"] == "SyntaxError"
        assert report["error"] == "Unexpected operator '.'"

    def test_eval_json_mismatched_parenthesis(self):
        result = runner.invoke(app, ["eval", "(1+2", "--json"])
        report = json.loads(result.output)
        assert report["error_kind"] == "MismatchedParenthesis"

    def test_eval_non_finite_propagate(self):
        result = runner.invoke(app, ["eval", "(0)^(-1)", "--non-finite", "propagate"])
        assert result.exit_code == 0
        assert result.output.strip() == "Infinity"

    def test_eval_json_keeps_infinity(self):
        result = runner.invoke(app, ["eval", "(0)^(-1)", "--non-finite", "propagate", "--json"])
        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["result"] == "Infinity"
        assert report["display"] == "Infinity"
        assert report["error"] is None

    def test_eval_leading_minus_reaches_evaluator(self):
        result = runner.invoke(app, ["eval", "-5"])
        assert result.exit_code == 1
        assert "Invalid '-5'" in result.output

    def test_eval_leading_minus_json(self):
        result = runner.invoke(app, ["eval", "-5+3", "--json"])
        report = json.loads(result.output)
        assert report["error_kind"] == "MalformedExpression"


class TestTokens:
    """Test the tokens command."""

    def test_tokens_shows_postfix(self):
        result = runner.invoke(app, ["tokens", "1+2*3"])
        assert result.exit_code == 0
        assert "Postfix: 1 2 3 × +" in result.output

    def test_tokens_leading_minus(self):
        result = runner.invoke(app, ["tokens", "-5+3"])
        assert result.exit_code == 0
        assert "Postfix: 5 - 3 +" in result.output

    def test_tokens_error(self):
        result = runner.invoke(app, ["tokens", "1+2)"])
        assert result.exit_code == 1
        assert "Mismatched ')'" in result.output


class TestRepl:
    """Test the interactive session."""

    def test_repl_session(self):
        result = runner.invoke(app, ["repl"], input="2*3\n=\n+1\nq\n")
        assert result.exit_code == 0
        assert "6" in result.output
        assert "6+1" in result.output
        assert "7" in result.output

    def test_repl_ends_on_eof(self):
        result = runner.invoke(app, ["repl"], input="1++\n")
        assert result.exit_code == 0
        assert "Unexpected operator '+'" in result.output


class TestNormalizeInput:
    """Test CLI input normalization."""

    def test_strips_whitespace_and_maps_aliases(self):
        assert normalize_input(" 1 * ( 2 / 3 ) ") == "1×(2÷3)"
