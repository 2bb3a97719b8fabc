"""
Tests for expression evaluation and printing in Lox.
"""
import math

import pytest

from loxlang.exceptions import LoxRuntimeError
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.parser import parse_expression
from loxlang.tests.utils import output_lines, parse_source, run_source


def evaluate(source: str):
    """
    Evaluate a single expression and return its value.
    """
    tokens, _ = scan(source)
    expr, diagnostics = parse_expression(tokens)
    assert diagnostics == []
    return Interpreter().evaluate(expr)


def test_print_integral_number_has_one_decimal(capsys):
    run_source("print 3;")
    assert output_lines(capsys) == ["3.0"]


def test_print_fractional_number(capsys):
    run_source("print 3.5; print 0.1; print 1 / 3; print -2;")
    assert output_lines(capsys) == ["3.5", "0.1", "0.3333333333333333", "-2.0"]


def test_print_other_values(capsys):
    run_source('print nil; print true; print false; print "text";')
    assert output_lines(capsys) == ["nil", "true", "false", "text"]


def test_arithmetic():
    assert evaluate("1 + 2 * 3 - 4 / 2") == 5.0
    assert evaluate("(1 + 2) * 3") == 9.0
    assert evaluate("-(3 - 5)") == 2.0
    assert evaluate("10 / 4") == 2.5


def test_division_by_zero_follows_ieee():
    assert evaluate("1 / 0") == math.inf
    assert evaluate("-1 / 0") == -math.inf
    assert math.isnan(evaluate("0 / 0"))


def test_string_concatenation(capsys):
    run_source('print "a" + "b";')
    assert output_lines(capsys) == ["ab"]


@pytest.mark.parametrize("source", ['1 + "b"', '"a" + 1', 'nil + nil', 'true + 1'])
def test_mixed_plus_is_a_runtime_error(source):
    with pytest.raises(LoxRuntimeError) as excinfo:
        evaluate(source)
    assert excinfo.value.message == "Operands must be two numbers or two strings."


def test_runtime_error_stops_execution(capsys):
    """
    Test that nothing after the first runtime error runs.
    """
    interpreter = Interpreter()
    statements = parse_source('print "before";\nprint 1 + "b";\nprint "after";')
    with pytest.raises(LoxRuntimeError) as excinfo:
        interpreter.interpret(statements)
    assert excinfo.value.line == 2
    assert str(excinfo.value) == "Operands must be two numbers or two strings.\n[line 2]"
    assert output_lines(capsys) == ["before"]


@pytest.mark.parametrize("source", ['"a" - "b"', '2 * "x"', 'nil / 1', '1 > "0"', 'true <= false'])
def test_number_operators_reject_other_types(source):
    with pytest.raises(LoxRuntimeError) as excinfo:
        evaluate(source)
    assert excinfo.value.message == "Operands must be numbers."


def test_unary_minus_requires_number():
    with pytest.raises(LoxRuntimeError) as excinfo:
        evaluate('-"x"')
    assert excinfo.value.message == "Operand must be a number."


def test_comparison():
    assert evaluate("1 < 2") is True
    assert evaluate("2 <= 2") is True
    assert evaluate("3 > 4") is False
    assert evaluate("4 >= 5") is False


def test_equality():
    assert evaluate("nil == nil") is True
    assert evaluate("nil == false") is False
    assert evaluate("0 == nil") is False
    assert evaluate("1 == 1") is True
    assert evaluate('"a" == "a"') is True
    assert evaluate('"1" == 1') is False
    assert evaluate("true == 1") is False
    assert evaluate("true != 1") is True
    assert evaluate("1 != 2") is True


@pytest.mark.parametrize(
    "source, truthy",
    [
        ("nil", False),
        ("false", False),
        ("true", True),
        ("0", True),
        ('""', True),
        ('"x"', True),
        ("1.5", True),
    ],
)
def test_truthiness_law(source, truthy):
    """
    Test that '!!v' equals the truthiness of v.
    """
    assert evaluate(f"!!{source}") is truthy
    assert evaluate(f"!{source}") is (not truthy)


def test_ternary_only_evaluates_selected_branch(capsys):
    """
    Test that the untaken branch is never evaluated.
    """
    run_source(
        "var hit = 0;\n"
        "print true ? 1 : (hit = 1);\n"
        "print nil ? (hit = 2) : \"no\";\n"
        "print hit;\n"
    )
    assert output_lines(capsys) == ["1.0", "no", "0.0"]


def test_ternary_untaken_branch_errors_are_ignored():
    assert evaluate("false ? undefined_name : 2") == 2.0


def test_expression_statement_discards_result(capsys):
    run_source("1 + 2; \"ignored\";")
    assert output_lines(capsys) == []


def test_evaluation_order_is_left_to_right(capsys):
    run_source("var a = 1; print (a = 2) + a;")
    assert output_lines(capsys) == ["4.0"]
