"""
Tests for variable declaration and assignment in Lox.
"""
import pytest

from loxlang.exceptions import UndefinedVariableException
from loxlang.interpreter import Interpreter
from loxlang.nodes import ExpressionStmt, VarDecl
from loxlang.tests.utils import output_lines, parse_source, run_source


def test_decl_and_assign_ast_and_runtime():
    source = (
        "var x = 5;\n"
        "x = x + 1;\n"
    )
    ast = parse_source(source)
    decl, assign = ast
    assert isinstance(decl, VarDecl)
    assert isinstance(assign, ExpressionStmt)

    interpreter = run_source(source)
    assert interpreter.globals.values["x"] == 6.0


def test_declaration_without_initializer_is_nil(capsys):
    run_source("var x; print x;")
    assert output_lines(capsys) == ["nil"]


def test_redeclaration_replaces_value(capsys):
    run_source("var x = 1; var x = \"two\"; print x;")
    assert output_lines(capsys) == ["two"]


def test_assign_without_decl_raises():
    """
    Test that assignment never creates a binding.
    """
    interpreter = Interpreter()
    with pytest.raises(UndefinedVariableException) as excinfo:
        interpreter.interpret(parse_source("x = 5;"))
    assert str(excinfo.value) == "Undefined variable 'x'.\n[line 1]"
    assert "x" not in interpreter.globals


def test_assign_without_decl_in_block_raises():
    interpreter = Interpreter()
    with pytest.raises(UndefinedVariableException):
        interpreter.interpret(parse_source("{ { y = 1; } }"))
    assert "y" not in interpreter.globals


def test_undefined_read_reports_line():
    interpreter = Interpreter()
    with pytest.raises(UndefinedVariableException) as excinfo:
        interpreter.interpret(parse_source("var a = 1;\n\nprint b;"))
    assert excinfo.value.line == 3


def test_assignment_is_an_expression(capsys):
    run_source("var a; var b; a = b = 3; print a; print b; print a = 4;")
    assert output_lines(capsys) == ["3.0", "3.0", "4.0"]
