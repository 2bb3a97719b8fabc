"""
Utility functions shared across Lox tests.
"""
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.parser import parse_program


def parse_source(source: str):
    """
    Scan and parse source code and return the statements.

    Fails the test if scanning or parsing reported anything.
    """
    tokens, lex_errors = scan(source)
    assert lex_errors == []
    statements, syntax_errors = parse_program(tokens)
    assert syntax_errors == []
    return statements


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter()
    interpreter.interpret(parse_source(source))
    return interpreter


def output_lines(capsys) -> list[str]:
    """
    Return captured stdout split into lines.
    """
    return capsys.readouterr().out.splitlines()
