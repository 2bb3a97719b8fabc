"""Lox front end and tree-walk evaluator.

The pipeline is three staged calls:

    tokens, lex_errors = scan(source)
    statements, syntax_errors = parse_program(tokens)
    Interpreter().interpret(statements)

Each stage returns its own diagnostics; the caller decides whether to stop
between stages. :func:`run_source` chains all three and raises
:class:`LoxSyntaxError` when scanning or parsing reported anything.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from loxlang.environment import Environment
from loxlang.exceptions import (
    Diagnostic,
    LoxRuntimeError,
    LoxSyntaxError,
    UndefinedVariableException,
)
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.parser import parse_program

__version__ = "0.1.0"


def run_source(source: str, interpreter: Optional[Interpreter] = None) -> Interpreter:
    """
    Scan, parse and execute ``source``.

    Parameters:
        source (str): Program text.
        interpreter (Interpreter): Interpreter to run in, so that globals
            persist across calls. A new one is created when omitted.

    Returns:
        Interpreter: The interpreter after execution.

    Raises:
        LoxSyntaxError: If scanning or parsing reported diagnostics; nothing
            is executed in that case.
        LoxRuntimeError: On the first runtime error.
    """
    tokens, lex_errors = scan(source)
    statements, syntax_errors = parse_program(tokens)
    diagnostics = [*lex_errors, *syntax_errors]
    if diagnostics:
        raise LoxSyntaxError(diagnostics)
    interpreter = interpreter if interpreter is not None else Interpreter()
    interpreter.interpret(statements)
    return interpreter


__all__ = [
    "Diagnostic",
    "Environment",
    "Interpreter",
    "LoxRuntimeError",
    "LoxSyntaxError",
    "UndefinedVariableException",
    "parse_program",
    "run_source",
    "scan",
]
