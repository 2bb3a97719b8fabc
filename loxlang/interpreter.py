"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
literals, grouping, unary, binary and conditional expressions, variables, blocks and output
statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in post-order: every operand is
evaluated before the operator that consumes it. Statements are executed via the `execute()`
method, and expressions are evaluated using `evaluate()`. Both dispatch with a single `match`
over the node classes in `loxlang.nodes`.

2. Environment
The interpreter keeps a global `Environment` for the lifetime of the instance and a pointer
to the currently active scope. Entering a block creates a child scope that encloses the active
one; leaving the block restores the previous scope, even when an error unwinds through it.

3. Expression Evaluation
Values are `float`, `str`, `bool` or `None` (nil). Arithmetic and comparison operators check
their operand types and raise `LoxRuntimeError` on a mismatch; `+` also concatenates two strings.
Equality works on any pair of values. The conditional operator only evaluates the branch it
selects.

4. Error Handling
Runtime errors such as undefined variables or operands of the wrong type are raised as typed
exceptions carrying the line of the offending token. The first one aborts `interpret()`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from typing import Iterable, Optional

from loxlang.environment import Environment
from loxlang.exceptions import LoxRuntimeError
from loxlang.nodes import (
    Assign,
    Binary,
    Block,
    Expr,
    ExpressionStmt,
    Grouping,
    Literal,
    PrintStmt,
    Stmt,
    Ternary,
    Unary,
    VarDecl,
    VariableRef,
)
from loxlang.tokens import Token, TokenType
from loxlang.values import Value, is_equal, is_truthy, stringify


def _check_number_operand(operator: Token, operand: Value) -> float:
    if isinstance(operand, float):
        return operand
    raise LoxRuntimeError(operator, "Operand must be a number.")


def _check_number_operands(operator: Token, left: Value, right: Value) -> tuple[float, float]:
    if isinstance(left, float) and isinstance(right, float):
        return left, right
    raise LoxRuntimeError(operator, "Operands must be numbers.")


def _divide(left: float, right: float) -> float:
    """IEEE division: a zero divisor yields an infinity or NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, environment: Optional[Environment] = None):
        """
        Initialize the interpreter.

        Parameters:
            environment (Environment): Global scope to run in. A fresh one is
                created when omitted.
        """
        self.globals = environment if environment is not None else Environment()
        self.environment = self.globals

    def interpret(self, statements: Iterable[Stmt]) -> None:
        """
        Execute top-level statements in order.

        Raises:
            LoxRuntimeError: On the first runtime error; later statements
                are not executed.
        """
        for stmt in statements:
            self.execute(stmt)

    def execute(self, stmt: Stmt) -> None:
        """
        Execute a single statement for its effect.
        """
        match stmt:
            case ExpressionStmt(expression):
                self.evaluate(expression)
            case PrintStmt(expression):
                value = self.evaluate(expression)
                print(stringify(value), flush=True)
            case VarDecl(name, initializer):
                value = None
                if initializer is not None:
                    value = self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
            case Block(statements):
                self.execute_block(statements, Environment(self.environment))
            case _:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")

    def execute_block(self, statements: Iterable[Stmt], environment: Environment) -> None:
        """
        Execute ``statements`` in ``environment``, then restore the previous scope.
        """
        previous = self.environment
        self.environment = environment
        try:
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous

    def evaluate(self, expr: Expr) -> Value:
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            UndefinedVariableException: If a variable is referenced or assigned
                that has not been defined.
            LoxRuntimeError: If an operator receives operands of the wrong type.
        """
        match expr:
            case Literal(value):
                return value
            case Grouping(inner):
                return self.evaluate(inner)
            case Unary(operator, right):
                return self._unary(operator, self.evaluate(right))
            case Binary(left, operator, right):
                lhs = self.evaluate(left)
                rhs = self.evaluate(right)
                return self._binary(operator, lhs, rhs)
            case Ternary(condition, _, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    return self.evaluate(then_branch)
                return self.evaluate(else_branch)
            case VariableRef(name):
                return self.environment.get(name)
            case Assign(name, value_expr):
                value = self.evaluate(value_expr)
                self.environment.assign(name, value)
                return value
        raise TypeError(f"Invalid expression node: {expr!r}")

    def _unary(self, operator: Token, operand: Value) -> Value:
        match operator.type:
            case TokenType.BANG:
                return not is_truthy(operand)
            case TokenType.MINUS:
                return -_check_number_operand(operator, operand)
        raise LoxRuntimeError(operator, f"Unknown unary operator '{operator.lexeme}'.")

    def _binary(self, operator: Token, lhs: Value, rhs: Value) -> Value:
        match operator.type:
            # Equality
            case TokenType.EQUAL_EQUAL:
                return is_equal(lhs, rhs)
            case TokenType.BANG_EQUAL:
                return not is_equal(lhs, rhs)

            # Arithmetic
            case TokenType.PLUS:
                if isinstance(lhs, float) and isinstance(rhs, float):
                    return lhs + rhs
                if isinstance(lhs, str) and isinstance(rhs, str):
                    return lhs + rhs
                raise LoxRuntimeError(
                    operator, "Operands must be two numbers or two strings."
                )
            case TokenType.MINUS:
                left, right = _check_number_operands(operator, lhs, rhs)
                return left - right
            case TokenType.STAR:
                left, right = _check_number_operands(operator, lhs, rhs)
                return left * right
            case TokenType.SLASH:
                left, right = _check_number_operands(operator, lhs, rhs)
                return _divide(left, right)

            # Comparison
            case TokenType.GREATER:
                left, right = _check_number_operands(operator, lhs, rhs)
                return left > right
            case TokenType.GREATER_EQUAL:
                left, right = _check_number_operands(operator, lhs, rhs)
                return left >= right
            case TokenType.LESS:
                left, right = _check_number_operands(operator, lhs, rhs)
                return left < right
            case TokenType.LESS_EQUAL:
                left, right = _check_number_operands(operator, lhs, rhs)
                return left <= right
        raise LoxRuntimeError(operator, f"Unknown binary operator '{operator.lexeme}'.")
