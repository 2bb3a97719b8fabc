"""
Lox Interpreter

This is the main entry point for the Lox interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Scanner tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Lexical and syntax errors are all reported before the process exits with
status 65; a runtime error stops execution and exits with status 70.


File: lox.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import os
import sys
from typing import Optional

from loxlang.exceptions import Diagnostic, LoxRuntimeError
from loxlang.interpreter import Interpreter
from loxlang.lexer import scan
from loxlang.parser import parse_expression, parse_program
from loxlang.printer import format_program, format_tokens
from loxlang.values import stringify

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70

COMMANDS = ("tokenize", "parse", "evaluate", "run")


def print_usage(stream=None):
    """
    Print usage.
    """
    stream = stream if stream is not None else sys.stdout
    print(file=stream)
    print("Lox Interpreter", file=stream)
    print(file=stream)
    print("Usage:", file=stream)
    print("    lox <command> <script.lox>", file=stream)
    print(file=stream)
    print("Commands:", file=stream)
    print("    tokenize    Print the tokens of the script, one per line.", file=stream)
    print("    parse       Print the syntax tree of each statement.", file=stream)
    print("    evaluate    Evaluate the script as a single expression and print it.", file=stream)
    print("    run         Execute the script.", file=stream)
    print(file=stream)
    print("Or run with no arguments to enter interactive mode (REPL).", file=stream)
    print(file=stream)
    print("Options:", file=stream)
    print("    -h, --help", file=stream)
    print("        Show this help message and exit.", file=stream)
    print(file=stream)
    print("Environment:", file=stream)
    print("    LOXDEBUG", file=stream)
    print("        When set, print the tokens and syntax tree before running.", file=stream)


def debug_enabled() -> bool:
    return bool(os.environ.get('LOXDEBUG'))


def debug_print_tokens_ast(tokens, statements):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    print(format_tokens(tokens), file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    print(format_program(statements), file=sys.stderr)
    print(" ", file=sys.stderr)


def report(diagnostics: list[Diagnostic]) -> None:
    """
    Write diagnostics to stderr, one per line.
    """
    for diagnostic in diagnostics:
        print(diagnostic, file=sys.stderr)


def read_source(script_name: str) -> Optional[str]:
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return None


def tokenize_command(source: str) -> int:
    """
    Print every token, then any lexical errors.
    """
    tokens, diagnostics = scan(source)
    print(format_tokens(tokens))
    if diagnostics:
        report(diagnostics)
        return EX_DATAERR
    return EX_OK


def parse_command(source: str) -> int:
    """
    Print the syntax tree of each statement.
    """
    tokens, lex_errors = scan(source)
    if lex_errors:
        report(lex_errors)
        return EX_DATAERR
    statements, syntax_errors = parse_program(tokens)
    if syntax_errors:
        report(syntax_errors)
        return EX_DATAERR
    if statements:
        print(format_program(statements))
    return EX_OK


def evaluate_command(source: str) -> int:
    """
    Evaluate the source as one expression and print its value.
    """
    tokens, lex_errors = scan(source)
    if lex_errors:
        report(lex_errors)
        return EX_DATAERR
    expr, syntax_errors = parse_expression(tokens)
    if syntax_errors:
        report(syntax_errors)
        return EX_DATAERR
    try:
        value = Interpreter().evaluate(expr)
    except LoxRuntimeError as e:
        print(e, file=sys.stderr)
        return EX_SOFTWARE
    print(stringify(value))
    return EX_OK


def run_command(source: str) -> int:
    """
    Run a Lox program.
    """
    tokens, lex_errors = scan(source)
    statements, syntax_errors = parse_program(tokens)

    if debug_enabled():
        debug_print_tokens_ast(tokens, statements)

    diagnostics = [*lex_errors, *syntax_errors]
    if diagnostics:
        report(diagnostics)
        return EX_DATAERR
    try:
        Interpreter().interpret(statements)
    except LoxRuntimeError as e:
        print(e, file=sys.stderr)
        return EX_SOFTWARE
    return EX_OK


HANDLERS = {
    "tokenize": tokenize_command,
    "parse": parse_command,
    "evaluate": evaluate_command,
    "run": run_command,
}


def is_incomplete(diagnostics: list[Diagnostic]) -> bool:
    """
    Return ``True`` if every error is one that more input could fix.
    """
    return bool(diagnostics) and all(d.at_end for d in diagnostics)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter()
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)

            tokens, lex_errors = scan(source)
            statements, syntax_errors = parse_program(tokens)
            diagnostics = [*lex_errors, *syntax_errors]
            if diagnostics:
                # A bare expression without ';' is echoed.
                expr, expr_errors = parse_expression(tokens)
                if not lex_errors and not expr_errors:
                    buffer.clear()
                    print(stringify(interpreter.evaluate(expr)))
                    continue
                if is_incomplete(diagnostics) and line.strip():
                    continue
                report(diagnostics)
                buffer.clear()
                continue

            buffer.clear()
            interpreter.interpret(statements)
        except LoxRuntimeError as e:
            print(e, file=sys.stderr)
            buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - A command followed by a path: read the file and run the command on it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    args = argv[1:]
    if not args:
        run_repl()
        return EX_OK
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return EX_OK
    if len(args) == 2 and args[0] in COMMANDS:
        source = read_source(args[1])
        if source is None:
            return EX_NOINPUT
        return HANDLERS[args[0]](source)
    if len(args) == 2:
        print(f"Unknown command: {args[0]}", file=sys.stderr)
    print_usage(sys.stderr)
    return EX_USAGE


if __name__ == "__main__":
    sys.exit(main(sys.argv))
