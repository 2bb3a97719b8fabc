"""Runtime values.

A Lox value is one of exactly four Python types:

- ``float`` for numbers (64-bit IEEE)
- ``str`` for strings
- ``bool`` for booleans
- ``None`` for ``nil``

The helpers below are the only places that decide truthiness, equality and
textual rendering, and each one matches over all four cases. ``bool`` is
matched before ``float`` is ever considered so that ``True`` is never treated
as the number ``1``.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from typing import Optional, Union

Value = Optional[Union[float, str, bool]]


def is_truthy(value: Value) -> bool:
    """
    Map a value to a boolean: only ``nil`` and ``false`` are falsy.
    """
    match value:
        case None:
            return False
        case bool():
            return value
        case float() | str():
            return True
    raise TypeError(f"Not a Lox value: {value!r}")


def is_equal(left: Value, right: Value) -> bool:
    """
    Lox equality: values of different types are never equal.
    """
    if left is None or right is None:
        return left is None and right is None
    if type(left) is not type(right):
        return False
    return left == right


def format_number(number: float) -> str:
    """
    Render a number: integral values with one decimal digit, others in
    their shortest round-trip form.

    Examples:
        3.0 -> "3.0", 3.5 -> "3.5", 0.1 -> "0.1", 1e21 -> "1000000000000000000000.0"
    """
    if math.isinf(number) or math.isnan(number):
        return repr(number)
    if number.is_integer():
        return f"{number:.1f}"
    return repr(number)


def stringify(value: Value) -> str:
    """
    Textual representation of a value as written by ``print``.
    """
    match value:
        case None:
            return "nil"
        case bool():
            return "true" if value else "false"
        case float():
            return format_number(value)
        case str():
            return value
    raise TypeError(f"Not a Lox value: {value!r}")


__all__ = ["Value", "format_number", "is_equal", "is_truthy", "stringify"]
