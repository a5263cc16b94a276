"""Parsing and evaluation of single-variable-free arithmetic expressions.

Expressions use the operators ``+ - * / ^``, parentheses, decimal numbers
and the functions ``sin``, ``cos``, ``tg``, ``sqrt`` and ``ln``.  Before
evaluation every function name is folded into a one-letter code
(``s``, ``c``, ``t``, ``q``, ``l``) and a unary minus is rewritten as a
subtraction from zero.
"""

from __future__ import annotations

import math
import re

__all__ = ["ExpressionError", "normalize", "is_well_formed", "evaluate"]

_PRECEDENCE = {
    "+": 2,
    "-": 2,
    "*": 3,
    "/": 3,
    "(": 1,
    "s": 5,
    "c": 5,
    "t": 5,
    "l": 5,
    "q": 4,
    "^": 4,
}
_FUNCTIONS = frozenset("sctlq")
_BINARY = frozenset("+-*/^")
_DIGITS = frozenset("0123456789")
_LEADING_FORBIDDEN = frozenset("*/^+")
_NUMBER = re.compile(r"([0-9]*)(\.([0-9]*))?")


class ExpressionError(ValueError):
    """Raised when an expression is malformed or cannot be evaluated."""


def normalize(expression: str) -> str:
    """Fold function names into one-letter codes and make unary minus explicit."""
    compact: list[str] = []
    pos = 0
    while pos < len(expression):
        char = expression[pos]
        following = expression[pos + 1 : pos + 2]
        if char == "s" and following == "i":
            compact.append("s")
            pos += 3
        elif char == "c":
            compact.append("c")
            pos += 3
        elif char == "t":
            compact.append("t")
            pos += 2
        elif char == "s" and following == "q":
            compact.append("q")
            pos += 4
        elif char == "l":
            compact.append("l")
            pos += 2
        else:
            compact.append(char)
            pos += 1

    result: list[str] = []
    previous = ""
    for index, char in enumerate(compact):
        if char == "-" and (index == 0 or previous == "("):
            result.append("0")
        result.append(char)
        previous = char
    return "".join(result)


def is_well_formed(expression: str) -> bool:
    """Check the syntax of an expression already passed through :func:`normalize`."""
    depth = 0
    has_digit = False
    last = len(expression) - 1
    for index, char in enumerate(expression):
        if char in _DIGITS:
            has_digit = True
        if index == 0 and char in _LEADING_FORBIDDEN:
            return False
        if index != 0 and char == ".":
            continue
        if index > 0:
            previous = expression[index - 1]
            if previous in _FUNCTIONS and char != "(":
                return False
            if previous == "^" and char == "-":
                return False
            if previous == "(" and char in _LEADING_FORBIDDEN:
                return False
        if char in _PRECEDENCE:
            if index == last or expression[index + 1] == ")":
                return False
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth < 0:
            return False
        if not (char in _PRECEDENCE or char in _DIGITS or char == ")"):
            return False
    return has_digit


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and exponent.is_integer() and int(exponent) % 2 == 1
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            return math.inf
        return math.nan


def _function(code: str, value: float) -> float:
    if code == "l":
        if value < 0:
            raise ExpressionError("logarithm of a negative number")
        return -math.inf if value == 0 else math.log(value)
    if code == "q":
        if value < 0:
            raise ExpressionError("square root of a negative number")
        return math.sqrt(value)
    trig = {"s": math.sin, "c": math.cos, "t": math.tan}[code]
    try:
        return trig(value)
    except ValueError:
        return math.nan


def _apply(operator: str, operands: list[float]) -> None:
    if not operands:
        raise ExpressionError("missing operand")
    right = operands.pop()
    if operator in _FUNCTIONS:
        operands.append(_function(operator, right))
        return
    if not operands:
        raise ExpressionError(f"missing operand for {operator!r}")
    if operator not in _BINARY:
        raise ExpressionError("unbalanced parenthesis")
    left = operands.pop()
    if operator == "^":
        operands.append(_power(left, right))
    elif operator == "+":
        operands.append(right + left)
    elif operator == "-":
        operands.append(left - right)
    elif operator == "*":
        operands.append(right * left)
    else:
        if right == 0:
            raise ExpressionError("division by zero")
        operands.append(left / right)


def _read_number(text: str, pos: int) -> tuple[float, int]:
    match = _NUMBER.match(text, pos)
    if match is None or match.end() == pos:
        raise ExpressionError(f"unexpected character at position {pos}")
    whole, dot, fraction = match.groups()
    end = match.end()
    if dot is not None and text[end : end + 1] == ".":
        raise ExpressionError("number with more than one decimal point")
    return float(f"{whole or '0'}.{fraction or '0'}"), end


def evaluate(expression: str) -> float:
    """Evaluate an expression and return its value.

    Raises :class:`ExpressionError` for malformed input, division by zero and
    logarithms or square roots of negative numbers.
    """
    text = normalize(expression)
    if not is_well_formed(text):
        raise ExpressionError(f"malformed expression: {expression!r}")

    operands: list[float] = []
    operators: list[str] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in _PRECEDENCE:
            rank = _PRECEDENCE[char]
            if char == "(" or not operators or _PRECEDENCE[operators[-1]] < rank:
                operators.append(char)
            else:
                while operators and _PRECEDENCE[operators[-1]] >= rank:
                    _apply(operators.pop(), operands)
                operators.append(char)
        elif char == ")":
            while True:
                if not operators:
                    raise ExpressionError("unbalanced parenthesis")
                operator = operators.pop()
                if operator == "(":
                    break
                _apply(operator, operands)
        else:
            value, pos = _read_number(text, pos)
            operands.append(value)
            continue
        pos += 1

    while operators:
        _apply(operators.pop(), operands)
    if not operands:
        raise ExpressionError("expression has no value")
    return operands.pop()