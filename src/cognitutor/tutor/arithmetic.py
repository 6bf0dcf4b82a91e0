"""Arithmetic extraction and solving for simple two-operand questions.

Messages like "what is 5+3" or "12*4=" are answered directly with a short
worked explanation instead of a canned template.
"""

import re

from .exceptions import UnsupportedOperationError
from .models import MathExpression, MathSolution

_NON_MATH_CHARS = re.compile(r"[^0-9+\-*/().=]")

# Checked in this order; division is recognised by the cleaner but never solved
SOLVABLE_OPERATORS = ("+", "-", "*")

# Longer operands are left to the classifier; products stay under the int-to-str digit limit
MAX_OPERAND_DIGITS = 1000

_DISPLAY_SYMBOLS = {"+": "+", "-": "-", "*": "×"}


def clean_expression(text: str) -> str:
    """Drop every character that cannot be part of an arithmetic expression."""
    return _NON_MATH_CHARS.sub("", text)


def extract_expression(text: object) -> MathExpression | None:
    """Find a two-operand integer expression in free-form text.

    The first operator present (in ``SOLVABLE_OPERATORS`` order) decides the
    split; there is no retry with a later operator. A trailing ``=`` is
    optional. Operands longer than ``MAX_OPERAND_DIGITS`` characters never
    match.

    Args:
        text: Raw message text; anything that is not a string yields None

    Returns:
        The expression, or None when the text holds no usable expression
    """
    if not isinstance(text, str):
        return None

    cleaned = clean_expression(text)
    operator = next((op for op in SOLVABLE_OPERATORS if op in cleaned), None)
    if operator is None:
        return None

    segments = cleaned.split(operator)
    if len(segments) != 2:
        return None

    left = segments[0]
    right = segments[1].split("=")[0]
    if len(left) > MAX_OPERAND_DIGITS or len(right) > MAX_OPERAND_DIGITS:
        return None
    try:
        first = int(left)
        second = int(right)
    except ValueError:
        return None

    return MathExpression(first_operand=first, second_operand=second, operator=operator)


def _explain(a: int, b: int, operator: str, result: int) -> str:
    symbol = _DISPLAY_SYMBOLS[operator]
    lines = [f"**{a} {symbol} {b} = {result}**", "", "Here's how to solve it:"]

    if operator == "+":
        lines += [
            f"1. Start with the first number: {a}",
            f"2. Add the second number: {a} + {b}",
            f"3. Count forward {b} from {a} to reach {result}",
        ]
    elif operator == "-":
        lines += [
            f"1. Start with the first number: {a}",
            f"2. Subtract the second number: {a} - {b}",
            f"3. Count backward {b} from {a} to reach {result}",
        ]
    else:
        lines += [
            f"1. Start with the first number: {a}",
            f"2. Multiply by the second number: {a} × {b}",
            f"3. Add {a} to itself {b} times",
            f"4. So {a} * {b} = {result}",
        ]

    return "\n".join(lines)


def solve_expression(expression: MathExpression) -> MathSolution:
    """Evaluate an expression and explain the steps.

    Raises:
        UnsupportedOperationError: For division, which has no worked explanation
    """
    a = expression.first_operand
    b = expression.second_operand
    op = expression.operator

    if op == "+":
        result = a + b
    elif op == "-":
        result = a - b
    elif op == "*":
        result = a * b
    else:
        raise UnsupportedOperationError(op)

    return MathSolution(expression=expression, result=result, explanation=_explain(a, b, op, result))


def solve_message(text: object) -> MathSolution | None:
    """Extract and solve in one step; None if nothing solvable was found."""
    expression = extract_expression(text)
    if expression is None:
        return None
    return solve_expression(expression)
