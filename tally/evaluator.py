"""Evaluator — reduces a token stream strictly left to right.

There is no precedence: each operator is applied to the result so far and the
next operand, in input order, so "2+3*4" is (2+3)*4 = 20.
"""

from __future__ import annotations

from tally.errors import DivisionByZeroError, FormatError
from tally.models import NumberToken, Operator, OperatorToken, Token
from tally.tokenizer import strip_whitespace, tokenize


def apply_operator(op: Operator, left: float, right: float) -> float:
    """Apply one binary operator.

    Raises:
        DivisionByZeroError: op is DIVIDE and right is zero (either sign).
    """
    if op is Operator.ADD:
        return left + right
    if op is Operator.SUBTRACT:
        return left - right
    if op is Operator.MULTIPLY:
        return left * right
    if op is Operator.DIVIDE:
        if right == 0.0:
            raise DivisionByZeroError("Division by zero.")
        return left / right
    raise FormatError(f"Unknown operator: {op}")


def _operand(token: Token, message: str) -> float:
    if not isinstance(token, NumberToken):
        raise FormatError(message)
    return token.value


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression left to right.

    Whitespace is ignored anywhere. An expression with no tokens (empty,
    whitespace-only or a lone sign) evaluates to 0.

    Args:
        expression: e.g. "5+3", "-2*10", "12.5/2".

    Returns:
        The final running result.

    Raises:
        FormatError: the expression is not `number (operator number)*`.
        DivisionByZeroError: a '/' step has a zero divisor.
    """
    text = strip_whitespace(expression)
    if not text:
        return 0.0

    tokens = tokenize(text)
    if not tokens:
        # A lone sign ("-") tokenizes to nothing
        return 0.0

    result = _operand(tokens[0], "Expression must start with a number.")

    for i in range(1, len(tokens), 2):
        op = tokens[i]
        if not isinstance(op, OperatorToken):
            raise FormatError(f"Unknown operator: {op.text}")
        if i + 1 >= len(tokens):
            raise FormatError("Expression ends with an operator.")
        operand = _operand(tokens[i + 1], "Expected a number after operator.")
        result = apply_operator(op.symbol, result, operand)

    return result
