"""Tokenizer — splits a flat arithmetic string into numbers and operators.

Scanning is a two-state machine:
    OPERAND   expecting an optional '-' sign followed by a number body
    OPERATOR  expecting one of + - * / (or the end of input)

OPERAND is only entered at the start of input or right after an operator,
which is exactly where a '-' must be read as a sign. Anywhere else '-' is
subtraction.
"""

from __future__ import annotations

from enum import Enum

from tally.errors import FormatError
from tally.models import SYMBOLS, NumberToken, Operator, OperatorToken, Token

_DIGITS = "0123456789"


class _State(Enum):
    OPERAND = "operand"
    OPERATOR = "operator"


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""
    return "".join(text.split())


def _scan_body(text: str, pos: int) -> int:
    """Consume digits and at most one '.' starting at pos.

    Returns the position just past the number body.
    """
    seen_decimal = False
    while pos < len(text) and (text[pos] in _DIGITS or text[pos] == "."):
        if text[pos] == ".":
            if seen_decimal:
                raise FormatError("Invalid number format: multiple decimal points.")
            seen_decimal = True
        pos += 1
    return pos


def tokenize(expression: str) -> list[Token]:
    """Tokenize an expression with no whitespace into numbers and operators.

    A sign with no number body after it ("5+-") is dropped; the resulting
    sequence is structurally broken and the evaluator reports it.

    Args:
        expression: Expression string, e.g. "10*-2".

    Returns:
        Tokens in input order.

    Raises:
        FormatError: a number has two decimal points, or a character outside
            digits, '.' and + - * / appears.
    """
    tokens: list[Token] = []
    state = _State.OPERAND
    pos = 0

    while pos < len(expression):
        if state is _State.OPERAND:
            start = pos
            if expression[pos] == "-":
                pos += 1
            body_start = pos
            pos = _scan_body(expression, pos)
            if pos > body_start:
                tokens.append(NumberToken(expression[start:pos]))
            state = _State.OPERATOR
            continue

        char = expression[pos]
        if char not in SYMBOLS:
            raise FormatError(f"Invalid character in expression: {char}")
        tokens.append(OperatorToken(Operator(char)))
        pos += 1
        state = _State.OPERAND

    return tokens


def parse_number(text: str) -> float:
    """Parse a single signed number using the tokenizer's number grammar.

    Accepts an optional leading '-', digits and at most one '.'; anything
    else (including "nan", "1e5" or an empty string) is a FormatError.
    """
    tokens = tokenize(strip_whitespace(text))
    if len(tokens) != 1 or not isinstance(tokens[0], NumberToken):
        raise FormatError(f"Not a number: {text!r}")
    return tokens[0].value
