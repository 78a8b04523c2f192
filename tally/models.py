"""Data models for the tally calculator.

Operator enum, NumberToken, OperatorToken, CalculatorState — the typed
structures that flow through tokenizer → evaluator → controller → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from tally.errors import FormatError


class Operator(str, Enum):
    """Binary operators, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


SYMBOLS = "".join(op.value for op in Operator)


@dataclass(frozen=True)
class NumberToken:
    """A signed decimal number, kept as the text it was scanned from.

    The sign is folded into the text ("-5"), so joining token texts gives
    back the expression.
    """

    text: str

    @property
    def value(self) -> float:
        try:
            return float(self.text)
        except ValueError:
            raise FormatError(f"Invalid number: {self.text!r}") from None


@dataclass(frozen=True)
class OperatorToken:
    """One of the four operator symbols."""

    symbol: Operator

    @property
    def text(self) -> str:
        return self.symbol.value


Token = Union[NumberToken, OperatorToken]


@dataclass
class CalculatorState:
    """Display and running-total state owned by the input controller.

    The engine never sees this; the controller composes plain expression
    strings from it.
    """

    display: str = "0"
    new_number: bool = True
    running_total: float = 0.0
    pending_operator: Optional[Operator] = None
