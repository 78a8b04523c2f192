"""Input controller — the key-press behavior of a basic desk calculator.

Holds the display text, the "next digit starts a new number" flag, the
running total and the pending operator. Pressing an operator or '=' composes
"<total><pending operator><displayed number>" and hands it to the evaluator;
the engine itself never sees any of this state.

Key set:
    0-9 .      number entry (digit limit and single decimal point enforced)
    + - * /    apply the pending operator, then make this one pending
    =          apply the pending operator and clear it
    %          divide the displayed number by 100
    C          clear everything
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from tally.config import Settings
from tally.errors import DivisionByZeroError, FormatError
from tally.evaluator import evaluate
from tally.models import SYMBOLS, CalculatorState, Operator
from tally.tokenizer import parse_number

_DIGITS = "0123456789"
_INPUT_KEYS = _DIGITS + "." + SYMBOLS + "%"


def format_number(value: float) -> str:
    """Render a float for the display.

    Shortest round-trip digits in positional notation, without the trailing
    ".0" on integral values: 8.0 → "8", 6.25 → "6.25", 1e16 →
    "10000000000000000", 1e-05 → "0.00001".
    """
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _current_number(display: str) -> str:
    """The part of the display after the last operator character."""
    i = len(display) - 1
    while i >= 0 and display[i] not in SYMBOLS:
        i -= 1
    return display[i + 1:]


class Calculator:
    """Running-total calculator driven one key at a time."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.state = CalculatorState()
        # Expression composed by the most recent press, if any
        self.last_expression: Optional[str] = None

    @property
    def display(self) -> str:
        return self.state.display

    def press(self, key: str) -> str:
        """Press a single key and return the display text.

        Raises:
            ValueError: key is not part of the calculator's key set.
        """
        self.last_expression = None
        if key in ("C", "c"):
            self.clear()
        elif key == "=":
            self.equals()
        elif len(key) == 1 and key in _INPUT_KEYS:
            self._input(key)
        else:
            raise ValueError(f"Unknown key: {key!r}")
        return self.state.display

    def press_all(self, keys: Iterable[str]) -> str:
        """Press each key in turn, skipping whitespace. Returns the display."""
        for key in keys:
            if key.isspace():
                continue
            self.press(key)
        return self.state.display

    def clear(self) -> None:
        self.state = CalculatorState()

    def equals(self) -> None:
        """Apply the pending operator, if any, and clear it."""
        current = self._read_display()
        if current is None:
            return

        if self.state.pending_operator is None:
            return

        try:
            self.state.running_total = self._apply_pending(current)
            self.state.display = format_number(self.state.running_total)
        except (DivisionByZeroError, FormatError) as e:
            self._show_error(e)
        finally:
            self.state.pending_operator = None
            self.state.new_number = True

    # ------------------------------------------------------------------
    # Key handlers
    # ------------------------------------------------------------------

    def _input(self, key: str) -> None:
        is_operator = key in SYMBOLS
        if self.state.new_number:
            if not is_operator and key != "%":
                self.state.display = ""
            self.state.new_number = False

        if is_operator:
            self._operator(Operator(key))
        elif key == "%":
            self._percent()
        else:
            self._append(key)

    def _append(self, key: str) -> None:
        current = _current_number(self.state.display)
        if key in _DIGITS and sum(c in _DIGITS for c in current) >= self.settings.max_digits:
            return
        if key == "." and "." in current:
            return
        self.state.display += key

    def _operator(self, op: Operator) -> None:
        current = self._read_display()
        if current is None:
            return

        try:
            if self.state.pending_operator is not None:
                self.state.running_total = self._apply_pending(current)
                self.state.display = format_number(self.state.running_total)
            else:
                self.state.running_total = current
            self.state.pending_operator = op
            self.state.new_number = True
        except (DivisionByZeroError, FormatError) as e:
            self._show_error(e)
            self.state.pending_operator = None
            self.state.new_number = True

    def _percent(self) -> None:
        current = self._read_display()
        if current is None:
            return
        self.state.display = format_number(current / 100.0)
        self.state.new_number = True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _read_display(self) -> Optional[float]:
        """Parse the display, showing the invalid message if it is not a number."""
        try:
            return parse_number(self.state.display)
        except FormatError:
            self.state.display = self.settings.invalid_message
            self.state.new_number = True
            return None

    def _apply_pending(self, current: float) -> float:
        op = self.state.pending_operator
        expression = f"{format_number(self.state.running_total)}{op.value}{format_number(current)}"
        self.last_expression = expression
        return evaluate(expression)

    def _show_error(self, error: Exception) -> None:
        if isinstance(error, DivisionByZeroError):
            self.state.display = self.settings.zero_division_message
        else:
            self.state.display = self.settings.invalid_message
