"""Tests for the key-press controller and display formatting.

Each test drives a fresh Calculator with a key sequence and checks the
display, mirroring how a user would operate a desk calculator.
"""

import pytest

from tally.config import Settings
from tally.controller import Calculator, format_number
from tally.models import Operator


@pytest.fixture
def calc():
    return Calculator()


# --- Running total ---

def test_initial_display(calc):
    assert calc.display == "0"
    assert calc.state.new_number is True


def test_simple_sum(calc):
    assert calc.press_all("5+3=") == "8"


def test_operator_applies_pending_operator(calc):
    calc.press_all("2+3*")
    assert calc.display == "5"
    assert calc.state.running_total == pytest.approx(5.0)
    assert calc.state.pending_operator is Operator.MULTIPLY


def test_chain_has_no_precedence(calc):
    assert calc.press_all("2+3*4=") == "20"


def test_decimal_result(calc):
    assert calc.press_all("12.5/2=") == "6.25"


def test_negative_running_total_feeds_next_operation(calc):
    assert calc.press_all("3-5=") == "-2"
    assert calc.press_all("*4=") == "-8"


def test_digit_after_result_starts_new_number(calc):
    calc.press_all("5+3=")
    assert calc.press("7") == "7"


def test_equals_without_pending_operator(calc):
    assert calc.press_all("7=") == "7"
    assert calc.state.pending_operator is None


def test_last_expression(calc):
    calc.press_all("5+3")
    assert calc.last_expression is None
    calc.press("=")
    assert calc.last_expression == "5+3"


def test_whitespace_keys_are_skipped(calc):
    assert calc.press_all("1 + 2 =") == "3"


def test_float_display(calc):
    assert calc.press_all("0.1+0.2=") == "0.30000000000000004"


def test_leading_decimal_point(calc):
    assert calc.press_all("5+.5=") == "5.5"


# --- Errors ---

def test_division_by_zero_message(calc):
    assert calc.press_all("5/0=") == "NaN: Div By Zero"
    assert calc.state.pending_operator is None
    assert calc.state.new_number is True


def test_division_by_zero_on_operator(calc):
    assert calc.press_all("5/0+") == "NaN: Div By Zero"
    assert calc.state.pending_operator is None


def test_recovers_after_error(calc):
    calc.press_all("5/0=")
    assert calc.press_all("3+4=") == "7"


def test_bare_decimal_point_is_invalid(calc):
    assert calc.press_all(".+") == "NaN"
    assert calc.state.new_number is True


def test_large_result_can_be_reused(calc):
    assert calc.press_all("10000000*1000000000=") == "10000000000000000"
    assert calc.press("=") == "10000000000000000"
    assert calc.press("%") == "100000000000000"
    assert calc.press_all("+5=") == "100000000000005"


def test_small_result_can_be_reused(calc):
    assert calc.press_all("1/100000=") == "0.00001"
    assert calc.press("=") == "0.00001"
    assert float(calc.press("%")) == pytest.approx(1e-07)


def test_custom_messages():
    calc = Calculator(Settings(invalid_message="Error", zero_division_message="Cannot divide by zero"))
    assert calc.press_all("1/0=") == "Cannot divide by zero"
    assert calc.press_all(".=") == "Error"


def test_unknown_key(calc):
    with pytest.raises(ValueError, match="Unknown key"):
        calc.press("x")


# --- Input shaping ---

def test_digit_limit(calc):
    assert calc.press_all("1" * 20) == "1" * 15


def test_digit_limit_ignores_decimal_point(calc):
    calc.press_all("123456789012345.6")
    assert calc.display == "123456789012345."


def test_configured_digit_limit():
    calc = Calculator(Settings(max_digits=3))
    assert calc.press_all("12345") == "123"


def test_single_decimal_point(calc):
    assert calc.press_all("1.2.3") == "1.23"


def test_percent(calc):
    assert calc.press_all("50%") == "0.5"
    assert calc.state.new_number is True


def test_percent_of_second_operand(calc):
    assert calc.press_all("200+50%=") == "200.5"


def test_clear(calc):
    calc.press_all("9*9")
    assert calc.press("C") == "0"
    assert calc.state.running_total == 0
    assert calc.state.pending_operator is None
    assert calc.state.new_number is True
    assert calc.press_all("c4=") == "4"


# --- Formatting ---

@pytest.mark.parametrize("value,expected", [
    (8.0, "8"),
    (6.25, "6.25"),
    (-2.0, "-2"),
    (-0.0, "-0"),
    (0.5, "0.5"),
    (1e16, "10000000000000000"),
    (1e-05, "0.00001"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected
