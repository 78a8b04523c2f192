"""Error kinds raised by the tally engine.

Both subclass the matching built-in so callers catching ValueError or
ZeroDivisionError keep working.
"""

from __future__ import annotations


class FormatError(ValueError):
    """Expression does not match `number (operator number)*`."""


class DivisionByZeroError(ZeroDivisionError):
    """A division step's divisor is exactly zero."""
