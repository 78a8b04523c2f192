"""Calculator settings, overridable through TALLY_* environment variables.

    TALLY_MAX_DIGITS              digits allowed per entered number (default 15)
    TALLY_INVALID_MESSAGE         display text for malformed input (default "NaN")
    TALLY_ZERO_DIVISION_MESSAGE   display text for division by zero
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_DIGITS = 15


@dataclass(frozen=True)
class Settings:
    """Input-shaping limits and error messages for the controller."""

    max_digits: int = DEFAULT_MAX_DIGITS
    invalid_message: str = "NaN"
    zero_division_message: str = "NaN: Div By Zero"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from the environment, falling back to defaults.

        Raises:
            ValueError: TALLY_MAX_DIGITS is not a positive integer.
        """
        env = os.environ if environ is None else environ
        raw_digits = env.get("TALLY_MAX_DIGITS", str(DEFAULT_MAX_DIGITS))
        try:
            max_digits = int(raw_digits)
        except ValueError:
            raise ValueError(f"TALLY_MAX_DIGITS must be an integer, got {raw_digits!r}") from None
        if max_digits < 1:
            raise ValueError(f"TALLY_MAX_DIGITS must be positive, got {max_digits}")

        return cls(
            max_digits=max_digits,
            invalid_message=env.get("TALLY_INVALID_MESSAGE", cls.invalid_message),
            zero_division_message=env.get("TALLY_ZERO_DIVISION_MESSAGE", cls.zero_division_message),
        )
