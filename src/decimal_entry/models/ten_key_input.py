"""TenKeyDecimalInput — calculator-style keypad entry with an implied separator.

Digits enter from the least significant side and the last ``fractions``
digits are the fraction part:

- ``"123"`` with 2 fractions reads as ``1.23``.
- ``"05"`` with 2 fractions reads as ``0.05``.
- ``"99"`` with 4 fractions reads as ``0.0099``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from decimal_entry.core.digits import (
    filter_digits,
    parse_digits,
    render_entry,
    require_non_negative,
)
from decimal_entry.core.types import NO_SEPARATOR, Digits, SeparatorChar, SeparatorIndex


class TenKeyDecimalInput(BaseModel):
    """Decimal entry with a fixed number of fraction digits.

    Leading zeros are dropped and the digits are left-padded so the integer
    part always holds at least one digit: typing ``""`` and ``"000"`` give
    the same ``0.00`` state for two fractions.
    """

    value: str
    separator_char: SeparatorChar = "."
    fractions: int = Field(ge=0)

    model_config = {"frozen": True}

    def __init__(self, value: str, separator_char: str = ".", *, fractions: int) -> None:
        require_non_negative("fractions", fractions)
        super().__init__(value=value, separator_char=separator_char, fractions=fractions)

    @computed_field
    @property
    def digits(self) -> Digits:
        chars = filter_digits(self.value).lstrip("0").rjust(self.fractions + 1, "0")
        return parse_digits(chars)

    @computed_field
    @property
    def separator_index(self) -> SeparatorIndex:
        if self.fractions == 0:
            return NO_SEPARATOR
        return len(self.digits) - self.fractions

    @property
    def display_value(self) -> str:
        return render_entry(self.digits, self.separator_index, self.separator_char)
