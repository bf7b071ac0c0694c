"""DecimalValue — the canonical decimal, stored as integer and fraction digits.

Values never pass through binary floating point. Rescaling only truncates
or pads the fraction part; the integer part is never touched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Final

from pydantic import BaseModel

from decimal_entry.core.digits import parse_digits, render_digits, require_non_negative
from decimal_entry.core.exceptions import InvalidArgumentError
from decimal_entry.core.protocols import IDecimalInput
from decimal_entry.core.types import NO_SEPARATOR, Digit
from decimal_entry.models.standard_input import StandardDecimalInput
from decimal_entry.models.ten_key_input import TenKeyDecimalInput

logger = logging.getLogger(__name__)

# Default for to_standard_decimal_input: keep the current scale.
_CURRENT_SCALE: Final[Any] = object()

DigitSource = str | Iterable[int]


def _as_digits(part: DigitSource) -> tuple[int, ...]:
    if isinstance(part, str):
        return parse_digits(part)
    return tuple(part)


class DecimalValue(BaseModel):
    """Unsigned decimal number as two digit sequences.

    ``DecimalValue([1, 2, 3], [4, 5])`` and ``DecimalValue("123", "45")`` are
    the same value; strings are filtered to their digit characters. Leading
    zeros of the integer part are kept as given.
    """

    integer_part: tuple[Digit, ...] = ()
    fraction_part: tuple[Digit, ...] = ()

    model_config = {"frozen": True}

    def __init__(self, integer_part: DigitSource = (), fraction_part: DigitSource = ()) -> None:
        super().__init__(
            integer_part=_as_digits(integer_part),
            fraction_part=_as_digits(fraction_part),
        )

    # --- Construction ---

    @classmethod
    def from_parts(cls, integer_part: Iterable[int], fraction_part: Iterable[int]) -> DecimalValue:
        """Create a value from digit sequences used as-is."""
        return cls(tuple(integer_part), tuple(fraction_part))

    @classmethod
    def from_strings(cls, integer_part: str, fraction_part: str) -> DecimalValue:
        """Create a value from two strings, ignoring every non-digit character.

        Empty or purely non-numeric strings give empty parts, i.e. zero.
        """
        return cls(parse_digits(integer_part), parse_digits(fraction_part))

    @classmethod
    def from_input(cls, decimal_input: IDecimalInput) -> DecimalValue:
        """Split an input's digits at its separator index."""
        digits = tuple(decimal_input.digits)
        index = decimal_input.separator_index
        if index == NO_SEPARATOR:
            return cls(digits, ())
        return cls(digits[:index], digits[index:])

    @classmethod
    def from_float(cls, value: float) -> DecimalValue:
        """Create a value from the default text rendering of a float.

        The fraction length follows ``str(value)`` and is not a reliable
        scale: ``90.00`` renders as ``"90.0"``. Call ``scale(n)`` on the
        result when a specific number of fraction digits is required.
        """
        return cls.from_input(StandardDecimalInput(str(value)))

    @classmethod
    def from_decimal(cls, value: Decimal) -> DecimalValue:
        """Create a value from a Decimal, keeping its exponent as the scale.

        The sign is ignored like any other non-digit character.
        """
        if not value.is_finite():
            logger.debug("Rejected non-finite Decimal %s", value)
            raise InvalidArgumentError("value", value, "must be a finite Decimal")
        return cls.from_input(StandardDecimalInput(format(value, "f")))

    # --- Rescaling ---

    def max_scale(self, n: int) -> DecimalValue:
        """Truncate the fraction part to at most ``n`` digits, without rounding."""
        require_non_negative("n", n)
        if len(self.fraction_part) > n:
            logger.debug("Truncating fraction from %d to %d digits", len(self.fraction_part), n)
        return type(self)(self.integer_part, self.fraction_part[:n])

    def min_scale(self, n: int) -> DecimalValue:
        """Return a value with exactly ``n`` fraction digits, zero-padded on the right.

        A longer fraction part is truncated.
        """
        require_non_negative("n", n)
        fraction = self.fraction_part[:n] + (0,) * (n - len(self.fraction_part))
        return type(self)(self.integer_part, fraction)

    def scale(self, n: int) -> DecimalValue:
        """Return a value with exactly ``n`` fraction digits, truncating or padding."""
        if len(self.fraction_part) > n:
            return self.max_scale(n)
        return self.min_scale(n)

    # --- Rendering and projection ---

    def __str__(self) -> str:
        """E notation: ``"12345E-2"`` for 123.45 and ``"0E-0"`` for the empty value."""
        return f"{_coefficient(self)}E-{len(self.fraction_part)}"

    def to_decimal(self) -> Decimal:
        return Decimal(str(self))

    def to_standard_decimal_input(
        self,
        separator_char: str = ".",
        alternative_separator_chars: str = "",
        max_fractions: int | None = _CURRENT_SCALE,
    ) -> StandardDecimalInput:
        """Project onto a StandardDecimalInput.

        ``max_fractions`` defaults to the current scale, which round-trips
        exactly; pass ``None`` for an unlimited input.
        """
        if max_fractions is _CURRENT_SCALE:
            max_fractions = len(self.fraction_part)
        text = render_digits(self.integer_part)
        if self.fraction_part:
            text += separator_char + render_digits(self.fraction_part)
        return StandardDecimalInput(
            text,
            separator_char=separator_char,
            alternative_separator_chars=alternative_separator_chars,
            max_fractions=max_fractions,
        )

    def to_ten_key_decimal_input(
        self,
        separator_char: str = ".",
        fractions: int | None = None,
    ) -> TenKeyDecimalInput:
        """Project onto a TenKeyDecimalInput; ``fractions`` defaults to the current scale."""
        if fractions is None:
            fractions = len(self.fraction_part)
        return TenKeyDecimalInput(
            _coefficient(self),
            separator_char=separator_char,
            fractions=fractions,
        )


def _coefficient(value: DecimalValue) -> str:
    return render_digits(value.integer_part + value.fraction_part) or "0"
