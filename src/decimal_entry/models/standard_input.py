"""StandardDecimalInput — free-form keyboard entry with a typed separator.

The user types digits and, somewhere, a separator. Anything that is not a
digit or a recognized separator is ignored so pasted text never fails:

- ``"1234.5678"`` with ``max_fractions=2`` reads as ``1234.56``.
- ``"1234,5678"`` with ``alternative_separator_chars=",;"`` reads as ``1234.5678``.
- ``"1,234.5678"`` with ``alternative_separator_chars=",;"`` and
  ``max_fractions=3`` reads as ``1.234``: the first separator wins.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, computed_field

from decimal_entry.core.digits import (
    filter_digits,
    parse_digits,
    render_entry,
    require_non_negative,
)
from decimal_entry.core.types import NO_SEPARATOR, Digits, SeparatorChar, SeparatorIndex

logger = logging.getLogger(__name__)

_LEADING_ZEROS = re.compile(r"^0+([0-9])")


class StandardDecimalInput(BaseModel):
    """Decimal entry parsed from free-form text.

    Attributes:
        value: Raw text as typed or pasted.
        separator_char: Preferred separator, used when rendering.
        alternative_separator_chars: Further characters accepted as the separator.
        max_fractions: Fraction digits kept; ``None`` keeps all of them and
            ``0`` drops the fraction part entirely.
    """

    value: str
    separator_char: SeparatorChar = "."
    alternative_separator_chars: str = ""
    max_fractions: int | None = None

    model_config = {"frozen": True}

    def __init__(
        self,
        value: str,
        separator_char: str = ".",
        alternative_separator_chars: str = "",
        max_fractions: int | None = None,
    ) -> None:
        if max_fractions is not None:
            require_non_negative("max_fractions", max_fractions)
        super().__init__(
            value=value,
            separator_char=separator_char,
            alternative_separator_chars=alternative_separator_chars,
            max_fractions=max_fractions,
        )

    @property
    def separators(self) -> frozenset[str]:
        return frozenset(self.alternative_separator_chars) | {self.separator_char}

    @computed_field
    @property
    def digits(self) -> Digits:
        integer, fraction, _ = _split(self)
        return parse_digits(integer + fraction)

    @computed_field
    @property
    def separator_index(self) -> SeparatorIndex:
        integer, _, has_separator = _split(self)
        if self.max_fractions == 0 or not has_separator:
            return NO_SEPARATOR
        return len(integer)

    @property
    def display_value(self) -> str:
        """Normalized text, e.g. ``"007,5"`` with ``","`` accepted renders ``"7.5"``."""
        return render_entry(self.digits, self.separator_index, self.separator_char)


def _split(entry: StandardDecimalInput) -> tuple[str, str, bool]:
    """Return (integer digit chars, fraction digit chars, separator seen)."""
    chars = _LEADING_ZEROS.sub(r"\1", entry.value)
    separators = entry.separators

    head, tail, has_separator = chars, "", False
    for position, char in enumerate(chars):
        if char in separators:
            head, tail, has_separator = chars[:position], chars[position + 1:], True
            break

    integer = filter_digits(head)
    fraction = filter_digits(tail)
    if entry.max_fractions is not None and len(fraction) > entry.max_fractions:
        logger.debug(
            "Truncating %d fraction digits to max_fractions=%d",
            len(fraction),
            entry.max_fractions,
        )
        fraction = fraction[: entry.max_fractions]
    return integer, fraction, has_separator
