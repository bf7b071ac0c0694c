"""Digit filtering and rendering shared by the value and input models."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from decimal_entry.core.exceptions import InvalidArgumentError
from decimal_entry.core.types import Digits

logger = logging.getLogger(__name__)


def filter_digits(text: str) -> str:
    """Return the decimal digits of text as ASCII, in order.

    Digits of any script count, so ``"١٢"`` gives ``"12"``.
    """
    return "".join(str(int(char)) for char in text if char.isdecimal())


def parse_digits(text: str) -> Digits:
    """Map the digit characters of text to their numeric values.

    Every other character (separators, letters, whitespace, signs) is dropped.
    """
    return tuple(int(char) for char in filter_digits(text))


def render_digits(digits: Iterable[int]) -> str:
    return "".join(str(digit) for digit in digits)


def render_entry(digits: Digits, separator_index: int, separator_char: str) -> str:
    """Render digits with separator_char inserted at separator_index (-1 for none)."""
    if separator_index < 0:
        return render_digits(digits)
    return (
        render_digits(digits[:separator_index])
        + separator_char
        + render_digits(digits[separator_index:])
    )


def require_non_negative(argument: str, value: int) -> int:
    """Raise InvalidArgumentError unless value >= 0."""
    if value < 0:
        logger.debug("Rejected negative %s=%d", argument, value)
        raise InvalidArgumentError(argument, value, "must not be negative")
    return value
