"""Precise decimal values and normalized decimal entry for form front-ends."""

from __future__ import annotations

import logging

from decimal_entry.core.config import EntrySettings
from decimal_entry.core.exceptions import DecimalEntryError, InvalidArgumentError
from decimal_entry.core.protocols import IDecimalInput
from decimal_entry.core.types import NO_SEPARATOR
from decimal_entry.models import DecimalValue, StandardDecimalInput, TenKeyDecimalInput

logger = logging.getLogger(__name__)


def create_decimal_input(value: str, settings: EntrySettings | None = None) -> IDecimalInput:
    """Build the input type selected by ``settings.mode`` for a raw entry.

    Returns:
        A StandardDecimalInput or TenKeyDecimalInput configured from settings.
    """
    if settings is None:
        settings = EntrySettings()

    logger.debug("Creating %s decimal input", settings.mode)
    if settings.mode == "ten_key":
        return TenKeyDecimalInput(
            value,
            separator_char=settings.separator_char,
            fractions=settings.fractions,
        )
    return StandardDecimalInput(
        value,
        separator_char=settings.separator_char,
        alternative_separator_chars=settings.alternative_separator_chars,
        max_fractions=settings.max_fractions,
    )


__all__ = [
    "NO_SEPARATOR",
    "DecimalEntryError",
    "DecimalValue",
    "EntrySettings",
    "IDecimalInput",
    "InvalidArgumentError",
    "StandardDecimalInput",
    "TenKeyDecimalInput",
    "create_decimal_input",
]
