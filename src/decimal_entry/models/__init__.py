"""Decimal value and input models."""

from __future__ import annotations

from decimal_entry.models.decimal_value import DecimalValue
from decimal_entry.models.standard_input import StandardDecimalInput
from decimal_entry.models.ten_key_input import TenKeyDecimalInput

__all__ = ["DecimalValue", "StandardDecimalInput", "TenKeyDecimalInput"]
