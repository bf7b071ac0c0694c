"""decimal_entry exception hierarchy."""

from __future__ import annotations

from typing import Any


class DecimalEntryError(Exception):
    """Base exception for all decimal_entry errors."""


class InvalidArgumentError(DecimalEntryError, ValueError):
    """A construction or rescaling argument is out of range."""

    def __init__(self, argument: str, value: Any, message: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid {argument}={value!r}: {message}")
