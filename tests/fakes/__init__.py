"""Shared test doubles — a plain IDecimalInput implementation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FakeDecimalInput:
    """Hand-built IDecimalInput with explicit digits and separator index."""

    digits: tuple[int, ...]
    separator_index: int = -1
    value: str = ""
    separator_char: str = "."


__all__ = ["FakeDecimalInput"]
