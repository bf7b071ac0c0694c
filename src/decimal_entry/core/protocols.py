"""Protocol interfaces for decimal_entry abstractions.

Inputs are consumed structurally: anything exposing these four read-only
attributes can be turned into a DecimalValue, no inheritance required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from decimal_entry.core.types import Digits, SeparatorIndex


# ---------------------------------------------------------------------------
# Decimal Input
# ---------------------------------------------------------------------------

@runtime_checkable
class IDecimalInput(Protocol):
    """A parsed decimal entry: digit sequence plus separator position.

    ``digits[:separator_index]`` is the integer part and
    ``digits[separator_index:]`` the fraction part. A ``separator_index``
    of ``NO_SEPARATOR`` (-1) means there is no fraction part.
    """

    @property
    def value(self) -> str: ...

    @property
    def digits(self) -> Digits: ...

    @property
    def separator_index(self) -> SeparatorIndex: ...

    @property
    def separator_char(self) -> str: ...
