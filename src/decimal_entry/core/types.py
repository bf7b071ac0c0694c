"""Type aliases used across decimal_entry."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

Digit = Annotated[int, Field(ge=0, le=9)]
Digits = tuple[int, ...]
SeparatorIndex = int
SeparatorChar = Annotated[str, Field(min_length=1, max_length=1)]

NO_SEPARATOR: SeparatorIndex = -1  # no fraction part
