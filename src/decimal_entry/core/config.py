"""Entry configuration using pydantic-settings with a DECIMAL_ENTRY_ env prefix."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class EntrySettings(BaseSettings):
    """Form-level defaults for building decimal inputs."""

    model_config = {"env_prefix": "DECIMAL_ENTRY_"}

    mode: Literal["standard", "ten_key"] = "standard"
    separator_char: str = Field(default=".", min_length=1, max_length=1)
    alternative_separator_chars: str = ""
    max_fractions: int | None = Field(default=None, ge=0)  # standard mode only
    fractions: int = Field(default=2, ge=0)  # ten-key mode only
