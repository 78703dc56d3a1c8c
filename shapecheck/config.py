"""
Configuration for shapecheck.

Settings come from environment variables prefixed ``SHAPECHECK_``.
The defaults reproduce the canonical SDL layout: two-space indent,
``<Field>Enum`` enum names, ``Enum``/``NestedType`` for anonymous names.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library configuration."""

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = Field(default="text")

    # GraphQL SDL output
    sdl_indent: int = Field(default=2, ge=0, description="Spaces before each field/enum value")
    enum_suffix: str = Field(default="Enum", description="Appended to a capitalized field name")
    anonymous_enum_name: str = Field(default="Enum", min_length=1)
    anonymous_type_name: str = Field(default="NestedType", min_length=1)

    model_config = {"env_prefix": "SHAPECHECK_"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
