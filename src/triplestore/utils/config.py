"""
Store configuration loaded from TOML and validated with pydantic.

Settings may live at the top level of the file or under a [triplestore]
table:

    [triplestore]
    wildcard = "?"
    first_id = 100
    logging_level = "DEBUG"
"""

import tomllib
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StoreConfig(BaseModel):
    """Settings used to build a TripleStore and configure logging."""

    model_config = ConfigDict(extra="forbid")

    wildcard: str = Field(default="*", min_length=1)
    first_id: int = Field(default=0, ge=0)
    logging_level: LogLevel = "WARNING"

    @field_validator("logging_level", mode="before")
    @classmethod
    def _upper_case_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


def load_config(path: Union[str, Path, None] = None) -> StoreConfig:
    """
    Load a StoreConfig from a TOML file.

    Args:
        path: Path to the TOML file. None returns the defaults.

    Returns:
        Validated StoreConfig

    Raises:
        FileNotFoundError: If path does not exist
        pydantic.ValidationError: If the file holds invalid settings
    """
    if path is None:
        return StoreConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("triplestore", data)
    return StoreConfig.model_validate(section)
