"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, placectl.toml only contains overrides.
The TOML key is ``json``; ``json_output`` is accepted as well.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    json_output: bool = Field(default=False, alias="json")
    quiet: bool = False


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    json_output: bool = Field(default=False, alias="json")
    verbose: bool = False
