"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, symcipher.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class KeysConfig(BaseModel):
    """[keys] section."""

    model_config = {"frozen": True}

    seed: int | None = None


class SessionConfig(BaseModel):
    """[session] section.

    ``max_attempts`` of 0 keeps re-prompting until an attempt succeeds.
    """

    model_config = {"frozen": True}

    max_attempts: int = Field(default=0, ge=0)
    separator_width: int = Field(default=79, ge=0)
