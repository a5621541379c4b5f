"""
Runtime settings loaded from the environment and a project `.env` file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MESSAGE_PREFIX = "[genfiler]"


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Process-wide settings.

    Attributes:
        log_level: Overrides the CLI `--log-level` when set.
        message_prefix: Prefix for diagnostics emitted during a processing pass.
    """
    log_level: Optional[str] = Field(default=None, alias="GENFILER_LOG_LEVEL")
    message_prefix: str = Field(default=DEFAULT_MESSAGE_PREFIX, alias="GENFILER_MESSAGE_PREFIX")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {
        field.alias: os.getenv(field.alias)
        for field in Settings.model_fields.values()
        if os.getenv(field.alias) is not None
    }
    return Settings(**values)
