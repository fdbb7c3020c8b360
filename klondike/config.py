"""Validated engine configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "KLONDIKE_CONFIG"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class EngineConfig(BaseModel):
    history_capacity: int = Field(300, ge=2, description="Maximum number of undo snapshots kept.")
    seed: Optional[int] = Field(None, description="Seed for the shuffle generator; random when unset.")
    log_level: str = Field("WARNING", description="Level applied by configure_logging.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """Read an EngineConfig from a JSON file; defaults when the path is missing.

    Without an explicit path the file named by ``KLONDIKE_CONFIG`` is used.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return EngineConfig()
    config_path = Path(path)
    if not config_path.exists():
        return EngineConfig()
    return EngineConfig.model_validate_json(config_path.read_text(encoding="utf-8"))


def configure_logging(config: EngineConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
