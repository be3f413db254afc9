"""Configuration models for torrentview."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import msgspec
from pydantic import BaseModel, Field


class ProfileConfig(BaseModel):
    """Deployment profile for record construction."""

    excluded_fields: list[str] = Field(
        default_factory=list,
        description="Fields dropped from the default field list",
    )


class NotificationConfig(BaseModel):
    """Push notification settings."""

    notification_urls: list[str] = Field(
        default_factory=list, description="Apprise notification URLs"
    )
    notify_on_finish: bool = Field(
        True, description="Notify when a torrent finishes downloading"
    )
    notify_on_error: bool = Field(
        True, description="Notify when a torrent reports a tracker/client error"
    )


class Config(BaseModel):
    """Top-level torrentview configuration."""

    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    notification: NotificationConfig = Field(default_factory=NotificationConfig)


# Global configuration, defaults until init_config() or load_config() runs
cfg = Config()


def init_config(data: Mapping[str, Any] | None = None) -> Config:
    """Validate a configuration mapping and install it as the global config.

    Args:
        data: Raw configuration mapping. None resets to defaults.

    Returns:
        Config: The installed configuration.

    Raises:
        pydantic.ValidationError: If the mapping does not match the schema.
    """
    global cfg
    cfg = Config.model_validate(dict(data or {}))
    return cfg


def load_config(path: str | Path) -> Config:
    """Load a TOML configuration file and install it as the global config.

    Args:
        path: Path to the TOML file.

    Returns:
        Config: The installed configuration.

    Raises:
        OSError: If the file cannot be read.
        msgspec.DecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If the content does not match the schema.
    """
    raw = msgspec.toml.decode(Path(path).read_bytes())
    return init_config(raw)
