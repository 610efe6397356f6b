"""Configuration management for the EAS calendar client."""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.exceptions import ConfigError

load_dotenv()

logger = logging.getLogger(__name__)


class AppConfig(BaseSettings):
    """Application configuration."""

    # Files
    config_file: Path = Field(
        default=Path("example-config.yaml"), validation_alias="EAS_CONFIG_FILE"
    )
    output_file: Path = Field(
        default=Path("calendars.json"), validation_alias="EAS_OUTPUT_FILE"
    )

    # HTTP
    request_timeout: Optional[float] = Field(
        default=None, validation_alias="EAS_REQUEST_TIMEOUT"
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[Path] = Field(default=None, validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_parse_none_str="",  # Treat empty string as None
    )


class EASConfig(BaseModel):
    """Server connection and account settings read from the YAML config file."""

    exchange_url: str
    username: str
    password: str = Field(repr=False)
    device_id: str
    calendar_folder_type: str

    model_config = {"frozen": True, "extra": "ignore"}


def load_config(path: Union[str, Path]) -> EASConfig:
    """
    Load the client configuration from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Loaded EASConfig

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        # BaseLoader keeps every scalar as its literal text, e.g. "0123" or "yes"
        data = yaml.load(raw, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        config = EASConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    logger.debug(f"Loaded config from {path} for user {config.username}")
    return config
