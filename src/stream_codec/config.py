import os
from typing import List, Literal, Optional

import yaml
from pydantic import TypeAdapter, ValidationError
from pydantic.dataclasses import dataclass

from .coercion import UInt64
from .exceptions import ConfigError

DEFAULT_CONFIG_PATH = "config.yml"
CONFIG_PATH_ENV = "STREAM_CODEC_CONFIG"
LOG_LEVEL_ENV = "STREAM_CODEC_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class AppConfig:
    request_id: UInt64
    streams: List[str]
    skip_invalid: bool = True
    log_level: LogLevel = "INFO"


def _read_yaml(path: str) -> dict:
    try:
        with open(path, "r") as stream:
            config = yaml.safe_load(stream)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(path, str(e)) from e

    if not isinstance(config, dict):
        raise ConfigError(path, "expected a mapping at the top level")

    return config


def _section(config: dict, name: str, path: str) -> dict:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(path, f"expected a mapping for {name}")
    return section


def load_config(path: Optional[str] = None) -> AppConfig:
    """
    Reads the YAML config file and validates it into an AppConfig. The path falls back
    to the STREAM_CODEC_CONFIG environment variable and then to 'config.yml', and
    STREAM_CODEC_LOG_LEVEL overrides the configured log level.
    """
    path = path or os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)
    config = _read_yaml(path)

    subscription = _section(config, "Subscription", path)
    decoder = _section(config, "Decoder", path)
    logging_config = _section(config, "Logging", path)

    values = {
        "request_id": subscription.get("RequestId"),
        "streams": subscription.get("Streams") or [],
        "skip_invalid": decoder.get("SkipInvalid", True),
        "log_level": str(
            os.environ.get(LOG_LEVEL_ENV, logging_config.get("Level", "INFO"))
        ).upper(),
    }

    try:
        return TypeAdapter(AppConfig).validate_python(values)
    except ValidationError as e:
        raise ConfigError(path, str(e)) from e
