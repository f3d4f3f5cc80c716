"""
Environment configuration helpers for the Woosmap client.

Loads `.env` files, reads `WOOSMAP_`-prefixed environment variables and
validates that required keys are present before a client is built.
"""

import os
import logging
from typing import Any, Dict, List
from urllib.parse import parse_qsl

from dotenv import load_dotenv


ENV_PREFIX = "WOOSMAP_"


class ConfigError(Exception):
    """Custom exception for configuration-related errors."""
    pass


def env_key(key: str) -> str:
    """Return the prefixed environment variable name for a setting."""
    key = key.upper()
    return key if key.startswith(ENV_PREFIX) else f"{ENV_PREFIX}{key}"


def load_config(env_path: str = ".env") -> None:
    """
    Load environment variables from a .env file.

    Args:
        env_path: Path to the .env file (default: ".env")
    """
    logger = logging.getLogger(__name__)

    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)
        logger.info(f"Loaded configuration from {env_path}")
    else:
        logger.warning(f"Configuration file {env_path} not found, using system environment variables only")


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a Woosmap setting from the environment.

    Args:
        key: Setting name, with or without the WOOSMAP_ prefix
        default: Default value if the variable is not set

    Returns:
        Configuration value or default
    """
    name = env_key(key)
    value = os.getenv(name)

    if value is None:
        logging.getLogger(__name__).debug(f"Configuration key '{name}' not set")
        return default

    return value


def parse_params(value: str) -> Dict[str, str]:
    """
    Parse a query-string style value ("region=nl&units=metric") into a dict.

    Order of the pairs is preserved. Blank values yield an empty dict.

    Raises:
        ConfigError: If a pair has no '=' separator
    """
    if not value or not value.strip():
        return {}

    try:
        return dict(parse_qsl(value.strip(), keep_blank_values=True, strict_parsing=True))
    except ValueError as e:
        raise ConfigError(f"Invalid parameter string '{value}': {e}")


def validate_config(required_keys: List[str]) -> None:
    """
    Validate that all required configuration keys are present and non-empty.

    Args:
        required_keys: Setting names, with or without the WOOSMAP_ prefix

    Raises:
        ConfigError: If any required key is missing or empty
    """
    logger = logging.getLogger(__name__)
    missing_keys = []
    empty_keys = []

    for key in required_keys:
        name = env_key(key)
        value = os.getenv(name)
        if value is None:
            missing_keys.append(name)
        elif value.strip() == "":
            empty_keys.append(name)

    if missing_keys or empty_keys:
        error_msg = "Configuration validation failed:"
        if missing_keys:
            error_msg += f" Missing keys: {', '.join(missing_keys)}."
        if empty_keys:
            error_msg += f" Empty keys: {', '.join(empty_keys)}."

        logger.error(error_msg)
        raise ConfigError(error_msg)

    logger.info(f"Configuration validation passed for keys: {', '.join(env_key(k) for k in required_keys)}")
