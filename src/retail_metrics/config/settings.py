"""
Configuration loading and management for the RetailMetrics mock API.

This module provides utilities for loading, validating, and managing
configuration settings from files and environment variables.
"""

import logging
import os
from pathlib import Path

from .models import MockDataConfig

logger = logging.getLogger(__name__)


def load_config(
    config_path: str | Path | None = None, config_name: str = "config.json"
) -> MockDataConfig:
    """
    Load configuration from file with path resolution.

    Args:
        config_path: Explicit path to config file or directory containing config
        config_name: Name of config file (default: "config.json")

    Returns:
        MockDataConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If no configuration file is found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / config_name,
            Path.cwd() / "config" / config_name,
        ]

        for path in search_paths:
            if path.exists():
                config_path = path
                break
        else:
            raise FileNotFoundError(
                f"Configuration file '{config_name}' not found in any of: "
                f"{[str(p) for p in search_paths]}"
            )

    config_path = Path(config_path)

    if config_path.is_dir():
        config_path = config_path / config_name

    return MockDataConfig.from_file(config_path)


def get_config_from_env() -> MockDataConfig | None:
    """
    Try to load configuration from environment variables.

    Returns:
        MockDataConfig if environment variables are set, None otherwise
    """
    config_file_env = os.getenv("RETAIL_METRICS_CONFIG_FILE")
    if config_file_env:
        return load_config(config_file_env)

    env_names = [
        "PORT",
        "RETAIL_METRICS_PORT",
        "RETAIL_METRICS_HOST",
        "RETAIL_METRICS_SEED",
        "RETAIL_METRICS_STORE_COUNT",
        "RETAIL_METRICS_LOG_LEVEL",
    ]
    env_values = {name: os.getenv(name) for name in env_names}
    if not any(env_values.values()):
        return None

    server: dict = {}
    generation: dict = {}
    try:
        # RETAIL_METRICS_PORT wins over the generic PORT
        port = env_values["RETAIL_METRICS_PORT"] or env_values["PORT"]
        if port:
            server["port"] = int(port)
        if env_values["RETAIL_METRICS_HOST"]:
            server["host"] = env_values["RETAIL_METRICS_HOST"]
        if env_values["RETAIL_METRICS_LOG_LEVEL"]:
            server["log_level"] = env_values["RETAIL_METRICS_LOG_LEVEL"]
        if env_values["RETAIL_METRICS_SEED"]:
            generation["seed"] = int(env_values["RETAIL_METRICS_SEED"])
        if env_values["RETAIL_METRICS_STORE_COUNT"]:
            generation["store_count"] = int(env_values["RETAIL_METRICS_STORE_COUNT"])

        return MockDataConfig(server=server, generation=generation)

    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid environment variable configuration: {e}")


def load_config_with_fallback(config_path: str | Path | None = None) -> MockDataConfig:
    """
    Load configuration with fallback to environment variables and defaults.

    Priority order:
    1. Explicit config file path
    2. Environment variable RETAIL_METRICS_CONFIG_FILE
    3. Individual environment variables
    4. Default locations (config.json, config/config.json)
    5. Built-in defaults

    Args:
        config_path: Optional explicit path to config file

    Returns:
        MockDataConfig: Loaded configuration
    """
    if config_path:
        return load_config(config_path)

    env_config = get_config_from_env()
    if env_config:
        return env_config

    try:
        return load_config()
    except FileNotFoundError:
        logger.info("No configuration found, using built-in defaults")

    return MockDataConfig()
