#!/usr/bin/env python3
"""
Generator Configuration Module

Loads generator settings from YAML files in `babbler/configs/`. The base file
`generator.yaml` is read first, then `generator_<environment>.yaml` overrides
it key by key. Missing files fall back to the built-in defaults.
"""

import os
import logging

import yaml

logger = logging.getLogger(__name__)

ENVIRONMENTS = ("development", "test", "production")

DEFAULT_CONFIG = {
    "default_length": 50,
    "default_start": None,
    "log_level": "INFO",
    "log_file": None,
    "console_json": True,
    "monitor_resources": False,
    "random_seed": None,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_dir():
    """Directory holding the packaged YAML configuration files."""
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "configs"))


def _read_yaml(config_path):
    """
    Read one YAML mapping, returning None when the file is absent or unusable.
    """
    if not os.path.exists(config_path):
        return None

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Error loading generator config from {config_path}: {e}",
                       extra={"metrics": {"config_path": config_path}})
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Ignoring generator config {config_path}: top level is not a mapping")
        return None

    logger.info(f"Loaded generator config from {config_path}")
    return config


def validate_config(config):
    """
    Check value types and ranges of a merged configuration.

    Raises:
        ValueError: A value is out of range or of the wrong type.
    """
    length = config["default_length"]
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ValueError(f"default_length must be a non-negative integer, got {length!r}")

    start = config["default_start"]
    if start is not None and not isinstance(start, str):
        raise ValueError(f"default_start must be a string or null, got {start!r}")

    level = str(config["log_level"]).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {config['log_level']!r}")
    config["log_level"] = level

    for key in ("console_json", "monitor_resources"):
        if not isinstance(config[key], bool):
            raise ValueError(f"{key} must be true or false, got {config[key]!r}")

    seed = config["random_seed"]
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"random_seed must be an integer or null, got {seed!r}")

    return config


def load_generator_config(environment="development", config_dir=None):
    """
    Load the generator configuration for an environment.

    Args:
        environment (str): One of 'development', 'test' or 'production'
        config_dir (str, optional): Directory to read YAML files from

    Returns:
        dict: Validated configuration

    Raises:
        ValueError: Unknown environment or invalid configuration values.
    """
    if environment not in ENVIRONMENTS:
        raise ValueError(f"Unknown environment {environment!r}; expected one of {', '.join(ENVIRONMENTS)}")

    config_dir = config_dir or get_config_dir()
    config = dict(DEFAULT_CONFIG)

    # Base file first, then the environment-specific overrides
    config_paths = [
        os.path.join(config_dir, "generator.yaml"),
        os.path.join(config_dir, f"generator_{environment}.yaml"),
    ]

    for config_path in config_paths:
        overrides = _read_yaml(config_path)
        if not overrides:
            continue
        for key, value in overrides.items():
            if key not in DEFAULT_CONFIG:
                logger.warning(f"Ignoring unknown generator config key {key!r} in {config_path}")
                continue
            config[key] = value

    config = validate_config(config)
    logger.debug("Generator config resolved", extra={
        "metrics": {"environment": environment, "config": config}
    })
    return config
