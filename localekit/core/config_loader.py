#!/usr/bin/env python3
"""Configuration loader with environment-based config support."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from localekit.core.config_schema import config_to_dict, validate_config
from localekit.core.logging_utils import setup_logger

logger = setup_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "base.yaml"


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML files with environment-based overrides.

    Loads the base config and merges the environment-specific config from
    ``envs/{LOCALEKIT_ENV}.yaml`` next to it (default: dev).

    Args:
        config_path: Path to base config file (default: config/base.yaml)

    Returns:
        Validated configuration dictionary with environment overrides applied

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        pydantic.ValidationError: If config doesn't match the schema

    Environment Variables:
        LOCALEKIT_ENV: Environment name (dev|prod|..., default: dev)
    """
    env = os.getenv("LOCALEKIT_ENV", "dev")

    config_file = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    with open(config_file, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    env_config_path = config_file.parent / "envs" / f"{env}.yaml"
    if env_config_path.exists():
        logger.info(f"Loading {env} environment config")
        with open(env_config_path, encoding="utf-8") as f:
            env_config = yaml.safe_load(f)
        if env_config:
            _deep_merge(config, env_config)
    else:
        logger.debug(f"No environment config found for '{env}' (expected: {env_config_path})")

    config = _expand_env_vars(config)

    validated = validate_config(config)
    return config_to_dict(validated)


def resolve_path(path: str | Path) -> Path:
    """Resolve a config-relative path against the project root.

    Args:
        path: Absolute path, or path relative to the project root

    Returns:
        Absolute path
    """
    path = Path(path)
    return path if path.is_absolute() else PROJECT_ROOT / path


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand ${VAR} environment variables in config.

    Args:
        obj: Config object (dict, list, str, or other)

    Returns:
        Object with environment variables expanded
    """
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):

        def replace_env(match):
            var_name = match.group(1) or match.group(2)
            return os.getenv(var_name, match.group(0))  # Keep original if not found

        return re.sub(r"\$\{([^}]+)\}|\$([A-Z_][A-Z0-9_]*)", replace_env, obj)
    else:
        return obj


def _deep_merge(base: dict, override: dict):
    """Deep merge override dict into base dict in-place.

    Args:
        base: Base configuration dictionary (modified in-place)
        override: Override configuration dictionary
    """
    for key, value in override.items():
        if isinstance(value, dict) and key in base and isinstance(base[key], dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """Get nested config value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'localization.default_language')
        default: Default value if path not found

    Returns:
        Config value or default

    Examples:
        >>> config = {'render': {'resolution': [800, 480]}}
        >>> get_nested(config, 'render.resolution')
        [800, 480]
        >>> get_nested(config, 'render.missing', default=[640, 480])
        [640, 480]
    """
    value = config

    for key in path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def set_nested(config: dict, path: str, value: Any):
    """Set nested config value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'render.resolution')
        value: Value to set

    Examples:
        >>> config = {}
        >>> set_nested(config, 'render.fullscreen', True)
        >>> config
        {'render': {'fullscreen': True}}
    """
    keys = path.split(".")
    current = config

    for key in keys[:-1]:
        if key not in current:
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value


def override_from_args(config: dict, args):
    """Apply CLI argument overrides to config.

    Args:
        config: Configuration dictionary
        args: Parsed argparse arguments

    Common overrides:
        --xml PATH -> localization.source
        --url URL -> localization.source_url
        --fullscreen -> render.fullscreen
        --resolution WxH -> render.resolution
    """
    if getattr(args, "xml", None):
        set_nested(config, "localization.source", args.xml)

    if getattr(args, "url", None):
        set_nested(config, "localization.source_url", args.url)

    if getattr(args, "fullscreen", False):
        set_nested(config, "render.fullscreen", True)

    if getattr(args, "resolution", None):
        # Parse "1920x1080" format
        try:
            w, h = map(int, args.resolution.lower().split("x"))
            set_nested(config, "render.resolution", [w, h])
        except (ValueError, AttributeError):
            logger.warning(f"Invalid resolution format: {args.resolution}")
