"""Configuration file loading and CLI/environment overrides.

Precedence, highest first: CLI flags, environment variables, the config
file, and finally whatever the project build files declare.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the configuration file or an override is invalid."""


@dataclass
class LinkConfig:
    """Settings read from a configuration file."""

    target_compatibility: Optional[str] = None
    offline_dir: Optional[str] = None
    javadoc_links: Dict[str, str] = field(default_factory=dict)


def _read_config_data(config_path: str) -> Any:
    ext = os.path.splitext(config_path)[1].lower()
    if ext not in Constants.CONFIG_EXTENSIONS:
        raise ConfigError(
            f"Unsupported config file type '{ext}', expected one of {', '.join(Constants.CONFIG_EXTENSIONS)}"
        )
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if ext == ".json":
                return json.load(f)
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e


def load_config(config_path: Optional[str]) -> LinkConfig:
    """Load settings from a YAML or JSON configuration file.

    Args:
        config_path: Path to the file, or None for an empty configuration.

    Returns:
        LinkConfig with the values found in the file.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """
    if not config_path:
        return LinkConfig()

    data = _read_config_data(config_path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping at the top level")

    links = data.get("javadoc_links") or {}
    if not isinstance(links, dict):
        raise ConfigError("'javadoc_links' must be a mapping of identifier to URI")

    target = data.get("target_compatibility")
    offline_dir = data.get("offline_dir")
    logger.debug("Loaded config from %s", config_path)
    return LinkConfig(
        target_compatibility=str(target) if target is not None else None,
        offline_dir=str(offline_dir) if offline_dir is not None else None,
        javadoc_links={str(k): str(v) for k, v in links.items()},
    )


def parse_link_overrides(values: Optional[List[str]]) -> Dict[str, str]:
    """Parse ``KEY=URI`` values given with --link.

    Raises:
        ConfigError: If a value has no '=' or an empty key.
    """
    overrides: Dict[str, str] = {}
    for value in values or []:
        key, sep, uri = value.partition("=")
        if not sep or not key.strip() or not uri.strip():
            raise ConfigError(f"Invalid --link value '{value}', expected KEY=URI")
        overrides[key.strip()] = uri.strip()
    return overrides


def resolve_target_compatibility(args, config: LinkConfig) -> Optional[str]:
    """Pick the target compatibility from CLI, environment or config file."""
    cli_value = getattr(args, "TARGET_COMPATIBILITY", None)
    if cli_value:
        return cli_value
    env_value = os.environ.get(Constants.ENV_TARGET_COMPATIBILITY)
    if env_value and env_value.strip():
        return env_value.strip()
    return config.target_compatibility


def resolve_offline_dir(args, config: LinkConfig) -> Optional[str]:
    """Pick the -linkoffline package-list directory from CLI or config file."""
    return getattr(args, "OFFLINE_DIR", None) or config.offline_dir
