"""
Settings loading for the vde_vmnet front-end

Search order (later overrides earlier):
1. Built-in defaults
2. /etc/vde-vmnet/config.toml (system-wide)
3. ~/.config/vde-vmnet/config.toml (user global)
4. ./.vde-vmnet.toml (local directory)
5. Environment variables (VDE_VMNET_*)

These settings only affect how the front-end reports; vmnet options come
from the command line alone.
"""

from __future__ import annotations

import os
import logging
import tomllib
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any


logger = logging.getLogger(__name__)

# Config file names
CONFIG_FILENAME = "config.toml"
LOCAL_CONFIG_FILENAME = ".vde-vmnet.toml"

# Environment variable prefix
ENV_PREFIX = "VDE_VMNET_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_dir() -> Path:
    """Get user config directory (XDG-compliant)."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "vde-vmnet"
    return Path.home() / ".config" / "vde-vmnet"


def get_config_paths() -> list[Path]:
    """
    Return list of config paths to check, in precedence order (lowest first).

    Returns paths that WOULD be checked - caller should verify existence.
    """
    return [
        Path("/etc/vde-vmnet") / CONFIG_FILENAME,
        get_config_dir() / CONFIG_FILENAME,
        Path.cwd() / LOCAL_CONFIG_FILENAME,
    ]


@dataclass
class Settings:
    """
    Merged front-end settings from all sources.

    Attributes:
        log_level: Root logging level name
        show_summary: Print the resolved configuration after a successful parse
        config_sources: Files and environment variables that contributed
    """
    log_level: str = "INFO"
    show_summary: bool = False

    config_sources: list[str] = field(default_factory=list)


def _normalize_log_level(value: Any, source: str) -> str | None:
    level = str(value).upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Ignoring unknown log level {value!r} from {source}")
        return None
    return level


def _merge_config(settings: Settings, data: dict[str, Any], source: str) -> None:
    """Merge the [defaults] section of a config file into settings."""
    settings.config_sources.append(source)
    defaults = data.get("defaults", {})
    if not isinstance(defaults, dict):
        logger.warning(f"Ignoring [defaults] in {source}: not a table")
        return

    if "log_level" in defaults:
        level = _normalize_log_level(defaults["log_level"], source)
        if level:
            settings.log_level = level
    if "show_summary" in defaults:
        settings.show_summary = bool(defaults["show_summary"])


def _apply_env_overrides(settings: Settings) -> None:
    """Apply environment variable overrides."""
    env_var = f"{ENV_PREFIX}LOG_LEVEL"
    value = os.environ.get(env_var)
    if value:
        level = _normalize_log_level(value, f"env:{env_var}")
        if level:
            settings.log_level = level
            settings.config_sources.append(f"env:{env_var}")

    env_var = f"{ENV_PREFIX}SHOW_SUMMARY"
    value = os.environ.get(env_var)
    if value is not None:
        settings.show_summary = value.lower() in ("1", "true", "yes")
        settings.config_sources.append(f"env:{env_var}")


def load_settings() -> Settings:
    """
    Load and merge settings from all config sources.

    Returns:
        Merged Settings object with all values resolved.
    """
    settings = Settings()

    for config_path in get_config_paths():
        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    data = tomllib.load(f)
                _merge_config(settings, data, str(config_path))
                logger.debug(f"Loaded config from {config_path}")
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning(f"Failed to load {config_path}: {e}")

    _apply_env_overrides(settings)
    return settings
