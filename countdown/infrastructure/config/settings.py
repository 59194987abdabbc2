"""Provides loading of configuration settings into an explicit settings object.

Supports loading from environment variables, a .env file and a YAML
configuration file (e.g., ~/.countdown/config.yaml). The result is a
CountdownSettings value that the entry point passes to the components that
need it; nothing here is kept as module-level state.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
ENV_PREFIX = "COUNTDOWN_"
ENV_FILE_NAME = ".env"
DEFAULT_HOME_DIR = Path.home() / ".countdown"
CONFIG_FILE_NAME = "config.yaml"
EVENTS_FILE_NAME = "events.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class CountdownSettings:
    """Resolved configuration for one invocation."""

    events_file: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None
    log_format: str = DEFAULT_LOG_FORMAT


def find_dotenv_path(start: Optional[Path] = None) -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = start or Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


def load_yaml_config(config_file: Path) -> Dict[str, Any]:
    """Reads the YAML config file; a missing or broken file yields an empty dict."""
    if not config_file.is_file():
        logger.debug(f"YAML config file not found: {config_file}")
        return {}
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load or parse YAML config {config_file}: {e}")
        return {}

    if isinstance(yaml_config, dict):
        logger.debug(f"Loaded configuration from YAML: {config_file}")
        return yaml_config
    if yaml_config is not None:
        logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
    return {}


def _nested(config: Mapping[str, Any], dotted_key: str) -> Any:
    """Looks up 'logging.level' style keys, accepting nested or flat YAML."""
    if dotted_key in config:
        return config[dotted_key]
    node: Any = config
    for part in dotted_key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node


def _merged_environment(environ: Mapping[str, str], env_file: Optional[Path]) -> Dict[str, str]:
    # Real environment variables take precedence over the .env file
    merged: Dict[str, str] = {}
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path and dotenv_path.is_file():
        values = dotenv_values(dotenv_path)
        merged.update({k: v for k, v in values.items() if v is not None})
        logger.debug(f"Loaded environment variables from: {dotenv_path}")
    merged.update(environ)
    return merged


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    config_file: Optional[Path] = None,
    env_file: Optional[Path] = None,
) -> CountdownSettings:
    """Loads configuration from environment, .env file and YAML file.

    Priority order (highest to lowest):
    1. Environment Variables
    2. .env file
    3. YAML configuration file
    4. Default values

    Args:
        environ: Environment mapping (os.environ if None).
        config_file: YAML config path; overrides COUNTDOWN_CONFIG_FILE.
        env_file: .env path (searches upwards from cwd if None).

    Returns:
        The resolved settings.
    """
    env = _merged_environment(os.environ if environ is None else environ, env_file)

    home = Path(env.get(f"{ENV_PREFIX}HOME") or DEFAULT_HOME_DIR).expanduser()
    config_path = config_file or Path(env.get(f"{ENV_PREFIX}CONFIG_FILE") or home / CONFIG_FILE_NAME).expanduser()
    yaml_config = load_yaml_config(config_path)

    def get(env_key: str, yaml_key: str, default: Any = None) -> Any:
        value = env.get(f"{ENV_PREFIX}{env_key}")
        if value:
            return value
        value = _nested(yaml_config, yaml_key)
        return default if value is None else value

    events_file = Path(str(get("EVENTS_FILE", "events_file", home / EVENTS_FILE_NAME))).expanduser()
    log_file = get("LOG_FILE", "logging.file")

    settings = CountdownSettings(
        events_file=events_file,
        log_level=str(get("LOG_LEVEL", "logging.level", DEFAULT_LOG_LEVEL)).upper(),
        log_file=Path(str(log_file)).expanduser() if log_file else None,
        log_format=str(get("LOG_FORMAT", "logging.format", DEFAULT_LOG_FORMAT)),
    )
    logger.debug(f"Configuration resolved: {settings}")
    return settings
