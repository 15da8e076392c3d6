"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables and a YAML
configuration file (~/.casemenu/config.yaml by default).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".casemenu"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
ENV_PREFIX = "CASEMENU_"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Turns nested YAML mappings into dotted keys ({'logging': {'level': ..}} -> 'logging.level')."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


def env_var_name(key: str) -> str:
    """Maps a dotted config key to its environment variable name."""
    return f"{ENV_PREFIX}{key.upper().replace('.', '_')}"


def load_configuration(config_file: Optional[Path] = None, env_file: Optional[Path] = None) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Values set at runtime with set_config (mirrored into the environment)
    2. Environment Variables
    3. .env file
    4. YAML configuration file
    5. Default values passed to get_config

    Args:
        config_file: Path to the YAML configuration file (~/.casemenu/config.yaml if None).
        env_file: Path to the .env file (searches upwards from cwd if None).
    """
    global _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    config_file = config_file or DEFAULT_CONFIG_FILE

    # 1. Load from YAML file (Lowest priority)
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                for key, value in _flatten(yaml_config).items():
                    _config.setdefault(key, value)
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. Load from .env file; override=False so real environment variables win
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("Skipping .env file loading (no .env found).")

    _loaded = True
    logger.debug("Configuration loading process completed.")


def _coerce(value: str) -> Any:
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except ValueError:
        return value


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value by key.

    Priority:
    1. Test configuration (if in testing mode)
    2. Environment variable (CASEMENU_<KEY>, also set by set_config)
    3. YAML config
    4. Default value

    Args:
        key: The dotted configuration key, e.g. 'logging.level'.
        default: Default value if the key is not found.

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = env_var_name(key)
    if env_key in os.environ:
        return _coerce(os.environ[env_key])

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found. Returning default: {default}")
    return default


def set_config(key: str, value: Any) -> None:
    """Sets a configuration value for the rest of the process.

    The value is also written to the matching CASEMENU_* environment
    variable, so it wins over whatever the environment held before.
    """
    logger.debug(f"Setting config: {key} = {value!r}")
    _config[key] = value
    os.environ[env_var_name(key)] = str(value)


def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


# --- Convenience Functions ---

def get_preserve_acronyms() -> bool:
    """Whether title-casing should leave all-caps words untouched."""
    flag = get_config('casing.preserve_acronyms', False)
    if isinstance(flag, str):
        if flag.lower() in ('true', 'false'):
            return flag.lower() == 'true'
        logger.warning(f"Unexpected value for casing.preserve_acronyms: '{flag}'. Defaulting to False.")
        return False
    return bool(flag)


def get_log_level() -> int:
    """Resolves 'logging.level' to a logging module level, falling back to INFO."""
    level_name = str(get_config('logging.level', DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{level_name}', using {DEFAULT_LOG_LEVEL}.")
        return logging.INFO
    return level


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """Set configuration values that override every other source (tests only)."""
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()


def reset_configuration() -> None:
    """Forgets everything loaded or set so far, so load_configuration runs again."""
    global _loaded
    _config.clear()
    _test_config.clear()
    _loaded = False
