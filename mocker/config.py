"""
Configuration management for the Mocker plugin.
"""
import os
import json
import logging

logger = logging.getLogger("mocker.config")

CURRENT_DIR = os.getcwd()

# Default filenames
CONFIG_FILENAME = "mocker.conf"

DEFAULT_CONFIG_FILE = os.environ.get(
    "MOCKER_CONFIG",
    os.path.join(CURRENT_DIR, CONFIG_FILENAME)
)

# Container configuration
CONTAINER_NAME = os.environ.get("MOCKER_CONTAINER_NAME", "mocker-model-runner")
ENGINE_IMAGE = os.environ.get("MOCKER_IMAGE", "ollama/ollama:latest")
VOLUME_NAME = os.environ.get("MOCKER_VOLUME", "ollama")
VOLUME_MOUNT_PATH = "/root/.ollama"
ENGINE_PORT = int(os.environ.get("MOCKER_PORT", "11434"))
DOCKER_BIN = os.environ.get("MOCKER_DOCKER", "docker")
STARTUP_DELAY = float(os.environ.get("MOCKER_STARTUP_DELAY", "2"))

# API configuration
DEFAULT_API_BASE = os.environ.get("MOCKER_API_BASE", f"http://localhost:{ENGINE_PORT}")
API_TIMEOUT = int(os.environ.get("MOCKER_API_TIMEOUT", "5"))

# Docker CLI plugin metadata
PLUGIN_NAME = "docker-model"
PLUGIN_SCHEMA_VERSION = "0.1.0"
PLUGIN_VENDOR = "Mocker"
PLUGIN_SHORT_DESCRIPTION = "Run and manage AI models using open-source technologies"

SETTING_KEYS = (
    "container_name", "image", "volume", "mount_path",
    "port", "docker", "startup_delay", "api_base",
)

def default_settings():
    """Return the settings in effect before any config file is applied."""
    return {
        "container_name": CONTAINER_NAME,
        "image": ENGINE_IMAGE,
        "volume": VOLUME_NAME,
        "mount_path": VOLUME_MOUNT_PATH,
        "port": ENGINE_PORT,
        "docker": DOCKER_BIN,
        "startup_delay": STARTUP_DELAY,
        "api_base": None,
    }

def load_settings_from_config(config_path):
    """
    Load setting overrides from a JSON config file.

    Unknown keys are ignored with a warning.

    Args:
        config_path (str): Path to the config file

    Returns:
        dict: Overrides found in the file, empty if the file is missing

    Raises:
        ValueError: If the file is not a JSON object
    """
    if not config_path or not os.path.isfile(config_path):
        return {}
    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {config_path}: expected a JSON object")

    overrides = {}
    for key, value in data.items():
        if key in SETTING_KEYS:
            overrides[key] = value
        else:
            logger.warning(f"Ignoring unknown setting '{key}' in {config_path}")
    return overrides

def _coerce(value, kind, key):
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid setting '{key}': {value!r} is not a number") from None

def load_settings(config_path=None, api_base=None):
    """
    Resolve the effective settings.

    Priority (highest first): ``api_base`` argument, config file, environment
    variables, built-in defaults. The default config file is only read when
    it exists.

    Args:
        config_path (str, optional): Explicit config file path
        api_base (str, optional): Engine API base URL override

    Returns:
        dict: Effective settings
    """
    settings = default_settings()
    if config_path:
        if not os.path.isfile(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")
        settings.update(load_settings_from_config(config_path))
    elif os.path.isfile(DEFAULT_CONFIG_FILE):
        settings.update(load_settings_from_config(DEFAULT_CONFIG_FILE))

    settings["port"] = _coerce(settings["port"], int, "port")
    settings["startup_delay"] = _coerce(settings["startup_delay"], float, "startup_delay")
    for key in ("container_name", "image", "volume", "mount_path", "docker", "api_base"):
        value = settings[key]
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Invalid setting '{key}': expected a string, got {value!r}")
    if api_base:
        settings["api_base"] = api_base
    if not settings["api_base"]:
        if "MOCKER_API_BASE" in os.environ:
            settings["api_base"] = DEFAULT_API_BASE
        else:
            settings["api_base"] = f"http://localhost:{settings['port']}"
    settings["api_base"] = settings["api_base"].rstrip("/")
    return settings
