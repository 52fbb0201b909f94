"""
Configuration management for the signup end-to-end tests.

Signup test data (base URL and the user profile entered into the
registration form) is read from a JSON file, with optional per-key
overrides from environment variables. Browser/runtime settings come
from environment variables only.
"""
import os
import re
import json
from pathlib import Path
from typing import Dict, Any, Iterable, Mapping, Optional
import logging

from dotenv import load_dotenv

load_dotenv()  # Load .env file if it exists

logger = logging.getLogger(__name__)

ENV_PREFIX = "SIGNUP_"

# Keys consumed by the registration page object
SIGNUP_KEYS = (
    "baseUrl",
    "password",
    "firstName",
    "lastName",
    "company",
    "address",
    "state",
    "city",
    "zip",
    "mobile",
    "birthDay",
    "birthMonth",
    "birthYear",
    "country",
)


class MissingConfigKeyError(KeyError):
    """Raised when a required configuration key is absent."""

    def __init__(self, key: str, source: str):
        self.key = key
        self.source = source
        super().__init__(key)

    def __str__(self) -> str:
        return f"Configuration key '{self.key}' not found in {self.source}"


class ConfigReader:
    """Read-only key -> string lookup over signup configuration values."""

    def __init__(self, properties: Mapping[str, str], source: str = "<memory>") -> None:
        self._properties = dict(properties)
        self.source = source

    def get_property(self, key: str) -> str:
        """
        Get a configuration value by key.

        Raises:
            MissingConfigKeyError: If the key is not configured
        """
        try:
            return self._properties[key]
        except KeyError:
            raise MissingConfigKeyError(key, self.source) from None

    def __getitem__(self, key: str) -> str:
        return self.get_property(key)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def keys(self) -> Iterable[str]:
        return self._properties.keys()

    def __repr__(self) -> str:
        return f"ConfigReader(source={self.source!r}, keys={sorted(self._properties)})"


def env_var_name(key: str) -> str:
    """
    Environment variable name overriding a configuration key.

    Example:
        env_var_name("baseUrl") -> "SIGNUP_BASE_URL"
    """
    snake = re.sub(r"(?<!^)(?=[A-Z])", "_", key).upper()
    return f"{ENV_PREFIX}{snake}"


def _default_config_path() -> Path:
    return Path(__file__).parent / "signup_data.json"


def load_signup_config(config_path: Optional[str] = None) -> ConfigReader:
    """
    Load signup configuration from a JSON file and environment overrides.

    Args:
        config_path: Path to a JSON file. If None, uses SIGNUP_CONFIG_PATH
            or the signup_data.json bundled with the package.

    Returns:
        ConfigReader over the merged values

    Raises:
        ValueError: If the file is malformed, or if no file exists and no
            environment overrides are set
    """
    if config_path is None:
        config_path = os.getenv("SIGNUP_CONFIG_PATH") or _default_config_path()

    config_file = Path(config_path)
    properties: Dict[str, str] = {}

    if config_file.exists():
        try:
            with open(config_file, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing signup config {config_file}: {e}")
            raise ValueError(f"Invalid JSON in {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Signup config {config_file} must contain a JSON object")

        for key, value in data.items():
            if not isinstance(value, str):
                raise ValueError(
                    f"Signup config value for '{key}' must be a string, got {type(value).__name__}"
                )
            properties[key] = value

        logger.info(f"Loaded {len(properties)} signup values from {config_file}")
    else:
        logger.warning(f"Config file not found: {config_file}. Trying environment variables.")

    overrides = 0
    for key in SIGNUP_KEYS:
        value = os.getenv(env_var_name(key))
        if value is not None:
            properties[key] = value
            overrides += 1

    if overrides:
        logger.info(f"Applied {overrides} signup values from environment variables")

    if not properties:
        raise ValueError(
            "No signup configuration found. Either create signup_data.json, set "
            f"SIGNUP_CONFIG_PATH, or set {ENV_PREFIX}* environment variables."
        )

    source = str(config_file) if config_file.exists() else "environment"
    return ConfigReader(properties, source=source)


def get_app_config() -> Dict[str, Any]:
    """
    Get browser/runtime configuration settings.

    Returns:
        Dictionary with application configuration
    """
    return {
        "headless": os.getenv("SIGNUP_HEADLESS", "true").lower() == "true",
        "slow_mo": int(os.getenv("SIGNUP_SLOW_MO", "0")),
        "default_timeout": int(os.getenv("SIGNUP_TIMEOUT", "30000")),
        "live": os.getenv("SIGNUP_E2E_LIVE", "false").lower() == "true",
        "verbose": os.getenv("SIGNUP_VERBOSE", "false").lower() == "true",
        "log_file": os.getenv("SIGNUP_LOG_FILE"),
    }
