"""
Configuration for solc-select.

All per-user paths and network settings live in a single
:class:`SolcSelectConfig` value that is passed explicitly into each
component, so the core can be pointed at a temporary directory in tests.

Directory Structure (~/.solc-select/ by default):
    - artifacts/       : One executable file per installed version (solc-<version>)
    - global-version   : Single-line file holding the active version
    - locks/           : Advisory lock files
    - config.yaml      : Optional overrides for the settings below

Resolution order for the home directory:
    1. Explicit ``home`` argument (e.g. ``--home`` on the CLI)
    2. ``SOLC_SELECT_HOME`` environment variable
    3. ``~/.solc-select``
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://binaries.soliditylang.org"
HOME_ENV_VAR = "SOLC_SELECT_HOME"
BASE_URL_ENV_VAR = "SOLC_SELECT_BASE_URL"
TIMEOUT_ENV_VAR = "SOLC_SELECT_TIMEOUT"
CONFIG_FILE_NAME = "config.yaml"


def _positive_seconds(name: str, value: Any) -> float:
    """Coerce a timeout setting to seconds, rejecting non-positive values."""
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be a number of seconds, got {value!r}")
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"{name} must be a number of seconds, got {value!r}"
        ) from e
    if not 0 < seconds < float("inf"):
        raise ConfigError(f"{name} must be a positive number of seconds, got {value!r}")
    return seconds


@dataclass
class SolcSelectConfig:
    """
    Settings shared by every solc-select component.

    Attributes:
        home: Per-user configuration root
        base_url: Root URL of the release catalog host
        request_timeout: Timeout in seconds for every HTTP request
        download_retries: Attempts per artifact download
        lock_timeout: Seconds to wait for an advisory lock
    """

    home: Path
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30
    download_retries: int = 3
    lock_timeout: float = 30

    def __post_init__(self):
        self.home = Path(self.home)
        if not isinstance(self.base_url, str):
            raise ConfigError(f"base_url must be a string, got {self.base_url!r}")
        self.base_url = self.base_url.rstrip("/")
        self.request_timeout = _positive_seconds("request_timeout", self.request_timeout)
        self.lock_timeout = _positive_seconds("lock_timeout", self.lock_timeout)
        if not isinstance(self.download_retries, int) or isinstance(
            self.download_retries, bool
        ):
            raise ConfigError(
                f"download_retries must be an integer, got {self.download_retries!r}"
            )
        if self.download_retries < 1:
            raise ConfigError(
                f"download_retries must be at least 1, got {self.download_retries}"
            )

    @property
    def artifacts_dir(self) -> Path:
        return self.home / "artifacts"

    @property
    def global_version_file(self) -> Path:
        return self.home / "global-version"

    @property
    def lock_dir(self) -> Path:
        return self.home / "locks"

    @property
    def config_file(self) -> Path:
        return self.home / CONFIG_FILE_NAME


def get_default_home() -> Path:
    """
    Get the default configuration root.

    Returns:
        Path: ``$SOLC_SELECT_HOME`` if set, otherwise ``~/.solc-select``

    Raises:
        ConfigError: If no home directory can be determined
    """
    env_home = os.environ.get(HOME_ENV_VAR)
    if env_home:
        return Path(env_home).expanduser()

    try:
        return Path.home() / ".solc-select"
    except RuntimeError as e:
        raise ConfigError(
            f"Cannot determine home directory; set {HOME_ENV_VAR} instead: {e}"
        ) from e


def load_yaml_settings(config_file: Path) -> Dict[str, Any]:
    """
    Load settings from a YAML file.

    Args:
        config_file: Path to YAML configuration file

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigError: If the file can't be read or isn't a YAML mapping
    """
    if not config_file.exists():
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            settings = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {config_file}: {e}") from e

    settings = settings or {}
    if not isinstance(settings, dict):
        raise ConfigError(f"Expected a mapping in {config_file}")
    return settings


def load_config(home: Optional[Union[str, Path]] = None) -> SolcSelectConfig:
    """
    Build the configuration for this process.

    Settings are layered: dataclass defaults, then ``config.yaml`` in the
    home directory, then environment variables.

    Args:
        home: Optional explicit configuration root

    Returns:
        SolcSelectConfig instance

    Raises:
        ConfigError: If the home directory or settings are invalid

    Example:
        >>> config = load_config()
        >>> config.artifacts_dir
        PosixPath('/home/user/.solc-select/artifacts')
    """
    home_path = Path(home).expanduser() if home else get_default_home()

    if home_path.exists() and not home_path.is_dir():
        raise ConfigError(f"Configuration root is not a directory: {home_path}")

    settings = load_yaml_settings(home_path / CONFIG_FILE_NAME)

    known = {f.name for f in fields(SolcSelectConfig)} - {"home"}
    unknown = set(settings) - known
    for key in sorted(unknown):
        logger.warning(f"Ignoring unknown setting '{key}' in {CONFIG_FILE_NAME}")
    settings = {k: v for k, v in settings.items() if k in known}

    base_url = os.environ.get(BASE_URL_ENV_VAR)
    if base_url:
        settings["base_url"] = base_url

    timeout = os.environ.get(TIMEOUT_ENV_VAR)
    if timeout:
        settings["request_timeout"] = _positive_seconds(TIMEOUT_ENV_VAR, timeout)

    try:
        return SolcSelectConfig(home=home_path, **settings)
    except TypeError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


__all__ = [
    "DEFAULT_BASE_URL",
    "SolcSelectConfig",
    "get_default_home",
    "load_yaml_settings",
    "load_config",
]
