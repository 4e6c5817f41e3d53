"""Global configuration storage for ugh.

Handles user-level configuration stored in the per-user config directory:
- config.yaml: Jira, provider, model and branch settings
- credentials: API keys and tokens
"""

import os
import platform
import stat
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ugh.errors import ConfigurationError, StorageError

CONFIG_DIR_ENV_VAR = "UGH_CONFIG_DIR"


class GlobalConfigError(ConfigurationError):
    """Raised when a persisted configuration file cannot be parsed."""
    pass


def _home_dir() -> Optional[Path]:
    """Return the user's home directory, or None if it cannot be determined."""
    for var in ("HOME", "USERPROFILE"):
        value = os.environ.get(var, "").strip()
        if value:
            return Path(value)
    return None


def _platform_config_dir() -> Optional[Path]:
    """Return the platform-specific config directory for ugh."""
    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    if xdg:
        return Path(xdg) / "ugh"

    home = _home_dir()
    system = platform.system()

    if system == "Darwin":
        if home:
            return home / "Library" / "Application Support" / "ugh"
    elif system == "Windows":
        appdata = os.environ.get("APPDATA", "").strip()
        if appdata:
            return Path(appdata) / "ugh"
    elif home:
        return home / ".config" / "ugh"

    return home / ".ugh" if home else None


def get_global_config_dir() -> Path:
    """Get the ugh configuration directory.

    Checks in order:
    1. UGH_CONFIG_DIR environment variable
    2. Platform config directory (XDG, macOS, Windows)
    3. ~/.ugh

    Returns:
        Path to the configuration directory.

    Raises:
        ConfigurationError: If no directory can be determined.
    """
    custom = os.environ.get(CONFIG_DIR_ENV_VAR, "").strip()
    if custom:
        return Path(custom)

    config_dir = _platform_config_dir()
    if config_dir is None:
        raise ConfigurationError("could not determine configuration directory")
    return config_dir


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to the configuration directory.
    """
    config_dir = get_global_config_dir()
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Failed to create config directory {config_dir}: {e}")
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_global_config_dir() / "credentials"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file is not a valid YAML mapping.
        StorageError: If the file cannot be read.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise GlobalConfigError(f"invalid config file {config_file}: {e}")
    except OSError as e:
        raise StorageError(f"Failed to read config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"invalid config file {config_file}: expected a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise StorageError(f"Failed to save config to {config_file}: {e}")


def _parse_credentials(text: str) -> Dict[str, str]:
    credentials = {}
    for line in text.splitlines():
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue
        # Parse KEY=value format
        if "=" in line:
            key, value = line.split("=", 1)
            credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load secrets from the credentials file.

    Returns:
        Dictionary mapping variable names to secret values.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _parse_credentials(credentials_file.read_text())
    except OSError as e:
        raise StorageError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(key: str, value: Optional[str]) -> None:
    """Save, update or remove a secret in the credentials file.

    Args:
        key: Variable name (e.g., "GOOGLE_API_KEY", "UGH_JIRA_TOKEN").
        value: The secret value; None removes the entry.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    existing_creds = load_credentials()
    if value is None:
        existing_creds.pop(key, None)
    else:
        existing_creds[key] = value

    try:
        with open(credentials_file, "w") as f:
            f.write("# ugh credentials\n")
            f.write("# This file stores API keys and tokens\n")
            f.write("# Format: NAME=value\n\n")

            for name, secret in existing_creds.items():
                f.write(f"{name}={secret}\n")

        # Set secure permissions (owner read/write only)
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)

    except OSError as e:
        raise StorageError(f"Failed to save credential: {e}")


def get_credential(key: str) -> Optional[str]:
    """Get a secret from the credentials file.

    Args:
        key: Variable name (e.g., "GOOGLE_API_KEY")

    Returns:
        The secret if found, None otherwise.
    """
    return load_credentials().get(key) or None


def set_provider_and_model(provider: str, model: str) -> None:
    """Set the active provider and model in global config.

    Args:
        provider: The provider name (e.g., "google").
        model: The model name to use.
    """
    config = load_global_config()
    config["llm_provider"] = provider
    config["llm_model"] = model
    save_global_config(config)


def is_configured() -> bool:
    """Check if ugh has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
