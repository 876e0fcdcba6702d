"""jiri configuration management.

Handles the local (./jiri.yaml) and global (~/.config/jiri/config.yaml)
configuration files plus the JIRA_* environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from jiri.errors import ConfigurationError
from jiri.utils import deep_merge

LOCAL_CONFIG_NAME = "jiri.yaml"

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "auth": {
        "username": None,
        "token": None,
        "site": None,
    },
    "general": {
        "default_project": None,
        "limit": 1000,
        "timeout": 30.0,
    },
    "logging": {
        "dir": None,
    },
}

ENV_VARS = {
    "username": "JIRA_API_USERNAME",
    "token": "JIRA_API_TOKEN",
    "site": "JIRA_SITE",
}

MISSING_CREDENTIALS_HELP = (
    "Missing Jira credentials. Set them in ./jiri.yaml, ~/.config/jiri/config.yaml, "
    "or the environment:\n"
    "  JIRA_API_USERNAME - your Atlassian account email\n"
    "  JIRA_API_TOKEN    - API token from https://id.atlassian.com/manage-profile/security/api-tokens\n"
    "  JIRA_SITE         - Base Jira site URL, e.g. https://your-org.atlassian.net"
)


@dataclass(frozen=True)
class Config:
    """Resolved runtime configuration."""

    user: str
    token: str
    site: str
    default_project: Optional[str] = None
    default_limit: int = 1000
    timeout: float = 30.0
    log_dir: Optional[Path] = None


def get_global_config_dir() -> Path:
    """Get the global configuration directory path."""
    return Path.home() / ".config" / "jiri"


def get_local_config_file() -> Path:
    """Get the local configuration file path (current project)."""
    return Path.cwd() / LOCAL_CONFIG_NAME


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML config file.

    Raises:
        ConfigurationError: If the file is unreadable or not a mapping.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid config at {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid config at {path}: expected a mapping")
    return data


def load_raw_config() -> dict[str, Any]:
    """Load merged configuration (local + global + environment).

    Priority (highest first):
    1. Environment variables (JIRA_*)
    2. Local project config (./jiri.yaml)
    3. Global config (~/.config/jiri/config.yaml)
    4. Default values

    Returns:
        Merged configuration dictionary
    """
    config = deep_merge(DEFAULT_CONFIG, {})

    global_config_file = get_global_config_dir() / "config.yaml"
    if global_config_file.exists():
        config = deep_merge(config, _read_yaml(global_config_file))

    local_config_file = get_local_config_file()
    if local_config_file.exists():
        config = deep_merge(config, _read_yaml(local_config_file))

    env_auth = {key: os.environ[var] for key, var in ENV_VARS.items() if os.environ.get(var)}
    env_overrides: dict[str, Any] = {"auth": env_auth}
    if os.environ.get("JIRA_DEFAULT_PROJECT"):
        env_overrides["general"] = {"default_project": os.environ["JIRA_DEFAULT_PROJECT"]}

    return deep_merge(config, env_overrides)


def load_config() -> Config:
    """Load and validate configuration.

    Returns:
        Config instance

    Raises:
        ConfigurationError: If credentials are missing or values are invalid.
    """
    raw = load_raw_config()
    auth = raw.get("auth") or {}
    general = raw.get("general") or {}
    logging_section = raw.get("logging") or {}

    user, token, site = (auth.get(key) for key in ("username", "token", "site"))
    if not user or not token or not site:
        raise ConfigurationError(MISSING_CREDENTIALS_HELP)

    try:
        limit = int(general.get("limit") or DEFAULT_CONFIG["general"]["limit"])
        timeout = float(general.get("timeout") or DEFAULT_CONFIG["general"]["timeout"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in general section: {e}") from e

    log_dir = logging_section.get("dir")

    return Config(
        user=str(user),
        token=str(token),
        site=str(site).rstrip("/"),
        default_project=general.get("default_project") or None,
        default_limit=limit,
        timeout=timeout,
        log_dir=Path(log_dir).expanduser() if log_dir else None,
    )
