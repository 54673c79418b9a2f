"""Configuration management for Tutum SDK.

Supports:
- Environment variables (TUTUM_TOKEN, TUTUM_USER, TUTUM_APIKEY, TUTUM_API_URL, etc.)
- Config file (~/.tutum/config.toml)
- Programmatic configuration
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_BASE_URL = "https://dashboard.tutum.co"
DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 3

CONFIG_DIR = Path.home() / ".tutum"
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Keys stored in the [auth] section of the config file.
AUTH_KEYS = ("user", "apikey")


def _number(convert: Any, name: str, value: Any) -> Any:
    """Convert a numeric setting, naming the setting when it is malformed."""
    try:
        return convert(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name} setting: {value!r} is not a number") from None


@dataclass
class AuthConfig:
    """Authentication configuration from the [auth] section."""

    user: str | None = None
    apikey: str | None = None


@dataclass
class TutumConfig:
    """SDK configuration."""

    token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES

    debug: bool = False
    verify_ssl: bool = True

    auth: AuthConfig = field(default_factory=AuthConfig)

    @classmethod
    def from_env(cls) -> TutumConfig:
        """Load configuration from environment variables."""
        return cls(
            token=os.getenv("TUTUM_TOKEN"),
            base_url=os.getenv("TUTUM_API_URL", DEFAULT_BASE_URL),
            api_version=os.getenv("TUTUM_API_VERSION", DEFAULT_API_VERSION),
            timeout=_number(float, "TUTUM_TIMEOUT", os.getenv("TUTUM_TIMEOUT", DEFAULT_TIMEOUT)),
            max_retries=_number(
                int, "TUTUM_MAX_RETRIES", os.getenv("TUTUM_MAX_RETRIES", DEFAULT_MAX_RETRIES)
            ),
            debug=os.getenv("TUTUM_DEBUG", "").lower() in ("1", "true", "yes"),
            verify_ssl=os.getenv("TUTUM_VERIFY_SSL", "true").lower() not in ("0", "false", "no"),
            auth=AuthConfig(
                user=os.getenv("TUTUM_USER"),
                apikey=os.getenv("TUTUM_APIKEY"),
            ),
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> TutumConfig:
        """Load configuration from TOML file."""
        config_path = path or CONFIG_FILE

        if not config_path.exists():
            return cls()

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        auth_data = data.get("auth", {})

        return cls(
            token=data.get("token"),
            base_url=data.get("api_url", DEFAULT_BASE_URL),
            api_version=data.get("api_version", DEFAULT_API_VERSION),
            timeout=_number(float, "timeout", data.get("timeout", DEFAULT_TIMEOUT)),
            max_retries=_number(int, "max_retries", data.get("max_retries", DEFAULT_MAX_RETRIES)),
            debug=data.get("debug", False),
            verify_ssl=data.get("verify_ssl", True),
            auth=AuthConfig(
                user=auth_data.get("user"),
                apikey=auth_data.get("apikey"),
            ),
        )

    @classmethod
    def load(cls) -> TutumConfig:
        """Load configuration with precedence: env > file > defaults."""
        config = cls.from_file()
        env_config = cls.from_env()

        if env_config.token:
            config.token = env_config.token
        if env_config.auth.user and env_config.auth.apikey:
            config.auth = env_config.auth
        if os.getenv("TUTUM_API_URL"):
            config.base_url = env_config.base_url
        if os.getenv("TUTUM_API_VERSION"):
            config.api_version = env_config.api_version
        if os.getenv("TUTUM_TIMEOUT"):
            config.timeout = env_config.timeout
        if os.getenv("TUTUM_MAX_RETRIES"):
            config.max_retries = env_config.max_retries
        if os.getenv("TUTUM_DEBUG"):
            config.debug = env_config.debug
        if os.getenv("TUTUM_VERIFY_SSL"):
            config.verify_ssl = env_config.verify_ssl

        return config


def save_config(config: dict[str, Any], path: Path | None = None) -> None:
    """Save configuration to TOML file.

    The file may hold an API token, so it is made readable by the owner only.
    """
    import tomli_w

    config_path = path or CONFIG_FILE
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    config_path.chmod(0o600)


def get_config_value(key: str) -> Any:
    """Get a single config value."""
    config = TutumConfig.load()
    if key in AUTH_KEYS:
        return getattr(config.auth, key)
    key_mapping = {
        "api_url": "base_url",
    }
    attr_name = key_mapping.get(key, key)
    return getattr(config, attr_name, None)


def set_config_value(key: str, value: Any) -> None:
    """Set a single config value in the config file."""
    config_path = CONFIG_FILE

    if config_path.exists():
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    else:
        data = {}

    if key in AUTH_KEYS:
        data.setdefault("auth", {})[key] = value
    else:
        data[key] = value
    save_config(data, config_path)
