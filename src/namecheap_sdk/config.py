"""
Configuration dataclasses for the Namecheap SDK.

This module defines the client configuration (credentials, endpoint
selection, transport and logging settings) and loaders for JSON files and
environment variables.
"""

import json
import os
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError


PRODUCTION_ENDPOINT = "https://api.namecheap.com/xml.response"
SANDBOX_ENDPOINT = "https://api.sandbox.namecheap.com/xml.response"

DEFAULT_CONFIG_PATH = Path.home() / ".namecheap_sdk" / "config.json"

LOG_LEVELS = ("debug", "info", "warn", "error")
OUTPUT_FORMATS = ("json", "text", "both")
_LEVEL_ALIASES = {"warning": "warn"}


@dataclass
class CredentialsConfig:
    """API credentials sent as global parameters on every call."""

    api_user: str = ""
    api_key: str = ""
    user_name: Optional[str] = None
    client_ip: str = ""


@dataclass
class TransportConfig:
    """HTTP transport settings."""

    timeout_seconds: float = 30.0
    verify_tls: bool = True
    user_agent: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    enabled: bool = False
    level: str = "info"
    output_format: str = "text"  # 'json', 'text', 'both'


@dataclass
class ClientConfig:
    """Main client configuration combining all sub-configurations."""

    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    transport: TransportConfig = field(default_factory=TransportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sandbox: bool = False
    endpoint: Optional[str] = None  # overrides the sandbox toggle

    def resolved_endpoint(self) -> str:
        """Get the API endpoint URL this configuration points at."""
        if self.endpoint:
            return self.endpoint
        return SANDBOX_ENDPOINT if self.sandbox else PRODUCTION_ENDPOINT


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _file_bool(value: Any) -> bool:
    # JSON may carry "false" as a string
    if isinstance(value, str):
        return _parse_bool(value)
    return bool(value)


def normalize_log_level(value: str) -> str:
    """
    Canonical log level name for a configured value.

    Accepts any case and "warning" for "warn".

    Raises:
        ValueError: If the value names no known level
    """
    level = str(value).strip().lower()
    level = _LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {value!r} (expected one of {', '.join(LOG_LEVELS)})"
        )
    return level


def normalize_output_format(value: str) -> str:
    """
    Canonical log output format for a configured value.

    Raises:
        ValueError: If the value is not json, text or both
    """
    output_format = str(value).strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid log output format: {value!r} (expected one of {', '.join(OUTPUT_FORMATS)})"
        )
    return output_format


def load_config_from_file(config_path: Path) -> Optional[ClientConfig]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        ClientConfig if successful, None otherwise
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        credentials_data = data.get("credentials", {})
        credentials = CredentialsConfig(
            api_user=credentials_data.get("api_user", ""),
            api_key=credentials_data.get("api_key", ""),
            user_name=credentials_data.get("user_name"),
            client_ip=credentials_data.get("client_ip", ""),
        )

        transport_data = data.get("transport", {})
        transport = TransportConfig(
            timeout_seconds=float(transport_data.get("timeout_seconds", 30.0)),
            verify_tls=_file_bool(transport_data.get("verify_tls", True)),
            user_agent=transport_data.get("user_agent"),
        )

        logging_data = data.get("logging", {})
        logging_config = LoggingConfig(
            enabled=_file_bool(logging_data.get("enabled", False)),
            level=normalize_log_level(logging_data.get("level", "info")),
            output_format=normalize_output_format(logging_data.get("output_format", "text")),
        )

        return ClientConfig(
            credentials=credentials,
            transport=transport,
            logging=logging_config,
            sandbox=_file_bool(data.get("sandbox", False)),
            endpoint=data.get("endpoint"),
        )

    except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None
    except FileNotFoundError:
        return None


def save_config_to_file(config: ClientConfig, config_path: Path) -> bool:
    """
    Save configuration to a JSON file.

    Args:
        config: ClientConfig to save
        config_path: Path to save the configuration

    Returns:
        True if successful, False otherwise
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(asdict(config), f, indent=2, ensure_ascii=False)

        return True

    except (OSError, TypeError) as e:
        print(f"Error saving config: {e}", file=sys.stderr)
        return False


def load_config_from_env(env_file: Optional[Path] = None) -> ClientConfig:
    """
    Build configuration from NAMECHEAP_* environment variables.

    Values from ``env_file`` (or a ``.env`` found by python-dotenv) are
    loaded first without overriding variables already set.

    Raises:
        ConfigurationError: If NAMECHEAP_TIMEOUT is not a number or
            NAMECHEAP_LOG_LEVEL names no known level
    """
    load_dotenv(dotenv_path=env_file)

    timeout_raw = os.getenv("NAMECHEAP_TIMEOUT", "30")
    try:
        timeout = float(timeout_raw)
    except ValueError as e:
        raise ConfigurationError(
            code="invalid_timeout",
            message=f"NAMECHEAP_TIMEOUT must be a number, got {timeout_raw!r}",
            details={"value": timeout_raw},
        ) from e

    level_raw = os.getenv("NAMECHEAP_LOG_LEVEL") or "info"
    try:
        level = normalize_log_level(level_raw)
    except ValueError as e:
        raise ConfigurationError(
            code="invalid_log_level",
            message=str(e),
            details={"value": level_raw},
        ) from e

    return ClientConfig(
        credentials=CredentialsConfig(
            api_user=os.getenv("NAMECHEAP_API_USER", "").strip(),
            api_key=os.getenv("NAMECHEAP_API_KEY", "").strip(),
            user_name=os.getenv("NAMECHEAP_USERNAME", "").strip() or None,
            client_ip=os.getenv("NAMECHEAP_CLIENT_IP", "").strip(),
        ),
        transport=TransportConfig(timeout_seconds=timeout),
        logging=LoggingConfig(
            enabled=_parse_bool(os.getenv("NAMECHEAP_LOG")),
            level=level,
        ),
        sandbox=_parse_bool(os.getenv("NAMECHEAP_SANDBOX")),
        endpoint=os.getenv("NAMECHEAP_ENDPOINT") or None,
    )
