"""
Persistent configuration store.

The configuration is a flat JSON object::

    {
      "interval": 300,
      "interfaces": ["eth0", "wlan0"],
      "randomize": true,
      "enabled": true
    }

Keys missing from the file take their defaults. Keys this module does not
know about are carried in ``MacChangerConfig.extra`` and written back
unchanged, so hand edits survive a round trip through the configure tool.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from config import settings
from core.errors import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

KNOWN_KEYS = ("interval", "interfaces", "enabled", "randomize")


@dataclass(frozen=True)
class MacChangerConfig:
    """Immutable snapshot of the service configuration."""
    interval: int = settings.DEFAULT_INTERVAL
    interfaces: Tuple[str, ...] = ()
    enabled: bool = True
    # Kept for file compatibility; cycling always randomizes
    randomize: bool = True
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MacChangerConfig":
        """
        Build a validated configuration from a decoded JSON object.

        Args:
            data: Mapping read from the configuration file.

        Returns:
            MacChangerConfig with defaults filled in.

        Raises:
            ConfigError: If a value has the wrong type or breaks an invariant.
        """
        if not isinstance(data, Mapping):
            raise ConfigError("Configuration must be a JSON object")

        merged = {**settings.DEFAULT_CONFIG, **data}

        interval = merged["interval"]
        validate_interval(interval)

        interfaces = merged["interfaces"]
        if not isinstance(interfaces, (list, tuple)):
            raise ConfigError("'interfaces' must be a list of interface names")
        for name in interfaces:
            if not isinstance(name, str) or not name:
                raise ConfigError(f"Invalid interface name: {name!r}")
            if name == settings.LOOPBACK_INTERFACE:
                raise ConfigError("The loopback interface cannot be configured")

        for key in ("enabled", "randomize"):
            if not isinstance(merged[key], bool):
                raise ConfigError(f"'{key}' must be true or false")

        extra = {k: v for k, v in data.items() if k not in KNOWN_KEYS}

        return cls(
            interval=interval,
            interfaces=tuple(interfaces),
            enabled=merged["enabled"],
            randomize=merged["randomize"],
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to the JSON object written to disk."""
        data = dict(self.extra)
        data.update({
            "interval": self.interval,
            "interfaces": list(self.interfaces),
            "randomize": self.randomize,
            "enabled": self.enabled,
        })
        return data


def validate_interval(value: Any) -> int:
    """
    Check that an interval is a positive whole number of seconds.

    Raises:
        ConfigError: If the value is not a positive integer.
    """
    # bool is an int subclass; true is not a valid interval
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'interval' must be a whole number of seconds, got {value!r}")
    if value <= 0:
        raise ConfigError(f"'interval' must be positive, got {value}")
    return value


def read_config_file(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read the raw configuration object without applying defaults.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the file is not valid JSON.
    """
    path = path or settings.CONFIG_FILE
    if not os.path.exists(path):
        raise ConfigNotFoundError(f"Configuration file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Error loading configuration: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")
    return data


def load_config(path: Optional[str] = None) -> MacChangerConfig:
    """Load and validate the configuration file."""
    return MacChangerConfig.from_dict(read_config_file(path))


def merge_config(current: Mapping[str, Any], answers: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay new answers on an existing configuration object."""
    return {**current, **answers}


def save_config(data: Mapping[str, Any], path: Optional[str] = None) -> str:
    """
    Validate and write a configuration object.

    Args:
        data: Configuration object; unknown keys are written unchanged.
        path: Target file (defaults to the service configuration file).

    Returns:
        The path written.
    """
    path = path or settings.CONFIG_FILE
    config = MacChangerConfig.from_dict(data)

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(config.to_dict(), fh, indent=2)
        fh.write("\n")

    logger.debug("Configuration written to %s", path)
    return path
