"""
Settings for the store itself.

Defaults match the reference behaviour; `StoreSettings.from_env` lets a
deployment tune them without code changes.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from configstore.core.exceptions import ConfigurationError
from configstore.providers.env import ENV_PRIORITY
from configstore.providers.refresh import DEFAULT_REFRESH_INTERVAL


@dataclass
class StoreSettings:
    """Store-level settings."""
    refresh_interval: float = DEFAULT_REFRESH_INTERVAL
    env_priority: int = ENV_PRIORITY
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self):
        if self.refresh_interval <= 0:
            raise ConfigurationError(
                "refresh_interval", f"must be positive, got {self.refresh_interval}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StoreSettings":
        """
        Build settings from CONFIGSTORE_* environment variables.

        Recognised: CONFIGSTORE_REFRESH_INTERVAL, CONFIGSTORE_LOG_LEVEL,
        CONFIGSTORE_JSON_LOGS.
        """
        environ = os.environ if environ is None else environ
        settings = {}

        interval = environ.get("CONFIGSTORE_REFRESH_INTERVAL")
        if interval:
            try:
                settings["refresh_interval"] = float(interval)
            except ValueError:
                raise ConfigurationError("CONFIGSTORE_REFRESH_INTERVAL", f"not a number: {interval!r}")

        level = environ.get("CONFIGSTORE_LOG_LEVEL")
        if level:
            settings["log_level"] = level.upper()

        json_logs = environ.get("CONFIGSTORE_JSON_LOGS")
        if json_logs:
            settings["json_logs"] = json_logs.lower() in ("1", "true", "yes", "on")

        return cls(**settings)
