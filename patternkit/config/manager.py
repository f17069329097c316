"""Configuration management for the ambient concerns of the library.

The pattern modules never read configuration; only logging setup does.
"""
from __future__ import annotations

import copy
import os
from typing import Any, Dict, Mapping, Optional

from patternkit.config.defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from patternkit.config.schemas import AppConfig, LoggingConfig, validate_config


class ConfigurationManager:
    """
    Builds AppConfig from defaults, explicit overrides and the environment.

    Precedence, lowest first: DEFAULT_CONFIG, ``overrides``, environment.
    The result is computed lazily and cached. Not safe for concurrent
    first access without external synchronization.
    """

    def __init__(
        self,
        overrides: Optional[Dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize configuration manager with lazy loading."""
        self._overrides = overrides or {}
        self._environ = environ
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            self._app_config = validate_config(self.get_config())
        return self._app_config

    def get_config(self) -> Dict[str, Any]:
        """Get the merged raw configuration dictionary."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        _deep_merge(config, self._overrides)

        environ = os.environ if self._environ is None else self._environ
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = environ.get(env_name)
            if value:
                config.setdefault(section, {})[key] = value
        return config

    def get_logging_config(self) -> LoggingConfig:
        """Get the typed logging configuration."""
        return self.app_config.logging

    def reload(self) -> None:
        """Discard the cached configuration."""
        self._app_config = None


def _deep_merge(base: Dict[str, Any], update: Mapping[str, Any]) -> None:
    for key, value in update.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
