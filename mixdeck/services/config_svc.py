#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads settings from defaults, the YAML document, overrides, env vars
#  - Caches composed config (noise profile is read-only after startup)
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from mixdeck.helpers.scalar_helper import NoiseProfile

# ======================================================================
# Internal Constants (Not User-Configurable)
# ======================================================================

# Document looked up in the working directory when nothing else is set
INTERNAL_DEFAULT_CONFIG_PATH = "config.yaml"

# Environment variable naming the document path
INTERNAL_CONFIG_PATH_ENV = "MIXDECK_CONFIG_PATH"

# Prefix for per-key environment overrides
INTERNAL_ENV_PREFIX = "MIXDECK_"

# Whitelist of user-configurable keys (YAML document and environment)
ALLOWED_KEYS = {
    "noise_reduction",
    "command_timeout",
    "window_strategy",
    "editor",
}


class ConfigService:
    """
    Service for loading and caching application settings.

    Settings live in the same YAML document as slider_mapping; only the
    whitelisted keys are read from it, everything else is left to the
    binding components.
    """

    def __init__(self, config_path: str | None = None, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._explicit_path = config_path
        self._overrides = dict(overrides or {})
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        return self.get_config().get(key, default)

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    @property
    def config_path(self) -> str:
        return str(self.get_config()["config_path"])

    def get_noise_profile(self) -> NoiseProfile:
        """Noise profile for slider filtering (unknown values mean default)."""
        value = self.get("noise_reduction")
        profile = NoiseProfile.from_value(value)
        if value is not None and profile.value != str(value).strip().lower():
            self._logger.warning(f"Unknown noise_reduction {value!r}, using {profile.value}")
        return profile

    def get_command_timeout(self) -> float:
        value = self.get("command_timeout")
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            self._logger.warning(f"Invalid command_timeout {value!r}, using default")
            return float(self._default_config()["command_timeout"])
        if timeout <= 0:
            self._logger.warning(f"command_timeout must be positive, got {timeout}; using default")
            return float(self._default_config()["command_timeout"])
        return timeout

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) The YAML document (explicit path, $MIXDECK_CONFIG_PATH, ./config.yaml)
          3) Overrides passed to the constructor
          4) Environment variables (MIXDECK_*)
        """
        cfg = self._default_config()
        cfg["config_path"] = self._resolve_config_path()

        document = self._load_yaml(cfg["config_path"])
        cfg.update({k: v for k, v in document.items() if k in ALLOWED_KEYS})

        cfg.update({k: v for k, v in self._overrides.items() if k in ALLOWED_KEYS})

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config from %s; keys: %s", cfg["config_path"], sorted(cfg))
        return cfg

    def _resolve_config_path(self) -> str:
        if self._explicit_path:
            return self._explicit_path
        return os.getenv(INTERNAL_CONFIG_PATH_ENV) or INTERNAL_DEFAULT_CONFIG_PATH

    def _default_config(self) -> dict[str, Any]:
        """Base defaults for user-configurable settings."""
        return {
            "noise_reduction": NoiseProfile.DEFAULT.value,  # "high", "low" or "default"
            "command_timeout": 2.0,  # Seconds to wait for hyprctl/pactl
            "window_strategy": "pid",  # "pid" or "class"
            "editor": None,  # Falls back to $EDITOR, then xdg-open
        }

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.

        The binding workflows report document errors themselves; settings
        fall back to defaults.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Failed to load settings from {path} (using defaults): {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides for the user-configurable keys only.

        Supported formats:
          MIXDECK_NOISE_REDUCTION=high
          MIXDECK_COMMAND_TIMEOUT=5
          MIXDECK_WINDOW_STRATEGY=class
          MIXDECK_EDITOR=nvim
        """
        for k, v in os.environ.items():
            if not k.startswith(INTERNAL_ENV_PREFIX):
                continue

            key = k[len(INTERNAL_ENV_PREFIX) :].lower()
            if key not in ALLOWED_KEYS:
                continue

            # Parse typed values
            val: Any
            if v.isdigit():
                val = int(v)
            elif v.replace(".", "", 1).isdigit():
                val = float(v)
            else:
                val = v
            cfg[key] = val
