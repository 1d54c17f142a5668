"""CLI Bootstrap Service - Service Container for CLI Commands.

Architecture:
- This is a SERVICE layer module (interfaces -> services)
- CLI commands SHOULD use these bootstrap functions to get service instances
- Settings come from ConfigService (YAML document + MIXDECK_* env vars)
"""

from __future__ import annotations

import logging

from mixdeck.services.binding_svc import BindingConfig, BindingService
from mixdeck.services.config_svc import ConfigService

logger = logging.getLogger(__name__)


def get_config_service(config_path: str | None = None) -> ConfigService:
    """Get ConfigService for CLI operations (explicit path wins over env/default)."""
    return ConfigService(config_path=config_path)


def get_binding_service(config_path: str | None = None) -> BindingService:
    """Get BindingService wired from the composed configuration.

    Example:
        >>> service = get_binding_service("config.yaml")
        >>> service.add_binding("firefox", 2)

    """
    config_service = get_config_service(config_path)
    cfg = BindingConfig(
        document_path=config_service.config_path,
        window_strategy=str(config_service.get("window_strategy") or "pid"),
        command_timeout=config_service.get_command_timeout(),
        editor=config_service.get("editor"),
    )
    logger.debug(f"[cli_bootstrap] Binding document: {cfg.document_path}")
    return BindingService(cfg)
