"""
Services package.
"""

from .binding_svc import BindingConfig, BindingService
from .cli_bootstrap_svc import get_binding_service, get_config_service
from .config_svc import ConfigService
from .slider_svc import SliderService

__all__ = [
    "BindingConfig",
    "BindingService",
    "ConfigService",
    "SliderService",
    "get_binding_service",
    "get_config_service",
]
