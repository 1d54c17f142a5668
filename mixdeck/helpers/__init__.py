"""
Helpers package.
"""

from .exceptions import ConfigFormatError, ConfigIOError, MixdeckError, ResolutionError
from .logging_helper import MixdeckLogFilter, clear_log_context, configure_logging, set_log_context
from .scalar_helper import NoiseProfile, is_significant, normalize_scalar

__all__ = [
    "ConfigFormatError",
    "ConfigIOError",
    "MixdeckError",
    "MixdeckLogFilter",
    "NoiseProfile",
    "ResolutionError",
    "clear_log_context",
    "configure_logging",
    "is_significant",
    "normalize_scalar",
    "set_log_context",
]
