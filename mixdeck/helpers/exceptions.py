"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class MixdeckError(Exception):
    """Base class for all reported (non-fatal) mixdeck failures."""


class ResolutionError(MixdeckError):
    """Raised when the focused window cannot be mapped to an audio stream owner.

    Non-fatal: callers skip the binding attempt and may retry on the next tick.
    """


class ConfigIOError(MixdeckError):
    """Raised when the binding document cannot be read or written."""


class ConfigFormatError(MixdeckError):
    """Raised when the binding document (or one of its entries) has an unexpected shape."""
