"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and form cross-layer
contracts within that domain (interfaces -> services -> workflows -> components).

Rules for DTO modules:
- Import only stdlib and typing (no mixdeck.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
"""

from __future__ import annotations

from mixdeck.helpers.dto.binding_dto import (
    AddBindingResult,
    BindingDocument,
    BindingOutcome,
    EmptySlot,
    MalformedEntry,
    NameListSlot,
    SliderMapping,
    SliderSlot,
)
from mixdeck.helpers.dto.platform_dto import CommandResult
from mixdeck.helpers.dto.slider_dto import SliderMoveEvent
from mixdeck.helpers.dto.window_dto import AudioStream, ResolvedWindow, WindowInfo

__all__ = [
    "AddBindingResult",
    "AudioStream",
    "BindingDocument",
    "BindingOutcome",
    "CommandResult",
    "EmptySlot",
    "MalformedEntry",
    "NameListSlot",
    "ResolvedWindow",
    "SliderMapping",
    "SliderMoveEvent",
    "SliderSlot",
    "WindowInfo",
]
