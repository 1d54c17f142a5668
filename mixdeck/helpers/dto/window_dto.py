"""
Window resolution DTOs.

Rules:
- Import only stdlib and typing (no mixdeck.* imports)
- Pure data structures only
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class WindowInfo:
    """Parsed ``key: value`` metadata for the active window."""

    fields: dict[str, str] = field(default_factory=dict)
    header: str = ""

    def get(self, key: str) -> str | None:
        return self.fields.get(key)

    @property
    def title(self) -> str:
        return self.fields.get("title", "")


@dataclass
class AudioStream:
    """One audio output stream (a ``pactl list sink-inputs`` block)."""

    index: str
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def process_id(self) -> str | None:
        return self.properties.get("application.process.id")

    @property
    def process_binary(self) -> str | None:
        return self.properties.get("application.process.binary")

    @property
    def application_name(self) -> str | None:
        return self.properties.get("application.name")


@dataclass
class ResolvedWindow:
    """Focused window mapped to the process that owns its audio stream.

    Transient: consumed by the binding workflow and never persisted.
    """

    title: str
    owner_process_name: str
    identifier: str
