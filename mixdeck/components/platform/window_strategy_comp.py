"""
Window identification strategies.

A strategy pulls an identifying key out of the active window's metadata and
says whether a given audio stream belongs to that key. Supporting another
desktop environment means adding a strategy, not branching the resolver.
"""

from __future__ import annotations

import logging
from typing import Protocol

from mixdeck.helpers.dto.window_dto import AudioStream, WindowInfo

logger = logging.getLogger(__name__)


class WindowIdentificationStrategy(Protocol):
    """Protocol for mapping an active window to its audio stream."""

    name: str

    def identify(self, window: WindowInfo) -> str | None:
        """Return the identifying key for the window, or None if absent."""
        ...

    def matches(self, stream: AudioStream, key: str) -> bool:
        """Return True if ``stream`` belongs to the window identified by ``key``."""
        ...


class PidStrategy:
    """Identify by process id (``pid`` field vs ``application.process.id``)."""

    name = "pid"

    def identify(self, window: WindowInfo) -> str | None:
        return window.get("pid") or None

    def matches(self, stream: AudioStream, key: str) -> bool:
        return stream.process_id == key


class ClassStrategy:
    """Identify by window class, compared case-insensitively with the stream's binary or app name."""

    name = "class"

    def identify(self, window: WindowInfo) -> str | None:
        return window.get("class") or None

    def matches(self, stream: AudioStream, key: str) -> bool:
        wanted = key.lower()
        return any(
            candidate is not None and candidate.lower() == wanted
            for candidate in (stream.process_binary, stream.application_name)
        )


STRATEGIES: dict[str, type[PidStrategy] | type[ClassStrategy]] = {
    PidStrategy.name: PidStrategy,
    ClassStrategy.name: ClassStrategy,
}


def get_strategy(name: str | None) -> WindowIdentificationStrategy:
    """Look up a strategy by config name; unknown names fall back to pid."""
    key = (name or PidStrategy.name).strip().lower()
    strategy_cls = STRATEGIES.get(key)
    if strategy_cls is None:
        logger.warning(f"[window_strategy] Unknown window_strategy {name!r}, using pid")
        strategy_cls = PidStrategy
    return strategy_cls()
