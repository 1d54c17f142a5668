"""
Compositor query component (Hyprland).

Wayland has no universal way to ask for the focused window, so this is
compositor-specific; Hyprland's ``hyprctl activewindow`` is the one supported.

Output looks like:

    Window 55d5a8ec3c10 -> ~/src:
    	mapped: 1
    	class: kitty
    	title: ~/src
    	pid: 1234

Architecture:
- Leaf component: runs the query through an injectable runner, parses text
- Parsing is a pure function so it can be tested without a compositor
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mixdeck.components.platform.command_runner_comp import (
    DEFAULT_COMMAND_TIMEOUT_S,
    CommandRunner,
    query_output,
    run_command,
)
from mixdeck.helpers.dto.window_dto import WindowInfo
from mixdeck.helpers.exceptions import ResolutionError

logger = logging.getLogger(__name__)

ACTIVE_WINDOW_COMMAND: tuple[str, ...] = ("hyprctl", "activewindow")

# hyprctl prints this instead of metadata when nothing has focus
NO_WINDOW_MARKER = "Invalid"


def parse_window_info(text: str) -> WindowInfo:
    """
    Parse ``key: value`` lines, splitting each line on its first colon.

    Lines without a colon are ignored. The ``Window <addr> -> <title>:``
    header is kept separately; titles may themselves contain colons.
    """
    info = WindowInfo()
    for raw_line in text.strip().splitlines():
        line = raw_line.strip()
        if not line or ":" not in line:
            continue
        key, _, value = line.partition(":")
        key = key.strip()
        if key.startswith("Window ") and "->" in key:
            info.header = line
            continue
        info.fields[key] = value.strip()
    return info


def get_active_window(
    timeout: float = DEFAULT_COMMAND_TIMEOUT_S,
    runner: CommandRunner = run_command,
    command: Sequence[str] = ACTIVE_WINDOW_COMMAND,
) -> WindowInfo:
    """
    Query the compositor for the focused window.

    Raises:
        ResolutionError: Query failed or returned no window metadata
    """
    output = query_output(command, timeout, runner)
    if output.strip() == NO_WINDOW_MARKER:
        raise ResolutionError("Compositor reports no active window")

    info = parse_window_info(output)
    if not info.fields:
        raise ResolutionError("Compositor returned no window metadata")

    logger.debug(f"[compositor] Active window: {info.title!r} ({len(info.fields)} fields)")
    return info
