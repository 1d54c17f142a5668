"""Foreground window resolution workflow.

Maps the focused window to the name of the process that owns its audio
stream:

1. Ask the compositor for the active window's metadata
2. Pull the identifying key out of it (pid by default)
3. Find the audio stream that belongs to that key
4. Return the stream's process binary

Every failure is a ResolutionError; an empty or guessed name is never
returned, so callers can never persist an empty binding.
"""

from __future__ import annotations

import logging
import sys

from mixdeck.components.platform.audio_streams_comp import list_audio_streams
from mixdeck.components.platform.command_runner_comp import (
    DEFAULT_COMMAND_TIMEOUT_S,
    CommandRunner,
    run_command,
)
from mixdeck.components.platform.compositor_comp import get_active_window
from mixdeck.components.platform.window_strategy_comp import PidStrategy, WindowIdentificationStrategy
from mixdeck.helpers.dto.window_dto import ResolvedWindow
from mixdeck.helpers.exceptions import ResolutionError

logger = logging.getLogger(__name__)

SUPPORTED_PLATFORMS = ("linux",)


def resolve_foreground_window_workflow(
    *,
    strategy: WindowIdentificationStrategy | None = None,
    timeout: float = DEFAULT_COMMAND_TIMEOUT_S,
    runner: CommandRunner = run_command,
    platform: str | None = None,
) -> ResolvedWindow:
    """Resolve the focused window to its audio stream owner.

    Args:
        strategy: Window identification strategy (default: PidStrategy)
        timeout: Per-command timeout in seconds
        runner: External command runner
        platform: Override for sys.platform

    Returns:
        ResolvedWindow with title, owner process name and identifying key

    Raises:
        ResolutionError: Any step failed or found nothing

    """
    platform = platform or sys.platform
    if not platform.startswith(SUPPORTED_PLATFORMS):
        raise ResolutionError(f"Focused window lookup is not supported on {platform}")

    strategy = strategy or PidStrategy()

    # Step 1: Active window metadata
    window = get_active_window(timeout=timeout, runner=runner)

    # Step 2: Identifying key
    key = strategy.identify(window)
    if not key:
        raise ResolutionError(f"Active window has no '{strategy.name}' field")

    # Step 3: Matching audio stream
    streams = list_audio_streams(timeout=timeout, runner=runner)
    stream = next((s for s in streams if strategy.matches(s, key)), None)
    if stream is None:
        raise ResolutionError(f"Window ({strategy.name}={key}) not in audio stream list")

    # Step 4: Owner name
    # TODO: wine/proton games report the wine loader as binary; walk child processes to find the real executable
    owner = (stream.process_binary or "").strip()
    if not owner:
        raise ResolutionError(f"Audio stream #{stream.index} has no process binary")

    logger.info(f"Focused window {window.title!r} -> {owner} ({strategy.name}={key})")
    return ResolvedWindow(title=window.title, owner_process_name=owner, identifier=key)


def get_foreground_owner_process_names_workflow(
    *,
    strategy: WindowIdentificationStrategy | None = None,
    timeout: float = DEFAULT_COMMAND_TIMEOUT_S,
    runner: CommandRunner = run_command,
    platform: str | None = None,
) -> list[str]:
    """Return the owner process names of the focused window (currently exactly one).

    Raises:
        ResolutionError: Resolution failed

    """
    resolved = resolve_foreground_window_workflow(
        strategy=strategy,
        timeout=timeout,
        runner=runner,
        platform=platform,
    )
    return [resolved.owner_process_name]
