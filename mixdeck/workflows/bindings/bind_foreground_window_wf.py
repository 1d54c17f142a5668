"""Bind the focused window's audio owner to a slider.

Resolution runs first and outside the document lock; nothing is read or
written unless a non-empty owner name was resolved.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mixdeck.components.platform.command_runner_comp import (
    DEFAULT_COMMAND_TIMEOUT_S,
    CommandRunner,
    run_command,
)
from mixdeck.components.platform.window_strategy_comp import WindowIdentificationStrategy
from mixdeck.helpers.dto.binding_dto import AddBindingResult
from mixdeck.workflows.bindings.add_binding_wf import add_binding_workflow
from mixdeck.workflows.bindings.resolve_foreground_wf import get_foreground_owner_process_names_workflow

logger = logging.getLogger(__name__)


def bind_foreground_window_workflow(
    slider_index: int,
    document_path: str | Path,
    *,
    strategy: WindowIdentificationStrategy | None = None,
    timeout: float = DEFAULT_COMMAND_TIMEOUT_S,
    runner: CommandRunner = run_command,
    platform: str | None = None,
) -> list[AddBindingResult]:
    """Resolve the focused window and bind each owner name to ``slider_index``.

    Raises:
        ResolutionError: Focused window could not be resolved (document untouched)
        ConfigIOError, ConfigFormatError: See add_binding_workflow

    """
    owners = get_foreground_owner_process_names_workflow(
        strategy=strategy,
        timeout=timeout,
        runner=runner,
        platform=platform,
    )
    return [add_binding_workflow(owner, slider_index, document_path) for owner in owners]
