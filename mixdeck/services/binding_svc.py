"""
Binding service.

Owns the binding document path and the identification settings, and wraps
the binding workflows so every failure comes back as a reported
BindingOutcome instead of an exception. Nothing here terminates the process.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from mixdeck.components.bindings.binding_document_comp import list_slot_names, load_binding_document
from mixdeck.components.platform.command_runner_comp import (
    DEFAULT_COMMAND_TIMEOUT_S,
    CommandRunner,
    open_external,
    run_command,
)
from mixdeck.components.platform.window_strategy_comp import get_strategy
from mixdeck.helpers.dto.binding_dto import BindingOutcome
from mixdeck.helpers.exceptions import MixdeckError, ResolutionError
from mixdeck.helpers.logging_helper import clear_log_context, set_log_context
from mixdeck.workflows.bindings.add_binding_wf import add_binding_workflow
from mixdeck.workflows.bindings.resolve_foreground_wf import get_foreground_owner_process_names_workflow

logger = logging.getLogger(__name__)


@dataclass
class BindingConfig:
    """Configuration for BindingService."""

    document_path: str
    window_strategy: str = "pid"
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT_S
    editor: str | None = None


class BindingService:
    """
    Slider binding operations for interfaces.

    Write failures after a successful in-memory mutation are reported as a
    failed outcome; they are not retried.
    """

    def __init__(self, cfg: BindingConfig, runner: CommandRunner = run_command) -> None:
        self.cfg = cfg
        self._runner = runner
        self._strategy = get_strategy(cfg.window_strategy)

    @property
    def document_path(self) -> Path:
        return Path(self.cfg.document_path)

    def resolve_foreground(self) -> list[str]:
        """
        Owner process names of the focused window.

        Raises:
            ResolutionError: Non-fatal; the caller skips this attempt
        """
        return get_foreground_owner_process_names_workflow(
            strategy=self._strategy,
            timeout=self.cfg.command_timeout,
            runner=self._runner,
        )

    def add_binding(self, owner_name: str, slider_index: int) -> BindingOutcome:
        """Bind a name to a slider and report the outcome."""
        set_log_context(slider=slider_index)
        try:
            result = add_binding_workflow(owner_name, slider_index, self.document_path)
        except (MixdeckError, ValueError) as e:
            logger.error(f"Failed to bind {owner_name!r} to slider {slider_index}: {e}")
            return BindingOutcome(success=False, error=str(e))
        finally:
            clear_log_context()
        return BindingOutcome(success=True, result=result)

    def bind_foreground_window(self, slider_index: int) -> BindingOutcome:
        """Resolve the focused window and bind its owner to ``slider_index``."""
        try:
            owners = self.resolve_foreground()
        except ResolutionError as e:
            logger.warning(f"Skipping binding for slider {slider_index}: {e}")
            return BindingOutcome(success=False, error=str(e))

        outcome = BindingOutcome(success=False, error="No owner resolved")
        for owner in owners:
            outcome = self.add_binding(owner, slider_index)
            if not outcome.success:
                break
        return outcome

    def list_bindings(self) -> dict[int, list[str]]:
        """
        Current slider -> names mapping.

        Raises:
            ConfigIOError, ConfigFormatError: Document cannot be loaded
        """
        return list_slot_names(load_binding_document(self.document_path).mapping)

    def open_document(self, editor: str | None = None) -> bool:
        """Open the binding document in an editor, detached."""
        command = editor or self.cfg.editor or os.getenv("EDITOR") or "xdg-open"
        return open_external(command, str(self.document_path))
