"""
Bind commands: Attach a process to a slider in the binding document.

Architecture:
- Uses CLI bootstrap service to get BindingService instance
- BindingService reports failures as outcomes; nothing here raises
"""

from __future__ import annotations

import argparse

from rich.markup import escape

from mixdeck.helpers.dto.binding_dto import BindingOutcome
from mixdeck.interfaces.cli.cli_ui import print_error, print_success
from mixdeck.services.cli_bootstrap_svc import get_binding_service


def _report(outcome: BindingOutcome) -> int:
    if not outcome.success or outcome.result is None:
        print_error(f"Binding failed: {escape(outcome.error or 'unknown error')}")
        return 1

    result = outcome.result
    message = f"Bound [bold]{escape(result.owner_name)}[/bold] to slider {result.slider_index}"
    if result.moved_from:
        message += f" (moved from slider {', '.join(str(i) for i in result.moved_from)})"
    print_success(message)
    return 0


def cmd_bind(args: argparse.Namespace) -> int:
    """Bind the focused window's audio owner to a slider."""
    service = get_binding_service(args.config)
    return _report(service.bind_foreground_window(args.slider))


def cmd_add(args: argparse.Namespace) -> int:
    """Bind an explicit process/window name to a slider."""
    service = get_binding_service(args.config)
    return _report(service.add_binding(args.name, args.slider))
