"""Resolve command: Show which process owns the focused window's audio."""

from __future__ import annotations

import argparse

from rich.markup import escape

from mixdeck.helpers.exceptions import ResolutionError
from mixdeck.interfaces.cli.cli_ui import console, print_error
from mixdeck.services.cli_bootstrap_svc import get_binding_service


def cmd_resolve(args: argparse.Namespace) -> int:
    """Print the owner process name(s) of the focused window, one per line."""
    service = get_binding_service(args.config)
    try:
        owners = service.resolve_foreground()
    except ResolutionError as e:
        print_error(f"Could not resolve focused window: {escape(str(e))}")
        return 1

    for owner in owners:
        console.print(owner, markup=False, highlight=False)
    return 0
