"""Show command: Display slider bindings from the document."""

from __future__ import annotations

import argparse

from rich.markup import escape

from mixdeck.helpers.exceptions import MixdeckError
from mixdeck.interfaces.cli.cli_ui import InfoPanel, TableDisplay, print_error, print_warning
from mixdeck.services.cli_bootstrap_svc import get_binding_service


def cmd_show(args: argparse.Namespace) -> int:
    """Display the slider_mapping section as a table."""
    service = get_binding_service(args.config)
    try:
        bindings = service.list_bindings()
    except MixdeckError as e:
        print_error(f"Cannot read bindings: {escape(str(e))}")
        return 1

    if not bindings:
        print_warning(f"No slider bindings in {service.document_path}")
        return 0

    InfoPanel.show("Binding Document", str(service.document_path))
    TableDisplay.show_bindings(bindings)
    return 0
