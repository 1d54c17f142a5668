"""Edit command: Open the binding document in an editor."""

from __future__ import annotations

import argparse

from mixdeck.interfaces.cli.cli_ui import print_error, print_success
from mixdeck.services.cli_bootstrap_svc import get_binding_service


def cmd_edit(args: argparse.Namespace) -> int:
    """Open the document detached so the shell returns immediately."""
    service = get_binding_service(args.config)
    if not service.open_document(args.editor):
        print_error(f"Could not open {service.document_path}")
        return 1
    print_success(f"Opened {service.document_path}")
    return 0
