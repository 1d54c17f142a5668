#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from mixdeck.__version__ import __version__
from mixdeck.helpers.logging_helper import configure_logging
from mixdeck.interfaces.cli.commands.bind_cli import cmd_add, cmd_bind
from mixdeck.interfaces.cli.commands.edit_cli import cmd_edit
from mixdeck.interfaces.cli.commands.resolve_cli import cmd_resolve
from mixdeck.interfaces.cli.commands.show_cli import cmd_show


def _slider_index(value: str) -> int:
    try:
        index = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"slider index must be an integer, got {value!r}") from None
    if index < 0:
        raise argparse.ArgumentTypeError(f"slider index must be non-negative, got {index}")
    return index


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="mixdeck",
        description="mixdeck - bind running applications to hardware volume sliders",
        epilog="Examples:\n"
        "  mixdeck resolve                            # Show the focused window's audio owner\n"
        "  mixdeck bind 2                             # Bind the focused window to slider 2\n"
        "  mixdeck add firefox 1                      # Bind firefox to slider 1\n"
        "  mixdeck show                               # List slider bindings\n"
        "  mixdeck edit                               # Open config.yaml in an editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--config", metavar="PATH", help="binding document (default: $MIXDECK_CONFIG_PATH or ./config.yaml)")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'mixdeck <command> --help' for command-specific help)",
    )

    # resolve: Print focused window owner
    s = sub.add_parser("resolve", help="Print the process that owns the focused window's audio")
    s.set_defaults(func=cmd_resolve)

    # bind: Focused window -> slider
    s = sub.add_parser("bind", help="Bind the focused window's audio owner to a slider")
    s.add_argument("slider", type=_slider_index, help="slider index (0-based)")
    s.set_defaults(func=cmd_bind)

    # add: Explicit name -> slider
    s = sub.add_parser("add", help="Bind a process/window name to a slider")
    s.add_argument("name", help="process binary or window name, e.g. firefox")
    s.add_argument("slider", type=_slider_index, help="slider index (0-based)")
    s.set_defaults(func=cmd_add)

    # show: List bindings
    s = sub.add_parser("show", help="List slider bindings")
    s.set_defaults(func=cmd_show)

    # edit: Open document detached
    s = sub.add_parser("edit", help="Open the binding document in an editor")
    s.add_argument("--editor", help="editor command (default: config 'editor', $EDITOR, xdg-open)")
    s.set_defaults(func=cmd_edit)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
