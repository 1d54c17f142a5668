"""
CLI command handlers.
"""

from .bind_cli import cmd_add, cmd_bind
from .edit_cli import cmd_edit
from .resolve_cli import cmd_resolve
from .show_cli import cmd_show

__all__ = [
    "cmd_add",
    "cmd_bind",
    "cmd_edit",
    "cmd_resolve",
    "cmd_show",
]
