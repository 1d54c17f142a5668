"""
Bindings package.
"""

from .add_binding_wf import add_binding_workflow
from .bind_foreground_window_wf import bind_foreground_window_workflow
from .resolve_foreground_wf import (
    get_foreground_owner_process_names_workflow,
    resolve_foreground_window_workflow,
)

__all__ = [
    "add_binding_workflow",
    "bind_foreground_window_workflow",
    "get_foreground_owner_process_names_workflow",
    "resolve_foreground_window_workflow",
]
