"""
Workflows package.
"""

from .bindings.add_binding_wf import add_binding_workflow
from .bindings.bind_foreground_window_wf import bind_foreground_window_workflow
from .bindings.resolve_foreground_wf import get_foreground_owner_process_names_workflow

__all__ = [
    "add_binding_workflow",
    "bind_foreground_window_workflow",
    "get_foreground_owner_process_names_workflow",
]
