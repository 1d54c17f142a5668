"""
Platform components: external commands, compositor and audio subsystem queries.
"""

from .audio_streams_comp import list_audio_streams, parse_audio_streams
from .command_runner_comp import CommandRunner, open_external, query_output, run_command
from .compositor_comp import get_active_window, parse_window_info
from .window_strategy_comp import ClassStrategy, PidStrategy, WindowIdentificationStrategy, get_strategy

__all__ = [
    "ClassStrategy",
    "CommandRunner",
    "PidStrategy",
    "WindowIdentificationStrategy",
    "get_active_window",
    "get_strategy",
    "list_audio_streams",
    "open_external",
    "parse_audio_streams",
    "parse_window_info",
    "query_output",
    "run_command",
]
