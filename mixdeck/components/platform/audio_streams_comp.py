"""
Audio subsystem query component (PulseAudio / PipeWire-pulse).

``pactl list sink-inputs`` prints one block per output stream, separated by
blank lines. The properties we care about look like:

    Sink Input #42
    	Driver: PipeWire
    	Properties:
    		application.name = "Firefox"
    		application.process.id = "1234"
    		application.process.binary = "firefox"

Architecture:
- Leaf component: runs the query through an injectable runner, parses text
- Only ``key = value`` lines become properties; ``Key: value`` lines are ignored
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from mixdeck.components.platform.command_runner_comp import (
    DEFAULT_COMMAND_TIMEOUT_S,
    CommandRunner,
    query_output,
    run_command,
)
from mixdeck.helpers.dto.window_dto import AudioStream

logger = logging.getLogger(__name__)

SINK_INPUTS_COMMAND: tuple[str, ...] = ("pactl", "list", "sink-inputs")

_BLOCK_SEPARATOR = re.compile(r"\n\s*\n")
_HEADER = re.compile(r"#\s*(\d+)")
_PROPERTY_KEY = re.compile(r"^[\w.\-]+$")


def _strip_value(value: str) -> str:
    return value.strip().strip('"').strip()


def parse_audio_streams(text: str) -> list[AudioStream]:
    """Split ``pactl`` output into blank-line separated blocks and parse each one."""
    streams: list[AudioStream] = []
    for block in _BLOCK_SEPARATOR.split(text.strip()):
        lines = [line for line in block.splitlines() if line.strip()]
        if not lines:
            continue
        header_match = _HEADER.search(lines[0])
        stream = AudioStream(index=header_match.group(1) if header_match else "")
        for line in lines:
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            if _PROPERTY_KEY.match(key):
                stream.properties[key] = _strip_value(value)
        streams.append(stream)
    return streams


def list_audio_streams(
    timeout: float = DEFAULT_COMMAND_TIMEOUT_S,
    runner: CommandRunner = run_command,
    command: Sequence[str] = SINK_INPUTS_COMMAND,
) -> list[AudioStream]:
    """
    Query the audio subsystem for all active output streams.

    Raises:
        ResolutionError: Query failed
    """
    streams = parse_audio_streams(query_output(command, timeout, runner))
    logger.debug(f"[audio_streams] {len(streams)} active output stream(s)")
    return streams
