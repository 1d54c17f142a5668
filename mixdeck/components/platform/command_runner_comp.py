"""
External command runner component.

Platform-level component that runs external tools (hyprctl, pactl, editors)
either to completion with combined output, or detached.

Architecture:
- Leaf component (no upward imports)
- run_command returns CommandResult and lets subprocess exceptions through;
  query_output turns every failure into ResolutionError
- Every blocking call has a hard timeout so a wedged tool cannot hang the caller
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from collections.abc import Callable, Sequence

from mixdeck.helpers.dto.platform_dto import CommandResult
from mixdeck.helpers.exceptions import ResolutionError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_TIMEOUT_S = 2.0

# (argv, timeout) -> CommandResult
CommandRunner = Callable[[Sequence[str], float], CommandResult]


def run_command(argv: Sequence[str], timeout: float = DEFAULT_COMMAND_TIMEOUT_S) -> CommandResult:
    """
    Run a command and capture stdout and stderr interleaved.

    Args:
        argv: Program and arguments
        timeout: Maximum seconds to wait

    Returns:
        CommandResult with exit status and combined output

    Raises:
        FileNotFoundError: The program is not installed
        subprocess.TimeoutExpired: The program did not finish in time
    """
    argv = list(argv)
    result = subprocess.run(
        argv,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        timeout=timeout,
        check=False,
    )
    logger.debug(f"[command_runner] {argv[0]} exited with {result.returncode}")
    return CommandResult(argv=argv, returncode=result.returncode, output=result.stdout or "")


def query_output(
    argv: Sequence[str],
    timeout: float = DEFAULT_COMMAND_TIMEOUT_S,
    runner: CommandRunner = run_command,
) -> str:
    """
    Run a read-only query command and return its output.

    Every way the query can fail (missing binary, timeout, non-zero exit) is
    reported as ResolutionError.
    """
    program = argv[0]
    try:
        result = runner(argv, timeout)
    except FileNotFoundError as e:
        raise ResolutionError(f"{program} not found") from e
    except subprocess.TimeoutExpired as e:
        raise ResolutionError(f"{program} timed out after {timeout}s") from e
    except OSError as e:
        raise ResolutionError(f"{program} could not be started: {e}") from e

    if not result.ok:
        summary = result.output.strip()[:100] or f"exit code {result.returncode}"
        raise ResolutionError(f"{program} failed: {summary}")
    return result.output


def open_external(command: str, argument: str) -> bool:
    """
    Spawn ``command argument`` detached from this process.

    ``command`` may carry its own arguments (``code --wait``); it is split
    with shell quoting rules. On Windows the command goes through
    ``cmd.exe /C start /b``; elsewhere it is started in a new session so it
    outlives the caller.

    Returns:
        True if the process was spawned, False otherwise (logged)
    """
    try:
        if sys.platform == "win32":
            subprocess.Popen(["cmd.exe", "/C", "start", "/b", command, argument])
        else:
            program = shlex.split(command)
            if not program:
                logger.warning(f"[command_runner] Empty command, not opening {argument}")
                return False
            subprocess.Popen(
                [*program, argument],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
    except (OSError, ValueError) as e:
        logger.warning(
            f"[command_runner] Failed to spawn detached process: command={command} argument={argument} error={e}"
        )
        return False

    logger.debug(f"[command_runner] Spawned detached {command} {argument}")
    return True
