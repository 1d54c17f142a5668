"""
Platform DTOs for external command execution.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CommandResult:
    """Combined stdout/stderr and exit status of a finished external command."""

    argv: list[str]
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0
