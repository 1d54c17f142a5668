"""
Pytest fixtures and configuration for the test suite.

Fake command runners stand in for hyprctl/pactl so nothing here needs a
compositor or an audio server. Binding documents live in tmp_path.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

# Add project root to path so tests can import the mixdeck package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from mixdeck.helpers.dto.platform_dto import CommandResult  # noqa: E402
from mixdeck.helpers.logging_helper import clear_log_context  # noqa: E402

HYPRCTL_ACTIVEWINDOW = """Window 55d5a8ec3c10 -> Steam - News: Patch 1.2:
\tmapped: 1
\thidden: 0
\tat: 2,2
\tsize: 1916,1076
\tworkspace: 1 (1)
\tfloating: 0
\tclass: steam_app_1234
\ttitle: Steam - News: Patch 1.2
\tinitialClass: steam_app_1234
\tinitialTitle: Game
\tpid: 1234
\txwayland: 1
\tpinned: 0
\tfullscreen: 0
"""

PACTL_SINK_INPUTS = """Sink Input #41
\tDriver: PipeWire
\tOwner Module: n/a
\tClient: 77
\tSink: 55
\tSample Specification: float32le 2ch 48000Hz
\tVolume: front-left: 65536 / 100% / 0.00 dB,   front-right: 65536 / 100% / 0.00 dB
\tMute: no
\tProperties:
\t\tapplication.name = "Firefox"
\t\tapplication.process.id = "4321"
\t\tapplication.process.binary = "firefox"
\t\tmedia.name = "AudioStream"

Sink Input #42
\tDriver: PipeWire
\tClient: 78
\tMute: no
\tProperties:
\t\tapplication.name = "Game"
\t\tapplication.process.id = "1234"
\t\tapplication.process.binary = "game.exe"
\t\tmedia.name = "audio stream"
"""

SAMPLE_DOCUMENT = """slider_mapping:
  0: master
  1:
    - chrome.exe
    - firefox
  2: []
  4:
    - discord
    - 1234
    - true
invert_sliders: false
com_port: /dev/ttyUSB0
baud_rate: 9600
noise_reduction: default
"""


FakeRunner = Callable[[Sequence[str], float], CommandResult]


def make_runner(outputs: dict[str, str | BaseException | CommandResult]) -> FakeRunner:
    """
    Build a runner that answers by program name.

    Values may be output text (exit 0), a CommandResult, or an exception to raise.
    """
    calls: list[list[str]] = []

    def runner(argv: Sequence[str], timeout: float) -> CommandResult:
        argv = list(argv)
        calls.append(argv)
        answer = outputs.get(argv[0])
        if answer is None:
            raise FileNotFoundError(argv[0])
        if isinstance(answer, BaseException):
            raise answer
        if isinstance(answer, CommandResult):
            return answer
        return CommandResult(argv=argv, returncode=0, output=answer)

    runner.calls = calls  # type: ignore[attr-defined]
    return runner


@pytest.fixture
def desktop_runner() -> FakeRunner:
    """Runner answering hyprctl and pactl with the sample outputs."""
    return make_runner({"hyprctl": HYPRCTL_ACTIVEWINDOW, "pactl": PACTL_SINK_INPUTS})


@pytest.fixture
def timeout_error() -> subprocess.TimeoutExpired:
    return subprocess.TimeoutExpired("hyprctl", 2.0)


@pytest.fixture
def config_document(tmp_path: Path) -> Path:
    """A binding document with mixed slot shapes and unrelated keys."""
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_log_context():
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def runner_factory() -> Callable[[dict[str, str | BaseException | CommandResult]], FakeRunner]:
    return make_runner


@pytest.fixture
def hyprctl_output() -> str:
    return HYPRCTL_ACTIVEWINDOW


@pytest.fixture
def pactl_output() -> str:
    return PACTL_SINK_INPUTS
