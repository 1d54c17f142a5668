"""Tests for window_strategy_comp.py."""

from __future__ import annotations

import pytest

from mixdeck.components.platform.window_strategy_comp import ClassStrategy, PidStrategy, get_strategy
from mixdeck.helpers.dto.window_dto import AudioStream, WindowInfo


def _stream(**properties: str) -> AudioStream:
    return AudioStream(index="1", properties=properties)


class TestPidStrategy:
    @pytest.mark.unit
    def test_identifies_by_pid(self):
        assert PidStrategy().identify(WindowInfo(fields={"pid": "99", "class": "kitty"})) == "99"

    @pytest.mark.unit
    def test_missing_pid(self):
        assert PidStrategy().identify(WindowInfo(fields={"class": "kitty"})) is None

    @pytest.mark.unit
    def test_empty_pid_is_missing(self):
        assert PidStrategy().identify(WindowInfo(fields={"pid": ""})) is None

    @pytest.mark.unit
    def test_matches_process_id(self):
        stream = _stream(**{"application.process.id": "99"})
        assert PidStrategy().matches(stream, "99") is True
        assert PidStrategy().matches(stream, "9") is False


class TestClassStrategy:
    @pytest.mark.unit
    def test_identifies_by_class(self):
        assert ClassStrategy().identify(WindowInfo(fields={"class": "Spotify"})) == "Spotify"

    @pytest.mark.unit
    def test_matches_binary_or_app_name_case_insensitive(self):
        by_binary = _stream(**{"application.process.binary": "spotify"})
        by_name = _stream(**{"application.name": "SPOTIFY"})
        other = _stream(**{"application.process.binary": "firefox"})

        assert ClassStrategy().matches(by_binary, "Spotify") is True
        assert ClassStrategy().matches(by_name, "Spotify") is True
        assert ClassStrategy().matches(other, "Spotify") is False


class TestGetStrategy:
    @pytest.mark.unit
    def test_lookup(self):
        assert isinstance(get_strategy("pid"), PidStrategy)
        assert isinstance(get_strategy("CLASS"), ClassStrategy)

    @pytest.mark.unit
    def test_default_and_unknown_fall_back_to_pid(self):
        assert isinstance(get_strategy(None), PidStrategy)
        assert isinstance(get_strategy("wmctrl"), PidStrategy)
