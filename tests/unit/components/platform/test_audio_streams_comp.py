"""Tests for audio_streams_comp.py."""

from __future__ import annotations

import pytest

from mixdeck.components.platform.audio_streams_comp import list_audio_streams, parse_audio_streams
from mixdeck.helpers.exceptions import ResolutionError


class TestParseAudioStreams:
    """Tests for parse_audio_streams()."""

    @pytest.mark.unit
    def test_splits_blocks(self, pactl_output):
        streams = parse_audio_streams(pactl_output)

        assert [s.index for s in streams] == ["41", "42"]

    @pytest.mark.unit
    def test_extracts_properties_without_quotes(self, pactl_output):
        game = parse_audio_streams(pactl_output)[1]

        assert game.process_id == "1234"
        assert game.process_binary == "game.exe"
        assert game.application_name == "Game"

    @pytest.mark.unit
    def test_ignores_colon_fields(self, pactl_output):
        firefox = parse_audio_streams(pactl_output)[0]

        assert "Driver" not in firefox.properties
        assert all(" " not in key for key in firefox.properties)

    @pytest.mark.unit
    def test_strips_whitespace_inside_quotes(self):
        text = 'Sink Input #3\n\tProperties:\n\t\tapplication.process.binary = "  spotify  "\n'
        assert parse_audio_streams(text)[0].process_binary == "spotify"

    @pytest.mark.unit
    def test_empty_output(self):
        assert parse_audio_streams("") == []

    @pytest.mark.unit
    def test_blank_lines_with_whitespace_separate_blocks(self):
        text = 'Sink Input #1\n\tapplication.process.id = "1"\n   \nSink Input #2\n\tapplication.process.id = "2"\n'
        assert [s.process_id for s in parse_audio_streams(text)] == ["1", "2"]


class TestListAudioStreams:
    """Tests for list_audio_streams()."""

    @pytest.mark.unit
    def test_runs_pactl(self, desktop_runner):
        streams = list_audio_streams(runner=desktop_runner)

        assert len(streams) == 2
        assert desktop_runner.calls == [["pactl", "list", "sink-inputs"]]

    @pytest.mark.unit
    def test_missing_pactl(self, runner_factory):
        with pytest.raises(ResolutionError, match="pactl not found"):
            list_audio_streams(runner=runner_factory({}))
