"""Tests for add_binding_wf.py."""

from __future__ import annotations

import threading
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from mixdeck.helpers.exceptions import ConfigFormatError, ConfigIOError, ResolutionError
from mixdeck.workflows.bindings.add_binding_wf import add_binding_workflow
from mixdeck.workflows.bindings.bind_foreground_window_wf import bind_foreground_window_workflow


def _mapping(path: Path) -> dict:
    return yaml.safe_load(path.read_text(encoding="utf-8"))["slider_mapping"]


class TestAddBindingWorkflow:
    """Tests for add_binding_workflow()."""

    @pytest.mark.integration
    def test_twice_is_idempotent(self, config_document: Path):
        add_binding_workflow("foo.exe", 2, config_document)
        result = add_binding_workflow("foo.exe", 2, config_document)

        assert _mapping(config_document)[2] == ["foo.exe"]
        assert result.slot_names == ["foo.exe"]
        assert result.moved_from == []

    @pytest.mark.integration
    def test_moves_between_sliders(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("slider_mapping:\n  1:\n    - foo.exe\n", encoding="utf-8")

        result = add_binding_workflow("foo.exe", 2, path)

        mapping = _mapping(path)
        assert mapping.get(1, []) == []
        assert mapping[2] == ["foo.exe"]
        assert result.moved_from == [1]

    @pytest.mark.integration
    def test_bare_string_slot_treated_as_list(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("slider_mapping:\n  1: foo.exe\n", encoding="utf-8")

        add_binding_workflow("bar.exe", 1, path)

        assert _mapping(path)[1] == ["foo.exe", "bar.exe"]

    @pytest.mark.integration
    def test_bare_string_slot_is_moved(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("slider_mapping:\n  1: foo.exe\n  2: bar.exe\n", encoding="utf-8")

        add_binding_workflow("foo.exe", 2, path)

        mapping = _mapping(path)
        assert mapping[1] == []
        assert mapping[2] == ["bar.exe", "foo.exe"]

    @pytest.mark.integration
    def test_unrelated_names_keep_their_text(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("slider_mapping:\n  1:\n    - ' spaced.exe'\n", encoding="utf-8")

        add_binding_workflow("x", 2, path)

        assert _mapping(path)[1] == [" spaced.exe"]

    @pytest.mark.integration
    def test_symlinked_document(self, tmp_path: Path):
        target = tmp_path / "dotfiles" / "config.yaml"
        target.parent.mkdir()
        target.write_text("slider_mapping:\n  1: foo.exe\n", encoding="utf-8")
        link = tmp_path / "config.yaml"
        link.symlink_to(target)

        add_binding_workflow("bar.exe", 1, link)

        assert link.is_symlink()
        assert _mapping(target)[1] == ["foo.exe", "bar.exe"]

    @pytest.mark.integration
    def test_name_under_one_slider_only(self, config_document: Path):
        add_binding_workflow("firefox", 0, config_document)

        mapping = _mapping(config_document)
        holders = [index for index, names in mapping.items() if "firefox" in names]
        assert holders == [0]
        assert mapping[0] == ["master", "firefox"]
        assert mapping[1] == ["chrome.exe"]

    @pytest.mark.integration
    def test_creates_mapping_section(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("baud_rate: 9600\n", encoding="utf-8")

        add_binding_workflow("spotify", 3, path)

        document = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert document == {"baud_rate": 9600, "slider_mapping": {3: ["spotify"]}}

    @pytest.mark.integration
    def test_unrelated_keys_preserved(self, config_document: Path):
        before = yaml.safe_load(config_document.read_text(encoding="utf-8"))
        add_binding_workflow("obs", 5, config_document)
        after = yaml.safe_load(config_document.read_text(encoding="utf-8"))

        for key in ("invert_sliders", "com_port", "baud_rate", "noise_reduction"):
            assert after[key] == before[key]

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_rejects_empty_name(self, config_document: Path, name):
        original = config_document.read_text(encoding="utf-8")
        with pytest.raises(ValueError):
            add_binding_workflow(name, 1, config_document)
        assert config_document.read_text(encoding="utf-8") == original

    @pytest.mark.unit
    @pytest.mark.parametrize("index", [-1, True, "2"])
    def test_rejects_bad_index(self, config_document: Path, index):
        with pytest.raises(ValueError):
            add_binding_workflow("obs", index, config_document)

    @pytest.mark.integration
    def test_missing_document(self, tmp_path: Path):
        with pytest.raises(ConfigIOError):
            add_binding_workflow("obs", 1, tmp_path / "config.yaml")
        assert not (tmp_path / "config.yaml").exists()

    @pytest.mark.integration
    def test_unparseable_document_untouched(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("slider_mapping: [\n", encoding="utf-8")

        with pytest.raises(ConfigFormatError):
            add_binding_workflow("obs", 1, path)
        assert path.read_text(encoding="utf-8") == "slider_mapping: [\n"

    @pytest.mark.integration
    def test_write_failure_reported(self, config_document: Path):
        original = config_document.read_text(encoding="utf-8")
        with patch("os.replace", side_effect=OSError("disk full")):
            with pytest.raises(ConfigIOError, match="disk full"):
                add_binding_workflow("obs", 1, config_document)
        assert config_document.read_text(encoding="utf-8") == original

    @pytest.mark.integration
    def test_concurrent_adds_lose_nothing(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("slider_mapping: {}\n", encoding="utf-8")
        names = [f"app{i}" for i in range(20)]

        threads = [
            threading.Thread(target=add_binding_workflow, args=(name, i % 4, path)) for i, name in enumerate(names)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        mapping = _mapping(path)
        bound = sorted(name for slot in mapping.values() for name in slot)
        assert bound == sorted(names)


class TestBindForegroundWindowWorkflow:
    @pytest.mark.integration
    def test_resolves_then_binds(self, config_document: Path, desktop_runner):
        results = bind_foreground_window_workflow(2, config_document, runner=desktop_runner, platform="linux")

        assert [r.owner_name for r in results] == ["game.exe"]
        assert _mapping(config_document)[2] == ["game.exe"]

    @pytest.mark.integration
    def test_resolution_failure_leaves_document_untouched(self, config_document: Path, runner_factory):
        original = config_document.read_text(encoding="utf-8")
        runner = runner_factory({"hyprctl": "class: kitty\n"})

        with pytest.raises(ResolutionError, match="pid"):
            bind_foreground_window_workflow(2, config_document, runner=runner, platform="linux")
        assert config_document.read_text(encoding="utf-8") == original
