"""Tests for the panesnap command line."""

import json
from unittest.mock import patch

import pytest

from cli.__main__ import format_tree, main
from panesnap import PanesnapConfig, capture_layout, infer_layout
from panesnap.providers import MemorySurface


@pytest.fixture
def config(tmp_path):
    config = PanesnapConfig()
    config.store.directory = str(tmp_path / "snapshots")
    return config


@pytest.fixture
def run_cli(config):
    """Run the CLI against a given surface and return (exit code, stdout)."""

    def _run(argv, surface, capsys):
        with patch("cli.__main__.load_config", return_value=config), \
                patch("cli.__main__.TmuxSurface", return_value=surface):
            code = main(argv)
        return code, capsys.readouterr()

    return _run


class TestCli:
    """Tests for CLI commands."""

    def test_save_and_restore(self, run_cli, build_surface, nested_tree, capsys):
        source = build_surface(nested_tree)
        target = MemorySurface(rows=48, cols=160)

        code, out = run_cli(["save", "work"], source, capsys)
        assert code == 0
        assert "Saved 6 panes as 'work'" in out.out

        code, out = run_cli(["restore", "work"], target, capsys)
        assert code == 0
        assert "6 panes at 160x48" in out.out
        assert target.pane_count() == 6

    def test_restore_missing_snapshot(self, run_cli, capsys):
        code, out = run_cli(["restore", "nothing"], MemorySurface(), capsys)

        assert code == 1
        assert "Error" in out.err

    def test_show_live_layout_as_json(self, run_cli, build_surface, top_and_split_bottom, capsys):
        surface = build_surface(infer_layout(top_and_split_bottom))

        code, out = run_cli(["show", "--json"], surface, capsys)

        assert code == 0
        assert json.loads(out.out) == capture_layout(surface).to_dict()

    def test_list(self, run_cli, build_surface, side_by_side, capsys):
        surface = build_surface(infer_layout(side_by_side))
        run_cli(["save", "b"], surface, capsys)
        run_cli(["save", "a"], surface, capsys)

        code, out = run_cli(["list", "--json"], surface, capsys)

        assert code == 0
        assert json.loads(out.out)["snapshots"] == ["a", "b"]

    def test_delete(self, run_cli, build_surface, side_by_side, capsys):
        surface = build_surface(infer_layout(side_by_side))
        run_cli(["save", "x"], surface, capsys)

        assert run_cli(["delete", "x"], surface, capsys)[0] == 0
        assert run_cli(["delete", "x"], surface, capsys)[0] == 1

    def test_not_in_tmux(self, run_cli, capsys):
        surface = MemorySurface()

        with patch.object(surface, "is_available", return_value=False):
            code, out = run_cli(["save"], surface, capsys)

        assert code == 1
        assert "Not in a tmux session" in out.err

    def test_config_set_first_axis(self, run_cli, tmp_path, capsys):
        path = tmp_path / "config.json"

        with patch("cli.__main__.get_config_path", return_value=path):
            code, out = run_cli(
                ["config", "set", "--key", "capture.first_axis", "--value", "Vertical"], MemorySurface(), capsys)

        assert code == 0
        assert json.loads(path.read_text())["capture"]["first_axis"] == "vertical"

    def test_config_set_rejects_unknown_axis(self, run_cli, tmp_path, capsys):
        path = tmp_path / "config.json"

        with patch("cli.__main__.get_config_path", return_value=path):
            code, out = run_cli(
                ["config", "set", "--key", "capture.first_axis", "--value", "diagonal"], MemorySurface(), capsys)

        assert code == 1
        assert "Invalid value for capture.first_axis: diagonal" in out.out
        assert not path.exists()

    def test_no_command_prints_help(self, run_cli, capsys):
        code, out = run_cli([], MemorySurface(), capsys)

        assert code == 0
        assert "usage: panesnap" in out.out


def test_format_tree(top_and_split_bottom):
    top_and_split_bottom[2].is_current = True
    lines = format_tree(infer_layout(top_and_split_bottom))

    assert lines[0] == "horizontal split (2)"
    assert lines[1].startswith("  top 80x10 at 1,1")
    assert lines[2] == "  vertical split (2)"
    assert lines[4].startswith("    bottom-right* 39x13 at 42,12")
