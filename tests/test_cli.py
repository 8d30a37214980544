"""Tests for the lumina command-line entry point."""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import pytest

from lumina.cli import main
from lumina.logging_setup import setup_logging


@pytest.fixture()
def run(tmp_path):
    data_dir = tmp_path / "data"
    settings = tmp_path / "missing.toml"

    def _run(*args: str) -> None:
        main(["--config", str(settings), "--data-dir", str(data_dir), *args])

    return _run


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr("lumina.cli.setup_logging", lambda level: None)


class TestCli:
    def test_scan(self, run, tmp_path, capsys):
        (tmp_path / "b.mp3").touch()
        (tmp_path / "a.wav").touch()
        (tmp_path / "c.txt").touch()
        run("scan", str(tmp_path))
        out = capsys.readouterr().out.splitlines()
        assert out == [str(tmp_path / "a.wav"), str(tmp_path / "b.mp3")]

    def test_scan_missing_folder_exits_with_error(self, run, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            run("scan", str(tmp_path / "missing"))
        assert excinfo.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_info(self, run, capsys):
        run("info", "/nonexistent/Daft Punk - One More Time.mp3")
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "title": "One More Time",
            "artist": "Daft Punk",
            "name": "Daft Punk - One More Time.mp3",
        }

    def test_read(self, run, tmp_path, capsys):
        f = tmp_path / "song.ogg"
        f.write_bytes(b"abc")
        run("read", str(f))
        out = capsys.readouterr().out
        assert "audio/ogg" in out
        assert "song.ogg" in out

    def test_read_missing(self, run, capsys):
        with pytest.raises(SystemExit):
            run("read", "/nonexistent")

    def test_exists(self, run, tmp_path, capsys):
        run("exists", str(tmp_path))
        assert capsys.readouterr().out.strip() == "yes"

    def test_api_key_round_trip(self, run, capsys):
        with pytest.raises(SystemExit):
            run("api-key")
        run("api-key", "--set", "secret")
        capsys.readouterr()
        run("api-key")
        assert capsys.readouterr().out.strip() == "secret"

    def test_playlist_round_trip(self, run, capsys):
        run("playlist", "--save", "/m/Artist - Song.mp3")
        run("playlist")
        items = json.loads(capsys.readouterr().out)
        assert items == [
            {
                "path": "/m/Artist - Song.mp3",
                "name": "Artist - Song.mp3",
                "metadata": {"title": "Song", "artist": "Artist"},
            }
        ]

    def test_index_round_trip(self, run, capsys):
        run("index")
        assert capsys.readouterr().out.strip() == "-1"
        run("index", "--set", "4")
        run("index")
        assert capsys.readouterr().out.strip() == "4"

    def test_index_out_of_range_exits_with_error(self, run, capsys):
        with pytest.raises(SystemExit) as excinfo:
            run("index", "--set", "4294967296")
        assert excinfo.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")
        run("index")
        assert capsys.readouterr().out.strip() == "-1"

    def test_settings_file_supplies_data_dir(self, tmp_path, capsys):
        data_dir = tmp_path / "from-settings"
        settings = tmp_path / "settings.toml"
        settings.write_text(f'data-dir = "{data_dir.as_posix()}"\n')
        main(["--config", str(settings), "index", "--set", "2"])
        assert (data_dir / "config.json").is_file()


class TestSetupLogging:
    def test_accepts_level_name(self):
        with patch("lumina.logging_setup.logging.basicConfig") as basic_config:
            setup_logging("debug")
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
        assert basic_config.call_args.kwargs["force"] is True

    def test_accepts_numeric_level(self):
        with patch("lumina.logging_setup.logging.basicConfig") as basic_config:
            setup_logging(logging.INFO)
        assert basic_config.call_args.kwargs["level"] == logging.INFO

    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("loud")
