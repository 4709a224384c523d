"""
Tests for the wikiwalker command line interface.
"""

import json

import msgpack
import pytest

from wikiwalker.cli import main


@pytest.fixture
def data_files(tmp_path, sample_site_map, sample_trajectories):
    """Write the sample site map and trajectories, return their paths as CLI args."""
    site_map = tmp_path / "site_map.msgpack"
    site_map.write_bytes(msgpack.packb(sample_site_map))
    trajectories = tmp_path / "trajectories.json"
    trajectories.write_text(json.dumps(sample_trajectories), encoding="utf-8")
    return ["--site-map", str(site_map), "--trajectories", str(trajectories)]


class TestCommands:
    """Test each subcommand end to end."""

    def test_has_path_yes(self, data_files, capsys):
        assert main([*data_files, "has-path", "Cat", "Animal"]) == 0
        assert capsys.readouterr().out.strip() == "yes"

    def test_has_path_no(self, data_files, capsys):
        assert main([*data_files, "has-path", "Mammal", "Cat"]) == 1
        assert capsys.readouterr().out.strip() == "no"

    def test_clicks(self, data_files, capsys):
        assert main([*data_files, "clicks", "Cat", "Dog"]) == 0
        assert capsys.readouterr().out.strip() == "2"

    def test_clicks_no_link(self, data_files, capsys):
        assert main([*data_files, "clicks", "Mammal", "Cat"]) == 0
        assert capsys.readouterr().out.strip() == "-1"

    def test_predict(self, data_files, capsys):
        assert main([*data_files, "predict", "Cat", "-k", "2"]) == 0
        assert capsys.readouterr().out.split("\n")[:2] == ["Dog", "Mammal"]

    def test_stats(self, data_files, capsys):
        assert main([*data_files, "stats"]) == 0
        out = capsys.readouterr().out
        assert "total_articles: 3" in out
        assert "total_clicks: 6" in out


class TestErrors:
    """Test error reporting and exit codes."""

    def test_unknown_article(self, data_files, capsys):
        assert main([*data_files, "clicks", "Animal", "Cat"]) == 2
        assert "Unknown article: 'Animal'" in capsys.readouterr().err

    def test_missing_site_map(self, tmp_path, capsys):
        missing = tmp_path / "missing.msgpack"
        assert main(["--site-map", str(missing), "stats"]) == 2
        assert capsys.readouterr().err.startswith("Error:")

    def test_negative_k(self, data_files, capsys):
        assert main([*data_files, "predict", "Cat", "-k", "-1"]) == 2

    def test_missing_command(self, data_files):
        with pytest.raises(SystemExit):
            main(data_files)

    def test_invalid_log_level(self, data_files, capsys, monkeypatch):
        """A bad LOG_LEVEL is reported like any other error."""
        monkeypatch.setattr("wikiwalker.cli.LOG_LEVEL", "LOUD")
        assert main([*data_files, "stats"]) == 2
        assert "Unknown log level: 'LOUD'" in capsys.readouterr().err
