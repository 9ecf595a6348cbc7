import json
import sqlite3

from click.testing import CliRunner

from photoedit.cli.main import main
from photoedit.cli.util import FLAG_FILE, get_pid_file, is_running


class TestInit:

    def test_creates_instance(self, tmp_path):
        instance = tmp_path / "instance"

        result = CliRunner().invoke(main, ["init", str(instance)])

        assert result.exit_code == 0, result.output
        for name in ("data", "logs"):
            assert (instance / name).is_dir()
        assert not (instance / "files").exists()
        assert (instance / "config.toml").read_text().startswith("# Photo editor instance configuration")
        flag = json.loads((instance / FLAG_FILE).read_text())
        assert flag["instance_path"] == str(instance.resolve())

        with sqlite3.connect(instance / "data" / "photoedit.db") as conn:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        assert {"images", "ai_operations", "projects"} <= tables

    def test_refuses_to_reinitialize(self, tmp_path):
        instance = tmp_path / "instance"
        runner = CliRunner()
        runner.invoke(main, ["init", str(instance)])

        result = runner.invoke(main, ["init", str(instance)])

        assert result.exit_code != 0
        assert "Already initialized" in result.output

    def test_refuses_non_empty_directory(self, tmp_path):
        (tmp_path / "notes.txt").write_text("keep me")

        result = CliRunner().invoke(main, ["init", str(tmp_path)])

        assert result.exit_code != 0
        assert not (tmp_path / FLAG_FILE).exists()


class TestStop:

    def test_not_initialized(self, tmp_path):
        result = CliRunner().invoke(main, ["stop", str(tmp_path)])

        assert result.exit_code != 0
        assert "Not initialized" in result.output

    def test_not_running(self, tmp_path):
        instance = tmp_path / "instance"
        runner = CliRunner()
        runner.invoke(main, ["init", str(instance)])

        result = runner.invoke(main, ["stop", str(instance)])

        assert result.exit_code == 0
        assert "not running" in result.output

    def test_stale_pid_file_is_removed(self, tmp_path):
        get_pid_file(tmp_path).write_text("999999999")

        assert is_running(tmp_path) is False
        assert not get_pid_file(tmp_path).exists()
