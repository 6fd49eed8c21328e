# ==============================================
# Tests for the CLI
# ==============================================

import pytest

from seedloader.cli import build_parser, main


@pytest.fixture(autouse=True)
def no_env_overrides(monkeypatch):
    for name in ("SOURCE_DATA_DIR", "SEPARATOR_CHAR", "SCHEMA_DIR", "DRY_RUN"):
        monkeypatch.delenv(name, raising=False)


class TestParser:

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_load_options(self):
        args = build_parser().parse_args(["load", "--source-dir", "in", "--separator", ",", "--dry-run"])
        assert (args.command, args.source_dir, args.separator, args.dry_run) == ("load", "in", ",", True)


class TestInfer:

    def test_prints_types_and_ddl(self, write_source, capsys):
        path = write_source("people.txt", "id|name\n1|Alice\n2|Bob\n")

        assert main(["infer", str(path)]) == 0

        out = capsys.readouterr().out
        assert "people.txt: 2 rows" in out
        assert "id: TINYINT" in out
        assert "name: VARCHAR(10)" in out
        assert "CREATE TABLE `people`" in out

    def test_unreadable_file(self, source_dir, capsys):
        assert main(["infer", str(source_dir / "missing.txt")]) == 1
        assert "✗" in capsys.readouterr().out


class TestLoad:

    def test_dry_run(self, write_source, source_dir, capsys):
        write_source("people.txt", "id\n1\n")

        assert main(["load", "--source-dir", str(source_dir), "--dry-run"]) == 0

        out = capsys.readouterr().out
        assert "CREATE TABLE `people`" in out
        assert "Files loaded: 1/1" in out

    def test_dry_run_with_failed_file(self, write_source, source_dir):
        write_source("people.txt", "id\n1\n")
        write_source("empty.txt", "")

        assert main(["load", "--source-dir", str(source_dir), "--dry-run"]) == 1

    def test_schema_dir_option(self, write_source, source_dir, tmp_path):
        write_source("people.txt", "id\n1\n")
        reports = tmp_path / "reports"

        main(["load", "--source-dir", str(source_dir), "--schema-dir", str(reports), "--dry-run"])

        assert (reports / "people.json").exists()

    @pytest.mark.parametrize("separator", ["||", ""])
    def test_invalid_separator(self, write_source, source_dir, separator, capsys):
        write_source("people.txt", "id\n1\n")

        assert main(["load", "--source-dir", str(source_dir), "--separator", separator, "--dry-run"]) == 1
        assert "✗ Invalid configuration" in capsys.readouterr().out

    def test_invalid_separator_from_environment(self, monkeypatch, write_source, capsys):
        path = write_source("people.txt", "id\n1\n")
        monkeypatch.setenv("SEPARATOR_CHAR", "||")

        assert main(["infer", str(path)]) == 1
        assert "SEPARATOR_CHAR" in capsys.readouterr().out

    def test_missing_source_dir(self, tmp_path, capsys):
        assert main(["load", "--source-dir", str(tmp_path / "nope"), "--dry-run"]) == 1
        assert "Source directory not found" in capsys.readouterr().out
