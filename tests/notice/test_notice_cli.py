"""Tests for the NOTICE checker command-line interface."""

import io

import pytest

from notice.notice_cli import main
from notice.notice_config import NoticeCheckConfig


@pytest.fixture
def workspace(tmp_path, monkeypatch, restore_logging):
    """Run the CLI from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCheckCommand:
    """Test the check command."""

    def test_up_to_date(self, workspace, capsys):
        """Test a NOTICE file that matches the generated contents."""
        (workspace / "NOTICE").write_text("Same\n", encoding="utf-8")
        (workspace / "generated.txt").write_text("Same\n", encoding="utf-8")

        assert main(['check', '--generated', 'generated.txt']) == 0

        assert "NOTICE file is up to date" in capsys.readouterr().out
        assert not (workspace / "build").exists()

    def test_mismatch(self, workspace, capsys):
        """Test a NOTICE file that differs from the generated contents."""
        (workspace / "NOTICE").write_text("Line A\nLine C\n", encoding="utf-8")
        (workspace / "generated.txt").write_text("Line A\nLine B\n", encoding="utf-8")

        assert main(['check', '--generated', 'generated.txt']) == 1

        err = capsys.readouterr().err
        assert "NOTICE check failed" in err
        assert "1c1\n< Line B\n> Line C\n" in err
        assert (workspace / "build" / "NOTICE.expected").read_text(encoding="utf-8") == "Line A\nLine B\n"

    def test_missing_notice(self, workspace, capsys):
        """Test a missing NOTICE file."""
        (workspace / "generated.txt").write_text("x\n", encoding="utf-8")

        assert main(['check', '--generated', 'generated.txt']) == 1
        assert "No NOTICE file exists at: NOTICE" in capsys.readouterr().err

    def test_generated_from_stdin(self, workspace, monkeypatch):
        """Test reading the generated contents from stdin."""
        (workspace / "NOTICE").write_text("Same\n", encoding="utf-8")
        monkeypatch.setattr('sys.stdin', io.TextIOWrapper(io.BytesIO(b"Same\n"), encoding="utf-8"))

        assert main(['check', '--generated', '-']) == 0

    def test_stdin_uses_configured_encoding(self, workspace, monkeypatch):
        """Test that stdin is decoded with the configured encoding, not the locale's."""
        (workspace / "NOTICE").write_bytes("Café Licence\r\n".encode("ISO-8859-1"))
        stdin = io.TextIOWrapper(io.BytesIO("Café Licence\r\n".encode("ISO-8859-1")), encoding="utf-8")
        monkeypatch.setattr('sys.stdin', stdin)

        assert main(['check', '--generated', '-', '--encoding', 'ISO-8859-1']) == 0
        assert not (workspace / "build").exists()

    def test_missing_generated_file(self, workspace, capsys):
        """Test that an unreadable generated file is reported."""
        (workspace / "NOTICE").write_text("x\n", encoding="utf-8")

        assert main(['check', '--generated', 'missing.txt']) == 1
        assert "Failed to read generated NOTICE contents" in capsys.readouterr().err

    def test_overrides(self, workspace):
        """Test command-line overrides of the configuration."""
        (workspace / "legal").mkdir()
        (workspace / "legal" / "NOTICE.txt").write_text("old\n", encoding="utf-8")
        (workspace / "generated.txt").write_text("new\n", encoding="utf-8")

        result = main([
            'check', '--generated', 'generated.txt',
            '--notice-file', 'legal/NOTICE.txt', '--build-dir', 'target'
        ])

        assert result == 1
        assert (workspace / "target" / "NOTICE.expected").exists()

    def test_default_config_file(self, workspace):
        """Test that notice-check.yaml in the working directory is used."""
        NoticeCheckConfig(notice_file="NOTICE.md").save_to_file("notice-check.yaml")
        (workspace / "NOTICE.md").write_text("Same\n", encoding="utf-8")
        (workspace / "generated.txt").write_text("Same\n", encoding="utf-8")

        assert main(['check', '--generated', 'generated.txt']) == 0

    def test_invalid_config(self, workspace, capsys):
        """Test that configuration errors stop the check."""
        (workspace / "generated.txt").write_text("x\n", encoding="utf-8")

        assert main(['check', '--generated', 'generated.txt', '--encoding', 'no-such-encoding']) == 1
        assert "Unknown encoding" in capsys.readouterr().err

    def test_missing_config_file(self, workspace, capsys):
        """Test that an explicit config file must exist."""
        (workspace / "generated.txt").write_text("x\n", encoding="utf-8")

        assert main(['check', '--generated', 'generated.txt', '--config', 'missing.yaml']) == 1
        assert "Error loading configuration" in capsys.readouterr().err

    def test_log_file(self, workspace):
        """Test that --log-file also writes log output to a file."""
        (workspace / "NOTICE").write_text("Same\n", encoding="utf-8")
        (workspace / "generated.txt").write_text("Same\n", encoding="utf-8")

        assert main(['check', '--generated', 'generated.txt', '--log-file', 'logs/check.log']) == 0
        assert "NOTICE file is up to date" in (workspace / "logs" / "check.log").read_text(encoding="utf-8")


class TestDiffCommand:
    """Test the diff command."""

    def test_identical(self, workspace, capsys):
        """Test diffing identical files."""
        (workspace / "a.txt").write_text("Same\n", encoding="utf-8")
        (workspace / "b.txt").write_text("Same\n", encoding="utf-8")

        assert main(['diff', 'a.txt', 'b.txt']) == 0
        assert capsys.readouterr().out == ""

    def test_different(self, workspace, capsys):
        """Test diffing different files prints the rendered diff."""
        (workspace / "a.txt").write_text("Line A\nLine B\n", encoding="utf-8")
        (workspace / "b.txt").write_text("Line A\nLine C\n", encoding="utf-8")

        assert main(['diff', 'a.txt', 'b.txt']) == 1
        assert capsys.readouterr().out == "1c1\n< Line B\n> Line C\n"

    def test_missing_file(self, workspace, capsys):
        """Test diffing against a missing file."""
        (workspace / "a.txt").write_text("x\n", encoding="utf-8")

        assert main(['diff', 'a.txt', 'b.txt']) == 1
        assert "No NOTICE file exists at: b.txt" in capsys.readouterr().err


class TestConfigCommands:
    """Test the init and validate-config commands."""

    def test_init_creates_config(self, workspace, capsys):
        """Test creating a default configuration file."""
        assert main(['init']) == 0

        assert NoticeCheckConfig.load_from_file("notice-check.yaml") == NoticeCheckConfig()
        assert "Created configuration file" in capsys.readouterr().out

    def test_init_refuses_to_overwrite(self, workspace, capsys):
        """Test that init does not overwrite without --force."""
        (workspace / "notice-check.yaml").write_text("notice_file: KEEP\n", encoding="utf-8")

        assert main(['init']) == 1
        assert "already exists" in capsys.readouterr().out
        assert NoticeCheckConfig.load_from_file("notice-check.yaml").notice_file == "KEEP"

    def test_init_force(self, workspace):
        """Test that init --force overwrites."""
        (workspace / "notice-check.yaml").write_text("notice_file: KEEP\n", encoding="utf-8")

        assert main(['init', '--force']) == 0
        assert NoticeCheckConfig.load_from_file("notice-check.yaml").notice_file == "NOTICE"

    def test_init_unwritable_path(self, workspace, capsys):
        """Test that a config path in a missing directory is reported, not raised."""
        assert main(['init', '--config', 'missing/notice-check.yaml']) == 1

        assert "Failed to write configuration file missing/notice-check.yaml" in capsys.readouterr().out
        assert not (workspace / "missing").exists()

    def test_validate_valid(self, workspace, capsys):
        """Test validating a good configuration."""
        NoticeCheckConfig().save_to_file("notice-check.yaml")

        assert main(['validate-config']) == 0
        assert "Configuration is valid" in capsys.readouterr().out

    def test_validate_invalid(self, workspace, capsys):
        """Test validating a bad configuration."""
        (workspace / "notice-check.yaml").write_text("encoding: no-such-encoding\n", encoding="utf-8")

        assert main(['validate-config']) == 1
        assert "Unknown encoding" in capsys.readouterr().out

    def test_validate_missing(self, workspace, capsys):
        """Test validating a missing configuration file."""
        assert main(['validate-config']) == 1
        assert "Configuration file not found" in capsys.readouterr().out


class TestNoCommand:
    """Test running without a command."""

    def test_prints_help(self, capsys):
        """Test that running without a command prints help and fails."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out
