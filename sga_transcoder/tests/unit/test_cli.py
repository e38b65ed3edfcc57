import io
import pytest
from unittest.mock import patch
import sga_transcoder.cli as cli


class TestCLI:
    def test_encode_arguments(self, capsys):
        assert cli.main(["encode", "hi,", "2024!"]) == 0
        assert capsys.readouterr().out == "⍑¦, 2024!\n"

    def test_decode_arguments(self, capsys):
        assert cli.main(["decode", "ᓵᔑʖ"]) == 0
        assert capsys.readouterr().out == "CAB\n"

    def test_auto_detects_direction(self, capsys):
        cli.main(["auto", "ᔑʖᓵ"])
        cli.main(["auto", "cab"])
        assert capsys.readouterr().out == "ABC\nᓵᔑʖ\n"

    def test_reads_stdin_when_no_text(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("cab\n"))
        assert cli.main(["encode"]) == 0
        assert capsys.readouterr().out == "ᓵᔑʖ\n"

    def test_alphabet_listing(self, capsys):
        assert cli.main(["alphabet"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 26
        assert lines[0] == "A\tᔑ"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])
        assert exc.value.code == 0
        assert "sga 0.1.0" in capsys.readouterr().out

    def test_missing_command(self):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 2

    def test_transforms_ignore_invalid_server_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("SGA_PORT", "eighty")
        monkeypatch.setenv("SGA_LOG_LEVEL", "verbose")

        assert cli.main(["encode", "cab"]) == 0
        assert cli.main(["alphabet"]) == 0
        assert capsys.readouterr().out.startswith("ᓵᔑʖ\n")

    def test_stdin_keeps_blank_lines(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("ᔑ\n\n\n"))
        assert cli.main(["decode"]) == 0
        assert capsys.readouterr().out == "A\n\n\n"

    def test_serve_rejects_invalid_log_level_setting(self, monkeypatch):
        monkeypatch.setenv("SGA_LOG_LEVEL", "verbose")
        with patch("sga_transcoder.cli.uvicorn.run") as mock_run:
            with pytest.raises(ValueError, match="SGA_LOG_LEVEL must be one of"):
                cli.main(["serve"])
        mock_run.assert_not_called()

    def test_serve_uses_environment_defaults(self, monkeypatch):
        monkeypatch.setenv("SGA_HOST", "0.0.0.0")
        monkeypatch.setenv("SGA_PORT", "9200")
        monkeypatch.setenv("SGA_LOG_LEVEL", "warning")
        with patch("sga_transcoder.cli.uvicorn.run") as mock_run:
            assert cli.main(["serve"]) == 0

        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9200
        assert kwargs["log_config"]["loggers"]["sga_transcoder"]["level"] == "WARNING"

    def test_serve_runs_uvicorn(self, monkeypatch):
        monkeypatch.setenv("SGA_PORT", "9100")
        with patch("sga_transcoder.cli.uvicorn.run") as mock_run:
            assert cli.main(["serve", "--host", "0.0.0.0", "--log-level", "debug"]) == 0

        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9100
        assert kwargs["log_config"]["loggers"]["sga_transcoder"]["level"] == "DEBUG"
