"""
Tests for pbc CLI (argparse front end)
"""

import pytest

from punch_board import __version__
from punch_board.cli import build_parser, main


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Fake HOME (no default config file) and no PBCALC_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("PBCALC_LOGGING__LEVEL", raising=False)
    monkeypatch.delenv("PBCALC_LOGGING__FORMAT", raising=False)
    monkeypatch.delenv("PBCALC_LOGGING", raising=False)
    return tmp_path


# =============================================================================
# PARSER
# =============================================================================


class TestParser:
    """Tests for build_parser."""

    def test_envelope_command(self):
        args = build_parser().parse_args(["envelope", "-l", "10", "-w", "8", "--loose"])
        assert args.command == "envelope"
        assert args.length == 10.0
        assert args.width == 8.0
        assert args.loose is True
        assert args.mini is False
        assert args.fraction is False

    def test_envelope_defaults(self):
        args = build_parser().parse_args(["envelope"])
        assert args.length == 0.0
        assert args.width == 0.0

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.strip() == f"pbc version {__version__}"


# =============================================================================
# ENVELOPE
# =============================================================================


class TestEnvelopeCommand:
    """Tests for pbc envelope."""

    def test_loose(self, capsys):
        assert main(["envelope", "--length", "10", "--width", "8", "--loose"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Content (length x width): 10.00 x 8.00",
            "Paper size: 15.7",
            "Punch location: 7.2",
        ]

    def test_not_loose(self, capsys):
        assert main(["envelope", "-l", "10", "-w", "8"]) == 0

        out = capsys.readouterr().out
        assert "Paper size: 14.9" in out
        assert "Punch location: 6.8" in out

    def test_fraction_output(self, capsys):
        assert main(["envelope", "-l", "10", "-w", "8", "--loose", "--fraction"]) == 0

        out = capsys.readouterr().out
        assert "Paper size: 15.7 (15 + 7/10)" in out
        assert "Punch location: 7.2 (7 + 1/5)" in out

    def test_mini_same_result(self, capsys):
        main(["envelope", "-l", "10", "-w", "8", "--loose"])
        plain = capsys.readouterr().out
        main(["envelope", "-l", "10", "-w", "8", "--loose", "--mini"])
        mini = capsys.readouterr().out
        assert plain == mini

    def test_missing_dimensions_rejected(self, capsys):
        assert main(["envelope"]) == 1

        captured = capsys.readouterr()
        assert "Content (length x width): 0.00 x 0.00" in captured.out
        assert "Paper size" not in captured.out
        assert "length must be positive" in captured.err

    def test_negative_width_rejected(self, capsys):
        assert main(["envelope", "-l", "10", "-w", "-8"]) == 1
        assert "width must be positive" in capsys.readouterr().err

    def test_non_finite_rejected(self, capsys):
        assert main(["envelope", "-l", "nan", "-w", "8"]) == 1

        err = capsys.readouterr().err
        assert err.count("Error:") == 1
        assert "length must be a finite number" in err

    def test_fraction_result_out_of_range(self, capsys):
        assert main(["envelope", "-l", "1e20", "-w", "8", "--fraction"]) == 1

        captured = capsys.readouterr()
        assert "Paper size" not in captured.out
        assert "out of range" in captured.err

    def test_fraction_result_infinite(self, capsys):
        # Both dimensions finite, their sum overflows to inf
        assert main(["envelope", "-l", "1.5e308", "-w", "1.5e308", "--fraction"]) == 1

        captured = capsys.readouterr()
        assert "Paper size" not in captured.out
        assert "invalid syntax" in captured.err

    def test_large_result_without_fraction(self, capsys):
        assert main(["envelope", "-l", "1e20", "-w", "8"]) == 0
        assert "Paper size: 7071067811" in capsys.readouterr().out

    def test_debug_logging(self, capsys, monkeypatch):
        monkeypatch.setenv("PBCALC_LOGGING__LEVEL", "debug")
        assert main(["envelope", "-l", "10", "-w", "8"]) == 0

        err = capsys.readouterr().err
        assert "calculated envelope" in err


# =============================================================================
# FRACTION
# =============================================================================


class TestFractionCommand:
    """Tests for pbc fraction."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1.2", "1 + 1/5"),
            ("-1.2", "-1 + 1/5"),
            ("-.2", "-1/5"),
            ("3", "3"),
            ("0.0", "0"),
        ],
    )
    def test_values(self, capsys, value, expected):
        assert main(["fraction", value]) == 0
        assert capsys.readouterr().out.strip() == expected

    def test_malformed(self, capsys):
        assert main(["fraction", "1.2.3"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid syntax" in captured.err

    def test_range_exceeded(self, capsys):
        assert main(["fraction", "0." + "1" * 19]) == 1
        assert "out of range" in capsys.readouterr().err


# =============================================================================
# CONFIG & LOGGING STARTUP
# =============================================================================


class TestStartup:
    """Config file and logging level handling."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "envelope" in capsys.readouterr().out

    def test_config_file_announced(self, capsys, tmp_path):
        cfg = tmp_path / "pbc.yaml"
        cfg.write_text("logging:\n  level: info\n", encoding="utf-8")

        assert main(["--config", str(cfg), "fraction", "1.5"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == f"Using config file: {cfg}"
        assert out[1] == "1 + 1/2"

    def test_default_config_file(self, capsys, isolated_env):
        cfg = isolated_env / ".pbc" / "config"
        cfg.parent.mkdir()
        cfg.write_text("logging:\n  level: error\n", encoding="utf-8")

        assert main(["fraction", "2"]) == 0
        assert f"Using config file: {cfg}" in capsys.readouterr().out

    def test_missing_config_file(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "nope.yaml"), "fraction", "1"]) == 1
        assert "config file not found" in capsys.readouterr().err

    def test_invalid_config_file(self, capsys, tmp_path):
        cfg = tmp_path / "pbc.yaml"
        cfg.write_text("logging:\n  level: loud\n", encoding="utf-8")

        assert main(["--config", str(cfg), "fraction", "1"]) == 1
        assert "invalid config file" in capsys.readouterr().err

    def test_invalid_env_level_falls_back(self, capsys, monkeypatch):
        monkeypatch.setenv("PBCALC_LOGGING__LEVEL", "loud")

        assert main(["fraction", "1.5"]) == 0

        captured = capsys.readouterr()
        assert captured.out.strip() == "1 + 1/2"
        assert "error parsing logging level" in captured.err

    def test_invalid_env_format(self, capsys, monkeypatch):
        monkeypatch.setenv("PBCALC_LOGGING__FORMAT", "xml")

        assert main(["fraction", "1.5"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "invalid settings" in captured.err
        assert "logging.format" in captured.err
