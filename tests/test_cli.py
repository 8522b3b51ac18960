"""
End-to-end tests for the meminfo-monitor command line.

These run main_cli() against temporary config and meminfo files and check
the rendered output and exit behaviour.
"""

import pytest
import toml

from meminfomon.cli import build_parser, main_cli


@pytest.fixture
def cli_config(tmp_path, meminfo_file):
    """A config.toml pointing at the sample meminfo file."""
    config_path = tmp_path / "config.toml"
    with open(config_path, "w") as f:
        toml.dump(
            {
                "monitor": {"meminfo_path": str(meminfo_file), "interval_seconds": 0.1},
                "display": {"bar_width": 10, "redraw": True},
                "logging": {"level": "WARNING"},
            },
            f,
        )
    return config_path


@pytest.mark.integration
class TestMainCli:
    """Test cases for the command-line entry point."""

    def test_single_poll(self, cli_config, capsys):
        main_cli(["--config", str(cli_config), "--once"])

        out = capsys.readouterr().out
        assert out.startswith("Memory Information")
        assert "3.1 MiB" in out
        assert "16 KiB" in out
        assert "[##########]" in out

    def test_path_override(self, cli_config, tmp_path, capsys):
        other = tmp_path / "other_meminfo"
        other.write_text("Dirty:   1536 kB\nWriteback:   0 kB\n")

        main_cli(["--config", str(cli_config), "--path", str(other), "--once"])

        assert "1.5 MiB" in capsys.readouterr().out

    def test_multiple_cycles(self, cli_config, capsys):
        main_cli(["--config", str(cli_config), "--cycles", "2", "--no-redraw"])

        out = capsys.readouterr().out
        assert out.count("Memory Information") == 2
        assert "\x1b[" not in out

    def test_unreadable_source_still_renders(self, cli_config, tmp_path, capsys):
        main_cli(["--config", str(cli_config), "--path", str(tmp_path / "nope"), "--once"])

        captured = capsys.readouterr()
        assert "Memory Information" in captured.out
        assert "0 B" in captured.out

    def test_invalid_interval_exits(self, cli_config):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(cli_config), "--interval", "fast"])

        assert exc_info.value.code == 1

    @pytest.mark.parametrize("interval", ["inf", "nan", "7200"])
    def test_out_of_range_interval_exits(self, cli_config, interval):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(cli_config), "--interval", interval, "--cycles", "2"])

        assert exc_info.value.code == 1

    def test_non_finite_config_interval_exits(self, tmp_path):
        bad = tmp_path / "config.toml"
        bad.write_text("[monitor]\ninterval_seconds = nan\n")

        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(bad), "--once"])

        assert exc_info.value.code == 1

    def test_invalid_cycles_exits(self, cli_config):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(cli_config), "--cycles", "0"])

        assert exc_info.value.code == 1

    def test_invalid_config_exits(self, tmp_path):
        bad = tmp_path / "config.toml"
        bad.write_text("[display]\nbar_width = 1\n")

        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(bad), "--once"])

        assert exc_info.value.code == 1

    def test_log_level_choices(self):
        args = build_parser().parse_args(["--log-level", "debug"])

        assert args.log_level == "DEBUG"
