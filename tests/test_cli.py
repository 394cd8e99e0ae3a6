"""Tests for termstack CLI."""

import os
import tempfile
from unittest.mock import patch

from typer.testing import CliRunner

from termstack import __version__
from termstack.cli import Direction, Theme, app, build_cli_overrides
from termstack.themes import AVAILABLE_THEMES

runner = CliRunner()


class TestBuildCliOverrides:
    """Tests for build_cli_overrides function."""

    def test_no_overrides(self) -> None:
        """Test no overrides when no flags given."""
        assert build_cli_overrides() == {}

    def test_theme_override(self) -> None:
        """Test theme override."""
        assert build_cli_overrides(theme=Theme.LIGHT) == {"theme": "light"}

    def test_layout_overrides(self) -> None:
        """Test layout flags are grouped under the layout section."""
        overrides = build_cli_overrides(
            direction=Direction.COLUMN,
            width=100,
            height=20,
            full_screen=True,
            border=False,
        )
        assert overrides == {
            "layout": {
                "direction": "column",
                "width": 100,
                "height": 20,
                "full_screen": True,
                "border": False,
            }
        }

    def test_false_flags_are_kept(self) -> None:
        """Test explicit False values are not dropped."""
        assert build_cli_overrides(border=False) == {"layout": {"border": False}}

    def test_theme_choices_follow_registry(self) -> None:
        """Test --theme offers exactly the registered themes."""
        assert [theme.value for theme in Theme] == AVAILABLE_THEMES


class TestVersion:
    """Tests for --version."""

    def test_version_flag(self) -> None:
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"termstack version {__version__}" in result.stdout

    def test_version_short_flag(self) -> None:
        """Test -V works as well."""
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestRenderCommand:
    """Tests for the render command."""

    def test_render_prints_frame(self) -> None:
        """Test render prints the demo frame."""
        result = runner.invoke(app, ["render", "--width", "60", "--height", "12"])
        assert result.exit_code == 0
        assert "termstack" in result.stdout
        assert "view 1" in result.stdout

    def test_render_frame_height(self) -> None:
        """Test the output has one line per row."""
        result = runner.invoke(app, ["render", "-W", "40", "-H", "8", "--no-border"])
        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 8

    def test_render_rejects_unknown_theme(self) -> None:
        """Test a theme that is not registered is a usage error."""
        result = runner.invoke(app, ["render", "--theme", "solarized"])
        assert result.exit_code == 2

    def test_render_column_direction(self) -> None:
        """Test the direction flag is accepted."""
        result = runner.invoke(app, ["render", "-d", "column", "-W", "70", "-H", "10"])
        assert result.exit_code == 0

    def test_render_with_config_file(self) -> None:
        """Test settings are read from --config."""
        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False, mode="w") as f:
            f.write("layout:\n  width: 30\n  height: 5\n")
            temp_path = f.name

        try:
            result = runner.invoke(app, ["render", "--config", temp_path])
            assert result.exit_code == 0
            assert len(result.stdout.splitlines()) == 5
        finally:
            os.unlink(temp_path)

    def test_missing_config_file(self) -> None:
        """Test a missing config file exits with an error."""
        result = runner.invoke(app, ["render", "--config", "/nonexistent/config.yaml"])
        assert result.exit_code == 1
        assert "Config file not found" in result.stdout

    def test_invalid_config_file(self) -> None:
        """Test an invalid config file exits with an error."""
        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False, mode="w") as f:
            f.write("theme: neon\n")
            temp_path = f.name

        try:
            result = runner.invoke(app, ["render", "--config", temp_path])
            assert result.exit_code == 1
            assert "Configuration error" in result.stdout
        finally:
            os.unlink(temp_path)

    def test_invalid_direction(self) -> None:
        """Test an unknown direction is rejected by the parser."""
        result = runner.invoke(app, ["render", "--direction", "diagonal"])
        assert result.exit_code != 0


class TestTuiCommand:
    """Tests for the tui command."""

    def test_tui_runs_app_with_config(self) -> None:
        """Test the tui command passes the loaded config to the app."""
        with patch("termstack.tui.run_app") as mock_run:
            result = runner.invoke(app, ["tui", "--theme", "light", "--full-screen"])
        assert result.exit_code == 0
        mock_run.assert_called_once()
        config = mock_run.call_args.args[0]
        assert config.theme == "light"
        assert config.layout.full_screen is True
