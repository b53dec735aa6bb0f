"""
Unit tests for CLI commands.

Tests cover:
- render command
- grow command (including viewport gating)
- show command
- config command
"""

from pathlib import Path

from typer.testing import CliRunner

from bonsai.cli.app import app

runner = CliRunner()


class TestRenderCommand:
    """Tests for render command."""

    def test_render_plain(self):
        """Plain render prints the pot."""
        result = runner.invoke(app, ["render", "--seed", "3", "--plain"])

        assert result.exit_code == 0
        assert "\\___/" in result.stdout
        assert "|_|" in result.stdout

    def test_render_html_markup(self):
        """HTML markup output uses style classes."""
        result = runner.invoke(app, ["render", "--seed", "1", "--html-markup"])

        assert result.exit_code == 0
        assert '<span class="pot">' in result.stdout
        assert '<span class="branch">' in result.stdout

    def test_render_rich(self):
        result = runner.invoke(app, ["render", "--seed", "2", "--life", "10"])

        assert result.exit_code == 0
        assert "|_|" in result.stdout

    def test_render_invalid_config(self):
        """Invalid values exit with code 2."""
        result = runner.invoke(app, ["render", "--life", "0"])

        assert result.exit_code == 2
        assert "Invalid configuration" in result.stdout

    def test_render_empty_leaves(self):
        result = runner.invoke(app, ["render", "--leaves", ""])

        assert result.exit_code == 2

    def test_render_writes_html_page(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["render", "--seed", "2", "--plain", "--html", "demo"])

        assert result.exit_code == 0
        assert (tmp_path / "outputs" / "pages" / "demo.html").exists()


class TestGrowCommand:
    """Tests for grow command."""

    def test_grow_completes(self):
        result = runner.invoke(app, ["grow", "--seed", "5", "--delay", "0", "--life", "8"])

        assert result.exit_code == 0
        assert "Steps" in result.stdout

    def test_grow_refuses_narrow_terminal(self):
        result = runner.invoke(app, ["grow", "--cols", "5000", "--delay", "0"])

        assert result.exit_code == 1
        assert "Terminal too narrow" in result.stdout

    def test_grow_max_steps(self):
        result = runner.invoke(app, ["grow", "--seed", "5", "--delay", "0", "--max-steps", "3"])

        assert result.exit_code == 0

    def test_grow_save_then_show(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        grown = runner.invoke(app, ["grow", "--seed", "7", "--delay", "0", "--life", "9", "--save", "mytree"])
        assert grown.exit_code == 0
        assert (tmp_path / "outputs" / "trees" / "mytree.yaml").exists()

        shown = runner.invoke(app, ["show", "mytree", "--plain"])
        assert shown.exit_code == 0
        assert "mytree" in shown.stdout
        assert "\\___/" in shown.stdout


class TestShowCommand:
    def test_show_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["show", "nothing"])

        assert result.exit_code == 1

    def test_show_invalid_record(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        bad = Path("bad.yaml")
        bad.write_text("steps: lots\n", encoding="utf-8")

        result = runner.invoke(app, ["show", "bad.yaml"])

        assert result.exit_code == 1
        assert "Failed to load tree" in result.stdout


class TestConfigCommand:
    def test_config_defaults(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "life_start" in result.stdout
        assert "38 x 70" in result.stdout

    def test_config_from_file(self, tmp_path):
        path = tmp_path / "bonsai.yaml"
        path.write_text("bonsai:\n  life_start: 21\n", encoding="utf-8")

        result = runner.invoke(app, ["config", "--config", str(path), "--rows", "30"])

        assert result.exit_code == 0
        assert "21" in result.stdout
        assert "30 x 70" in result.stdout

    def test_config_invalid(self):
        result = runner.invoke(app, ["config", "--rows", "0"])

        assert result.exit_code == 2

    def test_config_missing_file(self, tmp_path):
        result = runner.invoke(app, ["config", "--config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
