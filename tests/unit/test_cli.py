"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from widthtable.cli import cli, parse_alignments
from widthtable.models import ColumnAlign

NBSP = "\u00a0"


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


class TestCLI:
    """Test top-level CLI behaviour."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "width-aware text tables" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--markdown" in result.output
        assert "--max-width" in result.output
        assert "--align" in result.output
        assert "--rule" in result.output


class TestRenderCommand:
    """Tests for the render command."""

    def test_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--max-width", "80"], input="a,b\n1,2\n")
        assert result.exit_code == 0
        assert result.output == " a  b \n 1  2 \n"

    def test_file(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "data.csv"
        source.write_text("name,qty\nwidget,7\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", "-w", "80", "--gutter", "|", str(source)])
        assert result.exit_code == 0
        assert result.output == " name   | qty \n widget | 7   \n"

    def test_rule_and_alignment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "-w", "80", "--gutter", "|", "--rule", "-", "--align", "r,l"],
            input="a,b\n10,2\n",
        )
        assert result.exit_code == 0
        assert result.output == "  a | b \n----|---\n 10 | 2 \n"

    def test_rule_gutter(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "-w", "80", "--gutter", "|", "--rule", "=", "--rule-gutter", "+"],
            input="a,b\n",
        )
        assert result.exit_code == 0
        assert result.output.splitlines()[1] == "===+==="

    def test_rule_gutter_without_rule_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--rule-gutter", "+"], input="a,b\n")
        assert result.exit_code == 2
        assert "--rule-gutter requires --rule" in result.output

    def test_rule_gutter_with_markdown(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "--markdown", "--rule-gutter", "+"], input="a,b\n"
        )
        assert result.exit_code == 0
        assert "+" in result.output.splitlines()[1]

    def test_formatting_characters(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "render", "-w", "80",
                "--indent", ">", "--outdent", "<", "--fill", "_", "--pad", "#",
            ],
            input="abc,d\nx,y\n",
        )
        assert result.exit_code == 0
        assert result.output == ">#abc##d#<\n>#x__##y#<\n"

    def test_tab_delimiter(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "-w", "80", "-d", "\\t"], input="a\tb\n1\t2\n"
        )
        assert result.exit_code == 0
        assert result.output == " a  b \n 1  2 \n"

    def test_markdown(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--markdown", "--align", "l,r"], input="a,b\n1,2\n")
        assert result.exit_code == 0
        assert result.output == (
            f"{NBSP}a{NBSP}|{NBSP}b{NBSP}\n---|--:\n{NBSP}1{NBSP}|{NBSP}2{NBSP}\n"
        )

    def test_terminal_width_default(self, runner: CliRunner) -> None:
        with patch("widthtable.cli.terminal_width", return_value=100):
            result = runner.invoke(cli, ["render"], input="id,text\n1," + "x" * 200 + "\n")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[1] == " 1   " + "x" * 94 + "…"

    def test_truncation(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "-w", "80"], input="id,text\n1," + "x" * 200 + "\n2,short\n"
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[1].endswith("…")
        assert not lines[2].endswith("…")

    def test_blank_lines_skipped(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "-w", "80"], input="a,b\n\n1,2\n")
        assert result.exit_code == 0
        assert result.output == " a  b \n 1  2 \n"

    def test_empty_input(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render"], input="")
        assert result.exit_code == 1
        assert "No input rows" in result.output

    def test_ragged_row(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "-w", "80"], input="a,b\n1,2,3\n")
        assert result.exit_code == 1
        assert "✗ Failed to render table" in result.output
        assert "wrong number of items" in result.output

    def test_center_alignment(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "-w", "80", "--align", "c"], input="a\n1\n")
        assert result.exit_code == 1
        assert "only left- and right-align" in result.output

    def test_bad_alignment(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--align", "diagonal"], input="a\n1\n")
        assert result.exit_code == 2
        assert "Unknown alignment" in result.output

    def test_too_many_alignments(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--align", "l,r"], input="a\n1\n")
        assert result.exit_code == 2


class TestDemoCommand:
    """Tests for the demo command."""

    def test_plain(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].startswith(" numeric   alpha-2 ")
        assert "Åland Islands" in result.output
        assert "東京" in result.output

    def test_markdown(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["demo", "--markdown"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[1].startswith("--------:|---------|")


class TestParseAlignments:
    """Tests for parse_alignments."""

    def test_pads_with_left(self) -> None:
        assert parse_alignments("r", 3) == [ColumnAlign.RIGHT, ColumnAlign.LEFT, ColumnAlign.LEFT]

    def test_empty(self) -> None:
        assert parse_alignments("", 2) == [ColumnAlign.LEFT, ColumnAlign.LEFT]

    def test_full_names(self) -> None:
        assert parse_alignments("Right, left", 2) == [ColumnAlign.RIGHT, ColumnAlign.LEFT]
