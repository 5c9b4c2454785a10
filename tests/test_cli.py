"""Tests for the ansi-table command line interface."""

import json
from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from ansi_table.cli.app import build_cell, create_app
from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.color import Color

runner = CliRunner()


@pytest.fixture
def app(isolated_config: Path):
    return create_app()


class TestBuildCell:

    def test_escaped_newlines(self) -> None:
        assert build_cell("a\\nb").content == ["a", "b"]

    def test_all_options(self) -> None:
        cell = build_cell("x", delimiter='-', align="center", fg="red", bg="#000000",
                          attrs=["bold", "italic"])
        assert cell.delimiter == '-'
        assert cell.alignment is CellAlignment.CENTER
        assert cell.fg == Color.RED
        assert cell.bg == Color.from_rgb(0, 0, 0)
        assert cell.attributes == [Attribute.BOLD, Attribute.ITALIC]

    def test_long_delimiter_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_cell("x", delimiter="--")


class TestInspect:

    def test_json_output(self, app) -> None:
        result = runner.invoke(app, [
            "inspect", "one two\\nthree", "--align", "right", "--attr", "bold", "--json",
        ])
        assert result.exit_code == 0, result.output
        info = json.loads(result.output)
        assert info["content"] == ["one two", "three"]
        assert info["words"] == [["one", "two"], ["three"]]
        assert info["width"] == 7
        assert info["alignment"] == "right"
        assert info["delimiter"] == " "
        assert info["fg"] is None
        assert info["attributes"] == ["bold"]

    def test_config_defaults_apply(self, app, write_config: Callable[..., Path]) -> None:
        path = write_config('[table]\nfg = "cyan"\n[columns.1]\ndelimiter = "/"\n')
        result = runner.invoke(app, [
            "inspect", "a/b", "--config", str(path), "--column", "1", "--json",
        ])
        assert result.exit_code == 0, result.output
        info = json.loads(result.output)
        assert info["fg"] == {"mode": "16", "value": 6}
        assert info["words"] == [["a", "b"]]

    def test_table_output(self, app) -> None:
        result = runner.invoke(app, ["inspect", "hello world"])
        assert result.exit_code == 0, result.output
        assert "alignment" in result.output
        assert "'hello'" in result.output

    def test_bad_color(self, app) -> None:
        result = runner.invoke(app, ["inspect", "x", "--fg", "purple"])
        assert result.exit_code == 1
        assert "Unknown color" in result.output

    def test_missing_config(self, app, isolated_config: Path) -> None:
        result = runner.invoke(app, ["inspect", "x", "--config", str(isolated_config / "none.toml")])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestPreview:

    def test_prints_content(self, app) -> None:
        result = runner.invoke(app, ["preview", "first\\nsecond", "--fg", "green"])
        assert result.exit_code == 0, result.output
        assert "first" in result.output
        assert "second" in result.output

    def test_right_alignment_pads_left(self, app) -> None:
        result = runner.invoke(app, ["preview", "ab", "--align", "right", "--width", "6"])
        assert result.exit_code == 0, result.output
        assert "    ab" in result.output

    def test_center_alignment_from_config(self, app, write_config: Callable[..., Path]) -> None:
        path = write_config('[table]\nalignment = "center"\n')
        result = runner.invoke(app, ["preview", "ab", "--width", "6", "--config", str(path)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("  ab")

    def test_bad_attribute(self, app) -> None:
        result = runner.invoke(app, ["preview", "x", "--attr", "sparkly"])
        assert result.exit_code == 1
