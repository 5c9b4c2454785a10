"""Shared pytest fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from ansi_table.config import CONFIG_ENV_VAR
from ansi_table.core.alignment import CellAlignment
from ansi_table.core.attribute import Attribute
from ansi_table.core.cell import Cell
from ansi_table.core.color import Color


@pytest.fixture
def styled_cell() -> Cell:
    """A cell with every override set."""
    return (Cell("alpha beta\ngamma")
        .set_delimiter('-')
        .set_alignment(CellAlignment.RIGHT)
        .set_fg(Color.RED)
        .set_bg(Color.from_256(236))
        .add_attribute(Attribute.BOLD))


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no config environment variable."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(isolated_config: Path) -> Callable[[str], Path]:
    """Write TOML text to a config file and return its path."""
    def write(text: str, name: str = "custom.toml") -> Path:
        path = isolated_config / name
        path.write_text(text)
        return path
    return write
