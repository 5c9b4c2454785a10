"""Table-level and column-level style defaults loaded from TOML.

Example ``ansi-table.toml``:

    [table]
    alignment = "left"
    fg = "white"

    [columns.2]
    alignment = "right"
    delimiter = "/"
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ansi_table.core.alignment import CellAlignment
from ansi_table.core.color import Color
from ansi_table.core.style import StyleDefaults
from ansi_table.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ANSI_TABLE_CONFIG"
DEFAULT_CONFIG_NAME = "ansi-table.toml"

_STYLE_KEYS = ("alignment", "fg", "bg", "delimiter")


@dataclass(frozen=True)
class TableConfig:
    """Defaults for a whole table plus per-column overrides."""
    defaults: StyleDefaults = field(default_factory=StyleDefaults)
    column_defaults: dict[int, StyleDefaults] = field(default_factory=dict, hash=False)
    source: Path | None = None

    def column(self, index: int) -> StyleDefaults:
        """Defaults for the column at `index` (empty if none configured)."""
        return self.column_defaults.get(index, StyleDefaults())


def find_config_path(cwd: Path | None = None) -> Path | None:
    """Locate the config file: $ANSI_TABLE_CONFIG, then ./ansi-table.toml."""
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        path = Path(env_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"config file not found: {path}", source=CONFIG_ENV_VAR)
        return path

    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: str | Path | None = None) -> TableConfig:
    """
    Load table defaults.

    An explicit `path` must exist. Without one, the environment variable
    and the working directory are searched, and plain defaults are
    returned if nothing is found.
    """
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.is_file():
            raise ConfigError("config file not found", source=config_path)
    else:
        config_path = find_config_path()
        if config_path is None:
            logger.debug("No config file found, using defaults")
            return TableConfig()

    logger.debug("Loading config from %s", config_path)
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", source=config_path) from exc

    return parse_config(data, source=config_path)


def parse_config(data: dict[str, Any], source: Path | None = None) -> TableConfig:
    """Build a TableConfig from already-parsed TOML data."""
    for key in data:
        if key not in ("table", "columns"):
            logger.warning("Ignoring unknown config section %r in %s", key, source)

    defaults = _parse_style(data.get("table", {}), "table", source)

    columns: dict[int, StyleDefaults] = {}
    raw_columns = data.get("columns", {})
    if not isinstance(raw_columns, dict):
        raise ConfigError("[columns] must be a table", source=source)
    for key, section in raw_columns.items():
        try:
            index = int(key)
        except ValueError:
            raise ConfigError(f"column key must be an integer index, got {key!r}", source=source) from None
        if index < 0:
            raise ConfigError(f"column index must not be negative, got {index}", source=source)
        columns[index] = _parse_style(section, f"columns.{key}", source)

    return TableConfig(defaults=defaults, column_defaults=columns, source=source)


def _parse_style(section: Any, name: str, source: Path | None) -> StyleDefaults:
    """Parse one [table] or [columns.N] section."""
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table", source=source)

    for key in section:
        if key not in _STYLE_KEYS:
            logger.warning("Ignoring unknown key %r in [%s] of %s", key, name, source)

    try:
        alignment = _optional(section, "alignment", CellAlignment.parse)
        fg = _optional(section, "fg", _parse_color)
        bg = _optional(section, "bg", _parse_color)
    except ValueError as exc:
        raise ConfigError(f"[{name}] {exc}", source=source) from exc

    delimiter = section.get("delimiter")
    if delimiter is not None and (not isinstance(delimiter, str) or len(delimiter) != 1):
        raise ConfigError(f"[{name}] delimiter must be a single character", source=source)

    return StyleDefaults(alignment=alignment, fg=fg, bg=bg, delimiter=delimiter)


def _optional(section: dict[str, Any], key: str, parse):
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, (str, int)) or isinstance(value, bool):
        raise ValueError(f"{key} must be a string or integer, got {type(value).__name__}")
    return parse(value)


def _parse_color(value: str | int) -> Color:
    # Bare integers are 256-color indexes
    if isinstance(value, int):
        return Color.from_256(value)
    return Color.parse(value)
