"""Command line tools for inspecting cells."""

from ansi_table.cli.app import create_app

__all__ = ["create_app"]
