"""CLI package for mportctl.

This package contains the Typer application and all subcommands.
"""

from mportctl.cli.main import app

__all__ = ["app"]
