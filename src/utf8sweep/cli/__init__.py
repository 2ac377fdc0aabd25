"""Command-line interface for utf8sweep.

This package provides the Typer app and console helpers for all CLI commands
and user-facing output.

- app: The Typer application object, used by the console-script entry point.
- main: Entry point that configures logging before dispatching.
"""

from utf8sweep.cli.commands import ExitCode, app, main

__all__ = ["ExitCode", "app", "main"]
