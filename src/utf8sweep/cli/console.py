"""Console utilities & context manager for CLI commands.

This module centralises Rich configuration for CLI commands:

* A ``ConsoleManager`` context manager yielding a pre-configured
  :class:`rich.console.Console`.
* Opt-out via the ``--no-rich`` flag (sets env var ``UTF8SWEEP_NO_RICH``) or
  the environment variable being set externally.
* Helper :class:`FilenameColumn` and a default progress display used while a
  sweep is running.
"""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import Any, Dict

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

__all__ = [
    "ConsoleManager",
    "FilenameColumn",
    "create_default_progress",
    "rich_enabled",
]

# ENV VAR used to disable rich output entirely (useful for piping or testing)
_ENV_DISABLE_RICH = "UTF8SWEEP_NO_RICH"


def rich_enabled() -> bool:
    """Return False when rich output was disabled via ``UTF8SWEEP_NO_RICH``."""
    return os.getenv(_ENV_DISABLE_RICH, "0").lower() not in {"1", "true", "yes"}


class ConsoleManager(AbstractContextManager):
    """Context manager that yields a configured Rich :class:`Console`.

    Parameters
    ----------
    stderr:
        Write to standard error instead of standard output.
    force_use:
        When *True* / *False* this overrides autodetection and forces rich
        enabled/disabled. When *None*, autodetect via ``UTF8SWEEP_NO_RICH``.
    console_kwargs:
        Additional keyword arguments forwarded verbatim to the Console.
    """

    def __init__(
        self,
        *,
        stderr: bool = False,
        force_use: bool | None = None,
        **console_kwargs: Any,
    ) -> None:
        self._stderr = stderr
        self._force_use = force_use
        self._console_kwargs: Dict[str, Any] = console_kwargs
        self.console: Console | None = None

    def __enter__(self) -> Console:
        enabled = self._force_use if self._force_use is not None else rich_enabled()

        if enabled:
            self.console = Console(stderr=self._stderr, **self._console_kwargs)
        else:
            # Disable colour, otherwise output may contain escape codes.
            self.console = Console(
                stderr=self._stderr,
                color_system=None,
                force_terminal=False,
                **self._console_kwargs,
            )
        return self.console

    def __exit__(self, exc_type, exc_val, exc_tb):  # type: ignore[override]
        if self.console is not None:
            self.console.file.flush()
        # Propagate exceptions – we do *not* swallow them.
        return False


class FilenameColumn(TextColumn):
    """Render the current filename field in task fields."""

    def __init__(self) -> None:
        super().__init__("{task.fields[filename]}")


def create_default_progress(console: Console) -> Progress:
    """Return a standardised :class:`~rich.progress.Progress` instance.

    Columns:
    1. Spinner column
    2. Elapsed time
    3. Current filename (custom column)
    """

    return Progress(
        SpinnerColumn(),
        TimeElapsedColumn(),
        FilenameColumn(),
        console=console,
        transient=True,
        disable=not rich_enabled(),
    )
