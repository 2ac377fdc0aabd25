from __future__ import annotations

from rich.console import Console

from utf8sweep.cli.console import ConsoleManager, create_default_progress, rich_enabled


def test_console_manager_yields_console():  # noqa: D103
    with ConsoleManager(record=True) as console:  # type: Console
        assert isinstance(console, Console)
        console.print("Start")
        console.print("Done")

        output = console.export_text()

    for expected in ("Start", "Done"):
        assert expected in output


def test_console_manager_respects_no_rich(monkeypatch):  # noqa: D103
    monkeypatch.setenv("UTF8SWEEP_NO_RICH", "1")
    assert not rich_enabled()
    with ConsoleManager() as console:
        assert console.color_system is None


def test_console_manager_stderr(monkeypatch):  # noqa: D103
    with ConsoleManager(stderr=True, force_use=True) as console:
        assert console.stderr


def test_progress_disabled_without_rich(monkeypatch):  # noqa: D103
    monkeypatch.setenv("UTF8SWEEP_NO_RICH", "1")
    progress = create_default_progress(Console())
    assert progress.disable
