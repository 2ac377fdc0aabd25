"""CLI commands for utf8sweep.

This module implements all user-facing CLI commands: the conversion sweep,
exclusion list maintenance, the two boolean preferences, diagnostics and
version.
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through Rich Console; per-file failures are logged to
  stderr by the conversion engine and summarised here.
- Running the app without a subcommand converts the current directory.

Design:
- Annotated is used for CLI argument/option definitions to provide type safety
  and rich help text.
- ConvertCommandOptions dataclass groups the convert command options.
- Exit codes are defined as an Enum. Per-file failures do not change the exit
  status; only dispatch errors do.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.markup import escape

from utf8sweep.cli.console import ConsoleManager, create_default_progress
from utf8sweep.core.converter import run_conversion
from utf8sweep.core.inventory import list_extensions
from utf8sweep.core.sniffer import sniff_encoding
from utf8sweep.models.core import FileOutcome
from utf8sweep.utils import config
from utf8sweep.utils.debug import debug, setup_logger

FILEINFO_URL = "https://fileinfo.com/extension/{}"

app = typer.Typer(
    name="utf8sweep",
    help=(
        "Turn the encoding of all files below a directory into UTF-8, "
        "skipping files whose extension is on a global exclusion list."
    ),
    add_completion=False,
)


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


# Root path parameter
ROOT_PATH = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        resolve_path=True,
        help="Root directory to process (defaults to the current directory)",
    ),
]

EXTENSIONS = Annotated[
    List[str],
    typer.Argument(help="File extensions, with or without the leading dot"),
]

VERBOSE = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Print a message for every converted file and a final total",
    ),
]

DRY_RUN = Annotated[
    bool,
    typer.Option(
        "--dry-run",
        help="Detect and transcode without writing anything back",
    ),
]

BOM = Annotated[
    Optional[bool],
    typer.Option(
        "--bom/--no-bom",
        help="Keep (or strip) the byte-order mark for this run only",
        show_default=False,
    ),
]

EXTENSIONLESS = Annotated[
    Optional[bool],
    typer.Option(
        "--whitelist-extensionless/--blacklist-extensionless",
        help="Include (or skip) files without an extension for this run only",
        show_default=False,
    ),
]

NO_RICH = Annotated[
    bool,
    typer.Option(
        "--no-rich",
        help=(
            "Disable Rich coloured output and progress display. "
            "Can also be set with the UTF8SWEEP_NO_RICH environment variable."
        ),
    ),
]


@dataclass
class ConvertCommandOptions:
    """Options for the convert command."""

    root: Path
    verbose: bool = False
    dry_run: bool = False
    bom: Optional[bool] = None
    whitelist_extensionless: Optional[bool] = None


@app.callback(invoke_without_command=True)
def callback(ctx: typer.Context, no_rich: NO_RICH = False) -> None:
    """Top-level callback adding global options.

    Without a subcommand, converts the current working directory.
    """
    if no_rich:
        os.environ["UTF8SWEEP_NO_RICH"] = "1"
    if ctx.invoked_subcommand is None:
        raise typer.Exit(_convert_impl(ConvertCommandOptions(root=Path.cwd())))


@app.command()
def convert(
    root: ROOT_PATH = Path("."),
    verbose: VERBOSE = False,
    dry_run: DRY_RUN = False,
    bom: BOM = None,
    whitelist_extensionless: EXTENSIONLESS = None,
) -> None:
    """Convert every eligible file below ROOT to UTF-8."""
    options = ConvertCommandOptions(
        root=root,
        verbose=verbose,
        dry_run=dry_run,
        bom=bom,
        whitelist_extensionless=whitelist_extensionless,
    )
    code = _convert_impl(options)
    if code != ExitCode.SUCCESS:
        raise typer.Exit(code)


def _convert_impl(options: ConvertCommandOptions) -> int:
    """Implementation of the convert command."""
    settings = config.load_settings()
    settings = settings.model_copy(
        update={
            "add_bom": config.resolve_setting(
                "convert.add_bom", default=settings.add_bom, cli_value=options.bom
            ),
            "whitelist_extensionless": config.resolve_setting(
                "convert.whitelist_extensionless",
                default=settings.whitelist_extensionless,
                cli_value=options.whitelist_extensionless,
            ),
        }
    )
    debug(f"Converting {options.root} with {settings!r}")

    prefix = "[dry run] Would convert" if options.dry_run else "Successfully converted"
    with ConsoleManager() as console, ConsoleManager(stderr=True) as err_console:
        try:
            with create_default_progress(console) as progress:
                task = progress.add_task("convert", total=None, filename="")

                def _report(outcome: FileOutcome) -> None:
                    progress.update(task, filename=outcome.path.name)
                    if options.verbose and outcome.ok:
                        console.print(
                            f"{escape(prefix)} {escape(str(outcome.path))}",
                            soft_wrap=True,
                        )

                result = run_conversion(
                    options.root,
                    settings,
                    dry_run=options.dry_run,
                    on_outcome=_report,
                )
        except (FileNotFoundError, NotADirectoryError) as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
            return ExitCode.ERROR
        except Exception as e:
            err_console.print(
                f"[red]Error: An unexpected error occurred: {escape(str(e))}[/red]"
            )
            err_console.print_exception()
            return ExitCode.ERROR

        if result.failed:
            err_console.print(
                f"[yellow]Failed to convert {result.failed} file(s).[/yellow]"
            )
        if options.verbose:
            console.print(
                f"\nSuccessfully converted a total of {result.converted} files"
            )
    return ExitCode.SUCCESS


@app.command()
def add(extensions: EXTENSIONS) -> None:
    """Add extensions to the global exclusion list."""
    settings = config.load_settings()
    added = settings.add_extensions(extensions)
    config.save_settings(settings)
    with ConsoleManager() as console:
        for ext in added:
            console.print(f"Excluded [bold]{escape(ext)}[/bold]")
        if len(added) < len(extensions):
            console.print("[yellow]Some extensions were already excluded.[/yellow]")


@app.command()
def remove(extensions: EXTENSIONS) -> None:
    """Remove extensions from the global exclusion list."""
    settings = config.load_settings()
    removed = settings.remove_extensions(extensions)
    config.save_settings(settings)
    with ConsoleManager() as console:
        for ext in removed:
            console.print(f"Removed [bold]{escape(ext)}[/bold]")


@app.command("list")
def list_excluded() -> None:
    """List all currently excluded extensions."""
    settings = config.load_settings()
    with ConsoleManager() as console:
        console.print("Globally ignored file-extensions")
        for ext in settings.excluded_extensions:
            console.print(escape(ext))


@app.command()
def show(
    root: ROOT_PATH = Path("."),
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="List every extension found, including excluded ones",
        ),
    ] = False,
) -> None:
    """Show the unrecognized (not excluded) file formats below ROOT."""
    settings = config.load_settings()
    found = list_extensions(root, settings, include_excluded=show_all)
    with ConsoleManager() as console:
        qualifier = " (potentially excluded)" if show_all else ""
        console.print(f"Found the following{qualifier} fileformats:")
        for ext in found:
            console.print(escape(ext) if ext else "(no extension)")


@app.command()
def extensionless(
    whitelist: Annotated[
        Optional[bool],
        typer.Option(
            "--whitelist/--blacklist",
            help="Include or skip files without an extension",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Show or change whether extensionless files are converted."""
    settings = config.load_settings()
    if whitelist is not None:
        settings.whitelist_extensionless = whitelist
        config.save_settings(settings)
    state = "whitelisted" if settings.whitelist_extensionless else "blacklisted"
    with ConsoleManager() as console:
        console.print(f"Extensionless files are {state}")


@app.command()
def bom(
    enabled: Annotated[
        Optional[bool],
        typer.Option(
            "--on/--off",
            help="Keep or strip the byte-order mark in converted files",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Show or change whether converted files keep their byte-order mark."""
    settings = config.load_settings()
    if enabled is not None:
        settings.add_bom = enabled
        config.save_settings(settings)
    state = "kept" if settings.add_bom else "stripped"
    with ConsoleManager() as console:
        console.print(f"Byte-order marks are {state}")


@app.command()
def info(
    extensions: Annotated[
        Optional[List[str]],
        typer.Argument(help="File extensions to look up"),
    ] = None,
) -> None:
    """Open a web page with information on the given file types."""
    if not extensions:
        with ConsoleManager(stderr=True) as err_console:
            err_console.print("[red]You must specify an extension to look up[/red]")
        raise typer.Exit(ExitCode.ERROR)
    for ext in extensions:
        typer.launch(FILEINFO_URL.format(ext.strip().lstrip(".").lower()))


@app.command()
def reset(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Reset the exclusion list and preferences to their defaults."""
    with ConsoleManager() as console:
        if not yes and not typer.confirm(
            "Reset the exclusion list and settings to defaults? "
            "This cannot be undone."
        ):
            console.print("No changes made.")
            raise typer.Exit(ExitCode.SUCCESS)
        config.reset_settings()
        console.print("Extension list and settings have been reset to default")


@app.command()
def sniff(
    files: Annotated[
        List[Path],
        typer.Argument(
            exists=True,
            dir_okay=False,
            resolve_path=True,
            help="Files to inspect",
        ),
    ],
) -> None:
    """Print the encoding detected from each file's byte-order mark."""
    code = ExitCode.SUCCESS
    with ConsoleManager() as console, ConsoleManager(stderr=True) as err_console:
        for path in files:
            try:
                tag = sniff_encoding(path)
            except OSError as e:
                err_console.print(f"[red]Error: {escape(str(e))}[/red]")
                code = ExitCode.ERROR
                continue
            console.print(f"{escape(str(path))}: {tag.value}", soft_wrap=True)
    if code != ExitCode.SUCCESS:
        raise typer.Exit(code)


@app.command()
def version() -> None:
    """Show the version of utf8sweep."""
    from utf8sweep.__about__ import __version__

    with ConsoleManager() as console:
        console.print(f"utf8sweep version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    setup_logger()
    app()
