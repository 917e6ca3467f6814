"""Main CLI application for catalogfetch."""

from __future__ import annotations

import asyncio
import tomllib
from enum import IntEnum
from pathlib import Path

import msgspec
import typer
from rich.console import Console

from catalogfetch.config.settings import Config
from catalogfetch.config.settings import load_config
from catalogfetch.logs import configure_logging

# Create the main app
app = typer.Typer(
    name="catalogfetch",
    help="Fetch a product catalog and write it grouped by category",
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
)


class ExitCode(IntEnum):
    """Exit codes for catalogfetch."""

    SUCCESS = 0
    NO_DATA = 1
    CONFIG_ERROR = 4


@app.callback()
def main(
    ctx: typer.Context,
    url: str | None = typer.Option(None, "--url", "-u", help="Catalog URL to fetch"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="File to write the grouped catalog to"
    ),
    stdout: bool = typer.Option(
        False, "--stdout", help="Print the grouped catalog instead of writing it"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Enable quiet mode"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Catalogfetch - group a product catalog by category."""
    if version:
        from catalogfetch import __version__

        typer.echo(f"catalogfetch {__version__}")
        raise typer.Exit()

    # quiet takes precedence over verbose
    if verbose and quiet:
        verbose = False

    ctx.meta["url"] = url
    ctx.meta["output"] = output
    ctx.meta["verbose"] = verbose
    ctx.meta["quiet"] = quiet

    configure_logging(verbose=verbose, quiet=quiet)

    # If no command provided, run the pipeline
    if ctx.invoked_subcommand is None:
        config = resolve_config(ctx)
        exit_code = asyncio.run(run_default(config, stdout=stdout, quiet=quiet))
        raise typer.Exit(exit_code)


def resolve_config(ctx: typer.Context) -> Config:
    """Load settings and apply --url/--output overrides.

    Exits with CONFIG_ERROR if the config file is invalid.
    """
    console = Console(stderr=True)
    try:
        config = load_config()
    except (
        OSError,
        UnicodeDecodeError,
        tomllib.TOMLDecodeError,
        msgspec.ValidationError,
    ) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR) from e

    if url := ctx.meta.get("url"):
        fetch = msgspec.structs.replace(config.fetch, url=url)
        config = msgspec.structs.replace(config, fetch=fetch)

    if output := ctx.meta.get("output"):
        out = msgspec.structs.replace(config.output, path=str(output))
        config = msgspec.structs.replace(config, output=out)

    return config


async def run_default(
    config: Config,
    *,
    stdout: bool = False,
    quiet: bool = False,
) -> ExitCode:
    """Run the fetch-group-write pipeline and report the result."""
    from catalogfetch.core.catalog import run_pipeline
    from catalogfetch.core.http import cleanup

    console = Console()

    try:
        result = await run_pipeline(config, write=not stdout)
    finally:
        # Cleanup HTTP client
        await cleanup()

    if not result.success:
        console.print("[red]Unsuccessful request.[/red]")
        return ExitCode.NO_DATA

    if stdout:
        typer.echo(result.output)
        return ExitCode.SUCCESS

    if not result.written:
        # Reported, but the run itself still succeeded
        console.print(f"[yellow]Could not write {result.output_path}[/yellow]")
    elif not quiet:
        console.print(
            f"[green]✓[/green] Data successfully written to the file: "
            f"{result.output_path}"
        )
        console.print(
            f"[dim]{result.item_count} items in "
            f"{result.category_count} categories[/dim]"
        )

    return ExitCode.SUCCESS


@app.command("fetch")
def fetch_command(
    ctx: typer.Context,
    url: str | None = typer.Argument(None, help="URL to fetch (defaults to config)"),
) -> None:
    """Fetch the catalog and print the raw JSON body."""
    config = resolve_config(ctx)
    target = url or config.fetch.url

    outcome = asyncio.run(_fetch_once(config, target))

    if not outcome.success:
        console = Console(stderr=True)
        console.print(f"[red]Unsuccessful request:[/red] {outcome.failure.message}")
        raise typer.Exit(ExitCode.NO_DATA)

    typer.echo(outcome.body)


async def _fetch_once(config: Config, url: str):
    from catalogfetch.core.fetch import Fetcher
    from catalogfetch.core.http import cleanup

    try:
        return await Fetcher.from_config(config).fetch(url)
    finally:
        await cleanup()


def run_app() -> None:
    """Run the CLI app."""
    app()


# Import command modules and register their typer groups
# These imports must come after app is defined
from catalogfetch.cli.commands import config as config_cmd  # noqa: E402

app.add_typer(config_cmd.config_app, name="config")
