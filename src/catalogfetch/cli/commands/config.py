"""Config management commands for catalogfetch."""

from __future__ import annotations

import msgspec
import msgspec.toml
import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from catalogfetch.cli.app import ExitCode
from catalogfetch.cli.app import resolve_config
from catalogfetch.config.paths import config_dir
from catalogfetch.config.paths import config_file

# Create config group
config_app = typer.Typer(help="Manage configuration settings.")


@config_app.command("show")
def config_show_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False, "--json", "-j", help="Output in JSON format"
    ),
) -> None:
    """Display current settings, including environment overrides."""
    console = Console()

    config = resolve_config(ctx)
    config_path = config_file()
    verbose = ctx.meta.get("verbose", False)
    quiet = ctx.meta.get("quiet", False)

    # Spelled out so defaults are shown too
    config_dict = {
        "fetch": {
            "url": config.fetch.url,
            "timeout": config.fetch.timeout,
            "max_retries": config.fetch.max_retries,
        },
        "output": {
            "path": config.output.path,
            "indent": config.output.indent,
        },
    }

    if json_output:
        data = msgspec.json.format(msgspec.json.encode(config_dict), indent=2)
        typer.echo(data.decode())
        return

    # Quiet mode: minimal output
    if quiet:
        console.print(str(config_path))
        return

    toml_data = msgspec.toml.encode(config_dict)
    console.print(
        Panel(Syntax(toml_data.decode(), "toml"), title=f"Config: {config_path}")
    )

    if verbose:
        if config_path.exists():
            console.print(f"[dim]File size: {config_path.stat().st_size} bytes[/dim]")
        else:
            console.print(
                "[dim]Using default configuration (file not created yet)[/dim]"
            )


@config_app.command("path")
def config_path_command(ctx: typer.Context) -> None:
    """Show the paths used for configuration."""
    console = Console()

    if ctx.meta.get("quiet", False):
        console.print(str(config_file()))
        return

    console.print(f"Config dir:    {config_dir()}")
    console.print(f"Config file:   {config_file()}")
    if ctx.meta.get("verbose", False):
        console.print(f"[dim]Exists: {config_file().exists()}[/dim]")


@config_app.command("reset")
def config_reset_command(
    confirm: bool = typer.Option(
        False,
        "--confirm",
        "-y",
        help="Skip confirmation prompt",
    ),
) -> None:
    """Reset configuration to defaults."""
    console = Console()

    if not confirm:
        confirm = typer.confirm(
            "This will reset your configuration to defaults. Continue?",
            default=False,
        )

    if not confirm:
        console.print("Reset cancelled")
        raise typer.Exit(ExitCode.SUCCESS)

    cfg_path = config_file()
    if not cfg_path.exists():
        console.print("[yellow]No custom configuration to reset[/yellow]")
        return

    cfg_path.unlink()
    console.print("[green]✓[/green] Configuration reset to defaults")
    console.print(f"\nDeleted: {cfg_path}")
