"""layerfs command line tool."""

from typing import Optional

import typer
from rich.console import Console

from layerfs.cli import __version__
from layerfs.cli.commands import browse, embed
from layerfs.cli.utils.context import CLIContext
from layerfs.cli.utils.output import OutputFormatter
from layerfs.core.config import get_settings
from layerfs.infrastructure.logging import clear_context, setup_logging

app = typer.Typer(
    name="layerfs",
    help="layerfs - read folders, embedded data and overlays of both",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
)

console = Console()


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        console.print(f"layerfs v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: table, json, yaml",
    ),
):
    """
    layerfs

    Uniform read access to host folders and embedded data.
    """
    settings = get_settings()

    clear_context()
    setup_logging("DEBUG" if debug else None)

    formatter = OutputFormatter(output_format or settings.output_format, console=console)

    ctx.obj = CLIContext(
        debug=debug,
        settings=settings,
        formatter=formatter,
        console=console,
    )


app.add_typer(browse.app, name="fs", help="Read files and directories")
app.add_typer(embed.app, name="embed", help="Generate embedded filesystem modules")


if __name__ == "__main__":
    app()
