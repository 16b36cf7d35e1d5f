"""Embedded data module commands."""

from pathlib import Path
from typing import Optional

import typer

from layerfs.application.embed_generator import EmbedGenerator
from layerfs.cli.utils.context import CLIContext
from layerfs.core.exceptions import LayerFsError
from layerfs.infrastructure.logging import bind_context

app = typer.Typer(help="Generate embedded filesystem modules")


def _generator(
    cli_ctx: CLIContext,
    package: str,
    root_dir: Path,
    source_dir: Optional[Path],
    module: Optional[str],
) -> EmbedGenerator:
    return EmbedGenerator(
        package=package,
        root_dir=root_dir,
        source_dir=source_dir,
        module_name=module or cli_ctx.settings.embed_module_name,
        ignore_files=list(cli_ctx.settings.ignore_files),
    )


@app.command("generate")
def generate_module(
    ctx: typer.Context,
    package: str = typer.Argument(..., help="Dotted name of the package receiving the module"),
    root_dir: Path = typer.Option(Path("."), "--root-dir", help="Package root; embed patterns are relative to it"),
    source_dir: Optional[Path] = typer.Option(None, "--source-dir", help="Directory holding the package sources"),
    module: Optional[str] = typer.Option(None, "--module", "-m", help="Name of the generated module"),
):
    """
    Scan sources for embed directives and write the embedded data module.

    Example:
        layerfs embed generate mypkg
        layerfs embed generate mypkg --source-dir src --module _assets
    """
    cli_ctx: CLIContext = ctx.obj
    bind_context(command="embed")

    try:
        generator = _generator(cli_ctx, package, root_dir, source_dir, module)
        output = generator.generate()
    except LayerFsError as e:
        cli_ctx.formatter.print_error(str(e))
        raise typer.Exit(1)

    cli_ctx.formatter.print_success(f"Embedded data module written to '{output}'")


@app.command("scan")
def scan_sources(
    ctx: typer.Context,
    package: str = typer.Argument(..., help="Dotted name of the package receiving the module"),
    root_dir: Path = typer.Option(Path("."), "--root-dir", help="Package root; embed patterns are relative to it"),
    source_dir: Optional[Path] = typer.Option(None, "--source-dir", help="Directory holding the package sources"),
    module: Optional[str] = typer.Option(None, "--module", "-m", help="Name of the generated module"),
):
    """
    Show the embed declarations and the files they would include.

    Example:
        layerfs embed scan mypkg --source-dir src
    """
    cli_ctx: CLIContext = ctx.obj
    bind_context(command="embed")

    try:
        generator = _generator(cli_ctx, package, root_dir, source_dir, module)
        items = [
            {
                "name": declaration.name,
                "patterns": ", ".join(declaration.patterns),
                "files": sum(
                    1 for source in generator.collect(declaration).values()
                    if source is not None
                ),
            }
            for declaration in generator.scan()
        ]
    except LayerFsError as e:
        cli_ctx.formatter.print_error(str(e))
        raise typer.Exit(1)

    if not items:
        cli_ctx.formatter.print_warning(f"No embed declarations found for '{package}'")
        return

    cli_ctx.formatter.print_list(
        items,
        columns=["name", "patterns", "files"],
        title="Embed declarations",
    )
