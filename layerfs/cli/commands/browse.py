"""Commands reading from layered host folders."""

import posixpath
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from layerfs.cli.utils.context import CLIContext
from layerfs.cli.utils.output import OutputFormat
from layerfs.core.exceptions import LayerFsError
from layerfs.core.types import FileKind
from layerfs.core.walk import iter_tree
from layerfs.infrastructure.logging import bind_context, get_logger

app = typer.Typer(help="Read files and directories")
logger = get_logger(__name__)

ROOT_OPTION_HELP = "Host folder to serve; repeat to layer folders, first wins"


@app.command("ls")
def list_directory(
    ctx: typer.Context,
    path: str = typer.Argument("/", help="Virtual directory to list"),
    roots: Optional[List[Path]] = typer.Option(None, "--root", "-r", help=ROOT_OPTION_HELP),
    no_headers: bool = typer.Option(False, "--no-headers", help="Hide table headers"),
):
    """
    List the direct children of a directory.

    Example:
        layerfs fs ls /
        layerfs fs ls /templates --root ./overrides --root ./defaults
    """
    cli_ctx: CLIContext = ctx.obj
    bind_context(command="ls", fs_path=path)

    try:
        fs = cli_ctx.build_fs(roots)
        entries = fs.read_dir(path)
    except LayerFsError as e:
        cli_ctx.formatter.print_error(str(e))
        raise typer.Exit(1)

    items = [
        {"name": entry.name, "kind": entry.kind.value, "size": _display_size(entry.kind, entry.size)}
        for entry in entries
    ]
    cli_ctx.formatter.print_list(
        items,
        columns=["name", "kind", "size"],
        title=path,
        no_headers=no_headers,
    )


@app.command("cat")
def cat_file(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Virtual file to print"),
    roots: Optional[List[Path]] = typer.Option(None, "--root", "-r", help=ROOT_OPTION_HELP),
):
    """
    Write the content of a file to stdout.

    Example:
        layerfs fs cat /config.toml --root ./overrides --root ./defaults
    """
    cli_ctx: CLIContext = ctx.obj
    bind_context(command="cat", fs_path=path)

    try:
        content = cli_ctx.build_fs(roots).read_file(path)
    except LayerFsError as e:
        cli_ctx.formatter.print_error(str(e))
        raise typer.Exit(1)

    typer.echo(content, nl=False)


@app.command("tree")
def show_tree(
    ctx: typer.Context,
    path: str = typer.Argument("/", help="Virtual directory to start at"),
    roots: Optional[List[Path]] = typer.Option(None, "--root", "-r", help=ROOT_OPTION_HELP),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", "-L", min=1, help="Descend at most this many levels"),
):
    """
    Show everything below a directory, depth first.

    Example:
        layerfs fs tree /
        layerfs fs tree /assets -L 2
    """
    cli_ctx: CLIContext = ctx.obj
    bind_context(command="tree", fs_path=path)

    try:
        fs = cli_ctx.build_fs(roots)
        nodes = list(iter_tree(fs, path, max_depth))
    except LayerFsError as e:
        cli_ctx.formatter.print_error(str(e))
        raise typer.Exit(1)

    logger.debug("tree_collected", entries=len(nodes))

    if cli_ctx.formatter.format != OutputFormat.TABLE:
        cli_ctx.formatter.print_list(
            [
                {"path": node_path, "kind": entry.kind.value, "size": _display_size(entry.kind, entry.size)}
                for node_path, entry in nodes
            ]
        )
        return

    base_depth = _depth(path)
    cli_ctx.console.print(escape(path))
    for node_path, entry in nodes:
        indent = "    " * (_depth(node_path) - base_depth - 1)
        name = f"{entry.name}/" if entry.is_dir else entry.name
        cli_ctx.console.print(f"{indent}{escape(name)}", highlight=False)


def _depth(path: str) -> int:
    normalized = posixpath.normpath("/" + path.lstrip("/"))
    return 0 if normalized == "/" else normalized.count("/")


def _display_size(kind: FileKind, size: int) -> Optional[int]:
    return size if kind is FileKind.FILE else None
