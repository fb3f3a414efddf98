"""
Command line shell for file paths.

Runs the FilePath operations (listing, mkdirs, rename, delete, read and write)
against any filesystem that a YAML configuration describes.
"""
import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from FilePath import paths
from FilePath.hdfs_path import HdfsPath
from FileSystem.config_loader import load_filesystem_config
from FileSystem.models import FileSystemConfig
from FileSystem.registry import get_filesystem
from Utils.logging import setup_logging

app = typer.Typer(
    name="fpath",
    help="Navigate and manipulate files on HDFS and other fsspec filesystems.",
    add_completion=False,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[Optional[Path], typer.Option(
        "--config",
        help="YAML file describing the filesystem (protocol, storage_options, properties).",
        rich_help_panel="Filesystem",
    )] = None,
    protocol: Annotated[Optional[str], typer.Option(
        "--protocol",
        help="fsspec protocol to use when no config file is given (e.g. 'hdfs', 'file').",
        rich_help_panel="Filesystem",
    )] = None,
    log_dir: Annotated[Optional[Path], typer.Option(
        help="Directory to store log files. Logs go to stderr only if omitted.",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel="Logging Configuration",
    )] = None,
    log_level: Annotated[str, typer.Option(
        help="Set the logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        case_sensitive=False,
        rich_help_panel="Logging Configuration",
    )] = "WARNING",
):
    """Common options: which filesystem to talk to and where to log."""
    numeric_log_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_log_level, int):
        print(f"Warning: Invalid log level '{log_level}'. Defaulting to WARNING.", file=sys.stderr)
        numeric_log_level = logging.WARNING

    if log_dir is not None:
        setup_logging(log_dir=str(log_dir), log_level=numeric_log_level)
    else:
        logging.basicConfig(level=numeric_log_level,
                            format='%(asctime)s - %(levelname)s - %(message)s',
                            force=True)

    try:
        fs_config = load_filesystem_config(config) if config is not None else FileSystemConfig()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    if protocol:
        fs_config = fs_config.model_copy(update={"protocol": protocol})

    logger.info(f"Using filesystem protocol: {fs_config.protocol}")
    ctx.obj = get_filesystem(fs_config)


def _fail(message: str) -> None:
    logger.error(message)
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command("ls")
def list_children(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Directory to list.")],
):
    """List the entries of a directory."""
    fs = ctx.obj
    try:
        directory = HdfsPath.of(fs, path)
        for status in fs.list_status(directory.get_path()):
            child = directory.get_child(paths.get_name(status.path))
            kind = "d" if status.is_directory else "-"
            typer.echo(f"{kind} {status.length:>12} {child.get_path()}")
    except (OSError, ValueError) as e:
        _fail(f"cannot list {path}: {e}")


@app.command("mkdir")
def make_directories(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Directory to create, with any missing parents.")],
):
    """Create a directory and its missing parents."""
    try:
        if not HdfsPath.of(ctx.obj, path).mkdirs():
            typer.echo(f"Already exists: {path}")
    except (OSError, ValueError) as e:
        _fail(f"cannot create {path}: {e}")


@app.command("rm")
def remove(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="File or directory to delete recursively.")],
):
    """Delete a file or directory recursively."""
    try:
        deleted = HdfsPath.of(ctx.obj, path).delete()
    except ValueError as e:
        _fail(f"cannot delete {path}: {e}")
        return
    if not deleted:
        _fail(f"cannot delete {path}")


@app.command("mv")
def move(
    ctx: typer.Context,
    src: Annotated[str, typer.Argument(help="Path to move.")],
    dst: Annotated[str, typer.Argument(help="New path.")],
    no_clobber: Annotated[bool, typer.Option(
        "--no-clobber",
        help="Fail if the destination exists instead of replacing it.",
    )] = False,
):
    """Move a file or directory, removing source directories the move leaves empty."""
    fs = ctx.obj
    try:
        HdfsPath.of(fs, src).rename_to(HdfsPath.of(fs, dst), replace_existing=no_clobber)
    except (OSError, ValueError) as e:
        _fail(f"cannot move {src} to {dst}: {e}")


@app.command("cat")
def cat(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="File to print.")],
):
    """Write the content of a file to stdout."""
    try:
        with HdfsPath.of(ctx.obj, path).open() as f:
            while True:
                chunk = f.read(READ_CHUNK_SIZE)
                if not chunk:
                    break
                typer.echo(chunk, nl=False)
    except (OSError, ValueError) as e:
        _fail(f"cannot read {path}: {e}")


@app.command("put")
def put(
    ctx: typer.Context,
    local: Annotated[Path, typer.Argument(
        help="Local file to upload.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    )],
    remote: Annotated[str, typer.Argument(help="Destination path; parent directories are created.")],
    overwrite: Annotated[bool, typer.Option(
        "--overwrite/--no-overwrite",
        help="Replace the destination if it exists.",
    )] = False,
    block_size: Annotated[Optional[int], typer.Option(
        help="Block size for the new file; uses the configured buffer size and default replication.",
        min=1,
    )] = None,
):
    """Upload a local file."""
    try:
        with open(local, "rb") as src, HdfsPath.of(ctx.obj, remote).create(overwrite, block_size) as dst:
            shutil.copyfileobj(src, dst)
    except (OSError, ValueError) as e:
        _fail(f"cannot write {remote}: {e}")
    logger.info(f"Uploaded {local} to {remote}")


@app.command("stat")
def stat(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to describe.")],
):
    """Show the metadata of a path."""
    try:
        handle = HdfsPath.of(ctx.obj, path)
        status = handle.get_file_status()
        absolute = handle.get_absolute_path()
    except (OSError, ValueError) as e:
        _fail(f"cannot stat {path}: {e}")
        return

    typer.echo(f"path: {absolute}")
    typer.echo(f"type: {'directory' if status.is_directory else 'file'}")
    typer.echo(f"length: {status.length}")
    typer.echo(f"regular: {handle.is_regular()}")


if __name__ == "__main__":
    app()
