"""Main CLI implementation using Typer."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lxclocal.assembly.pipeline import AssemblyResult, ImageAssembler
from lxclocal.config import load_config
from lxclocal.errors import LxcLocalError
from lxclocal.models.config import LxcLocalConfig
from lxclocal.models.request import CreateRequest
from lxclocal.utils.logging import setup_logging


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="lxc-local",
    help="Create an LXC container from local metadata and fstree tarballs",
    add_completion=False,
)

console = Console()
stderr_console = Console(stderr=True)


def _fail(message: str) -> None:
    stderr_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
    raise typer.Exit(1)


def show_create_message(result: AssemblyResult) -> None:
    """Print the image's creation message, if it ships one."""
    if not result.create_message:
        return

    console.print()
    console.print("---", markup=False, highlight=False)
    console.print(
        result.create_message.rstrip("\n"), markup=False, highlight=False, soft_wrap=True
    )


@app.command()
def create(
    name: str = typer.Option(..., "--name", help="Container name"),
    path: Path = typer.Option(..., "--path", help="Container path"),
    rootfs: Optional[Path] = typer.Option(
        None, "--rootfs", help="Rootfs path (default: <path>/rootfs)"
    ),
    metadata: Optional[Path] = typer.Option(
        None, "--metadata", help="Path to the image metadata tarball"
    ),
    fstree: Optional[Path] = typer.Option(
        None, "--fstree", help="Path to the image filesystem tarball"
    ),
    no_dev: bool = typer.Option(
        False, "--no-dev", help="Don't unpack device nodes from the fstree"
    ),
    mapped_uid: Optional[int] = typer.Option(
        None, "--mapped-uid", help="A uid map (user namespaces)"
    ),
    mapped_gid: Optional[int] = typer.Option(
        None, "--mapped-gid", help="A gid map (user namespaces)"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="Settings file (default: $LXC_LOCAL_CONFIG)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override the configured log level"
    ),
):
    """Assemble a container from a metadata and an fstree tarball."""
    try:
        config = load_config(config_file)
        if log_level:
            config = LxcLocalConfig(**{**config.model_dump(), "log_level": log_level})
    except ValidationError:
        _fail(f"Invalid log level: {log_level}")
    except LxcLocalError as e:
        _fail(str(e))

    setup_logging(config.log_level)

    if fstree is None:
        _fail("Please pass the --fstree option")

    try:
        request = CreateRequest(
            name=name,
            path=path,
            rootfs=rootfs,
            metadata=metadata,
            fstree=fstree,
            no_dev=no_dev,
            mapped_uid=mapped_uid,
            mapped_gid=mapped_gid,
        )
    except ValidationError as e:
        _fail(f"Invalid arguments: {e}")

    try:
        result = ImageAssembler(request, config=config).run()
    except LxcLocalError as e:
        logger.debug("Assembly failed", exc_info=True)
        _fail(str(e))

    show_create_message(result)


def main():
    """Main entry point for CLI."""
    app()
