import importlib.metadata

import typer

from pe_stage.internal.logging import get_logger

logger = get_logger(__name__)


def version():
    """
    Show the pe-stage version.
    """
    try:
        # Read from installed package metadata; only works after installation
        package_version = importlib.metadata.version("pe-stage")
        typer.echo(f"pe-stage version: {package_version}")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("pe-stage is not installed or version metadata not found.")
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)")
        logger.warning("pe-stage package version not found.")
        raise typer.Exit(1)
